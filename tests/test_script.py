# tests/test_script.py
import pytest

from aksara import JAVANESE, LATIN, detect_script, is_valid_aksara_java, normalize_text


@pytest.mark.parametrize("text, expected", [
    ("ꦏꦚ꧀ꦕ", JAVANESE),
    ("abc ꦏ", JAVANESE),
    ("kanca", LATIN),
    ("", LATIN),
    ("123 !?", LATIN),
])
def test_detect_script(text, expected):
    assert detect_script(text) == expected
    assert detect_script(text) == detect_script(text)


def test_script_labels():
    assert JAVANESE == "Javanese"
    assert LATIN == "Latin"


@pytest.mark.parametrize("text, expected", [
    ("ꦏꦚ", True),
    ("  ꦏ ꦚ  ", True),
    ("ꦏꦚ꧀ꦕ", True),
    ("abc", False),
    ("ꦏa", False),
    ("", False),
    ("   ", False),
])
def test_is_valid_aksara_java(text, expected):
    assert is_valid_aksara_java(text) is expected


def test_normalize_latin_is_trimmed_and_lowered():
    assert normalize_text("  KANCA ") == "kanca"


def test_normalize_javanese_is_only_trimmed():
    assert normalize_text("  ꦏꦚ꧀ꦕ\n") == "ꦏꦚ꧀ꦕ"


def test_normalize_mixed_text_is_lowered():
    assert normalize_text("ꦏA") == "ꦏa"
