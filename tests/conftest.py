# tests/conftest.py
import pytest

from aksara import AksaraTranslator


@pytest.fixture
def translator():
    return AksaraTranslator()
