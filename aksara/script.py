# script.py

from __future__ import annotations

import re
from typing import Literal

from .tables import JAVANESE_BLOCK

Script = Literal["Latin", "Javanese"]

LATIN: Script = "Latin"
JAVANESE: Script = "Javanese"

_LO, _HI = JAVANESE_BLOCK
_AKSARA_RE = re.compile("[%s-%s\\s]+" % (chr(_LO), chr(_HI)))


def _is_javanese_char(ch: str) -> bool:
    return _LO <= ord(ch) <= _HI


def detect_script(text: str) -> Script:
    """Javanese if any character is in the Javanese block, Latin otherwise."""
    if any(_is_javanese_char(ch) for ch in text):
        return JAVANESE
    return LATIN


def is_valid_aksara_java(text: str) -> bool:
    """True when the trimmed text is only Javanese-block characters and whitespace."""
    return _AKSARA_RE.fullmatch(text.strip()) is not None


def normalize_text(text: str) -> str:
    """
    Trim surrounding whitespace, then lower-case unless the text is Javanese.

    Aksara Jawa has no letter case, so valid Javanese text comes back
    exactly as trimmed.
    """
    text = text.strip()
    if is_valid_aksara_java(text):
        return text
    return text.lower()
