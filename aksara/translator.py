# translator.py

# Latin <-> Aksara Jawa transliteration.
# Greedy left-to-right scan: the longest table key at the current position wins,
# then single symbols, and anything unmapped is passed through untouched.

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from . import script
from .script import JAVANESE, Script
from .tables import (
    JAVANESE_COMPOUNDS,
    JAVANESE_TO_LATIN,
    LATIN_DIGRAPHS,
    LATIN_TO_JAVANESE,
    SPECIAL_CHARACTERS,
    VOWEL_DIACRITICS,
)

log = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when a translation is asked for an empty string."""

    def __init__(self) -> None:
        super().__init__("input cannot be empty")


def _longest_match(
    text: str,
    pos: int,
    tables: Sequence[Mapping[str, str]],
    max_len: int,
) -> Optional[Tuple[str, int]]:
    """
    Find the longest key starting at `pos` in any of `tables`.

    Longer keys always win; for keys of equal length the earlier table wins.
    Returns (replacement, consumed length) or None.
    """
    for length in range(min(max_len, len(text) - pos), 0, -1):
        chunk = text[pos:pos + length]
        for table in tables:
            if chunk in table:
                return table[chunk], length
    return None


class AksaraTranslator:
    """Bidirectional Latin / Javanese transliterator over the built-in tables."""

    def __init__(self) -> None:
        self.latin_to_javanese_map = LATIN_TO_JAVANESE
        self.javanese_to_latin_map = JAVANESE_TO_LATIN
        self.latin_digraphs = LATIN_DIGRAPHS
        self.javanese_compounds = JAVANESE_COMPOUNDS
        self.vowel_diacritics = VOWEL_DIACRITICS
        self.special_characters = SPECIAL_CHARACTERS

        self._reverse_tables = (self.javanese_compounds, self.javanese_to_latin_map)
        self._reverse_max_len = max(len(k) for t in self._reverse_tables for k in t)

    # --- Latin → Javanese ---

    def latin_to_javanese(self, text: str) -> str:
        """
        Transliterate Latin text to Aksara Jawa.

        - Input is lower-cased first.
        - Every ng / ny / th / dh is rewritten to its consonant before scanning,
          wherever it occurs.
        - Punctuation ( ) [ ] . , maps to Javanese punctuation.
        - Unmapped characters (digits, spaces, Javanese text) pass through.
        """
        if not text:
            raise EmptyInputError()

        text = text.lower()
        for digraph, consonant in self.latin_digraphs.items():
            text = text.replace(digraph, consonant)

        result: List[str] = []
        i = 0
        length = len(text)

        while i < length:
            ch = text[i]

            # --- punctuation ---
            if ch in self.special_characters:
                result.append(self.special_characters[ch])
                i += 1
                continue

            # --- digraphs left over after the pre-pass ---
            if i + 1 < length:
                pair = ch + text[i + 1]
                if pair in self.latin_digraphs:
                    result.append(self.latin_digraphs[pair])
                    i += 2
                    continue

            # --- single letters ---
            if ch in self.latin_to_javanese_map:
                result.append(self.latin_to_javanese_map[ch])
            elif ch in self.vowel_diacritics:
                result.append(self.vowel_diacritics[ch])
            else:
                result.append(ch)  # pass through unknown
            i += 1

        return "".join(result)

    # --- Javanese → Latin ---

    def javanese_to_latin(self, text: str) -> str:
        """
        Transliterate Aksara Jawa to Latin.

        A text that is exactly one compound key (e.g. ꦲꦺꦴ, ꦔ) is returned
        directly. Otherwise the text is scanned by codepoint, compound keys
        taking precedence over base letters of the same length.
        """
        if not text:
            raise EmptyInputError()

        if text in self.javanese_compounds:
            log.debug("whole-input compound match for %r", text)
            return self.javanese_compounds[text]

        result: List[str] = []
        i = 0
        length = len(text)

        while i < length:
            match = _longest_match(text, i, self._reverse_tables, self._reverse_max_len)
            if match is None:
                result.append(text[i])
                i += 1
                continue
            latin, consumed = match
            result.append(latin)
            i += consumed

        return "".join(result)

    # --- script helpers ---

    def detect_script(self, text: str) -> Script:
        return script.detect_script(text)

    def is_valid_aksara_java(self, text: str) -> bool:
        return script.is_valid_aksara_java(text)

    def normalize_text(self, text: str) -> str:
        return script.normalize_text(text)

    def translate(self, text: str) -> str:
        """Translate in whichever direction the detected script calls for."""
        detected = self.detect_script(text)
        log.debug("detected %s script", detected)
        if detected == JAVANESE:
            return self.javanese_to_latin(text)
        return self.latin_to_javanese(text)
