# tables.py

# Fixed Latin <-> Aksara Jawa mapping tables.
# Every table is read-only; nothing in the package adds or changes entries.

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Javanese Unicode block, inclusive
JAVANESE_BLOCK: Tuple[int, int] = (0xA980, 0xA9DF)

# Single Latin letter → Javanese
LATIN_TO_JAVANESE: Mapping[str, str] = MappingProxyType({
    "a": "ꦲ",  "b": "ꦧ",  "c": "ꦕ",  "d": "ꦢ",
    "e": "ꦺ",  "f": "ꦥ꦳", "g": "ꦒ",  "h": "ꦲꦃ",
    "i": "ꦶ",  "j": "ꦗ",  "k": "ꦏ",  "l": "ꦭ",
    "m": "ꦩ",  "n": "ꦤ",  "o": "ꦺꦴ", "p": "ꦥ",
    "q": "ꦐ",  "r": "ꦫ",  "s": "ꦱ",  "t": "ꦠ",
    "u": "ꦸ",  "v": "ꦮ꦳", "w": "ꦮ",  "x": "ꦼ",
    "y": "ꦪ",  "z": "ꦗ꦳",
})

# Javanese → single Latin letter (inverse of the above)
JAVANESE_TO_LATIN: Mapping[str, str] = MappingProxyType(
    {jv: lat for lat, jv in LATIN_TO_JAVANESE.items()}
)

# Latin digraphs → Javanese consonant
LATIN_DIGRAPHS: Mapping[str, str] = MappingProxyType({
    "ng": "ꦔ", "ny": "ꦚ",
    "th": "ꦛ", "dh": "ꦝ",
})

# Javanese vowel combinations and digraph consonants → Latin
JAVANESE_COMPOUNDS: Mapping[str, str] = MappingProxyType({
    # ha + sandhangan
    "ꦲꦶ": "i", "ꦲꦸ": "u", "ꦲꦺ": "e", "ꦲꦺꦴ": "o",
    # consonants
    "ꦔ": "ng", "ꦚ": "ny", "ꦛ": "th", "ꦝ": "dh",
})

# Latin vowel → standalone vowel form
VOWEL_DIACRITICS: Mapping[str, str] = MappingProxyType({
    "a": "ꦄ", "i": "ꦶ", "u": "ꦸ",
    "e": "ꦺ", "o": "ꦺꦴ",
})

# Punctuation
SPECIAL_CHARACTERS: Mapping[str, str] = MappingProxyType({
    "(": "꧀", ")": "꧀",
    "[": "꧀", "]": "꧀",
    ".": "꧁", ",": "꧂",
})
