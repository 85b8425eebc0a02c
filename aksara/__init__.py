from __future__ import annotations

from .script import JAVANESE, LATIN, Script, detect_script, is_valid_aksara_java, normalize_text
from .translator import AksaraTranslator, EmptyInputError

__all__ = [
    "AksaraTranslator",
    "EmptyInputError",
    "JAVANESE",
    "LATIN",
    "Script",
    "detect_script",
    "is_valid_aksara_java",
    "normalize_text",
]
