from __future__ import annotations

from xdglaunch.parsers.errors import KeyFileError, StructuralParseError
from xdglaunch.parsers.keyfile_parser import decode_text, parse_keyfile
from xdglaunch.parsers.locale_parser import match_locale, parse_locale
from xdglaunch.parsers.types import Key, Locale, ParsedGroup

__all__ = [
    "Key",
    "KeyFileError",
    "Locale",
    "ParsedGroup",
    "StructuralParseError",
    "decode_text",
    "match_locale",
    "parse_keyfile",
    "parse_locale",
]
