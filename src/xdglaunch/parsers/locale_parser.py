from __future__ import annotations

from typing import Optional, Tuple

from xdglaunch.parsers.common import is_alpha, tag, take_while1
from xdglaunch.parsers.types import Locale


def _part(text: str, pos: int, sep: str) -> Optional[Tuple[str, int]]:
    p = tag(text, pos, sep)
    if p is None:
        return None
    return take_while1(text, p, is_alpha)


def match_locale(text: str, pos: int = 0) -> Optional[Tuple[Locale, int]]:
    """
    Match `lang ("_" country)? ("@" modifier)?` starting at `pos`.

    Each part is one or more ASCII letters. A separator that is not followed
    by a letter is left unconsumed.
    """
    m = take_while1(text, pos, is_alpha)
    if m is None:
        return None
    lang, pos = m

    country: Optional[str] = None
    m = _part(text, pos, "_")
    if m is not None:
        country, pos = m

    modifier: Optional[str] = None
    m = _part(text, pos, "@")
    if m is not None:
        modifier, pos = m

    return Locale(lang=lang, country=country, modifier=modifier), pos


def parse_locale(text: str) -> Optional[Locale]:
    """Parse a whole string as a locale; any leftover character means None."""
    if not text:
        return None
    m = match_locale(text, 0)
    if m is None or m[1] != len(text):
        return None
    return m[0]
