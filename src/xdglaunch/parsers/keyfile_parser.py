from __future__ import annotations

from typing import List, Optional, Tuple, Union

from xdglaunch.parsers.common import (
    is_key_char,
    is_space,
    is_whitespace,
    line_col,
    line_rest,
    tag,
    take_while,
    take_while1,
)
from xdglaunch.parsers.errors import StructuralParseError
from xdglaunch.parsers.locale_parser import match_locale
from xdglaunch.parsers.types import Key, ParsedGroup


# ----------------------------
# Grammar rules
# ----------------------------

def comment(text: str, pos: int) -> Optional[int]:
    """`sp? "#" not_newline*`"""
    _, p = take_while(text, pos, is_space)
    p = tag(text, p, "#")
    if p is None:
        return None
    _, p = line_rest(text, p)
    return p


def multispace(text: str, pos: int) -> Optional[int]:
    m = take_while1(text, pos, is_whitespace)
    return None if m is None else m[1]


def skip_ws_or_comments(text: str, pos: int) -> int:
    """`(comment | WHITESPACE)*`"""
    while True:
        nxt = comment(text, pos)
        if nxt is None:
            nxt = multispace(text, pos)
        if nxt is None or nxt == pos:
            return pos
        pos = nxt


def group_header(text: str, pos: int) -> Optional[Tuple[str, int]]:
    """`"[" [^\\]]+ "]" WHITESPACE?`"""
    p = tag(text, pos, "[")
    if p is None:
        return None
    end = text.find("]", p)
    if end == -1 or end == p:
        return None
    name = text[p:end]
    _, p = take_while(text, end + 1, is_whitespace)
    return name, p


def key_value(text: str, pos: int) -> Optional[Tuple[Key, str, int]]:
    """`ws_or_comment* key ("[" locale "]")? sp? "=" not_newline*`"""
    p = skip_ws_or_comments(text, pos)

    m = take_while1(text, p, is_key_char)
    if m is None:
        return None
    name, p = m

    locale = None
    if tag(text, p, "[") is not None:
        lm = match_locale(text, p + 1)
        if lm is not None and tag(text, lm[1], "]") is not None:
            locale, p = lm[0], lm[1] + 1

    _, p = take_while(text, p, is_space)
    p_eq = tag(text, p, "=")
    if p_eq is None:
        return None

    value, p = line_rest(text, p_eq)
    return Key(name=name, locale=locale), value, p


def group(text: str, pos: int) -> Optional[Tuple[ParsedGroup, int]]:
    """A header, its key-value lines, then any trailing comments/blank runs."""
    h = group_header(text, pos)
    if h is None:
        return None
    name, p = h

    entries: List[Tuple[Key, str]] = []
    while True:
        kv = key_value(text, p)
        if kv is None:
            break
        key, value, p = kv
        entries.append((key, value))

    p = skip_ws_or_comments(text, p)
    return ParsedGroup(name=name, entries=tuple(entries)), p


# ----------------------------
# Entry points
# ----------------------------

def decode_text(data: Union[bytes, bytearray, memoryview, str]) -> str:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise StructuralParseError(
            f"input is not valid UTF-8 (byte {e.start})", position=e.start
        ) from e


def parse_keyfile(text: str) -> List[ParsedGroup]:
    """
    Parse a whole key file into its groups, in file order.

    The entire input must match; otherwise StructuralParseError is raised
    pointing at the first character that could not be consumed.
    """
    pos = skip_ws_or_comments(text, 0)

    groups: List[ParsedGroup] = []
    while True:
        g = group(text, pos)
        if g is None:
            break
        parsed, pos = g
        groups.append(parsed)

    if pos != len(text):
        line, col = line_col(text, pos)
        raise StructuralParseError(
            f"unexpected input at line {line}, column {col}", position=pos
        )

    return groups
