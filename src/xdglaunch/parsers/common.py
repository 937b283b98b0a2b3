from __future__ import annotations

from typing import Callable, Optional, Tuple

# Cursor helpers shared by the grammar rules. Every rule takes (text, pos) and
# returns either None (no match, cursor untouched) or the new position.

SPACE_CHARS = " \t"
WHITESPACE_CHARS = " \t\r\n"


def is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_key_char(ch: str) -> bool:
    return is_alpha(ch) or ch == "-"


def is_space(ch: str) -> bool:
    return ch in SPACE_CHARS


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE_CHARS


def take_while(text: str, pos: int, pred: Callable[[str], bool]) -> Tuple[str, int]:
    end = pos
    n = len(text)
    while end < n and pred(text[end]):
        end += 1
    return text[pos:end], end


def take_while1(
    text: str, pos: int, pred: Callable[[str], bool]
) -> Optional[Tuple[str, int]]:
    chunk, end = take_while(text, pos, pred)
    if not chunk:
        return None
    return chunk, end


def tag(text: str, pos: int, literal: str) -> Optional[int]:
    return pos + len(literal) if text.startswith(literal, pos) else None


def line_rest(text: str, pos: int) -> Tuple[str, int]:
    """
    Everything up to (not including) the line ending.

    Lines end at "\\n" or "\\r\\n"; a lone "\\r" belongs to the line.
    """
    end = text.find("\n", pos)
    if end == -1:
        end = len(text)
    elif end > pos and text[end - 1] == "\r":
        end -= 1
    return text[pos:end], end


def line_col(text: str, pos: int) -> Tuple[int, int]:
    """1-based line/column of `pos`, for error messages."""
    line = text.count("\n", 0, pos) + 1
    col = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, col
