from __future__ import annotations


class KeyFileError(Exception):
    """Base class for everything the key-file core raises."""


class StructuralParseError(KeyFileError):
    """The grammar could not consume the whole input."""

    def __init__(self, message: str, *, position: int = 0) -> None:
        self.position = position
        super().__init__(message)
