from __future__ import annotations

from enum import IntEnum
from typing import Optional

from xdglaunch.parsers.errors import KeyFileError


class ExitCode(IntEnum):
    OK = 0
    NO_SELECTION = 1
    ERROR = 2


class EntryError(KeyFileError):
    """The key file parsed, but is not a launchable application entry."""


class SchemaMismatchError(EntryError):
    def __init__(self, type_value: Optional[str]) -> None:
        self.type_value = type_value
        shown = "missing" if type_value is None else repr(type_value)
        super().__init__(f"Type is {shown}, expected 'Application'")


class MissingRequiredFieldError(EntryError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"required key {field!r} is missing")


class MenuError(RuntimeError):
    """The external menu program could not be run."""


class LaunchError(RuntimeError):
    """An entry's command could not be turned into a process."""
