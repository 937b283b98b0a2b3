from __future__ import annotations

from xdglaunch.core.errors import (
    EntryError,
    ExitCode,
    MissingRequiredFieldError,
    SchemaMismatchError,
)
from xdglaunch.core.keyfile import KeyFile
from xdglaunch.core.models import DesktopEntry

__all__ = [
    "DesktopEntry",
    "EntryError",
    "ExitCode",
    "KeyFile",
    "MissingRequiredFieldError",
    "SchemaMismatchError",
]
