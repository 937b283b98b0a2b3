from __future__ import annotations

from xdglaunch.core import DesktopEntry, KeyFile
from xdglaunch.parsers import Key, KeyFileError, Locale, StructuralParseError

__version__ = "0.1.0"

__all__ = [
    "DesktopEntry",
    "Key",
    "KeyFile",
    "KeyFileError",
    "Locale",
    "StructuralParseError",
    "__version__",
]
