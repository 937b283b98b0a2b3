from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_DATA_HOME = "~/.local/share"
DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
APPLICATIONS_SUBDIR = "applications"
DESKTOP_EXTENSION = ".desktop"


def _absolute_dirs(raw: str) -> List[Path]:
    # Relative entries are invalid per the XDG base directory rules.
    return [Path(p) for p in raw.split(":") if p and os.path.isabs(p)]


def data_dirs(env: Optional[Mapping[str, str]] = None) -> List[Path]:
    """
    XDG data directories in priority order: $XDG_DATA_HOME, then $XDG_DATA_DIRS.
    """
    env = os.environ if env is None else env

    home = env.get("XDG_DATA_HOME") or ""
    out = [Path(home) if os.path.isabs(home) else Path(DEFAULT_DATA_HOME).expanduser()]

    dirs = _absolute_dirs(env.get("XDG_DATA_DIRS") or "")
    out.extend(dirs or _absolute_dirs(DEFAULT_DATA_DIRS))
    return out


def _list_files(folder: Path) -> List[Path]:
    try:
        return sorted(p for p in folder.iterdir() if p.is_file())
    except OSError as e:
        logger.debug("skipping %s: %s", folder, e)
        return []


def find_desktop_files(
    dirs: Optional[Sequence[Path]] = None,
    extra_dirs: Iterable[Path] = (),
) -> List[Path]:
    """
    `*.desktop` files directly inside each `<data dir>/applications/`.

    `extra_dirs` are application directories themselves and are searched
    first. A file name seen in a higher-priority directory shadows the same
    name further down the list.
    """
    if dirs is None:
        dirs = data_dirs()

    folders = [Path(d).expanduser() for d in extra_dirs]
    folders.extend(Path(d) / APPLICATIONS_SUBDIR for d in dirs)

    seen: set[str] = set()
    out: List[Path] = []
    for folder in folders:
        for p in _list_files(folder):
            if p.suffix != DESKTOP_EXTENSION or p.name in seen:
                continue
            seen.add(p.name)
            out.append(p)

    logger.debug("found %d desktop files in %d directories", len(out), len(folders))
    return out
