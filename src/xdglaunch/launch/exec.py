from __future__ import annotations

import logging
import shlex
import subprocess
from typing import List

from xdglaunch.core.errors import LaunchError
from xdglaunch.core.models import DesktopEntry

logger = logging.getLogger(__name__)

# Field codes that expand to files/URLs/icons; a launcher with nothing to
# pass drops them. %d %D %n %N %v %m are deprecated and always dropped.
FIELD_CODES = frozenset(
    ["%f", "%F", "%u", "%U", "%i", "%c", "%k", "%d", "%D", "%n", "%N", "%v", "%m"]
)


def build_argv(exec_line: str) -> List[str]:
    """Split an Exec value into argv, dropping field codes and unescaping %%."""
    try:
        parts = shlex.split(exec_line)
    except ValueError as e:
        raise LaunchError(f"cannot split Exec line {exec_line!r}: {e}") from e

    argv = [p.replace("%%", "%") for p in parts if p not in FIELD_CODES]
    if not argv:
        raise LaunchError(f"Exec line {exec_line!r} has no command")
    return argv


def launch_entry(entry: DesktopEntry, *, detach: bool = True) -> subprocess.Popen[bytes]:
    argv = build_argv(entry.exec)
    logger.info("launching %s: %s", entry.name, shlex.join(argv))
    try:
        return subprocess.Popen(
            argv,
            cwd=entry.working_dir or None,
            stdin=subprocess.DEVNULL,
            start_new_session=detach,
        )
    except OSError as e:
        raise LaunchError(f"failed to start {argv[0]!r}: {e}") from e
