from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

from xdglaunch.core.errors import MenuError

logger = logging.getLogger(__name__)


def select_with_menu(command: Sequence[str], choices: Sequence[str]) -> Optional[str]:
    """
    Pipe `choices` (one per line) into a dmenu-style program and return the
    line it prints. None when the menu is dismissed (non-zero exit) or prints
    nothing.
    """
    stdin = "".join(f"{c}\n" for c in choices)
    logger.debug("running menu %s with %d choices", list(command), len(choices))
    try:
        proc = subprocess.run(
            list(command),
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise MenuError(f"cannot run menu {command[0]!r}: {e}") from e

    if proc.returncode != 0:
        logger.debug("menu exited with %d", proc.returncode)
        return None

    chosen = proc.stdout.rstrip("\n")
    return chosen or None
