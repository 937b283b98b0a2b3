from __future__ import annotations

from xdglaunch.launch.exec import build_argv, launch_entry
from xdglaunch.launch.menu import select_with_menu

__all__ = ["build_argv", "launch_entry", "select_with_menu"]
