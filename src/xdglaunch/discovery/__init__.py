from __future__ import annotations

from xdglaunch.discovery.xdg_dirs import data_dirs, find_desktop_files

__all__ = ["data_dirs", "find_desktop_files"]
