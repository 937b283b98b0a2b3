from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from xdglaunch.cli.ui.formatters import (
    render_entries_plain,
    render_entries_table,
    render_errors,
    render_keyfile_tree,
    render_load_summary,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "name": "bold",
        "locale": "magenta",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool


def setup_logging(verbose: bool, console: Console) -> None:
    root = logging.getLogger("xdglaunch")
    root.handlers[:] = [
        RichHandler(console=console, show_time=False, show_path=verbose, markup=False)
    ]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_ui(*, verbose: bool = False) -> UI:
    console = Console(theme=THEME)
    err_console = Console(theme=THEME, stderr=True)
    setup_logging(verbose, err_console)
    return UI(console=console, err_console=err_console, verbose=verbose)


__all__ = [
    "THEME",
    "UI",
    "get_ui",
    "render_entries_plain",
    "render_entries_table",
    "render_errors",
    "render_keyfile_tree",
    "render_load_summary",
    "setup_logging",
]
