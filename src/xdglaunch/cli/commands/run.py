from __future__ import annotations

import shlex
from pathlib import Path
from typing import Dict, Optional

import typer
from rich.markup import escape

from xdglaunch.cli.ui import get_ui, render_errors
from xdglaunch.cli.utils.catalog import load_catalog, load_cli_config
from xdglaunch.core.errors import ExitCode, LaunchError, MenuError
from xdglaunch.core.models import LoadedEntry
from xdglaunch.launch import build_argv, launch_entry, select_with_menu


def run_cmd(
    tui: bool = typer.Option(
        False, "--tui", help="Pick in the terminal instead of the external menu."
    ),
    menu: Optional[str] = typer.Option(
        None, "--menu", help='Menu command line, e.g. "rofi -dmenu" (overrides config).'
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the command that would run, do not start it."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", dir_okay=False, help="Extra config file (TOML)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Choose an application from a menu and launch it."""
    ui = get_ui(verbose=verbose)

    overrides: dict = {}
    if menu is not None:
        overrides["menu"] = {"command": shlex.split(menu)}
    cfg = load_cli_config(config, overrides)

    result = load_catalog(cfg)
    render_errors(ui.err_console, result.errors, verbose=ui.verbose)

    if not result.entries:
        ui.err_console.print("[warn]No applications to choose from.[/warn]")
        raise typer.Exit(code=int(ExitCode.NO_SELECTION))

    chosen: Optional[LoadedEntry]
    if tui:
        from xdglaunch.cli.ui.picker import pick_entry

        chosen = pick_entry(result.entries)
    else:
        # Same display name twice: the higher-priority file wins.
        by_name: Dict[str, LoadedEntry] = {}
        for le in result.entries:
            by_name.setdefault(le.entry.name, le)
        try:
            name = select_with_menu(cfg.menu.command, list(by_name))
        except MenuError as e:
            ui.err_console.print(f"[err]{escape(str(e))}[/err]")
            raise typer.Exit(code=int(ExitCode.ERROR))
        chosen = by_name.get(name) if name is not None else None

    if chosen is None:
        raise typer.Exit(code=int(ExitCode.NO_SELECTION))

    try:
        if dry_run:
            typer.echo(shlex.join(build_argv(chosen.entry.exec)))
            raise typer.Exit(code=int(ExitCode.OK))

        proc = launch_entry(chosen.entry, detach=cfg.launch.detach)
    except LaunchError as e:
        ui.err_console.print(f"{chosen.path}: {e}", markup=False)
        raise typer.Exit(code=int(ExitCode.ERROR))

    if not cfg.launch.detach:
        proc.wait()

    raise typer.Exit(code=int(ExitCode.OK))
