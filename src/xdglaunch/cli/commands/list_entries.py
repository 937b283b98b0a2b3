from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from xdglaunch.cli.ui import (
    get_ui,
    render_entries_plain,
    render_entries_table,
    render_errors,
    render_load_summary,
)
from xdglaunch.cli.utils.catalog import load_catalog, load_cli_config
from xdglaunch.core.errors import ExitCode


def list_cmd(
    include_hidden: bool = typer.Option(
        False, "--all", "-a", help="Also list Hidden/NoDisplay entries."
    ),
    plain: bool = typer.Option(
        False, "--plain", help="Print name / exec / working dir lines instead of a table."
    ),
    paths: bool = typer.Option(False, "--paths", help="Show the source file of each entry."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", dir_okay=False, help="Extra config file (TOML)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """List installed applications."""
    ui = get_ui(verbose=verbose)

    overrides: dict = {"discovery": {}}
    if include_hidden:
        overrides["discovery"]["include_hidden"] = True
    cfg = load_cli_config(config, overrides)

    result = load_catalog(cfg)

    if plain:
        render_entries_plain(typer.echo, result.entries)
    else:
        render_entries_table(ui.console, result.entries, show_paths=paths)

    render_errors(ui.err_console, result.errors, verbose=ui.verbose)
    if ui.verbose:
        render_load_summary(ui.err_console, result)

    # Broken files are skipped; only fail when nothing could be read at all.
    if result.errors and result.stats.files_considered == len(result.errors):
        raise typer.Exit(code=int(ExitCode.ERROR))

    raise typer.Exit(code=int(ExitCode.OK))
