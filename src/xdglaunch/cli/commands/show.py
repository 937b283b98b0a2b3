from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from xdglaunch.cli.ui import get_ui, render_keyfile_tree
from xdglaunch.core.errors import ExitCode
from xdglaunch.core.keyfile import KeyFile
from xdglaunch.core.models import DESKTOP_ENTRY_GROUP, DesktopEntry
from xdglaunch.parsers.errors import KeyFileError


def show_cmd(
    path: Path = typer.Argument(..., dir_okay=False, help="Desktop entry / key file to inspect."),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Also show Name/GenericName for this exact locale."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse one key file and show its groups, keys and projected entry."""
    ui = get_ui(verbose=verbose)
    console = ui.console

    try:
        data = path.read_bytes()
    except OSError as e:
        ui.err_console.print(f"[err]{escape(str(path))}: {escape(str(e))}[/err]")
        raise typer.Exit(code=int(ExitCode.ERROR))

    try:
        kf = KeyFile.parse(data)
    except KeyFileError as e:
        ui.err_console.print(f"[err]{escape(str(path))}: parse error: {escape(str(e))}[/err]")
        raise typer.Exit(code=int(ExitCode.ERROR))

    render_keyfile_tree(console, kf, label=str(path))

    if locale is not None:
        console.print()
        for key in ("Name", "GenericName"):
            value = kf.get_localized_string(DESKTOP_ENTRY_GROUP, key, locale)
            shown = "-" if value is None else value
            console.print(f"{key}[{locale}]: {shown}", markup=False)

    console.print()
    try:
        entry = DesktopEntry.from_key_file(kf)
    except KeyFileError as e:
        console.print(f"[warn]Not a launchable application: {escape(str(e))}[/warn]")
        raise typer.Exit(code=int(ExitCode.ERROR))

    console.print(f"[ok]Application:[/ok] {escape(entry.name)}", highlight=False)
    console.print(f"  exec:    {entry.exec}", markup=False, highlight=False)
    if entry.generic_name is not None:
        console.print(f"  generic: {entry.generic_name}", markup=False, highlight=False)
    if entry.working_dir is not None:
        console.print(f"  path:    {entry.working_dir}", markup=False, highlight=False)
    console.print(f"  visible: {'yes' if entry.visible else 'no'}", highlight=False)

    raise typer.Exit(code=int(ExitCode.OK))
