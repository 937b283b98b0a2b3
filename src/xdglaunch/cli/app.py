from __future__ import annotations

import typer
from rich.console import Console

from xdglaunch import __version__
from xdglaunch.cli.commands.init import app as init_app
from xdglaunch.cli.commands.list_entries import list_cmd
from xdglaunch.cli.commands.run import run_cmd
from xdglaunch.cli.commands.show import show_cmd

app = typer.Typer(
    name="xdglaunch",
    help="List, inspect and launch desktop applications from their .desktop files.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"xdglaunch {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


app.command("list")(list_cmd)
app.command("show")(show_cmd)
app.command("run")(run_cmd)
app.add_typer(init_app, name="init")
