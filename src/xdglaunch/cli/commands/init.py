from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from xdglaunch.core.config import default_config_path, write_config_file

app = typer.Typer(help="Create xdglaunch configuration files.")


DEFAULT_CONFIG_TOML = """\
[discovery]
# extra "applications" directories, searched before the XDG data dirs
extra_dirs = []
# list Hidden=true / NoDisplay=true entries too
include_hidden = false

[menu]
# dmenu-compatible program: reads choices on stdin, prints the chosen line
command = ["dmenu", "-i", "-p", "run:"]

[launch]
# start applications in their own session and return immediately
detach = true
"""


@app.command("config")
def init_config(
    path: Optional[Path] = typer.Option(
        None, "--path", dir_okay=False, help="Where to write (default: XDG config dir)."
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write the commented default config (to the XDG config dir unless --path)."""
    target = path or default_config_path()

    if write_config_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Wrote {target}")
    else:
        typer.echo(f"{target} already exists (use --force to overwrite)")
