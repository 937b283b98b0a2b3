from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from xdglaunch.core.config import LoadedConfig, load_config
from xdglaunch.core.engine import load_entries
from xdglaunch.core.errors import ExitCode
from xdglaunch.core.models import LoadResult
from xdglaunch.discovery import find_desktop_files


def load_cli_config(config_path: Optional[Path], overrides: dict) -> LoadedConfig:
    try:
        return load_config(config_path, cli_overrides=overrides)
    except (OSError, ValueError) as e:
        # ValueError covers both TOML decode errors and pydantic validation.
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=int(ExitCode.ERROR))


def load_catalog(cfg: LoadedConfig) -> LoadResult:
    paths = find_desktop_files(extra_dirs=[Path(d) for d in cfg.discovery.extra_dirs])
    return load_entries(paths, include_hidden=cfg.discovery.include_hidden)
