from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from xdglaunch.core.models import DiscoveryConfig, LaunchConfig, MenuConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


CONFIG_DIR_NAME = "xdglaunch"
CONFIG_FILE_NAME = "config.toml"
LEGACY_CONFIG_FILE = "~/.xdglaunch.toml"


def _read_toml(path: Path) -> Dict[str, Any]:
    data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _section(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    d = merged.get(name) or {}
    if not isinstance(d, dict):
        return {}
    return d


def default_config_path(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    base = env.get("XDG_CONFIG_HOME") or ""
    root = Path(base) if os.path.isabs(base) else Path("~/.config").expanduser()
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def find_global_config(env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    for p in (default_config_path(env), Path(LEGACY_CONFIG_FILE).expanduser()):
        if p.exists() and p.is_file():
            return p
    return None


@dataclass(frozen=True)
class LoadedConfig:
    discovery: DiscoveryConfig
    menu: MenuConfig
    launch: LaunchConfig
    global_path: Optional[Path]
    explicit_path: Optional[Path]


def load_config(
    config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (models) ->
      global config ->
      explicit --config file ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config(env)

    merged: Dict[str, Any] = {}

    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))

    # An explicit path that does not exist is an error (OSError), unlike the
    # optional global file.
    if config_path is not None:
        merged = _deep_merge(merged, _read_toml(config_path))

    # CLI overrides are expected to be in the same shape as TOML (namespaced)
    merged = _deep_merge(merged, cli_overrides)

    return LoadedConfig(
        discovery=DiscoveryConfig.model_validate(_section(merged, "discovery")),
        menu=MenuConfig.model_validate(_section(merged, "menu")),
        launch=LaunchConfig.model_validate(_section(merged, "launch")),
        global_path=global_path,
        explicit_path=config_path,
    )


def write_config_file(path: Path, content: str, *, force: bool = False) -> bool:
    """
    Write a config file, creating its directory. An existing file is kept
    unless `force`; returns whether anything was written.
    """
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True
