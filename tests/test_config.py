from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from xdglaunch.core.config import (
    default_config_path,
    find_global_config,
    load_config,
    write_config_file,
)
from xdglaunch.core.models import DEFAULT_MENU_COMMAND


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults(xdg_env):
    cfg = load_config()
    assert cfg.menu.command == DEFAULT_MENU_COMMAND
    assert cfg.discovery.extra_dirs == []
    assert cfg.discovery.include_hidden is False
    assert cfg.launch.detach is True
    assert cfg.global_path is None


def test_default_config_path(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_path({"XDG_CONFIG_HOME": "/cfg"}) == Path("/cfg/xdglaunch/config.toml")
    assert default_config_path({"XDG_CONFIG_HOME": "rel"}) == tmp_path / ".config" / "xdglaunch" / "config.toml"


def test_global_config_is_loaded(xdg_env):
    path = _write(
        xdg_env / "config" / "xdglaunch" / "config.toml",
        '[menu]\ncommand = ["rofi", "-dmenu"]\n[discovery]\ninclude_hidden = true\n',
    )
    cfg = load_config()
    assert cfg.global_path == path
    assert cfg.menu.command == ["rofi", "-dmenu"]
    assert cfg.discovery.include_hidden is True


def test_legacy_global_config(xdg_env):
    path = _write(xdg_env / "home" / ".xdglaunch.toml", "[launch]\ndetach = false\n")
    assert find_global_config() == path
    assert load_config().launch.detach is False


def test_precedence(xdg_env):
    _write(
        xdg_env / "config" / "xdglaunch" / "config.toml",
        '[menu]\ncommand = ["rofi", "-dmenu"]\n[launch]\ndetach = false\n',
    )
    explicit = _write(xdg_env / "extra.toml", '[menu]\ncommand = ["wofi", "--dmenu"]\n')

    cfg = load_config(explicit)
    assert cfg.menu.command == ["wofi", "--dmenu"]
    assert cfg.launch.detach is False
    assert cfg.explicit_path == explicit

    cfg = load_config(explicit, cli_overrides={"menu": {"command": ["fzf"]}})
    assert cfg.menu.command == ["fzf"]


def test_missing_explicit_config_raises(xdg_env):
    with pytest.raises(OSError):
        load_config(xdg_env / "missing.toml")


def test_invalid_menu_command(xdg_env):
    with pytest.raises(ValidationError):
        load_config(cli_overrides={"menu": {"command": []}})


def test_write_config_file(tmp_path):
    target = tmp_path / "nested" / "dir" / "config.toml"

    assert write_config_file(target, "[launch]\ndetach = false\n") is True
    assert target.read_text(encoding="utf-8") == "[launch]\ndetach = false\n"
    assert load_config(target).launch.detach is False

    assert write_config_file(target, "[launch]\n") is False
    assert target.read_text(encoding="utf-8") == "[launch]\ndetach = false\n"

    assert write_config_file(target, "[launch]\n", force=True) is True
    assert target.read_text(encoding="utf-8") == "[launch]\n"
