from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

FIREFOX = """\
[Desktop Entry]
Name=Firefox
GenericName=Web Browser
GenericName[ast]=Restolador Web
Hidden=false
NoDisplay=true
"""

APPLICATION = """\
[Desktop Entry]
Type=Application
Name=Firefox
GenericName=Web Browser
GenericName[ast]=Restolador Web
Exec=firefox %u
"""


@pytest.fixture
def write_desktop(tmp_path: Path) -> Callable[..., Path]:
    def _write(rel: str, content: str) -> Path:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def xdg_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every XDG/home lookup into tmp_path."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "system"))
    (tmp_path / "home").mkdir()
    return tmp_path
