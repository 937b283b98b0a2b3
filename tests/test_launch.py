from __future__ import annotations

import shutil
import subprocess

import pytest

from xdglaunch.core.errors import LaunchError, MenuError
from xdglaunch.core.models import DesktopEntry
from xdglaunch.launch import build_argv, launch_entry, select_with_menu

needs_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")


@pytest.mark.parametrize(
    "exec_line, argv",
    [
        ("firefox %u", ["firefox"]),
        ("gimp-2.10 %U", ["gimp-2.10"]),
        ('sh -c "echo 100%%"', ["sh", "-c", "echo 100%"]),
        ("app --icon %i --name %c %F", ["app", "--icon", "--name"]),
        ("'/opt/My App/bin/app' --flag", ["/opt/My App/bin/app", "--flag"]),
    ],
)
def test_build_argv(exec_line, argv):
    assert build_argv(exec_line) == argv


@pytest.mark.parametrize("exec_line", ["", "   ", "%f", 'broken "quote'])
def test_build_argv_rejects(exec_line):
    with pytest.raises(LaunchError):
        build_argv(exec_line)


def test_launch_entry_uses_working_dir(monkeypatch, tmp_path):
    calls = {}

    def fake_popen(argv, **kwargs):
        calls["argv"] = argv
        calls.update(kwargs)
        return "proc"

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    entry = DesktopEntry(name="Editor", exec="editor %F", working_dir=str(tmp_path))

    assert launch_entry(entry, detach=False) == "proc"
    assert calls["argv"] == ["editor"]
    assert calls["cwd"] == str(tmp_path)
    assert calls["start_new_session"] is False


def test_launch_entry_wraps_os_errors(monkeypatch):
    def fake_popen(argv, **kwargs):
        raise FileNotFoundError(2, "No such file", argv[0])

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    entry = DesktopEntry(name="Nope", exec="does-not-exist")

    with pytest.raises(LaunchError):
        launch_entry(entry)


@needs_sh
def test_select_with_menu_returns_chosen_line():
    assert select_with_menu(["sh", "-c", "sed -n 2p"], ["Firefox", "GIMP", "Vim"]) == "GIMP"


@needs_sh
def test_select_with_menu_feeds_choices_in_order():
    assert select_with_menu(["sh", "-c", "tail -n 1"], ["a", "b", "c"]) == "c"


@needs_sh
@pytest.mark.parametrize("script", ["exit 1", "cat > /dev/null"])
def test_select_with_menu_cancelled(script):
    assert select_with_menu(["sh", "-c", script], ["a", "b"]) is None


def test_select_with_menu_missing_program():
    with pytest.raises(MenuError):
        select_with_menu(["xdglaunch-no-such-menu-program"], ["a"])
