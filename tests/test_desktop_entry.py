from __future__ import annotations

import pytest
from pydantic import ValidationError

from xdglaunch import DesktopEntry, KeyFile, StructuralParseError
from xdglaunch.core import EntryError, MissingRequiredFieldError, SchemaMismatchError

from conftest import APPLICATION, FIREFOX


def test_projects_application():
    entry = DesktopEntry.from_bytes(APPLICATION.encode())
    assert entry.name == "Firefox"
    assert entry.generic_name == "Web Browser"
    assert entry.exec == "firefox %u"
    assert entry.working_dir is None
    assert entry.hidden is False
    assert entry.no_display is False
    assert entry.visible is True


def test_canonical_example_is_not_visible():
    text = FIREFOX + "Type=Application\nExec=firefox\n"
    entry = DesktopEntry.from_key_file(KeyFile.parse(text))
    assert entry.hidden is False
    assert entry.no_display is True
    assert entry.visible is False


def test_optional_fields_and_flags():
    entry = DesktopEntry.from_bytes(
        APPLICATION + "Path=/opt/firefox\nHidden=true\nNoDisplay=false\n"
    )
    assert entry.working_dir == "/opt/firefox"
    assert entry.hidden is True
    assert entry.visible is False


def test_malformed_flags_default_to_false():
    entry = DesktopEntry.from_bytes(APPLICATION + "Hidden=True\nNoDisplay=1\n")
    assert entry.hidden is False
    assert entry.no_display is False
    assert entry.visible is True


def test_only_unlocalized_values_are_projected():
    text = (
        "[Desktop Entry]\nType=Application\nName[de]=Feuerfuchs\nExec=firefox\n"
    )
    with pytest.raises(MissingRequiredFieldError) as exc:
        DesktopEntry.from_bytes(text)
    assert exc.value.field == "Name"


@pytest.mark.parametrize("type_line, seen", [("Type=Link\n", "Link"), ("", None), ("Type=application\n", "application")])
def test_schema_mismatch(type_line, seen):
    text = f"[Desktop Entry]\n{type_line}Name=Home\nExec=true\n"
    with pytest.raises(SchemaMismatchError) as exc:
        DesktopEntry.from_bytes(text)
    assert exc.value.type_value == seen
    assert isinstance(exc.value, EntryError)


def test_type_must_be_in_desktop_entry_group():
    text = "[Other]\nType=Application\n[Desktop Entry]\nName=x\nExec=y\n"
    with pytest.raises(SchemaMismatchError):
        DesktopEntry.from_bytes(text)


def test_missing_exec():
    text = "[Desktop Entry]\nType=Application\nName=Firefox\n"
    with pytest.raises(MissingRequiredFieldError) as exc:
        DesktopEntry.from_bytes(text)
    assert exc.value.field == "Exec"
    assert "Exec" in str(exc.value)


def test_structural_errors_pass_through():
    with pytest.raises(StructuralParseError):
        DesktopEntry.from_bytes(APPLICATION + "garbage\n")


def test_entry_is_frozen():
    entry = DesktopEntry.from_bytes(APPLICATION)
    with pytest.raises(ValidationError):
        entry.name = "Other"  # type: ignore[misc]


def test_entry_outlives_its_buffer():
    buf = bytearray(APPLICATION.encode())
    entry = DesktopEntry.from_bytes(buf)
    buf[:] = b"\0" * len(buf)
    assert entry.name == "Firefox"
    assert entry.exec == "firefox %u"


def test_read_file(tmp_path):
    p = tmp_path / "firefox.desktop"
    p.write_text(APPLICATION, encoding="utf-8")
    assert DesktopEntry.read_file(p).name == "Firefox"


def test_read_file_passes_io_errors_through(tmp_path):
    with pytest.raises(FileNotFoundError):
        DesktopEntry.read_file(tmp_path / "missing.desktop")
