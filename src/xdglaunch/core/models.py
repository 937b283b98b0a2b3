from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from xdglaunch.core.errors import MissingRequiredFieldError, SchemaMismatchError
from xdglaunch.core.keyfile import Buffer, KeyFile


DESKTOP_ENTRY_GROUP = "Desktop Entry"
APPLICATION_TYPE = "Application"


# ================================
# Desktop entry
# ================================


class DesktopEntry(BaseModel):
    """
    Typed projection of the `[Desktop Entry]` group of an Application file.

    Holds its own copies of every value, so it outlives the parsed KeyFile.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    generic_name: Optional[str] = None
    exec: str
    working_dir: Optional[str] = None
    hidden: bool = False
    no_display: bool = False

    @property
    def visible(self) -> bool:
        return not self.hidden and not self.no_display

    @classmethod
    def from_key_file(cls, kf: KeyFile) -> "DesktopEntry":
        group = DESKTOP_ENTRY_GROUP

        type_value = kf.get_default_string(group, "Type")
        if type_value != APPLICATION_TYPE:
            raise SchemaMismatchError(type_value)

        name = kf.get_default_string(group, "Name")
        if name is None:
            raise MissingRequiredFieldError("Name")
        exec_line = kf.get_default_string(group, "Exec")
        if exec_line is None:
            raise MissingRequiredFieldError("Exec")

        return cls(
            name=name,
            generic_name=kf.get_default_string(group, "GenericName"),
            exec=exec_line,
            working_dir=kf.get_default_string(group, "Path"),
            hidden=kf.get_boolean(group, "Hidden") is True,
            no_display=kf.get_boolean(group, "NoDisplay") is True,
        )

    @classmethod
    def from_bytes(cls, data: Buffer) -> "DesktopEntry":
        return cls.from_key_file(KeyFile.parse(data))

    @classmethod
    def read_file(cls, path: Union[str, Path]) -> "DesktopEntry":
        # OSError from the read is left to the caller.
        return cls.from_bytes(Path(path).read_bytes())


# ================================
# Loading results
# ================================


class LoadedEntry(BaseModel):
    path: str
    entry: DesktopEntry


class LoadError(BaseModel):
    path: str
    message: str
    detail: Optional[str] = None


class LoadStats(BaseModel):
    files_considered: int = 0
    entries_loaded: int = 0
    entries_hidden: int = 0
    errors: int = 0
    duration_ms: int = 0


class LoadResult(BaseModel):
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    entries: List[LoadedEntry] = Field(default_factory=list)
    errors: List[LoadError] = Field(default_factory=list)
    stats: LoadStats = Field(default_factory=LoadStats)

    def names(self) -> List[str]:
        return [e.entry.name for e in self.entries]


# ================================
# Config (defaults only)
# ================================

DEFAULT_MENU_COMMAND = ["dmenu", "-i", "-p", "run:"]


class DiscoveryConfig(BaseModel):
    """
    Defaults live here.
    Global/explicit/CLI overrides are merged by core/config.py.
    """

    extra_dirs: List[str] = Field(
        default_factory=list,
        description="Extra 'applications' directories, searched before the XDG data dirs.",
    )
    include_hidden: bool = False


class MenuConfig(BaseModel):
    command: List[str] = Field(default_factory=lambda: list(DEFAULT_MENU_COMMAND))

    @field_validator("command")
    @classmethod
    def _command_not_empty(cls, v: List[str]) -> List[str]:
        if not v or not v[0].strip():
            raise ValueError("menu.command must name a program")
        return v


class LaunchConfig(BaseModel):
    detach: bool = True
