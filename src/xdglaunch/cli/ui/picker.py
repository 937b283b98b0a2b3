from __future__ import annotations

from typing import List, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input, OptionList

from xdglaunch.core.models import LoadedEntry


def filter_choices(choices: Sequence[str], query: str) -> List[int]:
    """Indexes of `choices` containing `query` (case-insensitive), in order."""
    q = (query or "").strip().lower()
    if not q:
        return list(range(len(choices)))
    return [i for i, c in enumerate(choices) if q in c.lower()]


class EntryPicker(App[Optional[int]]):
    """Type to filter, Enter to launch, Esc to quit without choosing."""

    CSS = """
    Screen { overflow: hidden; }

    #search {
        height: 3;
        margin: 0 1;
        border: solid $accent;
    }

    OptionList { height: 1fr; }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True, priority=True),
        Binding("down", "cursor_down", "Next", show=False),
        Binding("up", "cursor_up", "Previous", show=False),
    ]

    def __init__(self, choices: Sequence[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.choices = list(choices)
        self._visible: List[int] = list(range(len(self.choices)))

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="filter applications…", id="search")
        yield OptionList(*self.choices, id="choices")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "xdglaunch"
        self._options().highlighted = 0 if self._visible else None
        self.query_one("#search", Input).focus()

    def _options(self) -> OptionList:
        return self.query_one("#choices", OptionList)

    def on_input_changed(self, event: Input.Changed) -> None:
        self._visible = filter_choices(self.choices, event.value)
        options = self._options()
        options.clear_options()
        options.add_options([self.choices[i] for i in self._visible])
        options.highlighted = 0 if self._visible else None

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._choose(self._options().highlighted)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self._choose(event.option_index)

    def _choose(self, row: Optional[int]) -> None:
        if row is None or not (0 <= row < len(self._visible)):
            self.bell()
            return
        self.exit(self._visible[row])

    def action_cursor_down(self) -> None:
        self._options().action_cursor_down()

    def action_cursor_up(self) -> None:
        self._options().action_cursor_up()

    def action_cancel(self) -> None:
        self.exit(None)


def pick_entry(entries: Sequence[LoadedEntry]) -> Optional[LoadedEntry]:
    index = EntryPicker([le.entry.name for le in entries]).run()
    if index is None:
        return None
    return entries[index]
