from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from xdglaunch.core.keyfile import KeyFile
from xdglaunch.core.models import LoadedEntry, LoadError, LoadResult


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Entries
# ----------------------------

def render_entries_plain(echo: Callable[[str], None], entries: Sequence[LoadedEntry]) -> None:
    """One block per entry: name, then ` - exec` and ` - working dir`."""
    for le in entries:
        e = le.entry
        echo(e.name)
        echo(f" - {e.exec}")
        if e.working_dir is not None:
            echo(f" - {e.working_dir}")


def render_entries_table(
    console: Console,
    entries: Sequence[LoadedEntry],
    *,
    title: Optional[str] = None,
    show_paths: bool = False,
) -> None:
    if not entries:
        console.print("[muted]No desktop entries found.[/muted]")
        return

    table = Table(title=title or f"Applications ({len(entries)})", show_lines=False)
    table.add_column("Name", style="name")
    table.add_column("Generic name")
    table.add_column("Exec")
    table.add_column("Working dir", style="path")
    if show_paths:
        table.add_column("File", style="path")

    for le in entries:
        e = le.entry
        name = Text(e.name)
        if not e.visible:
            name.stylize("dim")
        row = [
            name,
            e.generic_name or "",
            _short(e.exec, 80),
            e.working_dir or "",
        ]
        if show_paths:
            row.append(le.path)
        table.add_row(*row)

    console.print(table)


# ----------------------------
# Errors
# ----------------------------

def render_errors(
    console: Console,
    errors: Sequence[LoadError],
    *,
    max_items: int = 25,
    verbose: bool = False,
) -> None:
    if not errors:
        return

    console.print(f"[warn]{len(errors)} file(s) could not be loaded.[/warn]")

    if not verbose:
        console.print("[muted]Run with --verbose to see error details.[/muted]")
        return

    shown = list(errors)[:max_items]
    for e in shown:
        msg = f"- {e.path}: {e.message}"
        if e.detail:
            msg += f" ({_short(e.detail, 160)})"
        console.print(msg, markup=False)

    if len(errors) > len(shown):
        console.print(f"[muted]… and {len(errors) - len(shown)} more[/muted]")


# ----------------------------
# Summaries / stats
# ----------------------------

def render_load_summary(console: Console, result: LoadResult, *, header: str = "Summary") -> None:
    s = result.stats
    cols: List[str] = ["files", "loaded", "hidden", "errors", "duration_ms"]
    vals: List[str] = [
        str(s.files_considered),
        str(s.entries_loaded),
        str(s.entries_hidden),
        str(s.errors),
        str(s.duration_ms),
    ]

    table = Table(title=header, show_header=True, show_lines=False)
    for c in cols:
        table.add_column(c, style="bold", no_wrap=True)
    table.add_row(*vals)

    console.print()
    console.print(table)


# ----------------------------
# Key file dump
# ----------------------------

def render_keyfile_tree(console: Console, kf: KeyFile, *, label: str = "key file") -> None:
    tree = Tree(Text(label, style="path"))
    for group_name in kf.groups():
        branch = tree.add(Text(f"[{group_name}]", style="bold"))
        for key in kf.keys(group_name):
            if key.locale is None:
                value = kf.get_default_string(group_name, key.name)
            else:
                value = kf.get_localized_string(group_name, key.name, str(key.locale))
            line = Text(key.name)
            if key.locale is not None:
                line.append(f"[{key.locale}]", style="locale")
            line.append(f"={value}")
            branch.add(line)
    console.print(tree)
