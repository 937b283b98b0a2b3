from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Union

from xdglaunch.core.models import (
    DesktopEntry,
    LoadError,
    LoadedEntry,
    LoadResult,
    LoadStats,
)
from xdglaunch.parsers.errors import KeyFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
BytesReader = Callable[[Path], bytes]


def _read_bytes(path: Path) -> bytes:
    return path.read_bytes()


def load_entries(
    paths: Iterable[PathLike],
    *,
    read_bytes: BytesReader = _read_bytes,
    include_hidden: bool = False,
) -> LoadResult:
    """
    Read and project every candidate file:
    read bytes -> KeyFile -> DesktopEntry -> visibility filter -> LoadResult.

    A file that cannot be read or projected is recorded as a LoadError and
    skipped; the remaining candidates are still loaded.
    """
    t0 = time.perf_counter()
    result = LoadResult(started_at=datetime.now(timezone.utc), stats=LoadStats())

    entries: List[LoadedEntry] = []

    for raw in paths:
        path = Path(raw)
        result.stats.files_considered += 1
        try:
            entry = DesktopEntry.from_bytes(read_bytes(path))
        except OSError as e:
            logger.warning("%s: failed to read desktop entry: %s", path, e)
            result.errors.append(
                LoadError(path=str(path), message="Failed to read file", detail=str(e))
            )
            continue
        except KeyFileError as e:
            logger.warning("%s: failed to read desktop entry: %s", path, e)
            result.errors.append(
                LoadError(
                    path=str(path),
                    message=f"Invalid desktop entry ({type(e).__name__})",
                    detail=str(e),
                )
            )
            continue

        if not entry.visible:
            result.stats.entries_hidden += 1
            if not include_hidden:
                logger.debug("%s: skipping hidden entry %r", path, entry.name)
                continue

        entries.append(LoadedEntry(path=str(path), entry=entry))

    result.entries = entries
    result.stats.entries_loaded = len(entries)
    result.stats.errors = len(result.errors)
    result.stats.duration_ms = int((time.perf_counter() - t0) * 1000)
    result.finished_at = datetime.now(timezone.utc)
    return result
