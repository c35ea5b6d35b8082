"""Column formatting for listing rows (mode, size, time)."""

from __future__ import annotations

import stat
import time

from .types import Entry

UNKNOWN_MODE = "??????????"
UNKNOWN_SIZE = "   ? "
UNKNOWN_TIME = "????????????"
RECENT_SECONDS = 180 * 24 * 3600

_SIZE_UNITS = ((1024**3, "G"), (1024**2, "M"), (1024, "K"))


def mode_string(entry: Entry) -> str:
    if entry.stat_failed or entry.mode is None:
        return UNKNOWN_MODE
    return stat.filemode(entry.mode)


def human_size(entry: Entry) -> str:
    """Return a five-column size label (``1234 ``, ``  12K``, ``   3M``)."""
    if entry.stat_failed:
        return UNKNOWN_SIZE
    for factor, unit in _SIZE_UNITS:
        if entry.size >= factor:
            return f"{entry.size // factor:4d}{unit}"
    return f"{entry.size:4d} "


def format_mtime(entry: Entry, now: float | None = None) -> str:
    """Format mtime like ``ls -l``: clock time when recent, year otherwise."""
    if entry.stat_failed:
        return UNKNOWN_TIME
    if now is None:
        now = time.time()
    try:
        stamp = time.localtime(entry.mtime)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_TIME
    if now - entry.mtime > RECENT_SECONDS or now < entry.mtime:
        return time.strftime("%b %d  %Y", stamp)
    return time.strftime("%b %d %H:%M", stamp)


__all__ = ["mode_string", "human_size", "format_mtime"]
