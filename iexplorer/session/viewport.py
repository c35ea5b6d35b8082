"""Scroll-window arithmetic for the listing pane."""

from __future__ import annotations

from .buffer import Buffer

RESERVED_ROWS = 2


def visible_rows(screen_height: int) -> int:
    """Rows available for entries once header and status lines are taken."""
    return max(1, screen_height - RESERVED_ROWS)


def compute_viewport_offset(cursor: int, total: int, rows: int, offset: int) -> int:
    """Return the first visible index keeping ``cursor`` inside the window."""
    if cursor >= offset + rows:
        offset = cursor - rows + 1
    if cursor < offset:
        offset = cursor
    if offset + rows > total:
        offset = max(0, total - rows)
    if offset >= total:
        offset = 0
    return max(0, offset)


def update_viewport(buffer: Buffer, screen_height: int) -> None:
    buffer.viewport_offset = compute_viewport_offset(
        buffer.cursor,
        len(buffer.entries),
        visible_rows(screen_height),
        buffer.viewport_offset,
    )


def visible_range(buffer: Buffer, screen_height: int) -> range:
    start = buffer.viewport_offset
    end = min(len(buffer.entries), start + visible_rows(screen_height))
    return range(start, end)
