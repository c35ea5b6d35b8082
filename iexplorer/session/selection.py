"""Cursor movement and mark bookkeeping for a buffer.

Indices ``0`` and ``1`` always address ``.`` and ``..``; they are never marked.
"""

from __future__ import annotations

from .buffer import Buffer

FIRST_MARKABLE_INDEX = 2


def clamp_cursor(buffer: Buffer) -> None:
    last = len(buffer.entries) - 1
    if buffer.cursor > last:
        buffer.cursor = max(0, last)
    if buffer.cursor < 0:
        buffer.cursor = 0


def move_up(buffer: Buffer) -> None:
    if buffer.cursor > 0:
        buffer.cursor -= 1


def move_down(buffer: Buffer) -> None:
    if buffer.cursor < len(buffer.entries) - 1:
        buffer.cursor += 1


def move_to_first(buffer: Buffer) -> None:
    buffer.cursor = 0


def move_to_last(buffer: Buffer) -> None:
    buffer.cursor = max(0, len(buffer.entries) - 1)


def toggle_mark(buffer: Buffer) -> bool:
    """Flip the mark on the cursor row; return ``False`` for ``.``/``..``."""
    index = buffer.cursor
    if index < FIRST_MARKABLE_INDEX or index >= len(buffer.entries):
        return False
    if index in buffer.marked:
        buffer.marked.discard(index)
    else:
        buffer.marked.add(index)
    return True


def _set_marks(buffer: Buffer, mark: bool) -> None:
    """Apply ``mark`` to the whole listing from ``.`` or to one row otherwise.

    On ``..`` nothing happens. On a regular row the cursor advances afterwards
    so repeated presses sweep downward.
    """
    if buffer.cursor == 0:
        indices = range(FIRST_MARKABLE_INDEX, len(buffer.entries))
        if mark:
            buffer.marked.update(indices)
        else:
            buffer.marked.difference_update(indices)
        return
    if buffer.cursor == 1:
        return
    if mark:
        buffer.marked.add(buffer.cursor)
    else:
        buffer.marked.discard(buffer.cursor)
    move_down(buffer)


def mark_selection(buffer: Buffer) -> None:
    _set_marks(buffer, True)


def unmark_selection(buffer: Buffer) -> None:
    _set_marks(buffer, False)


__all__ = [
    "FIRST_MARKABLE_INDEX",
    "clamp_cursor",
    "move_up",
    "move_down",
    "move_to_first",
    "move_to_last",
    "toggle_mark",
    "mark_selection",
    "unmark_selection",
]
