"""Browsing session model: buffers, selection, viewport and search.

Everything here is pure state manipulation over ``Buffer`` objects; nothing
touches the terminal.
"""

from __future__ import annotations

from .buffer import Buffer
from .search import BACKWARD, FORWARD, find_match, search
from .selection import (
    FIRST_MARKABLE_INDEX,
    clamp_cursor,
    mark_selection,
    move_down,
    move_to_first,
    move_to_last,
    move_up,
    toggle_mark,
    unmark_selection,
)
from .stack import BufferStack
from .state import Session
from .viewport import compute_viewport_offset, update_viewport, visible_range, visible_rows

__all__ = [
    "Buffer",
    "BufferStack",
    "Session",
    "FORWARD",
    "BACKWARD",
    "find_match",
    "search",
    "FIRST_MARKABLE_INDEX",
    "clamp_cursor",
    "move_up",
    "move_down",
    "move_to_first",
    "move_to_last",
    "toggle_mark",
    "mark_selection",
    "unmark_selection",
    "compute_viewport_offset",
    "update_viewport",
    "visible_rows",
    "visible_range",
]
