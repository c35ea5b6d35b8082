"""Regex search over entry names with a sticky last query."""

from __future__ import annotations

import re

from ..errors import OperationError
from ..listing import Entry
from .buffer import Buffer
from .selection import FIRST_MARKABLE_INDEX

FORWARD = 1
BACKWARD = -1


def find_match(entries: list[Entry], cursor: int, pattern: re.Pattern[str], direction: int) -> int | None:
    """Return the nearest matching index strictly after/before ``cursor``.

    ``.`` and ``..`` are never candidates and the scan does not wrap.
    """
    if direction == FORWARD:
        candidates = range(max(cursor + 1, FIRST_MARKABLE_INDEX), len(entries))
    else:
        candidates = range(cursor - 1, FIRST_MARKABLE_INDEX - 1, -1)
    for index in candidates:
        if pattern.search(entries[index].name):
            return index
    return None


def search(buffer: Buffer, direction: int = FORWARD, new_query: str | None = None) -> OperationError | None:
    """Move the cursor to the next match of ``new_query`` or the last query.

    A new query replaces ``buffer.last_query`` only when it compiles. Without
    any stored query the call is a no-op.
    """
    query = buffer.last_query if new_query is None else new_query
    if not query:
        return None
    try:
        pattern = re.compile(query)
    except re.error as exc:
        return OperationError("search", f"invalid pattern {query!r}: {exc}")
    buffer.last_query = query

    index = find_match(buffer.entries, buffer.cursor, pattern, direction)
    if index is not None:
        buffer.cursor = index
    return None
