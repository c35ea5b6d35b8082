"""Width-aware clipping for ANSI-styled rows.

Escape sequences are zero-width, East Asian wide characters take two cells and
tabs run to the next stop.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Cells taken by ``ch`` when drawn at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _segments(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, chunk)`` pairs covering ``text`` in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield False, text[pos : match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]


def display_width(text: str) -> int:
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            continue
        for ch in chunk:
            col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` down to ``max_cols`` cells.

    Escapes past the cut are still emitted so trailing resets survive; tabs
    are expanded into spaces.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            out.append(chunk)
            continue
        for ch in chunk:
            width = char_display_width(ch, col)
            if col >= max_cols or col + width > max_cols:
                col = max_cols
                break
            out.append(" " * width if ch == "\t" else ch)
            col += width
    return "".join(out)
