"""Listing frame composition.

Builds the full ANSI frame (header, visible entry rows, status line) from a
``Session`` without mutating it. Rows are separated by ``\\r\\n`` because the
terminal runs in raw mode.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from pathlib import Path

from . import __version__
from .ansi import RESET, clip_ansi_line, display_width
from .listing import Entry, format_mtime, human_size, mode_string, read_symlink_target
from .session import Buffer, Session, visible_range
from .ui_theme import UITheme

MARK_LABEL = "<M> "
HEADER_ROWS = 1


@dataclass(frozen=True)
class RenderContext:
    session: Session
    theme: UITheme
    pending_prefix: bool = False
    now: float | None = None


def entry_columns(entry: Entry, now: float | None = None) -> str:
    """Plain metadata columns preceding the name, ``ls -l`` style."""
    return (
        f"{mode_string(entry)} {entry.nlink:3d} {entry.owner:<8} {entry.group:<8} "
        f"{human_size(entry)} {format_mtime(entry, now)} "
    )


def entry_style(entry: Entry, theme: UITheme) -> str:
    if entry.is_special:
        return theme.special_entry
    if entry.is_dir:
        return theme.directory
    if entry.is_executable:
        return theme.executable
    return theme.file


def format_entry_row(
    buffer: Buffer,
    index: int,
    theme: UITheme,
    width: int,
    now: float | None = None,
) -> str:
    entry = buffer.entries[index]
    selected = index == buffer.cursor
    out = [entry_style(entry, theme)]
    if selected:
        out.append(theme.reverse)
    if index in buffer.marked:
        out.append(f"{theme.marked}{MARK_LABEL}")
    out.append(entry_columns(entry, now))
    out.append(entry.name)

    target = read_symlink_target(buffer.path, entry)
    if target is not None:
        out.append(f" -> {theme.symlink_target}{target}{theme.reset}")
    if selected:
        out.append(f"{RESET}  {theme.ghost_path}{os.path.realpath(buffer.entry_path(entry))}{theme.reset}")
    return clip_ansi_line("".join(out), width) + RESET


def entry_screen_position(buffer: Buffer, index: int, now: float | None = None) -> tuple[int, int]:
    """Return the 1-based ``(row, col)`` where entry ``index``'s name is drawn."""
    row = HEADER_ROWS + 1 + (index - buffer.viewport_offset)
    prefix = entry_columns(buffer.entries[index], now)
    if index in buffer.marked:
        prefix = MARK_LABEL + prefix
    return row, display_width(prefix) + 1


def format_header(path: Path, theme: UITheme, width: int) -> str:
    header = (
        f"{theme.header_title}(I)nteractive.(E)xplorer-v{__version__}{theme.reset}"
        f" list. {theme.header_path}{path}{theme.reset}"
    )
    return clip_ansi_line(header, width) + RESET


def format_status(context: RenderContext) -> str:
    session = context.session
    theme = context.theme
    buffer = session.active
    items = max(0, len(buffer.entries) - 2)
    dirs = sum(1 for entry in buffer.entries[2:] if entry.is_dir)
    parts = [
        f"{theme.status_label}{items} items{theme.reset}  ({dirs} dirs)",
        f"  [{theme.status_count}{buffer.cursor + 1}{theme.reset}/{theme.status_count}{len(buffer.entries)}{theme.reset}]",
    ]
    if len(session.stack) > 1:
        parts.append(f"  buf {session.stack.active + 1}/{len(session.stack)}")
    if session.status_message:
        parts.append(f"  {theme.warning}{session.status_message}{theme.reset}")
    elif buffer.marked:
        parts.append(f"  {theme.status_count}{len(buffer.marked)}{theme.reset} MARKED (u to unmark)")
    if context.pending_prefix:
        parts.append("  C-x-")
    return clip_ansi_line("".join(parts), session.screen_cols) + RESET


def build_frame(context: RenderContext) -> str:
    session = context.session
    buffer = session.active
    width = session.screen_cols
    now = time.time() if context.now is None else context.now
    out = ["\033[H\033[J", format_header(buffer.path, context.theme, width), "\r\n"]
    for index in visible_range(buffer, session.screen_rows):
        out.append(format_entry_row(buffer, index, context.theme, width, now))
        out.append("\r\n")
    out.append(format_status(context))
    return "".join(out)


__all__ = [
    "RenderContext",
    "build_frame",
    "entry_columns",
    "entry_screen_position",
    "format_entry_row",
    "format_header",
    "format_status",
]
