"""Full-screen read-only pager used when activating a plain file."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

from .ansi import RESET, clip_ansi_line
from .errors import OperationError
from .syntax import colorize_source, read_text, sanitize_terminal_text
from .ui_theme import UITheme


def load_viewer_lines(path: Path, style: str, no_color: bool) -> tuple[list[str], OperationError | None]:
    """Return display lines for ``path`` or a ``view`` error.

    Only regular files are read; FIFOs and devices would block.
    """
    try:
        if not stat.S_ISREG(os.stat(path).st_mode):
            return [], OperationError("view", f"cannot view {path}: not a regular file")
        source = sanitize_terminal_text(read_text(path))
    except OSError as exc:
        reason = exc.strerror or str(exc)
        return [], OperationError("view", f"cannot read {path}: {reason}")
    rendered = source if no_color else colorize_source(source, path, style)
    lines = rendered.splitlines()
    return lines or [""], None


class FileViewer:
    """Scrollable view over pre-rendered lines; ``run`` blocks until dismissed."""

    def __init__(
        self,
        title: str,
        lines: list[str],
        theme: UITheme,
        read_key: Callable[[], str],
        write: Callable[[str], None],
        screen_size: Callable[[], tuple[int, int]],
    ) -> None:
        self.title = title
        self.lines = lines
        self.theme = theme
        self.read_key = read_key
        self.write = write
        self.screen_size = screen_size
        self.start = 0

    def _page_rows(self) -> int:
        _cols, rows = self.screen_size()
        return max(1, rows - 1)

    def max_start(self) -> int:
        return max(0, len(self.lines) - self._page_rows())

    def handle_key(self, key: str) -> bool:
        """Apply one key; return ``True`` when the viewer should close."""
        page = self._page_rows()
        if key in {"q", "ESC"}:
            return True
        if key in {"j", "DOWN", "ENTER", "CTRL_N"}:
            self.start += 1
        elif key in {"k", "UP", "CTRL_P"}:
            self.start -= 1
        elif key in {"SPACE", "f", "CTRL_F"}:
            self.start += page
        elif key in {"b", "CTRL_B"}:
            self.start -= page
        elif key in {"g", "HOME"}:
            self.start = 0
        elif key in {"G", "END"}:
            self.start = self.max_start()
        self.start = max(0, min(self.start, self.max_start()))
        return False

    def render(self) -> str:
        cols, _rows = self.screen_size()
        page = self._page_rows()
        out: list[str] = ["\033[H\033[J"]
        for row in range(page):
            idx = self.start + row
            if idx < len(self.lines):
                text = clip_ansi_line(self.lines[idx], cols)
                out.append(text)
                if "\033" in text:
                    out.append(RESET)
            out.append("\r\n")
        end = min(len(self.lines), self.start + page)
        status = f"{self.title} ({self.start + 1}-{end}/{len(self.lines)})  q to close"
        out.append(self.theme.reverse)
        out.append(clip_ansi_line(status.ljust(cols), cols))
        out.append(self.theme.reset or RESET)
        return "".join(out)

    def run(self) -> None:
        while True:
            self.write(self.render())
            key = self.read_key()
            if key == "" or self.handle_key(key):
                return
