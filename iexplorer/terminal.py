"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


def terminal_size() -> tuple[int, int]:
    """Return ``(columns, rows)`` with an 80x24 fallback."""
    size = shutil.get_terminal_size((80, 24))
    return max(1, size.columns), max(1, size.lines)


class TerminalController:
    """Manage terminal mode transitions around the interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_enabled = False

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self._tui_enabled = True

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, restore tty state."""
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        self._tui_enabled = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @property
    def tui_enabled(self) -> bool:
        return self._tui_enabled

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def set_raw_input(self) -> None:
        """Switch stdin to raw mode without touching the screen buffer."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)

    @contextlib.contextmanager
    def suspended(self):
        """Temporarily hand the terminal back in cooked mode."""
        self.disable_tui_mode()
        try:
            yield
        finally:
            self.enable_tui_mode()

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
