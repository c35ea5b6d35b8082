"""Blocking interactive prompts drawn over the listing.

Each prompt reads keys through an injected ``read_key`` callable and writes
ANSI text through ``write``, so tests can drive them with scripted keys.
"""

from __future__ import annotations

from collections.abc import Callable

from .ansi import RESET, clip_ansi_line, display_width
from .ui_theme import UITheme

CANCEL_KEYS = frozenset({"ESC", "CTRL_G", "CTRL_C"})


def _move_to(row: int, col: int) -> str:
    return f"\033[{max(1, row)};{max(1, col)}H"


class LineEditor:
    """Single-line text input anchored at a screen position.

    ``row``/``col`` are 1-based terminal coordinates of the prompt start.
    """

    def __init__(
        self,
        read_key: Callable[[], str],
        write: Callable[[str], None],
        theme: UITheme,
        cols: int,
    ) -> None:
        self.read_key = read_key
        self.write = write
        self.theme = theme
        self.cols = max(1, cols)

    def _draw(self, prompt: str, text: str, row: int, col: int) -> None:
        room = max(1, self.cols - col + 1)
        shown = f"{self.theme.prompt}{prompt}{self.theme.reset}{text}"
        # Keep the tail of long input visible.
        while display_width(shown) >= room and text:
            text = text[1:]
            shown = f"{self.theme.prompt}{prompt}{self.theme.reset}{text}"
        line = clip_ansi_line(shown, room)
        self.write(f"{_move_to(row, col)}\033[K{line}{RESET}\033[?25h")

    def read(self, prompt: str, row: int, col: int = 1, initial: str = "") -> str | None:
        """Return the accepted text, or ``None`` when the operator cancels."""
        text = initial
        try:
            while True:
                self._draw(prompt, text, row, col)
                key = self.read_key()
                if key == "" or key in CANCEL_KEYS:
                    return None
                if key == "ENTER":
                    return text
                if key == "BACKSPACE":
                    text = text[:-1]
                elif key == "CTRL_U":
                    text = ""
                elif key == "SPACE":
                    text += " "
                elif key == "TAB":
                    text += "\t"
                elif len(key) == 1 and key.isprintable():
                    text += key
        finally:
            self.write("\033[?25l")


def confirm(
    read_key: Callable[[], str],
    write: Callable[[str], None],
    theme: UITheme,
    title: str,
    lines: list[str],
    default: bool,
    cols: int = 80,
) -> bool:
    """Show ``lines`` then ``title [Y/n]``; return the operator's answer."""
    out = ["\033[H\033[J"]
    for line in lines:
        out.append(clip_ansi_line(f"{theme.delete_target}--- {line}{theme.reset}", cols))
        out.append(RESET + "\r\n")
    hint = "[Y/n]" if default else "[y/N]"
    out.append(f"\r\n{theme.prompt}{title}{theme.reset} {hint} ")
    write("".join(out))
    while True:
        key = read_key()
        if key in {"y", "Y"}:
            return True
        if key in {"n", "N", "q", ""} or key in CANCEL_KEYS:
            return False
        if key == "ENTER":
            return default


def choose(
    read_key: Callable[[], str],
    write: Callable[[str], None],
    theme: UITheme,
    title: str,
    labels: list[str],
    current: int,
    cols: int = 80,
    rows: int = 24,
) -> int | None:
    """Let the operator pick one of ``labels``; ``None`` on cancel."""
    if not labels:
        return None
    selected = max(0, min(current, len(labels) - 1))
    list_rows = max(1, rows - 2)
    start = 0
    while True:
        if selected < start:
            start = selected
        elif selected >= start + list_rows:
            start = selected - list_rows + 1
        out = ["\033[H\033[J", f"{theme.header_title}{title}{theme.reset}\r\n"]
        for idx in range(start, min(len(labels), start + list_rows)):
            marker = "*" if idx == current else " "
            row = clip_ansi_line(f"{marker} {idx}: {labels[idx]}", cols)
            if idx == selected:
                row = f"{theme.reverse}{row}{RESET}"
            out.append(row + "\r\n")
        write("".join(out))

        key = read_key()
        if key in {"j", "DOWN", "CTRL_N"}:
            selected = min(len(labels) - 1, selected + 1)
        elif key in {"k", "UP", "CTRL_P"}:
            selected = max(0, selected - 1)
        elif key == "ENTER":
            return selected
        elif key in {"q", ""} or key in CANCEL_KEYS:
            return None
        elif key.isdigit() and int(key) < len(labels):
            selected = int(key)


__all__ = ["LineEditor", "confirm", "choose"]
