"""Composition root: wire terminal, prompts, viewer and dispatcher together."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

from ..commands import CommandContext, CommandDispatcher
from ..config import Settings
from ..errors import OperationError
from ..input import read_key
from ..launcher import run_program
from ..prompts import LineEditor, choose, confirm
from ..render import RenderContext, build_frame
from ..session import Session
from ..terminal import TerminalController, terminal_size
from ..ui_theme import resolve_theme
from ..viewer import FileViewer, load_viewer_lines
from .loop import run_main_loop

logger = logging.getLogger(__name__)


def open_session(path: Path) -> Session:
    """Create the first buffer; an unlistable start directory is fatal."""
    cols, rows = terminal_size()
    session = Session.open(path, screen_cols=cols, screen_rows=rows)
    error = session.refresh_if_needed()
    if error is not None:
        raise SystemExit(f"could not list files in filepath: {path} ({error.message})")
    return session


def run_browser(path: Path, settings: Settings) -> None:
    """Run the interactive browser on ``path`` until the operator quits."""
    session = open_session(path)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    theme = resolve_theme(settings.theme, no_color=settings.no_color)
    dispatcher: CommandDispatcher | None = None

    def read() -> str:
        return read_key(stdin_fd)

    def read_line(prompt: str, row: int, col: int, initial: str) -> str | None:
        return LineEditor(read, terminal.write, theme, session.screen_cols).read(prompt, row, col, initial)

    def confirm_prompt(title: str, lines: list[str], default: bool) -> bool:
        return confirm(read, terminal.write, theme, title, lines, default, session.screen_cols)

    def choose_prompt(title: str, labels: list[str], current: int) -> int | None:
        return choose(read, terminal.write, theme, title, labels, current, session.screen_cols, session.screen_rows)

    def view_file(target: Path) -> OperationError | None:
        lines, error = load_viewer_lines(target, settings.style, settings.no_color)
        if error is not None:
            return error
        FileViewer(str(target), lines, theme, read, terminal.write, terminal_size).run()
        return None

    def launch(argv: list[str], cwd: Path) -> OperationError | None:
        return run_program(argv, cwd, terminal, read)

    def redraw() -> None:
        pending = dispatcher.awaiting_second_key if dispatcher is not None else False
        terminal.write(build_frame(RenderContext(session, theme, pending_prefix=pending)))

    context = CommandContext(
        session=session,
        read_line=read_line,
        confirm=confirm_prompt,
        choose=choose_prompt,
        view_file=view_file,
        run_program=launch,
        redraw=redraw,
        pause=time.sleep,
        confirm_delete_default=settings.confirm_delete_default,
        unknown_sequence_pause_seconds=settings.unknown_sequence_pause_seconds,
    )
    dispatcher = CommandDispatcher(context)

    logger.info("session started in %s", path)
    with terminal.raw_mode():
        run_main_loop(session, dispatcher, theme, read, terminal.write, terminal_size)
    logger.info("session ended with %d buffer(s)", len(session.stack))
