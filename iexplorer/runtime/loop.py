"""Main interactive event loop for the browser.

Each iteration: consume a pending re-snapshot, fix cursor and viewport,
render, then block for exactly one key and dispatch it.
"""

from __future__ import annotations

from collections.abc import Callable

from ..commands import CommandDispatcher
from ..render import RenderContext, build_frame
from ..session import Session, clamp_cursor
from ..ui_theme import UITheme


def prepare_frame(session: Session, screen_size: Callable[[], tuple[int, int]]) -> None:
    """Bring session state up to date ahead of rendering."""
    cols, rows = screen_size()
    session.resize(cols, rows)
    session.report(session.refresh_if_needed())
    clamp_cursor(session.active)
    session.update_viewport()
    session.expire_status()


def run_main_loop(
    session: Session,
    dispatcher: CommandDispatcher,
    theme: UITheme,
    read_key: Callable[[], str],
    write: Callable[[str], None],
    screen_size: Callable[[], tuple[int, int]],
) -> None:
    """Run until a quit action or end of input."""
    while True:
        prepare_frame(session, screen_size)
        write(build_frame(RenderContext(session, theme, pending_prefix=dispatcher.awaiting_second_key)))
        try:
            key = read_key()
        except KeyboardInterrupt:
            continue
        if key == "":
            return
        if dispatcher.handle_key(key):
            return
