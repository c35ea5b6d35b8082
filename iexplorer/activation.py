"""Enter/open action for the selected entry: cd, execute, or view."""

from __future__ import annotations

import logging
import os
import stat
from typing import TYPE_CHECKING

from .listing import EXECUTE_BITS
from .session import Buffer

if TYPE_CHECKING:
    from .commands import CommandContext

ARGUMENTS_PROMPT = "Arguments: "

logger = logging.getLogger(__name__)


def is_runnable(buffer: Buffer, name: str) -> bool:
    """Return whether ``name`` is an executable regular file (symlinks followed).

    Entries whose metadata probe failed are never run.
    """
    entry = next((candidate for candidate in buffer.entries if candidate.name == name), None)
    if entry is None or entry.stat_failed:
        return False
    try:
        st = os.stat(buffer.path / name)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXECUTE_BITS)


def activate(context: CommandContext, name: str) -> None:
    """Activate ``name`` in the active buffer.

    Directories are entered (a listing failure keeps the old directory),
    executables are run with prompted arguments, anything else is viewed.
    """
    session = context.session
    buffer = session.active
    target = buffer.path / name

    if target.is_dir():
        resolved = target.resolve()
        logger.debug("entering %s", resolved)
        session.report(buffer.change_directory(resolved))
        return

    if is_runnable(buffer, name):
        arguments = context.read_line(ARGUMENTS_PROMPT, session.screen_rows, 1, "")
        if arguments is None:
            return
        argv = [str(target), *arguments.split()]
        logger.info("running %s", argv)
        session.report(context.run_program(argv, buffer.path))
        session.needs_refresh = True
        return

    session.report(context.view_file(target))
