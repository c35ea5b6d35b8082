"""Run an external program while the browser hands the terminal back.

Mirrors the ``$EDITOR`` launch pattern: leave TUI mode, run the child to
completion, wait for one acknowledgement key, then re-enter TUI mode.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from .errors import OperationError
from .terminal import TerminalController

CONTINUE_PROMPT = "\r\nPress any key to continue...\r\n"

logger = logging.getLogger(__name__)


def run_program(
    argv: list[str],
    cwd: Path,
    terminal: TerminalController,
    read_key: Callable[[], str],
) -> OperationError | None:
    """Run ``argv`` in ``cwd`` synchronously; spawn failures are returned.

    Ctrl-C while the child runs reaches this process too; it ends the child
    but still goes through the acknowledgement before the listing returns.
    """
    error: OperationError | None = None
    with terminal.suspended():
        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            return OperationError("spawn", f"failed to run {argv[0]}: {reason}")
        except KeyboardInterrupt:
            logger.info("%s interrupted", argv[0])
            error = OperationError("spawn", f"{argv[0]} interrupted")
        else:
            logger.info("%s exited with status %s", argv[0], completed.returncode)
        terminal.set_raw_input()
        terminal.write(CONTINUE_PROMPT)
        read_key()
    return error
