"""Explicit session object threaded through the dispatcher."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import OperationError
from .stack import BufferStack
from .viewport import update_viewport

STATUS_MESSAGE_SECONDS = 2.5

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """All mutable browsing state for one process run."""

    stack: BufferStack = field(default_factory=BufferStack)
    screen_cols: int = 80
    screen_rows: int = 24
    needs_refresh: bool = True
    status_message: str = ""
    status_message_until: float = 0.0

    @classmethod
    def open(cls, path: Path, screen_cols: int = 80, screen_rows: int = 24) -> Session:
        session = cls(screen_cols=screen_cols, screen_rows=screen_rows)
        session.stack.new_buffer(path)
        return session

    @property
    def active(self):
        return self.stack.active_buffer

    def flash(self, message: str, seconds: float = STATUS_MESSAGE_SECONDS) -> None:
        self.status_message = message
        self.status_message_until = time.monotonic() + seconds

    def report(self, error: OperationError | None) -> bool:
        """Flash ``error`` when present; return whether there was one."""
        if error is None:
            return False
        logger.warning("%s failed: %s", error.kind, error.message)
        self.flash(error.message)
        return True

    def expire_status(self, now: float | None = None) -> None:
        if not self.status_message:
            return
        if (time.monotonic() if now is None else now) >= self.status_message_until:
            self.status_message = ""
            self.status_message_until = 0.0

    def refresh_if_needed(self) -> OperationError | None:
        """Consume ``needs_refresh`` by re-snapshotting the active buffer."""
        if not self.needs_refresh:
            return None
        self.needs_refresh = False
        return self.active.refresh()

    def resize(self, cols: int, rows: int) -> None:
        self.screen_cols = max(1, cols)
        self.screen_rows = max(1, rows)

    def update_viewport(self) -> None:
        update_viewport(self.active, self.screen_rows)
