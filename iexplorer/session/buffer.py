"""One independently navigable directory view."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import OperationError
from ..listing import Entry, build_snapshot


@dataclass
class Buffer:
    """Directory path plus its current snapshot, cursor, marks and query.

    ``entries`` is replaced wholesale by ``load``; marks and the last search
    query belong to one snapshot generation and are dropped with it.
    """

    path: Path
    entries: list[Entry] = field(default_factory=list)
    cursor: int = 0
    marked: set[int] = field(default_factory=set)
    viewport_offset: int = 0
    last_query: str = ""

    @property
    def current_entry(self) -> Entry | None:
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def entry_path(self, entry: Entry) -> Path:
        return self.path / entry.name

    def load(self, directory: Path) -> OperationError | None:
        """Snapshot ``directory`` and install it; on failure keep current state."""
        entries, scan_error = build_snapshot(directory)
        if scan_error is not None:
            reason = scan_error.strerror or str(scan_error)
            return OperationError("enumerate", f"cannot enter directory {directory}: {reason}")
        self.path = directory
        self.entries = entries
        self.marked.clear()
        self.last_query = ""
        if self.cursor > len(self.entries) - 1:
            self.cursor = max(0, len(self.entries) - 1)
        return None

    def refresh(self) -> OperationError | None:
        return self.load(self.path)

    def change_directory(self, directory: Path) -> OperationError | None:
        """Move to ``directory`` with the cursor on its first row."""
        error = self.load(directory)
        if error is None:
            self.cursor = 0
            self.viewport_offset = 0
        return error
