"""Ordered collection of buffers with one active member."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .buffer import Buffer


@dataclass
class BufferStack:
    """Append-only list of buffers; ``active`` indexes the one on screen."""

    buffers: list[Buffer] = field(default_factory=list)
    active: int = 0

    @property
    def active_buffer(self) -> Buffer:
        return self.buffers[self.active]

    def __len__(self) -> int:
        return len(self.buffers)

    def new_buffer(self, path: Path) -> Buffer:
        """Append a buffer rooted at ``path`` and make it active.

        The caller is responsible for snapshotting it.
        """
        buffer = Buffer(path=path)
        self.buffers.append(buffer)
        self.active = len(self.buffers) - 1
        return buffer

    def switch_buffer(self, index: int) -> bool:
        """Activate buffer ``index``; return ``False`` when nothing changed."""
        if not 0 <= index < len(self.buffers) or index == self.active:
            return False
        self.active = index
        target = self.buffers[index]
        target.cursor = 0
        target.viewport_offset = 0
        return True

    def labels(self) -> list[str]:
        return [str(buffer.path) for buffer in self.buffers]
