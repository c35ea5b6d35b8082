"""Domain datatypes for one directory listing row."""

from __future__ import annotations

import stat
from dataclasses import dataclass

SELF_NAME = "."
PARENT_NAME = ".."
SPECIAL_NAMES = frozenset({SELF_NAME, PARENT_NAME})
UNKNOWN_NAME = "?"
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class Entry:
    """One file-system object plus metadata observed via ``lstat``.

    When the probe failed ``stat_failed`` is set and every metadata field holds
    its sentinel value; the entry is still listed.
    """

    name: str
    mode: int | None = None
    nlink: int = 0
    owner: str = UNKNOWN_NAME
    group: str = UNKNOWN_NAME
    size: int = 0
    mtime: float = 0.0
    stat_failed: bool = False

    @classmethod
    def unprobed(cls, name: str) -> Entry:
        """Return an entry carrying sentinel metadata for a failed probe."""
        return cls(name=name, stat_failed=True)

    @property
    def is_special(self) -> bool:
        return self.name in SPECIAL_NAMES

    @property
    def is_dir(self) -> bool:
        return self.mode is not None and stat.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return self.mode is not None and stat.S_ISLNK(self.mode)

    @property
    def is_executable(self) -> bool:
        if self.stat_failed or self.mode is None:
            return False
        return bool(self.mode & EXECUTE_BITS)
