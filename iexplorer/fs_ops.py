"""Destructive file-system operations: recursive delete and rename.

Failures come back as ``OperationError`` values so the caller can flash them
and keep the session alive.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import OperationError
from .listing import SPECIAL_NAMES
from .session import Buffer

logger = logging.getLogger(__name__)


def deletion_targets(buffer: Buffer) -> list[str]:
    """Names to delete: every marked entry, else the one under the cursor."""
    if buffer.marked:
        indices = sorted(index for index in buffer.marked if 0 <= index < len(buffer.entries))
    elif buffer.current_entry is not None:
        indices = [buffer.cursor]
    else:
        indices = []
    return [buffer.entries[index].name for index in indices if buffer.entries[index].name not in SPECIAL_NAMES]


def _remove_error(path: Path, exc: OSError) -> OperationError:
    reason = exc.strerror or str(exc)
    return OperationError("remove", f"failed to remove {path}: {reason}")


def remove_path(path: Path) -> OperationError | None:
    """Delete ``path``; directories are emptied depth-first, then removed.

    Symlinks are unlinked, never followed. The first failure stops the walk.
    """
    if path.is_symlink() or not path.is_dir():
        try:
            path.unlink()
        except OSError as exc:
            return _remove_error(path, exc)
        logger.debug("removed %s", path)
        return None

    try:
        children = os.listdir(path)
    except OSError as exc:
        return _remove_error(path, exc)
    for name in children:
        error = remove_path(path / name)
        if error is not None:
            return error
    try:
        path.rmdir()
    except OSError as exc:
        return _remove_error(path, exc)
    logger.debug("removed directory %s", path)
    return None


def delete_targets(directory: Path, names: list[str]) -> tuple[int, OperationError | None]:
    """Remove each name under ``directory``; return ``(removed, first_error)``."""
    removed = 0
    for name in names:
        if name in SPECIAL_NAMES:
            continue
        error = remove_path(directory / name)
        if error is not None:
            return removed, error
        removed += 1
    return removed, None


def rename_entry(directory: Path, old_name: str, new_name: str) -> OperationError | None:
    """Rename ``old_name`` to ``new_name`` inside ``directory``.

    Refuses ``.``/``..``, names containing a path separator, and targets that
    already exist.
    """
    if old_name in SPECIAL_NAMES or new_name in SPECIAL_NAMES:
        return OperationError("rename", f"cannot rename {old_name!r} to {new_name!r}")
    if os.sep in new_name or (os.altsep and os.altsep in new_name):
        return OperationError("rename", f"invalid name {new_name!r}: contains a path separator")
    source = directory / old_name
    target = directory / new_name
    if os.path.lexists(target):
        return OperationError("rename", f"failed to rename `{old_name}` to `{new_name}`: target exists")
    try:
        os.rename(source, target)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        return OperationError("rename", f"failed to rename `{old_name}` to `{new_name}`: {reason}")
    logger.info("renamed %s -> %s", source, target)
    return None


__all__ = ["deletion_targets", "remove_path", "delete_targets", "rename_entry"]
