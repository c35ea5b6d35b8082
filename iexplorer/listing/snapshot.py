"""Directory snapshots: enumerate, probe, and order listing entries."""

from __future__ import annotations

import grp
import os
import pwd
from pathlib import Path

from .types import PARENT_NAME, SELF_NAME, UNKNOWN_NAME, Entry


def entry_sort_key(name: str) -> tuple[int, bytes]:
    """Order ``.`` first, ``..`` second, then names by raw byte value."""
    if name == SELF_NAME:
        return (0, b"")
    if name == PARENT_NAME:
        return (1, b"")
    return (2, os.fsencode(name))


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return UNKNOWN_NAME


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return UNKNOWN_NAME


def probe_entry(directory: Path, name: str) -> Entry:
    """Build an ``Entry`` for ``name`` inside ``directory`` without following symlinks."""
    try:
        st = os.lstat(directory / name)
    except OSError:
        return Entry.unprobed(name)
    return Entry(
        name=name,
        mode=st.st_mode,
        nlink=st.st_nlink,
        owner=_owner_name(st.st_uid),
        group=_group_name(st.st_gid),
        size=st.st_size,
        mtime=st.st_mtime,
    )


def build_snapshot(directory: Path) -> tuple[list[Entry], OSError | None]:
    """List ``directory`` as ordered entries.

    Returns ``(entries, scan_error)``. ``scan_error`` is set, and ``entries``
    is empty, when the directory cannot be enumerated. A failing metadata probe
    for one child never aborts the listing.
    """
    try:
        names = os.listdir(directory)
    except OSError as exc:
        return [], exc

    names.extend((SELF_NAME, PARENT_NAME))
    names.sort(key=entry_sort_key)
    return [probe_entry(directory, name) for name in names], None


def read_symlink_target(directory: Path, entry: Entry) -> str | None:
    """Return the raw link target for symlink entries, ``None`` otherwise."""
    if not entry.is_symlink:
        return None
    try:
        return os.readlink(directory / entry.name)
    except OSError:
        return None
