"""Directory listing model.

This package contains non-UI listing primitives:
- the per-row ``Entry`` datatype with sentinel metadata for failed probes
- snapshot building with the ``.``/``..``-first byte-wise ordering
- column formatting helpers used by the renderer
"""

from __future__ import annotations

from .format import format_mtime, human_size, mode_string
from .snapshot import build_snapshot, entry_sort_key, probe_entry, read_symlink_target
from .types import EXECUTE_BITS, PARENT_NAME, SELF_NAME, SPECIAL_NAMES, Entry

__all__ = [
    "Entry",
    "EXECUTE_BITS",
    "SELF_NAME",
    "PARENT_NAME",
    "SPECIAL_NAMES",
    "build_snapshot",
    "entry_sort_key",
    "probe_entry",
    "read_symlink_target",
    "mode_string",
    "human_size",
    "format_mtime",
]
