"""Recoverable operation failures reported on the status line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationError:
    """Failure of one file-system or UI operation.

    ``kind`` is one of ``enumerate``, ``remove``, ``rename``, ``spawn``,
    ``view`` or ``search``. Callers return ``None`` on success.
    """

    kind: str
    message: str

    def __str__(self) -> str:
        return self.message
