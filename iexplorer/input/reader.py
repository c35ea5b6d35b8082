"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens:
``UP``/``DOWN``/``LEFT``/``RIGHT``, ``ENTER``, ``ESC``, ``BACKSPACE``,
``SPACE``, ``CTRL_<letter>``, or the decoded character itself.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
    b" ": "SPACE",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}
_CONTROL_KEYS.update(
    {bytes([code]): f"CTRL_{chr(code + 64)}" for code in range(1, 27) if bytes([code]) not in _CONTROL_KEYS}
)

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    """Collect continuation bytes for a multi-byte UTF-8 character."""
    first = lead[0]
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    elif first >= 0xC0:
        missing = 1
    else:
        return lead
    data = lead
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key (or until ``timeout_ms``) and return its token.

    Returns ``""`` on timeout or end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[seq]
    # Drain the parameters of sequences we do not map (``ESC [ 5 ~`` and friends).
    while seq is not None and not (0x40 <= seq[0] <= 0x7E):
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    return "ESC"
