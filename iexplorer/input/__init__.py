"""Input-layer public API: terminal key decoding and key dispatch tables."""

from .key_registry import KeyComboBinding, KeyComboRegistry, PrefixKeyMachine, SequenceState
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "PrefixKeyMachine",
    "SequenceState",
]
