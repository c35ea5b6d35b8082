"""Key-combo registry and the two-key prefix state machine."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Key tokens that all trigger ``handler``; a truthy result asks to quit."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Token-to-handler table for one level of the key map."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Add ``bindings`` in order; a later binding wins on shared tokens."""
        self._handlers.update((combo, binding.handler) for binding in bindings for combo in binding.combos)
        return self

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        return self.register_bindings(binding)

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Run the handler for ``key``; ``None`` when nothing is bound to it."""
        handler = self._handlers.get(key)
        return None if handler is None else bool(handler())


class SequenceState(enum.Enum):
    IDLE = "idle"
    AWAITING_SECOND_KEY = "awaiting_second_key"


class PrefixKeyMachine:
    """Route keys through a root table, or a second table after ``prefix``.

    ``on_unknown`` is called with the offending key when the second key of a
    sequence has no binding; ``cancel_keys`` end a sequence silently.
    """

    def __init__(
        self,
        prefix: str,
        root: KeyComboRegistry,
        second: KeyComboRegistry,
        on_unknown: Callable[[str], None],
        cancel_keys: frozenset[str] = frozenset({"ESC", "CTRL_G"}),
    ) -> None:
        self.prefix = prefix
        self.root = root
        self.second = second
        self.on_unknown = on_unknown
        self.cancel_keys = cancel_keys
        self.state = SequenceState.IDLE

    @property
    def awaiting_second_key(self) -> bool:
        return self.state is SequenceState.AWAITING_SECOND_KEY

    def feed(self, key: str) -> bool:
        """Consume one key; return ``True`` when the bound action asks to quit."""
        if self.state is SequenceState.AWAITING_SECOND_KEY:
            self.state = SequenceState.IDLE
            if key in self.cancel_keys:
                return False
            handled = self.second.dispatch(key)
            if handled is None:
                self.on_unknown(key)
                return False
            return handled

        if key == self.prefix:
            self.state = SequenceState.AWAITING_SECOND_KEY
            return False
        return bool(self.root.dispatch(key))
