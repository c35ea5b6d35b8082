"""Tests for key tables and the ``Ctrl-X`` prefix state machine."""

from __future__ import annotations

import unittest

from iexplorer.input import KeyComboBinding, KeyComboRegistry, PrefixKeyMachine, SequenceState


class KeyComboRegistryTests(unittest.TestCase):
    def test_dispatch_reports_unbound_keys_as_none(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("j", "DOWN"), lambda: calls.append("down")),
            KeyComboBinding(("q",), lambda: True),
        )

        self.assertIn("DOWN", registry)
        self.assertFalse(registry.dispatch("j"))
        self.assertTrue(registry.dispatch("q"))
        self.assertIsNone(registry.dispatch("z"))
        self.assertEqual(calls, ["down"])

    def test_later_binding_overrides_earlier(self) -> None:
        registry = KeyComboRegistry()
        registry.register_binding(KeyComboBinding(("x",), lambda: False))
        registry.register_binding(KeyComboBinding(("x",), lambda: True))
        self.assertTrue(registry.dispatch("x"))


class PrefixKeyMachineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.calls: list[str] = []
        self.unknown: list[str] = []
        root = KeyComboRegistry().register_bindings(
            KeyComboBinding(("c",), lambda: self.calls.append("root-c")),
            KeyComboBinding(("q",), lambda: True),
        )
        second = KeyComboRegistry().register_bindings(
            KeyComboBinding(("c",), lambda: self.calls.append("second-c")),
        )
        self.machine = PrefixKeyMachine("CTRL_X", root, second, on_unknown=self.unknown.append)

    def test_prefix_routes_next_key_to_second_table(self) -> None:
        self.assertFalse(self.machine.feed("CTRL_X"))
        self.assertTrue(self.machine.awaiting_second_key)

        self.machine.feed("c")
        self.machine.feed("c")

        self.assertEqual(self.calls, ["second-c", "root-c"])
        self.assertIs(self.machine.state, SequenceState.IDLE)

    def test_unbound_second_key_reports_and_returns_to_idle(self) -> None:
        self.machine.feed("CTRL_X")
        self.assertFalse(self.machine.feed("z"))

        self.assertEqual(self.unknown, ["z"])
        self.assertFalse(self.machine.awaiting_second_key)
        self.assertEqual(self.calls, [])

    def test_cancel_key_ends_sequence_silently(self) -> None:
        self.machine.feed("CTRL_X")
        self.machine.feed("CTRL_G")
        self.assertEqual(self.unknown, [])
        self.assertFalse(self.machine.awaiting_second_key)

    def test_prefix_pressed_twice_is_unknown(self) -> None:
        self.machine.feed("CTRL_X")
        self.machine.feed("CTRL_X")
        self.assertEqual(self.unknown, ["CTRL_X"])
        self.assertFalse(self.machine.awaiting_second_key)

    def test_quit_propagates_from_root_table(self) -> None:
        self.assertTrue(self.machine.feed("q"))
        self.assertFalse(self.machine.feed("unbound"))


if __name__ == "__main__":
    unittest.main()
