"""Tests for line editing, confirmation and buffer choosing prompts."""

from __future__ import annotations

import unittest

from iexplorer.prompts import LineEditor, choose, confirm
from iexplorer.ui_theme import PLAIN_THEME


def _keys(*tokens: str):
    pending = list(tokens)

    def read_key() -> str:
        return pending.pop(0) if pending else ""

    return read_key


class LineEditorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.output: list[str] = []

    def _editor(self, *tokens: str) -> LineEditor:
        return LineEditor(_keys(*tokens), self.output.append, PLAIN_THEME, cols=80)

    def test_typed_text_is_returned_on_enter(self) -> None:
        result = self._editor("l", "o", "g", "SPACE", "x", "BACKSPACE", "ENTER").read("Query: ", row=24)
        self.assertEqual(result, "log ")
        self.assertIn("\033[24;1H", self.output[0])
        self.assertIn("Query: ", self.output[0])

    def test_initial_text_is_editable(self) -> None:
        result = self._editor("BACKSPACE", "BACKSPACE", "BACKSPACE", "m", "d", "ENTER").read("", 5, 40, "notes.txt")
        self.assertEqual(result, "notes.md")
        self.assertIn("\033[5;40H", self.output[0])

    def test_ctrl_u_clears_line(self) -> None:
        self.assertEqual(self._editor("CTRL_U", "b", "ENTER").read("", 1, 1, "abc"), "b")

    def test_cancel_keys_and_end_of_input_return_none(self) -> None:
        self.assertIsNone(self._editor("a", "ESC").read("Arguments: ", 24))
        self.assertIsNone(self._editor("a", "CTRL_G").read("Arguments: ", 24))
        self.assertIsNone(self._editor("a").read("Arguments: ", 24))

    def test_cursor_hidden_again_after_edit(self) -> None:
        self._editor("ENTER").read("", 1)
        self.assertEqual(self.output[-1], "\033[?25l")


class ConfirmTests(unittest.TestCase):
    def test_lists_targets_and_honours_default_on_enter(self) -> None:
        output: list[str] = []
        self.assertTrue(confirm(_keys("ENTER"), output.append, PLAIN_THEME, "Remove these files?", ["a", "b"], True))
        screen = "".join(output)
        self.assertIn("--- a", screen)
        self.assertIn("--- b", screen)
        self.assertIn("Remove these files? [Y/n]", screen)

        self.assertFalse(confirm(_keys("ENTER"), output.append, PLAIN_THEME, "Remove?", ["a"], False))

    def test_explicit_answers(self) -> None:
        sink: list[str] = []
        self.assertTrue(confirm(_keys("x", "y"), sink.append, PLAIN_THEME, "Remove?", ["a"], False))
        self.assertFalse(confirm(_keys("n"), sink.append, PLAIN_THEME, "Remove?", ["a"], True))
        self.assertFalse(confirm(_keys("ESC"), sink.append, PLAIN_THEME, "Remove?", ["a"], True))
        self.assertFalse(confirm(_keys(), sink.append, PLAIN_THEME, "Remove?", ["a"], True))


class ChooseTests(unittest.TestCase):
    def test_navigation_and_selection(self) -> None:
        sink: list[str] = []
        labels = ["/a", "/b", "/c"]
        self.assertEqual(choose(_keys("j", "j", "j", "ENTER"), sink.append, PLAIN_THEME, "Choose Buffer", labels, 0), 2)
        self.assertEqual(choose(_keys("k", "ENTER"), sink.append, PLAIN_THEME, "Choose Buffer", labels, 2), 1)
        self.assertEqual(choose(_keys("0", "ENTER"), sink.append, PLAIN_THEME, "Choose Buffer", labels, 2), 0)
        self.assertIn("* 2: /c", "".join(sink))

    def test_cancel_returns_none(self) -> None:
        sink: list[str] = []
        self.assertIsNone(choose(_keys("q"), sink.append, PLAIN_THEME, "Choose Buffer", ["/a"], 0))
        self.assertIsNone(choose(_keys("ESC"), sink.append, PLAIN_THEME, "Choose Buffer", ["/a"], 0))
        self.assertIsNone(choose(_keys(), sink.append, PLAIN_THEME, "Choose Buffer", [], 0))

    def test_long_lists_scroll_with_selection(self) -> None:
        sink: list[str] = []
        labels = [f"/dir{idx}" for idx in range(10)]
        result = choose(_keys(*(["DOWN"] * 9), "ENTER"), sink.append, PLAIN_THEME, "Choose Buffer", labels, 0, rows=5)
        self.assertEqual(result, 9)
        self.assertIn("9: /dir9", sink[-1])
        self.assertNotIn("0: /dir0", sink[-1])


if __name__ == "__main__":
    unittest.main()
