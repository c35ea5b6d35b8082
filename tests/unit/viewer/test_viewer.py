"""Tests for the read-only file viewer and its text loading."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from iexplorer.syntax import colorize_source, read_text, sanitize_terminal_text
from iexplorer.ui_theme import PLAIN_THEME
from iexplorer.viewer import FileViewer, load_viewer_lines


def _viewer(lines: list[str], rows: int = 6, keys: tuple[str, ...] = ()) -> tuple[FileViewer, list[str]]:
    pending = list(keys)
    output: list[str] = []
    viewer = FileViewer(
        "notes.txt",
        lines,
        PLAIN_THEME,
        lambda: pending.pop(0) if pending else "",
        output.append,
        lambda: (40, rows),
    )
    return viewer, output


class FileViewerTests(unittest.TestCase):
    def test_scrolling_is_clamped_to_content(self) -> None:
        viewer, _output = _viewer([f"line {idx}" for idx in range(20)], rows=6)

        viewer.handle_key("k")
        self.assertEqual(viewer.start, 0)
        viewer.handle_key("SPACE")
        self.assertEqual(viewer.start, 5)
        viewer.handle_key("G")
        self.assertEqual(viewer.start, 15)
        viewer.handle_key("j")
        self.assertEqual(viewer.start, 15)
        viewer.handle_key("b")
        self.assertEqual(viewer.start, 10)
        viewer.handle_key("g")
        self.assertEqual(viewer.start, 0)

    def test_quit_keys_close(self) -> None:
        viewer, _output = _viewer(["x"])
        self.assertTrue(viewer.handle_key("q"))
        self.assertTrue(viewer.handle_key("ESC"))
        self.assertFalse(viewer.handle_key("z"))

    def test_render_shows_page_and_position(self) -> None:
        viewer, _output = _viewer([f"line {idx}" for idx in range(20)], rows=6)
        viewer.handle_key("j")
        frame = viewer.render()
        self.assertIn("line 1\r\n", frame)
        self.assertNotIn("line 0\r\n", frame)
        self.assertIn("notes.txt (2-6/20)  q to close", frame)

    def test_run_returns_on_quit_or_end_of_input(self) -> None:
        viewer, output = _viewer(["a", "b"], keys=("j", "q"))
        viewer.run()
        self.assertEqual(len(output), 2)

        viewer, output = _viewer(["a"])
        viewer.run()
        self.assertEqual(len(output), 1)


class LoadViewerLinesTests(unittest.TestCase):
    def test_plain_loading_sanitizes_control_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bell.txt"
            path.write_bytes(b"ring\x07\nok\n")
            lines, error = load_viewer_lines(path, "monokai", no_color=True)
        self.assertIsNone(error)
        self.assertEqual(lines, ["ring\\x07", "ok"])

    def test_empty_file_yields_one_blank_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty"
            path.write_bytes(b"")
            lines, error = load_viewer_lines(path, "monokai", no_color=True)
        self.assertEqual((lines, error), ([""], None))

    def test_fifo_is_refused_without_reading(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fifo = Path(tmp) / "pipe"
            os.mkfifo(fifo)
            lines, error = load_viewer_lines(fifo, "monokai", no_color=True)
        self.assertEqual(lines, [])
        self.assertEqual(error.kind, "view")
        self.assertIn("not a regular file", error.message)

    def test_unreadable_file_is_view_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            lines, error = load_viewer_lines(Path(tmp) / "missing.py", "monokai", no_color=False)
        self.assertEqual(lines, [])
        self.assertEqual(error.kind, "view")
        self.assertIn("cannot read", error.message)


class SyntaxTests(unittest.TestCase):
    def test_read_text_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "latin.txt"
            path.write_bytes("caf\xe9".encode("latin-1"))
            self.assertEqual(read_text(path), "café")

    def test_sanitize_keeps_whitespace_controls(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\r\n\x1b[2J"), "a\tb\r\n\\x1b[2J")

    def test_python_source_is_colorized(self) -> None:
        rendered = colorize_source("def f():\n    return 1\n", Path("example.py"), "monokai")
        self.assertIn("\x1b[", rendered)
        self.assertIn("return", rendered)

    def test_unknown_style_and_extension_fall_back(self) -> None:
        rendered = colorize_source("plain words\n", Path("notes.unknownext"), "no-such-style")
        self.assertIn("plain words", rendered)


if __name__ == "__main__":
    unittest.main()
