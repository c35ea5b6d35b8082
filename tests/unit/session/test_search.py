"""Tests for regex search navigation."""

from __future__ import annotations

import unittest
from pathlib import Path

from iexplorer.listing import Entry
from iexplorer.session import BACKWARD, FORWARD, Buffer, search


def _make_buffer(*names: str, cursor: int = 0) -> Buffer:
    entries = [Entry(name=name) for name in (".", "..", *names)]
    return Buffer(path=Path("/tmp"), entries=entries, cursor=cursor)


class SearchTests(unittest.TestCase):
    def test_forward_search_jumps_to_first_match_and_stays_when_exhausted(self) -> None:
        buffer = _make_buffer("a.txt", "log.txt", "notes", cursor=2)

        self.assertIsNone(search(buffer, FORWARD, "log"))
        self.assertEqual(buffer.cursor, 3)
        self.assertEqual(buffer.last_query, "log")

        self.assertIsNone(search(buffer, FORWARD))
        self.assertEqual(buffer.cursor, 3)

    def test_backward_search_finds_nearest_previous_match(self) -> None:
        buffer = _make_buffer("a1", "b", "a2", "c", cursor=5)
        buffer.last_query = "^a"

        search(buffer, BACKWARD)
        self.assertEqual(buffer.cursor, 4)
        search(buffer, BACKWARD)
        self.assertEqual(buffer.cursor, 2)
        search(buffer, BACKWARD)
        self.assertEqual(buffer.cursor, 2)

    def test_search_never_selects_dot_entries(self) -> None:
        buffer = _make_buffer("x", "y", cursor=0)
        search(buffer, FORWARD, ".")
        self.assertEqual(buffer.cursor, 2)

        buffer.cursor = 2
        search(buffer, BACKWARD, r"^\.")
        self.assertEqual(buffer.cursor, 2)

    def test_repeat_without_query_is_noop(self) -> None:
        buffer = _make_buffer("a", "b", cursor=2)
        self.assertIsNone(search(buffer, FORWARD))
        self.assertEqual(buffer.cursor, 2)

    def test_invalid_pattern_reports_error_and_keeps_previous_query(self) -> None:
        buffer = _make_buffer("log", cursor=0)
        buffer.last_query = "log"

        error = search(buffer, FORWARD, "(")

        self.assertIsNotNone(error)
        self.assertEqual(error.kind, "search")
        self.assertEqual(buffer.last_query, "log")
        self.assertEqual(buffer.cursor, 0)

    def test_pattern_matches_anywhere_in_bare_name(self) -> None:
        buffer = _make_buffer("alpha", "my-notes.md", cursor=0)
        search(buffer, FORWARD, "notes")
        self.assertEqual(buffer.cursor, 3)


if __name__ == "__main__":
    unittest.main()
