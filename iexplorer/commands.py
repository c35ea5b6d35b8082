"""Key dispatch for the browser: single keys plus ``Ctrl-X`` sequences.

Feature logic lives in the session, fs and activation modules; this module
maps keys onto them and owns the prefix-sequence state machine.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .activation import activate
from .errors import OperationError
from .fs_ops import delete_targets, deletion_targets, rename_entry
from .input import KeyComboBinding, KeyComboRegistry, PrefixKeyMachine
from .listing import PARENT_NAME
from .render import entry_screen_position
from .session import (
    BACKWARD,
    FORWARD,
    Session,
    mark_selection,
    move_down,
    move_to_first,
    move_to_last,
    move_up,
    search,
    toggle_mark,
    unmark_selection,
)

PREFIX_KEY = "CTRL_X"
UNKNOWN_SEQUENCE_MESSAGE = "C-x: Unknown Sequence"
DELETE_TITLE = "Remove these files?"
QUERY_PROMPT = "Query: "
CHOOSER_TITLE = "Choose Buffer"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandContext:
    """Session plus the blocking UI collaborators commands may call.

    ``read_line(prompt, row, col, initial)`` returns ``None`` on cancel;
    ``confirm(title, lines, default)`` answers yes/no;
    ``choose(title, labels, current)`` returns an index or ``None``.
    """

    session: Session
    read_line: Callable[[str, int, int, str], str | None]
    confirm: Callable[[str, list[str], bool], bool]
    choose: Callable[[str, list[str], int], int | None]
    view_file: Callable[[Path], OperationError | None]
    run_program: Callable[[list[str], Path], OperationError | None]
    redraw: Callable[[], None]
    pause: Callable[[float], None]
    confirm_delete_default: bool = True
    unknown_sequence_pause_seconds: float = 0.4


class CommandDispatcher:
    """Translate key tokens into session operations."""

    def __init__(self, context: CommandContext) -> None:
        self.context = context
        root = KeyComboRegistry().register_bindings(
            KeyComboBinding(("DOWN", "j", "CTRL_N"), self._cursor_action(move_down)),
            KeyComboBinding(("UP", "k", "CTRL_P"), self._cursor_action(move_up)),
            KeyComboBinding(("g", "HOME"), self._cursor_action(move_to_first)),
            KeyComboBinding(("G", "END"), self._cursor_action(move_to_last)),
            KeyComboBinding(("ENTER",), self.activate_selection),
            KeyComboBinding(("d",), self.delete_selection),
            KeyComboBinding(("r",), self.rename_selection),
            KeyComboBinding(("m",), self._cursor_action(mark_selection)),
            KeyComboBinding(("u",), self._cursor_action(unmark_selection)),
            KeyComboBinding(("SPACE",), self._cursor_action(toggle_mark)),
            KeyComboBinding(("/",), self.new_search),
            KeyComboBinding(("n",), lambda: self.repeat_search(FORWARD)),
            KeyComboBinding(("N",), lambda: self.repeat_search(BACKWARD)),
            KeyComboBinding(("q",), lambda: True),
        )
        second = KeyComboRegistry().register_bindings(
            KeyComboBinding(("ENTER",), self.activate_parent),
            KeyComboBinding(("CTRL_Q",), self.rename_selection),
            KeyComboBinding(("c",), self.open_new_buffer),
            KeyComboBinding(("b",), self.choose_buffer),
        )
        self.machine = PrefixKeyMachine(PREFIX_KEY, root, second, on_unknown=self.unknown_sequence)

    @property
    def session(self) -> Session:
        return self.context.session

    @property
    def awaiting_second_key(self) -> bool:
        return self.machine.awaiting_second_key

    def handle_key(self, key: str) -> bool:
        """Handle one key and return ``True`` when the session should end."""
        return self.machine.feed(key)

    def _cursor_action(self, operation: Callable[..., object]) -> Callable[[], None]:
        def run() -> None:
            if self.session.active.entries:
                operation(self.session.active)

        return run

    def activate_selection(self) -> None:
        entry = self.session.active.current_entry
        if entry is not None:
            activate(self.context, entry.name)

    def activate_parent(self) -> None:
        activate(self.context, PARENT_NAME)

    def delete_selection(self) -> None:
        """Confirm and remove the marked entries, or the one under the cursor."""
        buffer = self.session.active
        targets = deletion_targets(buffer)
        if not targets:
            return
        if not self.context.confirm(DELETE_TITLE, targets, self.context.confirm_delete_default):
            return
        removed, error = delete_targets(buffer.path, targets)
        logger.info("removed %d of %d entries in %s", removed, len(targets), buffer.path)
        buffer.marked.clear()
        self.session.needs_refresh = True
        if not self.session.report(error):
            self.session.flash(f"removed {removed} item(s)")

    def rename_selection(self) -> None:
        """Edit the name of the entry under the cursor in place."""
        buffer = self.session.active
        entry = buffer.current_entry
        if entry is None or entry.is_special:
            return
        row, col = entry_screen_position(buffer, buffer.cursor)
        new_name = self.context.read_line("", row, col, entry.name)
        if not new_name or new_name == entry.name:
            return
        error = rename_entry(buffer.path, entry.name, new_name)
        if not self.session.report(error):
            self.session.needs_refresh = True

    def new_search(self) -> None:
        query = self.context.read_line(QUERY_PROMPT, self.session.screen_rows, 1, "")
        if not query:
            return
        self.session.report(search(self.session.active, FORWARD, query))

    def repeat_search(self, direction: int) -> None:
        self.session.report(search(self.session.active, direction))

    def open_new_buffer(self) -> None:
        self.session.stack.new_buffer(self.session.active.path)
        self.session.needs_refresh = True

    def choose_buffer(self) -> None:
        stack = self.session.stack
        choice = self.context.choose(CHOOSER_TITLE, stack.labels(), stack.active)
        if choice is None:
            return
        if stack.switch_buffer(choice):
            self.session.needs_refresh = True

    def unknown_sequence(self, key: str) -> None:
        logger.debug("unknown sequence C-x %s", key)
        self.session.flash(UNKNOWN_SEQUENCE_MESSAGE, seconds=self.context.unknown_sequence_pause_seconds)
        self.context.redraw()
        self.context.pause(self.context.unknown_sequence_pause_seconds)
