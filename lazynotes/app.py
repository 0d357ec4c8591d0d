"""Note browser application: wires the note store to the two list panes.

Key handling is a pure state transition on ``AppState`` plus store calls,
so it runs without a terminal. ``handle_key`` returns ``True`` to quit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from . import store
from .config import DEFAULT_LEFT_PANE_PERCENT
from .edit_buffer import LineInput
from .errors import NoteStoreError
from .selection import SelectionModel
from .state import FOCUS_CONTENT, FOCUS_FILES, MODE_EDITING, MODE_NORMAL, AppState

logger = logging.getLogger(__name__)

PANE_RESIZE_STEP = 2.0
MIN_LEFT_PANE_PERCENT = 10.0
MAX_LEFT_PANE_PERCENT = 90.0

_NEXT_KEYS = {"j", "DOWN"}
_PREVIOUS_KEYS = {"k", "UP"}


def build_state(notes_dir: Path, left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT) -> AppState:
    """Create initial state with the first note loaded.

    The file list starts with its first entry selected; the note pane starts
    unselected. Raises ``OSError`` for an unreadable directory and
    ``EmptyNotesDirectoryError`` when it has no entries.
    """
    entries = store.list_directory(notes_dir)
    first = store.require_first_entry(entries, notes_dir)
    lines = store.read_lines(Path(notes_dir) / first)
    return AppState(
        notes_dir=Path(notes_dir),
        files=SelectionModel(entries, select_first=True),
        content=SelectionModel(lines, select_first=False),
        left_pane_percent=left_pane_percent,
    )


class NotesApp:
    def __init__(
        self,
        state: AppState,
        save_left_pane_percent: Callable[[float], None] | None = None,
    ) -> None:
        self.state = state
        self._save_left_pane_percent = save_left_pane_percent

    @classmethod
    def open(
        cls,
        notes_dir: Path,
        left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT,
        save_left_pane_percent: Callable[[float], None] | None = None,
    ) -> NotesApp:
        return cls(build_state(notes_dir, left_pane_percent), save_left_pane_percent)

    def current_file_path(self) -> Path:
        return self.state.notes_dir / self.state.files.current()

    def reload_content(self) -> None:
        """Reload the selected note; the line cursor is reset."""
        self.state.content.replace_items(store.read_lines(self.current_file_path()))
        self.state.dirty = True

    def reload_content_keeping_index(self, index: int) -> None:
        """Reload the selected note and keep ``index`` highlighted.

        Falls back to a reset cursor when the reloaded note is shorter, which
        only happens if the file changed on disk behind our back.
        """
        lines = store.read_lines(self.current_file_path())
        if 0 <= index < len(lines):
            self.state.content.replace_items_keeping_index(lines, index)
        else:
            self.state.content.replace_items(lines)
        self.state.dirty = True

    def set_status(self, message: str) -> None:
        self.state.status_message = message
        self.state.dirty = True

    def handle_key(self, key: str) -> bool:
        state = self.state
        if state.status_message and state.mode == MODE_NORMAL:
            state.status_message = ""
            state.dirty = True
        if state.mode == MODE_EDITING:
            self._handle_editing_key(key)
            return False
        if state.focus == FOCUS_FILES:
            return self._handle_file_list_key(key)
        self._handle_content_key(key)
        return False

    def _handle_file_list_key(self, key: str) -> bool:
        state = self.state
        if key == "q":
            return True
        if key in _NEXT_KEYS:
            state.files.next()
            self.reload_content()
        elif key in _PREVIOUS_KEYS:
            state.files.previous()
            self.reload_content()
        elif key in {"e", "l", "ENTER", "RIGHT"}:
            state.focus = FOCUS_CONTENT
            if not state.content.is_empty:
                state.content.next()
            state.dirty = True
        elif key == "<":
            self._resize_left_pane(-PANE_RESIZE_STEP)
        elif key == ">":
            self._resize_left_pane(PANE_RESIZE_STEP)
        return False

    def _handle_content_key(self, key: str) -> None:
        state = self.state
        if key in {"q", "h", "ESC", "LEFT"}:
            state.focus = FOCUS_FILES
            state.content.unselect()
            state.dirty = True
            return
        if state.content.is_empty:
            if key in {"e", "ENTER"}:
                self.set_status("Note is empty; nothing to edit.")
            return
        if key in _NEXT_KEYS:
            state.content.next()
            state.dirty = True
        elif key in _PREVIOUS_KEYS:
            state.content.previous()
            state.dirty = True
        elif key in {"e", "ENTER"}:
            self.start_edit()

    def _handle_editing_key(self, key: str) -> None:
        if key == "ENTER":
            self.commit_edit()
        elif key == "ESC":
            self.cancel_edit()
        elif self.state.edit_buffer.handle(key):
            self.state.dirty = True

    def start_edit(self) -> None:
        """Open the edit buffer on the highlighted line, marker included."""
        state = self.state
        if state.content.current_index() is None:
            state.content.next()
        state.edit_buffer = LineInput(state.content.current())
        state.mode = MODE_EDITING
        state.status_message = ""
        state.dirty = True

    def cancel_edit(self) -> None:
        self.state.edit_buffer = LineInput()
        self.state.mode = MODE_NORMAL
        self.state.dirty = True

    def commit_edit(self) -> bool:
        """Persist the edit buffer into the highlighted line.

        The store validates the index against a fresh read of the file. Any
        store error is reported in the status row and the edit is discarded.
        Returns whether the line was written.
        """
        state = self.state
        index = state.content.current_index()
        path = self.current_file_path()
        new_text = state.edit_buffer.value
        state.edit_buffer = LineInput()
        state.mode = MODE_NORMAL
        state.dirty = True
        if index is None:
            self.set_status("No line selected; edit discarded.")
            return False

        try:
            store.write_line_at(path, index, new_text)
        except NoteStoreError as exc:
            logger.warning("Edit discarded: %s", exc)
            self.set_status(f"{exc}; edit discarded.")
            self.reload_content_keeping_index(index)
            return False

        self.reload_content_keeping_index(index)
        return True

    def _resize_left_pane(self, delta: float) -> None:
        state = self.state
        updated = max(MIN_LEFT_PANE_PERCENT, min(MAX_LEFT_PANE_PERCENT, state.left_pane_percent + delta))
        if updated == state.left_pane_percent:
            return
        state.left_pane_percent = updated
        state.dirty = True
        if self._save_left_pane_percent is not None:
            self._save_left_pane_percent(updated)
