"""Error types raised by the note store.

Read failures never raise; these cover the fatal preconditions and the
write path, which must be reported to the user.
"""

from __future__ import annotations

from pathlib import Path


class NoteStoreError(Exception):
    """Base class for note store failures."""


class EmptyNotesDirectoryError(NoteStoreError):
    """The notes directory holds no entry to open."""

    def __init__(self, notes_dir: Path | str) -> None:
        super().__init__(f"No files in notes directory: {notes_dir}")
        self.notes_dir = Path(notes_dir)


class LineIndexError(NoteStoreError, IndexError):
    """An edit targeted a line that the freshly read note does not have."""

    def __init__(self, path: Path | str, line_index: int, line_count: int) -> None:
        super().__init__(
            f"Line {line_index} is out of range for {path} ({line_count} lines)"
        )
        self.path = Path(path)
        self.line_index = line_index
        self.line_count = line_count


class NoteWriteError(NoteStoreError):
    """Rewriting a note failed; the edit was not persisted."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class LineTextError(NoteStoreError, ValueError):
    """Replacement text would split into more than one line on re-read."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Cannot write {path}: line text must not contain a newline")
        self.path = Path(path)
