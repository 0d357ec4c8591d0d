"""Line-oriented access to the notes directory.

Lists note files, reads them as lines, and rewrites a single line in place.
Reads degrade to empty content; writes report failures as ``NoteWriteError``.
"""

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path

from .errors import EmptyNotesDirectoryError, LineIndexError, LineTextError, NoteWriteError

logger = logging.getLogger(__name__)

STRUCK_MARKER = "~"
EMPHASIZED_MARKER = "*"
LINE_TERMINATOR = "\n"


class LineStyle(enum.Enum):
    """Presentation tag derived from a line's first character."""

    STRUCK = "struck"
    EMPHASIZED = "emphasized"
    PLAIN = "plain"


def list_directory(dir_path: Path | str) -> list[str]:
    """Return entry names of ``dir_path`` in filesystem enumeration order.

    The order is whatever ``os.scandir`` reports and is not sorted. Raises
    ``OSError`` when the directory cannot be opened.
    """
    with os.scandir(dir_path) as entries:
        return [entry.name for entry in entries]


def require_first_entry(entries: list[str], notes_dir: Path | str = "") -> str:
    """Return the first listed entry or fail on an empty notes directory."""
    if not entries:
        raise EmptyNotesDirectoryError(notes_dir)
    return entries[0]


def _split_lines(text: str) -> list[str]:
    lines = text.split(LINE_TERMINATOR)
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _terminated(line: str) -> str:
    # _split_lines strips one CR per line, so a line that itself ends in CR
    # needs one more to read back unchanged.
    if line.endswith("\r"):
        return line + "\r" + LINE_TERMINATOR
    return line + LINE_TERMINATOR


def read_whole(file_path: Path | str) -> str:
    """Return the full contents of a note, or ``""`` when it cannot be read.

    Missing files, permission errors, directories and invalid UTF-8 all
    degrade to empty content so one broken note does not end the session.
    """
    path = Path(file_path)
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return ""


def read_lines(file_path: Path | str) -> list[str]:
    """Return the lines of a note without their terminators.

    Shares the failure policy of ``read_whole``: unreadable notes have no lines.
    """
    return _split_lines(read_whole(file_path))


def write_line_at(file_path: Path | str, line_index: int, new_text: str) -> list[str]:
    """Replace one line of a note and rewrite the whole file.

    The index is validated against a fresh read of the file, not against any
    earlier view of it. Every line is written back so that a re-read
    returns exactly the same lines, stray carriage returns included. The
    rewrite truncates in place, so a crash mid-write can leave a short file.
    Returns the lines that were written.
    """
    path = Path(file_path)
    if LINE_TERMINATOR in new_text:
        raise LineTextError(path)

    lines = read_lines(path)
    if not 0 <= line_index < len(lines):
        raise LineIndexError(path, line_index, len(lines))
    lines[line_index] = new_text

    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            for line in lines:
                handle.write(_terminated(line))
    except OSError as exc:
        logger.error("Cannot write %s: %s", path, exc)
        raise NoteWriteError(path, exc.strerror or str(exc)) from exc

    logger.info("Rewrote line %d of %s", line_index, path)
    return lines


def style_of(line: str) -> LineStyle:
    if line.startswith(STRUCK_MARKER):
        return LineStyle.STRUCK
    if line.startswith(EMPHASIZED_MARKER):
        return LineStyle.EMPHASIZED
    return LineStyle.PLAIN


def display_text(line: str, strip_marker: bool = True) -> str:
    """Return the visible text for ``line``.

    Styled lines lose their marker character when ``strip_marker`` is set;
    the stored line always keeps it.
    """
    if strip_marker and style_of(line) is not LineStyle.PLAIN:
        return line[1:]
    return line
