"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and the visible cursor
shown while a line is being edited.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions for the note browser."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._cursor_visible = True

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._cursor_visible = False

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer, cursor, and saved tty attributes."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        self._cursor_visible = True
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def show_cursor_at(self, row: int, col: int) -> None:
        """Move the cursor to 1-based ``row``/``col`` and make it visible."""
        os.write(self.stdout_fd, f"\x1b[{max(1, row)};{max(1, col)}H\x1b[?25h".encode("ascii"))
        self._cursor_visible = True

    def hide_cursor(self) -> None:
        if not self._cursor_visible:
            return
        os.write(self.stdout_fd, b"\x1b[?25l")
        self._cursor_visible = False

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
