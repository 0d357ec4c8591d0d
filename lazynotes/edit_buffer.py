"""Single-line text input used while editing a note line."""

from __future__ import annotations


class LineInput:
    """Editable string plus a cursor offset measured in characters.

    Only printable single characters are inserted, so the buffer never holds
    a line terminator.
    """

    def __init__(self, value: str = "", cursor: int | None = None) -> None:
        self.value = value
        self.cursor = len(value) if cursor is None else max(0, min(cursor, len(value)))

    def __repr__(self) -> str:
        return f"LineInput(value={self.value!r}, cursor={self.cursor})"

    def insert(self, text: str) -> None:
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)

    def handle(self, key: str) -> bool:
        """Apply one key token; return whether the buffer consumed it."""
        if key == "BACKSPACE":
            if self.cursor > 0:
                self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
                self.cursor -= 1
            return True
        if key == "DELETE":
            if self.cursor < len(self.value):
                self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
            return True
        if key == "LEFT":
            self.cursor = max(0, self.cursor - 1)
            return True
        if key == "RIGHT":
            self.cursor = min(len(self.value), self.cursor + 1)
            return True
        if key in {"HOME", "CTRL_A"}:
            self.cursor = 0
            return True
        if key in {"END", "CTRL_E"}:
            self.cursor = len(self.value)
            return True
        if key == "CTRL_U":
            self.value = self.value[self.cursor :]
            self.cursor = 0
            return True
        if key == "CTRL_K":
            self.value = self.value[: self.cursor]
            return True
        if len(key) == 1 and key.isprintable():
            self.insert(key)
            return True
        return False
