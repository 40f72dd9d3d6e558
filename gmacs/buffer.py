"""Text buffers: a list of lines with a cursor and attached modes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Position:
    """A cursor location: line index and character index within the line."""

    row: int = 0
    col: int = 0


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines or [""]


class Buffer:
    """An editable sequence of lines with a cursor."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.lines: list[str] = [""]
        self.cursor = Position()
        self.modified = False
        self.filepath = ""
        self.major_mode: Any = None
        self.minor_modes: list[Any] = []

    @classmethod
    def from_file(cls, path: str) -> Buffer:
        """Create a buffer holding the contents of the file at ``path``.

        Raises ``OSError`` when the file cannot be read.
        """
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
        name = path.rsplit("/", 1)[-1] if "/" in path else path
        buffer = cls(name)
        buffer.lines = _split_lines(text)
        buffer.filepath = os.fspath(path)
        return buffer

    def __repr__(self) -> str:
        return f"Buffer(name={self.name!r}, lines={len(self.lines)})"

    def set_cursor(self, row: int, col: int) -> None:
        """Move the cursor, clamping it to the buffer's contents."""
        row = max(0, min(row, len(self.lines) - 1))
        col = max(0, min(col, len(self.lines[row])))
        self.cursor = Position(row, col)

    def insert_char(self, ch: str) -> None:
        """Insert one character at the cursor; a newline splits the line."""
        if ch == "\n":
            self._insert_newline()
            return
        row, col = self.cursor.row, self.cursor.col
        line = self.lines[row]
        self.lines[row] = line[:col] + ch + line[col:]
        self.cursor = Position(row, col + len(ch))
        self.modified = True

    def _insert_newline(self) -> None:
        row, col = self.cursor.row, self.cursor.col
        line = self.lines[row]
        self.lines[row : row + 1] = [line[:col], line[col:]]
        self.cursor = Position(row + 1, 0)
        self.modified = True

    def insert_string(self, text: str) -> None:
        """Insert text, possibly spanning several lines, at the cursor."""
        if not text:
            return
        row, col = self.cursor.row, self.cursor.col
        current = self.lines[row]
        before, after = current[:col], current[col:]
        pieces = text.split("\n")
        pieces[0] = before + pieces[0]
        pieces[-1] = pieces[-1] + after
        self.lines[row : row + 1] = pieces
        self.cursor = Position(row + len(pieces) - 1, len(pieces[-1]) - len(after))
        self.modified = True

    def clear(self) -> None:
        """Remove all text and reset the cursor."""
        self.lines = [""]
        self.cursor = Position()
        self.modified = True

    def delete_backward(self) -> None:
        """Delete the character before the cursor, joining lines at column 0."""
        row, col = self.cursor.row, self.cursor.col
        if row == 0 and col == 0:
            return
        line = self.lines[row]
        if col == 0:
            previous = self.lines[row - 1]
            self.lines[row - 1 : row + 1] = [previous + line]
            self.cursor = Position(row - 1, len(previous))
        else:
            self.lines[row] = line[: col - 1] + line[col:]
            self.cursor = Position(row, col - 1)
        self.modified = True

    def delete_forward(self) -> None:
        """Delete the character at the cursor, joining lines at line end."""
        row, col = self.cursor.row, self.cursor.col
        if row >= len(self.lines):
            return
        line = self.lines[row]
        if col >= len(line):
            if row < len(self.lines) - 1:
                self.lines[row : row + 2] = [line + self.lines[row + 1]]
                self.modified = True
        else:
            self.lines[row] = line[:col] + line[col + 1 :]
            self.modified = True

    def enable_minor_mode(self, mode: Any) -> None:
        """Attach a minor mode, keeping modes ordered by descending priority."""
        if any(existing.name == mode.name for existing in self.minor_modes):
            return
        self.minor_modes.append(mode)
        self.minor_modes.sort(key=lambda m: m.priority, reverse=True)

    def disable_minor_mode(self, name: str) -> None:
        """Detach the minor mode with the given name, if attached."""
        for index, mode in enumerate(self.minor_modes):
            if mode.name == name:
                del self.minor_modes[index]
                return