"""Cursor movement commands that work on a single buffer."""

from __future__ import annotations

from gmacs.buffer import Buffer
from gmacs.width import char_width, string_width


def display_column(line: str, col: int) -> int:
    """Return the display width of ``line`` up to character index ``col``."""
    if col >= len(line):
        return string_width(line)
    return string_width(line[:col])


def column_at_display_width(line: str, target_width: int) -> int:
    """Return the character index in ``line`` that sits at ``target_width`` cells.

    A wide character that straddles the target is not included; a target
    beyond the end of the line yields the line's length.
    """
    if target_width <= 0:
        return 0
    used = 0
    for index, ch in enumerate(line):
        width = char_width(ch)
        if used + width > target_width:
            return index
        used += width
    return len(line)


def forward_char(buffer: Buffer) -> None:
    """Move one character forward, wrapping to the start of the next line."""
    row, col = buffer.cursor.row, buffer.cursor.col
    if row >= len(buffer.lines):
        return
    if col < len(buffer.lines[row]):
        buffer.set_cursor(row, col + 1)
    elif row < len(buffer.lines) - 1:
        buffer.set_cursor(row + 1, 0)


def backward_char(buffer: Buffer) -> None:
    """Move one character backward, wrapping to the end of the previous line."""
    row, col = buffer.cursor.row, buffer.cursor.col
    if col > 0:
        buffer.set_cursor(row, col - 1)
    elif row > 0:
        buffer.set_cursor(row - 1, len(buffer.lines[row - 1]))


def _move_vertically(buffer: Buffer, delta: int) -> None:
    row, col = buffer.cursor.row, buffer.cursor.col
    target_row = row + delta
    if not 0 <= target_row < len(buffer.lines):
        return
    target_width = display_column(buffer.lines[row], col)
    new_col = column_at_display_width(buffer.lines[target_row], target_width)
    buffer.set_cursor(target_row, new_col)


def next_line(buffer: Buffer) -> None:
    """Move to the next line, keeping the same display column where possible."""
    _move_vertically(buffer, 1)


def previous_line(buffer: Buffer) -> None:
    """Move to the previous line, keeping the same display column where possible."""
    _move_vertically(buffer, -1)


def beginning_of_line(buffer: Buffer) -> None:
    """Move to the start of the current line."""
    buffer.set_cursor(buffer.cursor.row, 0)


def end_of_line(buffer: Buffer) -> None:
    """Move to the end of the current line."""
    row = buffer.cursor.row
    if row < len(buffer.lines):
        buffer.set_cursor(row, len(buffer.lines[row]))