"""Buffer name completion and the tabular buffer listing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gmacs.buffer import Buffer

BUFFER_LIST_NAME = "*Buffer List*"
SCRATCH_NAME = "*scratch*"
BUFFER_LIST_HEADER = "CRM Buffer                Size  Mode              File"

_NAME_COLUMN = 20


@dataclass(frozen=True)
class Completion:
    """The outcome of completing a partial buffer name.

    ``text`` is what the input should become; ``matches`` holds every name
    that started with the input; ``message`` is set when the input could not
    be extended and several candidates remain.
    """

    text: str
    matches: tuple[str, ...] = ()
    message: str | None = None

    @property
    def changed(self) -> bool:
        """Whether completion produced text different from a bare message."""
        return self.message is None and bool(self.matches)


def common_prefix(names: Iterable[str]) -> str:
    """Return the longest string that every name in ``names`` starts with."""
    names = list(names)
    if not names:
        return ""
    prefix = names[0]
    for name in names[1:]:
        limit = min(len(prefix), len(name))
        cut = next(
            (index for index in range(limit) if prefix[index] != name[index]),
            limit,
        )
        prefix = prefix[:cut]
    return prefix


def complete_name(text: str, names: Iterable[str]) -> Completion:
    """Complete ``text`` against ``names``.

    A single match completes fully; several matches complete to their common
    prefix when that is longer than ``text``, and otherwise yield a message
    listing them. No match leaves ``text`` unchanged.
    """
    matches = tuple(name for name in names if name.startswith(text))
    if not matches:
        return Completion(text)
    if len(matches) == 1:
        return Completion(matches[0], matches)
    prefix = common_prefix(matches)
    if len(prefix) > len(text):
        return Completion(prefix, matches)
    return Completion(text, matches, "Matches: " + ", ".join(matches))


def buffer_size(buffer: Buffer) -> int:
    """Return the size of ``buffer`` in characters, counting one per line end."""
    return sum(len(line) + 1 for line in buffer.lines)


def buffer_mode_name(buffer: Buffer) -> str:
    """Return the mode label shown for ``buffer`` in the buffer list."""
    name = buffer.name
    if name == SCRATCH_NAME:
        return "Lisp Interaction"
    if name == BUFFER_LIST_NAME:
        return "Buffer Menu"
    if name.startswith("*"):
        return "Special"
    path = buffer.filepath
    if path.endswith(".go"):
        return "Go"
    if path.endswith(".md"):
        return "Markdown"
    if path.endswith(".txt"):
        return "Text"
    return "Fundamental"


def format_buffer_line(buffer: Buffer, is_current: bool) -> str:
    """Return the buffer-list row describing ``buffer``.

    The first three columns flag the current buffer (``.``), special
    read-only buffers (``%``) and unsaved changes (``*``).
    """
    current_flag = "." if is_current else " "
    read_only = buffer.name.startswith("*") and buffer.name != SCRATCH_NAME
    read_only_flag = "%" if read_only else " "
    modified_flag = "*" if buffer.modified else " "

    name = buffer.name
    if len(name) > _NAME_COLUMN:
        name = name[:17] + "..."

    return (
        f"{current_flag}{read_only_flag}{modified_flag} "
        f"{name:<20} {buffer_size(buffer):5d}  "
        f"{buffer_mode_name(buffer):<16} {buffer.filepath}"
    )


def format_buffer_list(buffers: Sequence[Buffer], current: Buffer | None) -> list[str]:
    """Return the header and one row per buffer, the current buffer first."""
    ordered = [current] if current is not None else []
    ordered.extend(buffer for buffer in buffers if buffer is not current)
    return [BUFFER_LIST_HEADER] + [
        format_buffer_line(buffer, buffer is current) for buffer in ordered
    ]