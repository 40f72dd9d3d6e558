"""Built-in major and minor modes."""

from __future__ import annotations

import re
from typing import Any, Callable

from gmacs.buffer import Buffer


class FundamentalMode:
    """The basic major mode: no file pattern, no indentation, no highlighting."""

    name = "fundamental-mode"
    indent_width = 0

    def __init__(self) -> None:
        self.key_bindings: dict[str, Callable[..., Any]] = {}
        self.commands: dict[str, Any] = {}
        self.syntax_highlighting: Any = None
        self._file_pattern: re.Pattern[str] | None = None
        self._initialized: set[Buffer] = set()
        self._active: set[Buffer] = set()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def file_pattern(self) -> re.Pattern[str] | None:
        """Return the file-name pattern this mode claims; none for this mode."""
        return self._file_pattern

    def indent(self, buffer: Buffer, line: int) -> int:
        """Return the indentation for ``line``; this mode never indents."""
        return self.indent_width

    def initialize(self, buffer: Buffer) -> None:
        """Prepare ``buffer`` for this mode by recording it as initialised."""
        self._initialized.add(buffer)

    def on_activate(self, buffer: Buffer) -> None:
        """Record that the mode became active in ``buffer``."""
        self._active.add(buffer)

    def on_deactivate(self, buffer: Buffer) -> None:
        """Record that the mode stopped being active in ``buffer``."""
        self._active.discard(buffer)


class AutoAMode:
    """A minor mode that inserts an ``a`` after every newline."""

    name = "auto-a-mode"
    priority = 10

    def __init__(self) -> None:
        self.key_bindings: dict[str, Callable[..., Any]] = {}
        self._enabled: dict[Buffer, bool] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def enable(self, buffer: Buffer) -> None:
        """Turn the mode on for ``buffer``."""
        self._enabled[buffer] = True
        buffer.enable_minor_mode(self)

    def disable(self, buffer: Buffer) -> None:
        """Turn the mode off for ``buffer``."""
        self._enabled[buffer] = False
        buffer.disable_minor_mode(self.name)

    def is_enabled(self, buffer: Buffer) -> bool:
        """Return whether the mode is on for ``buffer``."""
        return self._enabled.get(buffer, False)

    def process_newline(self, buffer: Buffer) -> None:
        """Insert ``a`` at the cursor if the mode is on for ``buffer``."""
        if self.is_enabled(buffer):
            buffer.insert_char("a")