"""Named interactive commands and the registry that holds them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from gmacs.buffer import Buffer

logger = logging.getLogger(__name__)

VERSION_MESSAGE = "gmacs 0.1.0 - Emacs-like text editor"


class EditorLike(Protocol):
    """What commands need from an editor."""

    current_buffer: Buffer | None

    def set_message(self, text: str) -> None: ...

    def quit(self) -> None: ...


CommandFunction = Callable[[Any], Any]


@dataclass(frozen=True)
class Command:
    """An interactive command: a name bound to a function of the editor."""

    name: str
    function: CommandFunction

    def execute(self, editor: Any) -> Any:
        """Run the command against ``editor``; errors propagate as exceptions."""
        return self.function(editor)


class CommandRegistry:
    """All commands available by name, seeded with a few built-ins."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self.register_function("version", self._version)
        self.register_function("list-commands", self._list_commands)
        self.register_function("clear-buffer", self._clear_buffer)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, command: Command) -> None:
        """Add ``command``, replacing any command of the same name."""
        self._commands[command.name] = command

    def register_function(self, name: str, fn: CommandFunction) -> None:
        """Wrap ``fn`` in a command called ``name`` and add it."""
        self.register(Command(name, fn))

    def get(self, name: str) -> Command | None:
        """Return the command called ``name``, or ``None``."""
        return self._commands.get(name)

    def names(self) -> list[str]:
        """Return every command name in alphabetical order."""
        return sorted(self._commands)

    @staticmethod
    def _version(editor: EditorLike) -> None:
        logger.info("Executing version command")
        editor.set_message(VERSION_MESSAGE)

    def _list_commands(self, editor: EditorLike) -> None:
        logger.info("Listing available commands")
        editor.set_message("Available commands: " + ", ".join(self.names()))

    @staticmethod
    def _clear_buffer(editor: EditorLike) -> None:
        buffer = editor.current_buffer
        if buffer is not None:
            buffer.clear()
            logger.info("Buffer cleared")
            editor.set_message("Buffer cleared")


def quit_editor(editor: EditorLike) -> None:
    """Stop the editor."""
    logger.info("Quit command executed")
    editor.quit()


def delete_backward_char(editor: EditorLike) -> None:
    """Delete the character before the cursor in the current buffer."""
    buffer = editor.current_buffer
    if buffer is not None:
        buffer.delete_backward()
        logger.debug("Deleted backward character")


def delete_char(editor: EditorLike) -> None:
    """Delete the character at the cursor in the current buffer."""
    buffer = editor.current_buffer
    if buffer is not None:
        buffer.delete_forward()
        logger.debug("Deleted forward character")