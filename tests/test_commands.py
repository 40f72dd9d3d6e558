import pytest

from gmacs.buffer import Buffer, Position
from gmacs.commands import (
    VERSION_MESSAGE,
    Command,
    CommandRegistry,
    delete_backward_char,
    delete_char,
    quit_editor,
)


class FakeEditor:
    def __init__(self, buffer=None):
        self.current_buffer = buffer
        self.messages = []
        self.running = True

    def set_message(self, text):
        self.messages.append(text)

    def quit(self):
        self.running = False


def buffer_with(text, row=0, col=0):
    buffer = Buffer("test")
    buffer.lines = text.split("\n")
    buffer.set_cursor(row, col)
    return buffer


def test_builtin_commands_listed_alphabetically():
    registry = CommandRegistry()
    assert registry.names() == ["clear-buffer", "list-commands", "version"]


def test_version_command_sets_message():
    editor = FakeEditor()
    CommandRegistry().get("version").execute(editor)
    assert editor.messages == [VERSION_MESSAGE]
    assert VERSION_MESSAGE.startswith("gmacs 0.1.0")


def test_list_commands_message_names_every_command():
    registry = CommandRegistry()
    registry.register_function("quit", quit_editor)
    editor = FakeEditor()
    registry.get("list-commands").execute(editor)
    assert editor.messages == ["Available commands: " + ", ".join(registry.names())]
    assert "quit" in editor.messages[0]


def test_clear_buffer_command():
    buffer = buffer_with("one\ntwo", 1, 2)
    editor = FakeEditor(buffer)
    CommandRegistry().get("clear-buffer").execute(editor)
    assert buffer.lines == [""]
    assert buffer.cursor == Position(0, 0)
    assert editor.messages == ["Buffer cleared"]


def test_clear_buffer_without_buffer_is_silent():
    editor = FakeEditor()
    CommandRegistry().get("clear-buffer").execute(editor)
    assert editor.messages == []


def test_get_unknown_command_returns_none():
    registry = CommandRegistry()
    assert registry.get("no-such-command") is None
    assert "no-such-command" not in registry


def test_register_replaces_existing_command():
    registry = CommandRegistry()
    calls = []
    registry.register(Command("version", lambda editor: calls.append(editor)))
    editor = FakeEditor()
    registry.get("version").execute(editor)
    assert calls == [editor]
    assert editor.messages == []
    assert registry.names().count("version") == 1


def test_execute_returns_function_result():
    command = Command("answer", lambda editor: ("ran", editor.running))
    assert command.execute(FakeEditor()) == ("ran", True)


def test_execute_propagates_errors():
    def failing(editor):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        Command("fail", failing).execute(FakeEditor())


def test_quit_editor_stops_editor():
    editor = FakeEditor()
    quit_editor(editor)
    assert editor.running is False


def test_delete_backward_char_command():
    buffer = buffer_with("abc", 0, 2)
    delete_backward_char(FakeEditor(buffer))
    assert buffer.lines == ["ac"]
    assert buffer.cursor == Position(0, 1)


def test_delete_char_command():
    buffer = buffer_with("abc", 0, 1)
    delete_char(FakeEditor(buffer))
    assert buffer.lines == ["ac"]
    assert buffer.cursor == Position(0, 1)


def test_delete_commands_without_buffer_do_not_fail():
    editor = FakeEditor()
    delete_char(editor)
    delete_backward_char(editor)
    assert editor.current_buffer is None and editor.messages == []