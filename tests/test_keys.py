import pytest

from gmacs.keys import KeyEvent, parse_input


def test_empty_input_yields_nothing():
    assert parse_input(b"") == []


def test_ctrl_a():
    assert parse_input(b"\x01") == [KeyEvent(key="a", ctrl=True, raw=b"\x01")]


@pytest.mark.parametrize("byte", [1, 2, 3, 5, 6, 14, 16, 24, 26])
def test_control_bytes_map_to_ctrl_letters(byte):
    [event] = parse_input(bytes([byte]))
    assert event.ctrl
    assert event.rune == ""
    assert ord(event.key) - ord("a") + 1 == byte
    assert event.raw == bytes([byte])


def test_enter():
    [event] = parse_input(b"\r")
    assert event.key == "Enter"
    assert event.rune == "\n"
    assert not event.ctrl


def test_escape():
    [event] = parse_input(b"\x1b")
    assert event.key == "\x1b"
    assert event.rune == ""


def test_backspace():
    [event] = parse_input(b"\x7f")
    assert event.key == "Backspace"
    assert not event.ctrl


@pytest.mark.parametrize("text", ["a", "Z", " ", "~", "3"])
def test_printable_ascii(text):
    [event] = parse_input(text.encode())
    assert event.key == text
    assert event.rune == text
    assert not event.ctrl and not event.meta


def test_unprintable_byte_has_no_key():
    [event] = parse_input(b"\x00")
    assert event.key == ""
    assert event.rune == ""
    assert event.raw == b"\x00"


@pytest.mark.parametrize("sequence", ["\x1b[A", "\x1b[B", "\x1b[C", "\x1b[D", "\x1b[3~"])
def test_escape_sequences_become_one_event(sequence):
    data = sequence.encode()
    events = parse_input(data)
    assert len(events) == 1
    assert events[0].key == sequence
    assert events[0].raw == data
    assert events[0].rune == ""


def test_utf8_character():
    data = "あ".encode()
    assert parse_input(data) == [KeyEvent(key="あ", rune="あ", raw=data)]


def test_multibyte_chunk_yields_one_event_per_character():
    text = "aあb"
    data = text.encode()
    events = parse_input(data)
    assert [event.rune for event in events] == list(text)
    assert all(event.raw == data for event in events)


def test_invalid_utf8_bytes_are_dropped():
    data = b"x\xffy"
    events = parse_input(data)
    assert [event.key for event in events] == ["x", "y"]


def test_accepts_bytearray():
    assert parse_input(bytearray(b"q")) == parse_input(b"q")