"""Decoding raw terminal input bytes into key events."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ESCAPE = 27
ENTER = 13
BACKSPACE = 127

_ARROWS = {
    "\x1b[A": "Up",
    "\x1b[B": "Down",
    "\x1b[C": "Right",
    "\x1b[D": "Left",
}


@dataclass(frozen=True)
class KeyEvent:
    """A key press: its name, the character it types, and its modifiers.

    ``rune`` is empty when the key does not type a character.
    """

    key: str = ""
    rune: str = ""
    ctrl: bool = False
    meta: bool = False
    raw: bytes = b""


def _decode_byte(byte: int) -> KeyEvent:
    raw = bytes([byte])
    if byte == ENTER:
        return KeyEvent(key="Enter", rune="\n", raw=raw)
    if byte == ESCAPE:
        return KeyEvent(key="\x1b", raw=raw)
    if byte == BACKSPACE:
        return KeyEvent(key="Backspace", raw=raw)
    if 32 <= byte <= 126:
        ch = chr(byte)
        return KeyEvent(key=ch, rune=ch, raw=raw)
    if 1 <= byte <= 26:
        return KeyEvent(key=chr(ord("a") + byte - 1), ctrl=True, raw=raw)
    logger.debug("Non-printable byte: 0x%02x", byte)
    return KeyEvent(raw=raw)


def parse_input(data: bytes) -> list[KeyEvent]:
    """Turn one chunk of terminal input into key events.

    An ANSI escape sequence becomes one event named by the whole sequence;
    other multi-byte input is decoded as UTF-8, one event per character,
    dropping undecodable bytes; a single byte maps to a control key,
    Enter, Escape, Backspace or a printable character.
    """
    data = bytes(data)
    if len(data) >= 3 and data[0] == ESCAPE and data[1] == ord("["):
        sequence = data.decode("utf-8", errors="replace")
        logger.debug(
            "ANSI sequence %r (%s)", sequence, _ARROWS.get(sequence, "unknown")
        )
        return [KeyEvent(key=sequence, raw=data)]

    if len(data) > 1:
        text = data.decode("utf-8", errors="replace")
        return [
            KeyEvent(key=ch, rune=ch, raw=data) for ch in text if ch != "\ufffd"
        ]

    return [_decode_byte(byte) for byte in data]