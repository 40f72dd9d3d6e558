"""Display width of text on a character-cell terminal."""

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    """Return the number of terminal cells a single character occupies."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    width = wcwidth(ch)
    return width if width > 0 else 0


def string_width(text: str) -> int:
    """Return the number of terminal cells a string occupies."""
    return sum(char_width(ch) for ch in text)


def truncate_to_width(text: str, max_width: int) -> str:
    """Cut ``text`` so that it fits within ``max_width`` cells.

    A wide character that would straddle the limit is dropped entirely.
    """
    if string_width(text) <= max_width:
        return text
    used = 0
    for index, ch in enumerate(text):
        width = char_width(ch)
        if used + width > max_width:
            return text[:index]
        used += width
    return text