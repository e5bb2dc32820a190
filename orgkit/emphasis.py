"""Emphasis markup (bold, italic and the like) delimited by a marker character."""

from __future__ import annotations

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
_ALLOWED_AFTER = frozenset(" -.,:!?'\n)}")


def parse_emphasis(text: str, marker: str) -> tuple[str, str] | None:
    """Parse emphasised text starting with ``marker``.

    Returns the rest of the input after the closing marker and the text
    between the markers; None if there is no valid closing marker.
    """
    if len(text) < 3 or text[1] in _ASCII_WHITESPACE:
        return None

    positions = (index for index, char in enumerate(text) if char == marker)
    next(positions, None)
    for pos in positions:
        if text.count("\n", 1, pos) >= 2:
            break
        if _valid_closing(pos, text):
            return text[pos + 1 :], text[1:pos]
    return None


def _valid_closing(pos: str, text: str) -> bool:
    if text[pos - 1] in _ASCII_WHITESPACE:
        return False
    if pos + 1 < len(text):
        return text[pos + 1] in _ALLOWED_AFTER
    return True