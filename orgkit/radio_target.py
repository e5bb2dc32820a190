"""Radio target object (<<<TARGET>>>)."""

from __future__ import annotations

import re

_RADIO_TARGET = re.compile(r"<<<([^<>\n]*)>>>")


def parse_radio_target(text: str) -> tuple[str, str] | None:
    """Parse a radio target; return the rest of the input and its contents."""
    match = _RADIO_TARGET.match(text)
    if match is None:
        return None
    contents = match.group(1)
    if not contents or contents[0] == " " or contents[-1] == " ":
        return None
    return text[match.end() :], contents