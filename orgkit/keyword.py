"""Keyword and babel call elements (#+KEY: VALUE)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, line

_KEY = re.compile(r"[^ \t\n\r\x0c:\[]*")


@dataclass
class Keyword:
    """Keyword element."""

    key: str = ""
    optional: str | None = None
    value: str = ""
    post_blank: int = 0


@dataclass
class BabelCall:
    """Babel call element (#+CALL:)."""

    value: str = ""
    post_blank: int = 0


def parse_keyword(
    text: str,
) -> tuple[str, tuple[str, str | None, str, int]] | None:
    """Parse a keyword line.

    Returns the rest of the input and a tuple of the key, the optional
    bracketed value, the trimmed value and the number of blank lines after
    it; None if the input is not a keyword line.
    """
    rest = text.lstrip(" \t")
    if not rest.startswith("#+"):
        return None
    rest = rest[2:]
    match = _KEY.match(rest)
    key = match.group()
    rest = rest[match.end() :]

    optional = None
    if rest.startswith("["):
        close = len(rest)
        for index, char in enumerate(rest[1:], start=1):
            if char in "]\n":
                close = index
                break
        if rest[close : close + 1] == "]":
            optional = rest[1:close]
            rest = rest[close + 1 :]

    if not rest.startswith(":"):
        return None
    rest, value = line(rest[1:])
    rest, blank = blank_lines(rest)
    return rest, (key, optional, value.strip(), blank)