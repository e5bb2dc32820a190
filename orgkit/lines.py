"""Line-oriented parsing helpers and the comment and fixed-width elements.

Every helper takes the remaining input and returns the rest of the input
first, followed by what was recognised. Helpers that can fail return None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

_ASCII_WHITESPACE = " \t\n\r\x0c"
_WORD = re.compile(r"[^ \t\n\r\x0c]+")


def _is_blank(segment: str) -> bool:
    return all(c in _ASCII_WHITESPACE for c in segment)


def blank_lines(text: str) -> tuple[str, int]:
    """Skip leading whitespace-only lines; return the rest and how many were skipped."""
    count = 0
    pos = 0
    while True:
        nl = text.find("\n", pos)
        if nl == -1 or not _is_blank(text[pos:nl]):
            return text[pos:], count
        count += 1
        pos = nl + 1


def line(text: str) -> tuple[str, str]:
    """Split off the first line, without its line terminator."""
    nl = text.find("\n")
    if nl == -1:
        return "", text
    content = text[:nl]
    if content.endswith("\r"):
        content = content[:-1]
    return text[nl + 1 :], content


def eol(text: str) -> str | None:
    """Match optional spaces followed by a newline or the end of input."""
    rest = text.lstrip(" \t")
    if not rest:
        return ""
    if rest.startswith("\n"):
        return rest[1:]
    if rest.startswith("\r\n"):
        return rest[2:]
    return None


def take_lines_while(
    text: str, predicate: Callable[[str], bool]
) -> tuple[str, str]:
    """Take whole lines for as long as ``predicate`` accepts them."""
    pos = 0
    while True:
        nl = text.find("\n", pos)
        end = len(text) if nl == -1 else nl
        segment = text[pos:end]
        if segment.endswith("\r"):
            segment = segment[:-1]
        if not predicate(segment):
            return text[pos:], text[:pos]
        if nl == -1:
            return "", text
        pos = nl + 1


def take_one_word(text: str) -> tuple[str, str] | None:
    """Take a non-empty run of non-whitespace characters."""
    match = _WORD.match(text)
    if match is None:
        return None
    return text[match.end() :], match.group()


def skip_empty_lines(text: str) -> str:
    """Drop leading whitespace-only lines."""
    return blank_lines(text)[0]


@dataclass
class Comment:
    """Comment element; ``value`` keeps the pound signs."""

    value: str = ""
    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, Comment] | None:
        def is_comment(segment: str) -> bool:
            stripped = segment.lstrip()
            return stripped == "#" or stripped.startswith("# ")

        rest, value = take_lines_while(text, is_comment)
        rest, blank = blank_lines(rest)
        if not value:
            return None
        return rest, cls(value=value, post_blank=blank)


@dataclass
class FixedWidth:
    """Fixed-width area; ``value`` keeps the colons."""

    value: str = ""
    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, FixedWidth] | None:
        def is_fixed(segment: str) -> bool:
            stripped = segment.lstrip()
            return stripped == ":" or stripped.startswith(": ")

        rest, value = take_lines_while(text, is_fixed)
        rest, blank = blank_lines(rest)
        if not value:
            return None
        return rest, cls(value=value, post_blank=blank)