"""Drawer element (:NAME: ... :END:)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, eol, line, take_lines_while

_DRAWER_NAME = re.compile(r":([A-Za-z_-]+):")


@dataclass
class Drawer:
    """Drawer element."""

    name: str = ""
    pre_blank: int = 0
    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, tuple[Drawer, str]] | None:
        return parse_drawer(text)


def parse_drawer(text: str) -> tuple[str, tuple[Drawer, str]] | None:
    """Parse a drawer, counting blank lines inside and after it."""
    result = parse_drawer_without_blank(text)
    if result is None:
        return None
    rest, (drawer, contents) = result
    contents, drawer.pre_blank = blank_lines(contents)
    rest, drawer.post_blank = blank_lines(rest)
    return rest, (drawer, contents)


def parse_drawer_without_blank(text: str) -> tuple[str, tuple[Drawer, str]] | None:
    """Parse a drawer without looking at surrounding blank lines."""
    rest = text.lstrip(" \t")
    match = _DRAWER_NAME.match(rest)
    if match is None:
        return None
    rest = eol(rest[match.end() :])
    if rest is None:
        return None
    rest, contents = take_lines_while(
        rest, lambda segment: segment.strip().lower() != ":end:"
    )
    rest, _ = line(rest)
    return rest, (Drawer(name=match.group(1)), contents)