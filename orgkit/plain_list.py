"""Plain list and list item elements."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INDENT = re.compile(r"[ \t]*")
_BULLET = re.compile(r"(?:[+*-] |[0-9]+\. )")
_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


def _is_blank(segment: str) -> bool:
    return all(c in _ASCII_WHITESPACE for c in segment)


@dataclass
class List:
    """Plain list; its type is determined by its first item."""

    indent: int = 0
    ordered: bool = False
    post_blank: int = 0


@dataclass
class ListItem:
    """List item with its bullet and indentation."""

    bullet: str = ""
    indent: int = 0
    ordered: bool = False

    @classmethod
    def parse(cls, text: str) -> tuple[str, tuple[ListItem, str]] | None:
        """Parse a list item; return the rest, the item and its contents."""
        indent = _INDENT.match(text).end()
        match = _BULLET.match(text, indent)
        if match is None:
            return None
        bullet = match.group()
        rest, contents = _item_contents(text[match.end() :], indent)
        item = cls(bullet=bullet, indent=indent, ordered=bullet[0].isdigit())
        return rest, (item, contents)


def _item_contents(text: str, indent: int) -> tuple[str, str]:
    line_ends = [index + 1 for index, char in enumerate(text) if char == "\n"]
    line_ends.append(len(text))
    last_end = line_ends[0]

    for end in line_ends[1:]:
        current = text[last_end:end]
        if _is_blank(current):
            following = text.find("\n", end)
            stop = len(text) if following == -1 else following + 1
            # two consecutive empty lines end the item
            if _is_blank(text[end:stop]):
                return text[stop:], text[:stop]

        # a line indented no deeper than the bullet ends the item
        if not _is_blank(current[: indent + 1]):
            return text[last_end:], text[:last_end]

        last_end = end

    return "", text