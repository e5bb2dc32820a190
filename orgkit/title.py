"""Headline title element."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from orgkit.config import DEFAULT_CONFIG, ParseConfig
from orgkit.drawer import parse_drawer_without_blank
from orgkit.lines import blank_lines, line, skip_empty_lines, take_one_word
from orgkit.planning import Planning
from orgkit.timestamp import Timestamp

_STARS = re.compile(r"\**")
_SPACES = re.compile(r"[ \t]+")
_UPPERCASE = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass
class Title:
    """A headline's title line with its planning and property drawer."""

    level: int = 1
    priority: str | None = None
    tags: list[str] = field(default_factory=list)
    keyword: str | None = None
    raw: str = ""
    planning: Planning | None = None
    properties: dict[str, str] = field(default_factory=dict)
    post_blank: int = 0

    @classmethod
    def parse(
        cls, text: str, config: ParseConfig = DEFAULT_CONFIG
    ) -> tuple[str, tuple[Title, str]] | None:
        """Parse a headline title; return the rest, the title and its raw text."""
        rest = text
        level = _STARS.match(rest).end()
        rest = rest[level:]

        keyword = None
        spaces = _SPACES.match(rest)
        if spaces is not None:
            taken = take_one_word(rest[spaces.end() :])
            if taken is not None and config.is_todo_keyword(taken[1]):
                rest, keyword = taken

        priority = None
        spaces = _SPACES.match(rest)
        if spaces is not None:
            taken = take_one_word(rest[spaces.end() :])
            if taken is not None:
                after, word = taken
                if (
                    len(word) >= 4
                    and word.startswith("[#")
                    and word[2] in _UPPERCASE
                    and word[3] == "]"
                ):
                    priority = word[2]
                    rest = after

        rest, tail = line(rest)
        tail = tail.strip()
        raw, tag_text = tail, ""
        last_space = tail.rfind(" ")
        if last_space != -1:
            candidate = tail[last_space + 1 :]
            if len(candidate) > 2 and candidate.startswith(":") and candidate.endswith(":"):
                raw, tag_text = tail[:last_space].strip(), candidate
        tags = [tag for tag in tag_text.split(":") if tag]

        planning = None
        planned = Planning.parse(rest)
        if planned is not None:
            rest, planning = planned

        properties: dict[str, str] = {}
        drawer = parse_properties_drawer(rest)
        if drawer is not None:
            rest, properties = drawer

        rest, blank = blank_lines(rest)
        title = cls(
            level=level,
            priority=priority,
            tags=tags,
            keyword=keyword,
            raw=raw,
            planning=planning,
            properties=properties,
            post_blank=blank,
        )
        return rest, (title, raw)

    def closed(self) -> Timestamp | None:
        """Return the closed timestamp, or None if not set."""
        return self.planning.closed if self.planning else None

    def scheduled(self) -> Timestamp | None:
        """Return the scheduled timestamp, or None if not set."""
        return self.planning.scheduled if self.planning else None

    def deadline(self) -> Timestamp | None:
        """Return the deadline timestamp, or None if not set."""
        return self.planning.deadline if self.planning else None

    def is_archived(self) -> bool:
        """Return True if the headline carries the ARCHIVE tag."""
        return "ARCHIVE" in self.tags

    def is_commented(self) -> bool:
        """Return True if the headline is commented out."""
        return self.raw.startswith("COMMENT  ")


def _parse_node_property(text: str) -> tuple[str, tuple[str, str]] | None:
    rest = skip_empty_lines(text).lstrip()
    if not rest.startswith(":"):
        return None
    close = rest.find(":", 1)
    if close == -1:
        return None
    name = rest[1:close].rstrip("+")
    rest, value = line(rest[close + 1 :])
    return rest, (name, value.strip())


def parse_properties_drawer(text: str) -> tuple[str, dict[str, str]] | None:
    """Parse a PROPERTIES drawer into a mapping of property names to values."""
    parsed = parse_drawer_without_blank(text.lstrip())
    if parsed is None:
        return None
    rest, (drawer, contents) = parsed
    if drawer.name != "PROPERTIES":
        return None
    properties: dict[str, str] = {}
    while (node := _parse_node_property(contents)) is not None:
        contents, (name, value) = node
        properties[name] = value
    return rest, properties