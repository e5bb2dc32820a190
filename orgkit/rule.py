"""Horizontal rule element."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, eol

_DASHES = re.compile(r"-{5,}")


@dataclass
class Rule:
    """Horizontal rule: five or more dashes alone on a line."""

    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, Rule] | None:
        rest = text.lstrip(" \t")
        match = _DASHES.match(rest)
        if match is None:
            return None
        rest = eol(rest[match.end() :])
        if rest is None:
            return None
        rest, blank = blank_lines(rest)
        return rest, cls(post_blank=blank)