"""Statistics cookie object ([1/3] or [33%])."""

from __future__ import annotations

import re
from dataclasses import dataclass

_COOKIE = re.compile(r"\[(?:[0-9]*/[0-9]*|[0-9]*%)\]")


@dataclass
class Cookie:
    """Statistics cookie; ``value`` is the full cookie text with brackets."""

    value: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Cookie] | None:
        """Parse a cookie; return the rest of the input and the cookie."""
        match = _COOKIE.match(text)
        if match is None:
            return None
        return text[match.end() :], cls(value=match.group())