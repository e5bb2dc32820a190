"""Regular link object ([[PATH]] or [[PATH][DESCRIPTION]])."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LINK = re.compile(r"\[\[([^<>\n\]]*)\](?:\[([^\[\]]*)\])?\]")


@dataclass
class Link:
    """Link with a destination and an optional description."""

    path: str = ""
    desc: str | None = None

    @classmethod
    def parse(cls, text: str) -> tuple[str, Link] | None:
        """Parse a link; return the rest of the input and the link."""
        match = _LINK.match(text)
        if match is None:
            return None
        path, desc = match.groups()
        return text[match.end() :], cls(path=path, desc=desc)