"""Export snippet object (@@BACKEND:VALUE@@)."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEAD = re.compile(r"@@([A-Za-z0-9-]+):")


@dataclass
class Snippet:
    """Export snippet for a given back-end."""

    name: str = ""
    value: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Snippet] | None:
        """Parse an export snippet; return the rest of the input and the snippet."""
        match = _HEAD.match(text)
        if match is None:
            return None
        close = text.find("@@", match.end())
        if close == -1:
            return None
        return text[close + 2 :], cls(
            name=match.group(1), value=text[match.end() : close]
        )