"""Target object (<<TARGET>>)."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TARGET = re.compile(r"<<([^<>\n]*)>>")


@dataclass
class Target:
    """Dedicated target."""

    target: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, Target] | None:
        """Parse a target; return the rest of the input and the target."""
        match = _TARGET.match(text)
        if match is None:
            return None
        name = match.group(1)
        if not name or name[0] == " " or name[-1] == " ":
            return None
        return text[match.end() :], cls(target=name)