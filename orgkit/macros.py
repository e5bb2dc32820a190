"""Macro object ({{{NAME(ARGUMENTS)}}})."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NAME = re.compile(r"\{\{\{([A-Za-z][A-Za-z0-9_-]*)")


@dataclass
class Macros:
    """Macro call with optional arguments."""

    name: str = ""
    arguments: str | None = None

    @classmethod
    def parse(cls, text: str) -> tuple[str, Macros] | None:
        """Parse a macro; return the rest of the input and the macro."""
        match = _NAME.match(text)
        if match is None:
            return None
        rest = text[match.end() :]
        arguments = None
        if rest.startswith("("):
            close = rest.find(")}}}", 1)
            if close != -1:
                arguments = rest[1:close]
                rest = rest[close + 1 :]
        if not rest.startswith("}}}"):
            return None
        return rest[3:], cls(name=match.group(1), arguments=arguments)