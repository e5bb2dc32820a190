"""Inline babel call object (call_NAME[HEADER](ARGS)[HEADER])."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INLINE_CALL = re.compile(
    r"call_([^\[\n()]*)"
    r"(?:\[([^\]\n]*)\])?"
    r"\(([^)\n]*)\)"
    r"(?:\[([^\]\n]*)\])?"
)


@dataclass
class InlineCall:
    """Inline babel call."""

    name: str = ""
    inside_header: str | None = None
    arguments: str = ""
    end_header: str | None = None

    @classmethod
    def parse(cls, text: str) -> tuple[str, InlineCall] | None:
        """Parse an inline call; return the rest of the input and the call."""
        match = _INLINE_CALL.match(text)
        if match is None:
            return None
        name, inside_header, arguments, end_header = match.groups()
        return text[match.end() :], cls(
            name=name,
            inside_header=inside_header,
            arguments=arguments,
            end_header=end_header,
        )