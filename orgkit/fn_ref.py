"""Footnote reference object ([fn:LABEL] or [fn:LABEL:DEFINITION])."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LABEL = re.compile(r"\[fn:([A-Za-z0-9_-]*)")


def _balanced_brackets(text: str) -> tuple[str, str] | None:
    depth = 1
    for index, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            if depth != 1:
                depth -= 1
            else:
                return text[index:], text[:index]
    return None


@dataclass
class FnRef:
    """Footnote reference, optionally with an inline definition."""

    label: str = ""
    definition: str | None = None

    @classmethod
    def parse(cls, text: str) -> tuple[str, FnRef] | None:
        """Parse a footnote reference; return the rest of the input and the reference."""
        match = _LABEL.match(text)
        if match is None:
            return None
        rest = text[match.end() :]
        definition = None
        if rest.startswith(":"):
            balanced = _balanced_brackets(rest[1:])
            if balanced is not None:
                rest, definition = balanced
        if not rest.startswith("]"):
            return None
        return rest[1:], cls(label=match.group(1), definition=definition)