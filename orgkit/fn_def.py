"""Footnote definition element ([fn:LABEL] contents)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, line

_LABEL = re.compile(r"\[fn:([A-Za-z0-9_-]+)\]")


@dataclass
class FnDef:
    """Footnote definition; ``label`` is used for references."""

    label: str = ""
    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, tuple[FnDef, str]] | None:
        """Parse a footnote definition; return the rest, the definition and its contents."""
        match = _LABEL.match(text)
        if match is None:
            return None
        rest, contents = line(text[match.end() :])
        rest, blank = blank_lines(rest)
        return rest, (cls(label=match.group(1), post_blank=blank), contents)