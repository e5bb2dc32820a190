"""Inline source block object (src_LANG[OPTIONS]{BODY})."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INLINE_SRC = re.compile(
    r"src_([^ \t\n\r\x0c\[{]+)"
    r"(?:\[([^\n\]]*)\])?"
    r"\{([^\n}]*)\}"
)


@dataclass
class InlineSrc:
    """Inline source block."""

    lang: str = ""
    options: str | None = None
    body: str = ""

    @classmethod
    def parse(cls, text: str) -> tuple[str, InlineSrc] | None:
        """Parse an inline source block; return the rest of the input and the block."""
        match = _INLINE_SRC.match(text)
        if match is None:
            return None
        lang, options, body = match.groups()
        return text[match.end() :], cls(lang=lang, options=options, body=body)