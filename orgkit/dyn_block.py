"""Dynamic block element (#+BEGIN: name ... #+END:)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, line, take_lines_while

_BEGIN = "#+begin:"
_NAME = re.compile(r"[ \t]+([A-Za-z]+)")


@dataclass
class DynBlock:
    """Dynamic block element."""

    block_name: str = ""
    arguments: str | None = None
    pre_blank: int = 0
    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, tuple[DynBlock, str]] | None:
        """Parse a dynamic block; return the rest, the block and its contents."""
        rest = text.lstrip(" \t")
        if rest[: len(_BEGIN)].lower() != _BEGIN:
            return None
        match = _NAME.match(rest, len(_BEGIN))
        if match is None:
            return None
        rest, args = line(rest[match.end() :])
        rest, contents = take_lines_while(
            rest, lambda segment: segment.strip().lower() != "#+end:"
        )
        contents, pre_blank = blank_lines(contents)
        rest, _ = line(rest)
        rest, post_blank = blank_lines(rest)

        args = args.strip()
        block = cls(
            block_name=match.group(1),
            arguments=args or None,
            pre_blank=pre_blank,
            post_blank=post_blank,
        )
        return rest, (block, contents)