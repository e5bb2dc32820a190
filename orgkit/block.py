"""Greater and lesser block elements (#+BEGIN_NAME ... #+END_NAME)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, line, take_lines_while

_NAME = re.compile(r"[A-Za-z]+")
_BEGIN = "#+begin_"


@dataclass
class SpecialBlock:
    """A block whose name has no special meaning."""

    name: str = ""
    parameters: str | None = None
    pre_blank: int = 0
    post_blank: int = 0


@dataclass
class QuoteBlock:
    """Quote block."""

    parameters: str | None = None
    pre_blank: int = 0
    post_blank: int = 0


@dataclass
class CenterBlock:
    """Center block."""

    parameters: str | None = None
    pre_blank: int = 0
    post_blank: int = 0


@dataclass
class VerseBlock:
    """Verse block."""

    parameters: str | None = None
    pre_blank: int = 0
    post_blank: int = 0


@dataclass
class CommentBlock:
    """Comment block."""

    contents: str = ""
    data: str | None = None
    post_blank: int = 0


@dataclass
class ExampleBlock:
    """Example block."""

    contents: str = ""
    data: str | None = None
    post_blank: int = 0


@dataclass
class ExportBlock:
    """Export block; ``data`` names the back-end."""

    data: str = ""
    contents: str = ""
    post_blank: int = 0


@dataclass
class SourceBlock:
    """Source code block."""

    contents: str = ""
    language: str = ""
    arguments: str = ""
    post_blank: int = 0


def parse_block_element(
    text: str,
) -> tuple[str, tuple[str, str | None, str, int]] | None:
    """Parse a block.

    Returns the rest of the input and a tuple of the block name, its
    parameters (None when empty), its raw contents and the number of blank
    lines after it; None if the input does not start with a block.
    """
    rest = text.lstrip(" \t")
    if rest[: len(_BEGIN)].lower() != _BEGIN:
        return None
    rest = rest[len(_BEGIN) :]
    match = _NAME.match(rest)
    if match is None:
        return None
    name = match.group()
    rest, args = line(rest[match.end() :])

    end_line = f"#+END_{name}".lower()
    rest, contents = take_lines_while(
        rest, lambda segment: segment.strip().lower() != end_line
    )
    rest, _ = line(rest)
    rest, blank = blank_lines(rest)

    args = args.strip()
    return rest, (name, args or None, contents, blank)