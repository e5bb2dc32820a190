"""Table, table row and table cell elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from orgkit.lines import blank_lines, take_lines_while


class TableKind(Enum):
    """The syntax a table is written in."""

    ORG = "org"
    TABLE_EL = "table.el"


class TableRow(Enum):
    """The role of a table row.

    Rows before the first rule line form the header; rule lines between
    header and body are header rules, later ones body rules.
    """

    HEADER = "header"
    BODY = "body"
    HEADER_RULE = "header-rule"
    BODY_RULE = "body-rule"


class TableCell(Enum):
    """The role of a table cell."""

    HEADER = "header"
    BODY = "body"


@dataclass
class Table:
    """Table element.

    Org tables carry ``tblfm`` and ``has_header``; table.el tables carry
    their raw ``value``.
    """

    kind: TableKind
    tblfm: str | None = None
    post_blank: int = 0
    has_header: bool = False
    value: str | None = None

    @classmethod
    def parse_table_el(cls, text: str) -> tuple[str, Table] | None:
        """Parse a table.el table; return the rest of the input and the table."""
        newline = text.find("\n")
        first_line = (text if newline == -1 else text[:newline]).strip()

        # the first line must be a "+-" border made only of plus and minus signs
        if not first_line.startswith("+-") or any(c not in "+-" for c in first_line):
            return None

        def is_table_line(segment: str) -> bool:
            stripped = segment.lstrip()
            return stripped.startswith("|") or stripped.startswith("+")

        rest, content = take_lines_while(text, is_table_line)
        rest, blank = blank_lines(rest)
        return rest, cls(TableKind.TABLE_EL, value=content, post_blank=blank)