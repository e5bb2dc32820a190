"""The element enumeration that ties every org-mode element and object together."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from orgkit.block import (
    CenterBlock,
    CommentBlock,
    ExampleBlock,
    ExportBlock,
    QuoteBlock,
    SourceBlock,
    SpecialBlock,
    VerseBlock,
)
from orgkit.clock import Clock
from orgkit.cookie import Cookie
from orgkit.drawer import Drawer
from orgkit.dyn_block import DynBlock
from orgkit.fn_def import FnDef
from orgkit.fn_ref import FnRef
from orgkit.inline_call import InlineCall
from orgkit.inline_src import InlineSrc
from orgkit.keyword import BabelCall, Keyword
from orgkit.lines import Comment, FixedWidth
from orgkit.link import Link
from orgkit.macros import Macros
from orgkit.plain_list import List, ListItem
from orgkit.rule import Rule
from orgkit.snippet import Snippet
from orgkit.table import Table, TableCell, TableKind, TableRow
from orgkit.target import Target
from orgkit.timestamp import Timestamp
from orgkit.title import Title


class ElementKind(Enum):
    """Every kind of element; values are the names used when serialising."""

    SPECIAL_BLOCK = "special-block"
    QUOTE_BLOCK = "quote-block"
    CENTER_BLOCK = "center-block"
    VERSE_BLOCK = "verse-block"
    COMMENT_BLOCK = "comment-block"
    EXAMPLE_BLOCK = "example-block"
    EXPORT_BLOCK = "export-block"
    SOURCE_BLOCK = "source-block"
    BABEL_CALL = "babel-call"
    SECTION = "section"
    CLOCK = "clock"
    COOKIE = "cookie"
    RADIO_TARGET = "radio-target"
    DRAWER = "drawer"
    DOCUMENT = "document"
    DYN_BLOCK = "dyn-block"
    FN_DEF = "fn-def"
    FN_REF = "fn-ref"
    HEADLINE = "headline"
    INLINE_CALL = "inline-call"
    INLINE_SRC = "inline-src"
    KEYWORD = "keyword"
    LINK = "link"
    LIST = "list"
    LIST_ITEM = "list-item"
    MACROS = "macros"
    SNIPPET = "snippet"
    TEXT = "text"
    PARAGRAPH = "paragraph"
    RULE = "rule"
    TIMESTAMP = "timestamp"
    TARGET = "target"
    BOLD = "bold"
    STRIKE = "strike"
    ITALIC = "italic"
    UNDERLINE = "underline"
    VERBATIM = "verbatim"
    CODE = "code"
    COMMENT = "comment"
    FIXED_WIDTH = "fixed-width"
    TITLE = "title"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"


_UNIT_KINDS = frozenset(
    {
        ElementKind.SECTION,
        ElementKind.RADIO_TARGET,
        ElementKind.BOLD,
        ElementKind.STRIKE,
        ElementKind.ITALIC,
        ElementKind.UNDERLINE,
    }
)

_INLINE_FIELDS: dict[ElementKind, tuple[str, ...]] = {
    ElementKind.DOCUMENT: ("pre_blank",),
    ElementKind.HEADLINE: ("level",),
    ElementKind.TEXT: ("value",),
    ElementKind.PARAGRAPH: ("post_blank",),
    ElementKind.VERBATIM: ("value",),
    ElementKind.CODE: ("value",),
}

_PAYLOAD_TYPES: dict[ElementKind, type] = {
    ElementKind.SPECIAL_BLOCK: SpecialBlock,
    ElementKind.QUOTE_BLOCK: QuoteBlock,
    ElementKind.CENTER_BLOCK: CenterBlock,
    ElementKind.VERSE_BLOCK: VerseBlock,
    ElementKind.COMMENT_BLOCK: CommentBlock,
    ElementKind.EXAMPLE_BLOCK: ExampleBlock,
    ElementKind.EXPORT_BLOCK: ExportBlock,
    ElementKind.SOURCE_BLOCK: SourceBlock,
    ElementKind.BABEL_CALL: BabelCall,
    ElementKind.CLOCK: Clock,
    ElementKind.COOKIE: Cookie,
    ElementKind.DRAWER: Drawer,
    ElementKind.DYN_BLOCK: DynBlock,
    ElementKind.FN_DEF: FnDef,
    ElementKind.FN_REF: FnRef,
    ElementKind.INLINE_CALL: InlineCall,
    ElementKind.INLINE_SRC: InlineSrc,
    ElementKind.KEYWORD: Keyword,
    ElementKind.LINK: Link,
    ElementKind.LIST: List,
    ElementKind.LIST_ITEM: ListItem,
    ElementKind.MACROS: Macros,
    ElementKind.SNIPPET: Snippet,
    ElementKind.RULE: Rule,
    ElementKind.TIMESTAMP: Timestamp,
    ElementKind.TARGET: Target,
    ElementKind.COMMENT: Comment,
    ElementKind.FIXED_WIDTH: FixedWidth,
    ElementKind.TITLE: Title,
    ElementKind.TABLE: Table,
    ElementKind.TABLE_ROW: TableRow,
    ElementKind.TABLE_CELL: TableCell,
}

# Payload types that can be turned into an element directly.
_WRAPPABLE: dict[type, ElementKind] = {
    payload_type: kind
    for kind, payload_type in _PAYLOAD_TYPES.items()
    if kind is not ElementKind.TABLE_CELL
}

_CONTAINERS = frozenset(
    {
        ElementKind.SPECIAL_BLOCK,
        ElementKind.QUOTE_BLOCK,
        ElementKind.CENTER_BLOCK,
        ElementKind.VERSE_BLOCK,
        ElementKind.BOLD,
        ElementKind.DOCUMENT,
        ElementKind.DYN_BLOCK,
        ElementKind.HEADLINE,
        ElementKind.ITALIC,
        ElementKind.LIST,
        ElementKind.LIST_ITEM,
        ElementKind.PARAGRAPH,
        ElementKind.SECTION,
        ElementKind.STRIKE,
        ElementKind.UNDERLINE,
        ElementKind.TITLE,
        ElementKind.TABLE,
        ElementKind.TABLE_CELL,
    }
)


@dataclass
class Element:
    """A parsed element or object.

    Kinds backed by an element class keep it in ``data``; the few kinds
    that only carry a number or a string keep it in ``attrs``; the
    remaining kinds carry nothing.
    """

    kind: ElementKind
    data: Any = None
    attrs: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        expected_attrs = _INLINE_FIELDS.get(self.kind, ())
        if set(self.attrs) != set(expected_attrs):
            raise ValueError(
                f"{self.kind.value} element takes attributes {expected_attrs}, "
                f"got {tuple(self.attrs)}"
            )
        payload_type = _PAYLOAD_TYPES.get(self.kind)
        if payload_type is None:
            if self.data is not None:
                raise ValueError(f"{self.kind.value} element carries no data")
        elif not isinstance(self.data, payload_type):
            raise ValueError(
                f"{self.kind.value} element needs a {payload_type.__name__}"
            )

    def is_container(self) -> bool:
        """Return True if the element can hold child elements."""
        if self.kind is ElementKind.TABLE_ROW:
            return self.data in (TableRow.HEADER, TableRow.BODY)
        return self.kind in _CONTAINERS

    @classmethod
    def wrap(cls, value: Any) -> Element:
        """Build the element that carries ``value``."""
        kind = _WRAPPABLE.get(type(value))
        if kind is None:
            raise TypeError(f"cannot make an element from {type(value).__name__}")
        return cls(kind, data=value)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping tagged with the element ``type``."""
        result: dict[str, Any] = {"type": self.kind.value}
        if self.data is not None:
            result.update(_to_plain(self.data))
        result.update({name: _to_plain(value) for name, value in self.attrs.items()})
        return result


def _is_skipped(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and not value)


def _fields(obj: Any, names: tuple[str, ...] | None = None) -> dict[str, Any]:
    chosen = names or tuple(f.name for f in dataclasses.fields(obj))
    return {
        name: _to_plain(getattr(obj, name))
        for name in chosen
        if not _is_skipped(getattr(obj, name))
    }


def _to_plain(value: Any) -> Any:
    if isinstance(value, Timestamp):
        plain = {"timestamp_type": value.kind.value}
        plain.update(_fields(value, ("start", "end", "repeater", "delay", "value")))
        return plain
    if isinstance(value, Table):
        if value.kind is TableKind.ORG:
            names: tuple[str, ...] = ("tblfm", "post_blank", "has_header")
        else:
            names = ("value", "post_blank")
        plain = {"table_type": value.kind.value}
        plain.update(_fields(value, names))
        return plain
    if isinstance(value, TableRow):
        return {"table_row_type": value.value}
    if isinstance(value, TableCell):
        return {"table_cell_type": value.value}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _fields(value)
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    return value