# orgkit

Small parsers for the building blocks of Org-mode documents. It has no
dependencies outside the standard library. It covers headlines, planning
lines, property drawers, blocks, dynamic blocks, clocks, timestamps, keywords,
comments, fixed-width areas, rules, plain list items, table.el tables,
footnotes, links, macros, export snippets, targets, radio targets, statistics
cookies, inline calls, inline source blocks and emphasis.

Each parser takes text that starts at the element it recognises. It returns a
tuple: the text that is left over comes first, and what was found comes
second. When the text does not start with that element, the parser returns
`None`.

## Installation

```
pip install orgkit
```

## Usage

### Timestamps and clocks

```python
from orgkit.timestamp import parse_active, parse_inactive, parse_diary
from orgkit.clock import Clock

rest, stamp = parse_inactive("[2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39]")
stamp.kind                   # TimestampKind.INACTIVE_RANGE
stamp.start.to_datetime()    # 2003-09-16 09:39:00+00:00

rest, clock = Clock.parse("CLOCK: [2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39] =>  1:00\n")
clock.is_closed(), clock.duration   # (True, "1:00")
clock.value()                       # the inactive range timestamp
```

A `Datetime` converts to the standard library's types:

- `to_date()` returns the calendar date.
- `to_time()` returns the time of day. It gives midnight when the timestamp has no time.
- `to_datetime()` returns both together as a UTC datetime.

### Headlines

`Title.parse` reads the following parts of a headline:

- the stars
- an optional TODO keyword
- a priority cookie such as `[#A]`
- tags
- a planning line that follows (`DEADLINE:`, `SCHEDULED:`, `CLOSED:`)
- a `PROPERTIES` drawer

```python
from orgkit.config import ParseConfig
from orgkit.title import Title

rest, (title, raw) = Title.parse("**** DONE [#A] Write report :work:", ParseConfig())
title.level, title.keyword, title.priority, title.tags   # (4, "DONE", "A", ["work"])

config = ParseConfig(todo_keywords=(["TASK"], []))
rest, (title, raw) = Title.parse("* TASK Title", config)
```

`ParseConfig.todo_keywords` holds two lists of keywords. The first is for open
tasks and the second for finished ones. The default is `(["TODO"], ["DONE"])`.
A `Title` has the following methods:

- `closed()`, `scheduled()` and `deadline()`, which return the planning timestamps.
- `is_archived()`
- `is_commented()`

### Blocks, drawers and other elements

```python
from orgkit.block import parse_block_element
from orgkit.drawer import Drawer
from orgkit.dyn_block import DynBlock
from orgkit.keyword import parse_keyword
from orgkit.lines import Comment, FixedWidth
from orgkit.rule import Rule
from orgkit.table import Table

rest, (name, args, contents, blank) = parse_block_element(
    "#+BEGIN_SRC python\nprint('hi')\n#+END_SRC\n"
)

rest, (drawer, contents) = Drawer.parse(":PROPERTIES:\n  :CUSTOM_ID: id\n  :END:")
rest, (key, optional, value, blank) = parse_keyword("#+CAPTION[Short]: Longer caption.")
rest, fixed = FixedWidth.parse(": A\n: B\n")
rest, table = Table.parse_table_el("+---+\n|   |\n+---+\n")
```

`orgkit.lines` also provides the line helpers that the element parsers are
built from:

- `blank_lines`
- `line`
- `eol`
- `take_lines_while`
- `take_one_word`
- `skip_empty_lines`

### Lists

```python
from orgkit.plain_list import ListItem

rest, (item, contents) = ListItem.parse("+ item1\n+ item2")
# rest == "+ item2", item.bullet == "+ ", contents == "item1\n"
```

### Inline objects

```python
from orgkit.cookie import Cookie
from orgkit.emphasis import parse_emphasis
from orgkit.fn_ref import FnRef
from orgkit.inline_src import InlineSrc
from orgkit.link import Link
from orgkit.macros import Macros
from orgkit.snippet import Snippet
from orgkit.target import Target

rest, link = Link.parse("[[#id][desc]]")
rest, macro = Macros.parse("{{{poem(red,blue)}}}")
rest, inner = parse_emphasis("*bold*", "*")      # ("", "bold")
rest, snippet = Snippet.parse("@@html:<b>@@")
rest, src = InlineSrc.parse("src_C{int a = 0;}")
```

### Elements

`orgkit.element.Element` pairs an `ElementKind` with the parsed value:

- `Element.wrap(value)` builds the element for a parsed value.
- `is_container()` tells whether the element can hold children.
- `to_dict()` returns a plain mapping tagged with a `type` key, ready for JSON.

```python
from orgkit.element import Element, ElementKind
from orgkit.link import Link

rest, link = Link.parse("[[#id][desc]]")
Element.wrap(link).to_dict()    # {"type": "link", "path": "#id", "desc": "desc"}
Element(ElementKind.TEXT, attrs={"value": "hi"}).to_dict()
```

## What it does not do

orgkit parses one element or object at a time. It does not walk a whole
document and build it into a tree of sections and headlines, and it does not
produce a stream of events from one. It has no exporter to HTML or any other
format, and no command-line tool.

Some element kinds cannot be produced by any parser here. You can build
`DOCUMENT`, `SECTION`, `PARAGRAPH` and org-style `Table` values yourself, but
no parser returns them. Timestamp repeaters and delays are never filled in by
the parsers.

## Running the tests

```
pip install -e .[test]
pytest
```