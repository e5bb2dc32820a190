import pytest

from orgkit.config import DEFAULT_CONFIG, ParseConfig
from orgkit.planning import Planning
from orgkit.timestamp import Datetime, Timestamp, TimestampKind
from orgkit.title import Title, parse_properties_drawer


def _plain(raw, keyword=None, priority=None, tags=None):
    return Title(
        level=4,
        keyword=keyword,
        priority=priority,
        raw=raw,
        tags=tags or [],
        planning=None,
        properties={},
        post_blank=0,
    )


@pytest.mark.parametrize(
    "text, keyword, priority, raw, tags",
    [
        ("**** DONE [#A] COMMENT Title :tag:a2%:", "DONE", "A", "COMMENT Title", ["tag", "a2%"]),
        ("**** ToDO [#A] COMMENT Title", None, None, "ToDO [#A] COMMENT Title", []),
        ("**** T0DO [#A] COMMENT Title", None, None, "T0DO [#A] COMMENT Title", []),
        ("**** DONE [#1] COMMENT Title", "DONE", None, "[#1] COMMENT Title", []),
        ("**** DONE [#a] COMMENT Title", "DONE", None, "[#a] COMMENT Title", []),
        ("**** Title :tag:a2%", None, None, "Title :tag:a2%", []),
        ("**** Title tag:a2%:", None, None, "Title tag:a2%:", []),
    ],
)
def test_parse_title_default_config(text, keyword, priority, raw, tags):
    assert Title.parse(text, DEFAULT_CONFIG) == (
        "",
        (_plain(raw, keyword, priority, tags), raw),
    )


def test_no_todo_keywords():
    config = ParseConfig(todo_keywords=([], []))
    assert Title.parse("**** DONE Title", config) == (
        "",
        (_plain("DONE Title"), "DONE Title"),
    )


def test_custom_todo_keyword():
    config = ParseConfig(todo_keywords=(["TASK"], []))
    assert Title.parse("**** TASK [#A] Title", config) == (
        "",
        (_plain("Title", keyword="TASK", priority="A"), "Title"),
    )


def test_properties_drawer_from_source():
    assert parse_properties_drawer(
        "   :PROPERTIES:\n   :CUSTOM_ID: id\n   :END:"
    ) == ("", {"CUSTOM_ID": "id"})


def test_properties_drawer_wrong_name():
    assert parse_properties_drawer(":LOGBOOK:\n:ID: x\n:END:") is None


def test_properties_plus_suffix_stripped():
    assert parse_properties_drawer(":PROPERTIES:\n:VAR+: a\n:END:\n") == (
        "",
        {"VAR": "a"},
    )


def test_title_with_planning_and_properties():
    text = (
        "* TODO Title\n"
        "DEADLINE: <2019-04-08 Mon>\n"
        ":PROPERTIES:\n:ID: x\n:END:\n\nrest"
    )
    rest, (title, raw) = Title.parse(text, DEFAULT_CONFIG)
    assert rest == "rest"
    assert raw == "Title"
    assert title.level == 1
    assert title.keyword == "TODO"
    assert title.properties == {"ID": "x"}
    assert title.post_blank == 1
    assert title.planning == Planning(
        deadline=Timestamp(TimestampKind.ACTIVE, start=Datetime(2019, 4, 8, "Mon"))
    )
    assert title.deadline() == title.planning.deadline
    assert title.scheduled() is None
    assert title.closed() is None


def test_accessors_without_planning():
    _, (title, _) = Title.parse("* Title")
    assert title.deadline() is None
    assert title.scheduled() is None
    assert title.closed() is None


def test_is_archived():
    _, (title, _) = Title.parse("* Title :ARCHIVE:")
    assert title.tags == ["ARCHIVE"]
    assert title.is_archived() is True
    _, (other, _) = Title.parse("* Title :work:")
    assert other.is_archived() is False


def test_is_commented():
    _, (title, _) = Title.parse("* COMMENT  Title")
    assert title.raw == "COMMENT  Title"
    assert title.is_commented() is True
    _, (other, _) = Title.parse("* COMMENT Title")
    assert other.is_commented() is False


def test_default_title():
    title = Title()
    assert title.level == 1
    assert title.tags == []
    assert title.properties == {}
    assert title.raw == ""