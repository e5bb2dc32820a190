import pytest

from orgkit.plain_list import List, ListItem


@pytest.mark.parametrize(
    "text, rest, bullet, indent, ordered, contents",
    [
        ("+ item1\n+ item2", "+ item2", "+ ", 0, False, "item1\n"),
        ("* item1\n\n* item2", "* item2", "* ", 0, False, "item1\n\n"),
        ("* item1\n\n\n* item2", "* item2", "* ", 0, False, "item1\n\n\n"),
        ("* item1\n\n", "", "* ", 0, False, "item1\n\n"),
        ("+ item1\n  + item2\n", "", "+ ", 0, False, "item1\n  + item2\n"),
        (
            "+ item1\n\n  + item2\n\n+ item 3",
            "+ item 3",
            "+ ",
            0,
            False,
            "item1\n\n  + item2\n\n",
        ),
        ("  + item1\n\n  + item2", "  + item2", "+ ", 2, False, "item1\n\n"),
        (
            "  1. item1\n2. item2\n  3. item3",
            "2. item2\n  3. item3",
            "1. ",
            2,
            True,
            "item1\n",
        ),
        (
            "+ 1\n\n  - 2\n\n  - 3\n\n+ 4",
            "+ 4",
            "+ ",
            0,
            False,
            "1\n\n  - 2\n\n  - 3\n\n",
        ),
    ],
)
def test_parse_list_item(text, rest, bullet, indent, ordered, contents):
    assert ListItem.parse(text) == (
        rest,
        (ListItem(bullet=bullet, indent=indent, ordered=ordered), contents),
    )


@pytest.mark.parametrize("text", ["item", "1.item", "+item", ""])
def test_parse_rejects_non_items(text):
    assert ListItem.parse(text) is None


def test_rest_and_contents_rebuild_input_tail():
    text = "- a\n- b\n"
    rest, (item, contents) = ListItem.parse(text)
    assert item.bullet + contents + rest == text


def test_list_defaults():
    plain = List(indent=2, ordered=True, post_blank=1)
    assert (plain.indent, plain.ordered, plain.post_blank) == (2, True, 1)