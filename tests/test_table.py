import pytest

from orgkit.table import Table, TableKind


def test_parse_table_el():
    text = "  +---+\n  |   |\n  +---+\n\n"
    assert Table.parse_table_el(text) == (
        "",
        Table(
            TableKind.TABLE_EL,
            value="  +---+\n  |   |\n  +---+\n",
            post_blank=1,
        ),
    )


@pytest.mark.parametrize("text", ["", "+----|---", "| a | b |", "-+--"])
def test_parse_table_el_rejects(text):
    assert Table.parse_table_el(text) is None


def test_parse_table_el_stops_at_other_lines():
    text = "+--+\n|a |\n+--+\nparagraph"
    rest, table = Table.parse_table_el(text)
    assert rest == "paragraph"
    assert table.value == "+--+\n|a |\n+--+\n"
    assert table.post_blank == 0