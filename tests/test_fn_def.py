import pytest

from orgkit.fn_def import FnDef


@pytest.mark.parametrize(
    "text, label, contents",
    [
        ("[fn:1] https://orgmode.org", "1", " https://orgmode.org"),
        ("[fn:word_1] https://orgmode.org", "word_1", " https://orgmode.org"),
        ("[fn:WORD-1] https://orgmode.org", "WORD-1", " https://orgmode.org"),
        ("[fn:WORD]", "WORD", ""),
    ],
)
def test_parse_valid(text, label, contents):
    assert FnDef.parse(text) == ("", (FnDef(label=label, post_blank=0), contents))


@pytest.mark.parametrize(
    "text",
    [
        "[fn:] https://orgmode.org",
        "[fn:wor d] https://orgmode.org",
        "[fn:WORD https://orgmode.org",
    ],
)
def test_parse_invalid(text):
    assert FnDef.parse(text) is None


def test_parse_counts_blank_lines():
    assert FnDef.parse("[fn:a] text\n\n\nnext") == (
        "next",
        (FnDef(label="a", post_blank=2), " text"),
    )