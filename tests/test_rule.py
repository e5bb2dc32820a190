import pytest

from orgkit.rule import Rule


@pytest.mark.parametrize(
    "text, blank",
    [
        ("-----", 0),
        ("--------", 0),
        ("-----\n\n\n", 2),
        ("-----  \n", 0),
    ],
)
def test_valid_rules(text, blank):
    assert Rule.parse(text) == ("", Rule(post_blank=blank))


@pytest.mark.parametrize(
    "text",
    [
        "",
        "----",
        "None----",
        "None  ----",
        "None------",
        "----None----",
        "\t\t----",
        "------None",
        "----- None",
    ],
)
def test_invalid_rules(text):
    assert Rule.parse(text) is None


def test_rest_after_rule():
    assert Rule.parse("  -----\ntext") == ("text", Rule(post_blank=0))