from orgkit.link import Link


def test_parse_path_only():
    assert Link.parse("[[#id]]") == ("", Link(path="#id", desc=None))


def test_parse_with_description():
    assert Link.parse("[[#id][desc]]") == ("", Link(path="#id", desc="desc"))


def test_parse_unterminated():
    assert Link.parse("[[#id][desc]") is None


def test_parse_leaves_rest():
    assert Link.parse("[[a]] b") == (" b", Link(path="a"))