from orgkit.planning import Planning
from orgkit.timestamp import Datetime, Timestamp, TimestampKind


def test_scheduled_from_source():
    assert Planning.parse("SCHEDULED: <2019-04-08 Mon>\n") == (
        "",
        Planning(
            scheduled=Timestamp(
                TimestampKind.ACTIVE,
                start=Datetime(2019, 4, 8, "Mon", None, None),
            ),
            deadline=None,
            closed=None,
        ),
    )


def test_closed_inactive_keeps_rest():
    rest, planning = Planning.parse("CLOSED: [2019-04-08 Mon]\nnext line")
    assert rest == "next line"
    assert planning.closed == Timestamp(
        TimestampKind.INACTIVE, start=Datetime(2019, 4, 8, "Mon")
    )
    assert planning.deadline is None
    assert planning.scheduled is None


def test_several_keywords():
    rest, planning = Planning.parse(
        "DEADLINE: <2019-04-09 Tue> SCHEDULED: <2019-04-08 Mon>"
    )
    assert rest == ""
    assert planning.deadline.start == Datetime(2019, 4, 9, "Tue")
    assert planning.scheduled.start == Datetime(2019, 4, 8, "Mon")


def test_repeated_keyword_fails():
    assert (
        Planning.parse("DEADLINE: <2019-04-08 Mon> DEADLINE: <2019-04-09 Tue>")
        is None
    )


def test_unknown_keyword_fails():
    assert Planning.parse("WHEN: <2019-04-08 Mon>") is None


def test_bad_timestamp_fails():
    assert Planning.parse("DEADLINE: someday soon") is None


def test_plain_text_fails():
    assert Planning.parse("Just text") is None
    assert Planning.parse("") is None