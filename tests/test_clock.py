import pytest

from orgkit.clock import Clock
from orgkit.timestamp import Datetime, Timestamp, TimestampKind


def test_running_clock():
    assert Clock.parse("CLOCK: [2003-09-16 Tue 09:39]") == (
        "",
        Clock(
            start=Datetime(2003, 9, 16, "Tue", 9, 39),
            repeater=None,
            delay=None,
            post_blank=0,
        ),
    )


def test_closed_clock():
    assert Clock.parse(
        "CLOCK: [2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39] =>  1:00\n\n"
    ) == (
        "",
        Clock(
            start=Datetime(2003, 9, 16, "Tue", 9, 39),
            end=Datetime(2003, 9, 16, "Tue", 10, 39),
            repeater=None,
            delay=None,
            duration="1:00",
            post_blank=1,
        ),
    )


def test_running_state_methods():
    _, clock = Clock.parse("  CLOCK: [2003-09-16 Tue 09:39]\nnext")
    assert clock.is_running() is True
    assert clock.is_closed() is False
    assert clock.duration is None


def test_closed_state_methods():
    _, clock = Clock.parse("CLOCK: [2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39] => 1:00")
    assert clock.is_closed() is True
    assert clock.is_running() is False
    assert clock.duration == "1:00"


def test_rest_after_clock():
    rest, _ = Clock.parse("CLOCK: [2003-09-16 Tue 09:39]\n\nnext line")
    assert rest == "next line"


def test_value_of_running_clock():
    _, clock = Clock.parse("CLOCK: [2003-09-16 Tue 09:39]")
    assert clock.value() == Timestamp(
        TimestampKind.INACTIVE, start=Datetime(2003, 9, 16, "Tue", 9, 39)
    )


def test_value_of_closed_clock():
    _, clock = Clock.parse("CLOCK: [2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39] => 1:00")
    assert clock.value() == Timestamp(
        TimestampKind.INACTIVE_RANGE,
        start=Datetime(2003, 9, 16, "Tue", 9, 39),
        end=Datetime(2003, 9, 16, "Tue", 10, 39),
    )


@pytest.mark.parametrize(
    "text",
    [
        "CLOCK: <2003-09-16 Tue 09:39>",
        "CLOCK: [2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39]",
        "CLOCK: [2003-09-16 Tue 09:39]--[2003-09-16 Tue 10:39] => 1h",
        "CLOCK: [2003-09-16 Tue 09:39] extra",
        "CLOCKS: [2003-09-16 Tue 09:39]",
        "clock: [2003-09-16 Tue 09:39]",
    ],
)
def test_failures(text):
    assert Clock.parse(text) is None