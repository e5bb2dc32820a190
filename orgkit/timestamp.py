"""Timestamp objects: active, inactive, ranges and diary sexps."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timezone
from enum import Enum

_DIGITS = frozenset("0123456789")
_SPACES = re.compile(r"[ \t]+")
_HOUR = re.compile(r"[0-9]{1,2}")
_DAYNAME = re.compile(r"[^ \t\n\r\x0c0-9+\-\]>]*")


class TimestampKind(Enum):
    """The shape of a timestamp."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ACTIVE_RANGE = "active-range"
    INACTIVE_RANGE = "inactive-range"
    DIARY = "diary"


@dataclass
class Datetime:
    """A date with an optional time of day, as written in a timestamp."""

    year: int
    month: int
    day: int
    dayname: str = ""
    hour: int | None = None
    minute: int | None = None

    def to_date(self) -> date:
        """Return the calendar date."""
        return date(self.year, self.month, self.day)

    def to_time(self) -> time:
        """Return the time of day, midnight when no time is given."""
        return time(self.hour or 0, self.minute or 0, 0)

    def to_datetime(self) -> datetime:
        """Return the date and time as a UTC datetime."""
        return datetime.combine(self.to_date(), self.to_time(), tzinfo=timezone.utc)


@dataclass
class Timestamp:
    """Timestamp object.

    Ranges carry ``start`` and ``end``; single timestamps only ``start``;
    diary timestamps only ``value``.
    """

    kind: TimestampKind
    start: Datetime | None = None
    end: Datetime | None = None
    repeater: str | None = None
    delay: str | None = None
    value: str | None = None

    @property
    def is_range(self) -> bool:
        return self.kind in (TimestampKind.ACTIVE_RANGE, TimestampKind.INACTIVE_RANGE)

    @property
    def is_active(self) -> bool:
        return self.kind in (TimestampKind.ACTIVE, TimestampKind.ACTIVE_RANGE)


def _parse_uint(digits: str) -> int | None:
    body = digits[1:] if digits.startswith("+") else digits
    if body and all(c in _DIGITS for c in body):
        return int(body)
    return None


def _parse_time(text: str) -> tuple[str, tuple[int, int]] | None:
    match = _HOUR.match(text)
    if match is None:
        return None
    hour = int(match.group())
    rest = text[match.end():]
    if not rest.startswith(":"):
        return None
    rest = rest[1:]
    if len(rest) < 2:
        return None
    minute = _parse_uint(rest[:2])
    if minute is None:
        return None
    return rest[2:], (hour, minute)


def _take_number(text: str, width: int) -> tuple[str, int] | None:
    if len(text) < width:
        return None
    number = _parse_uint(text[:width])
    if number is None:
        return None
    return text[width:], number


def _parse_datetime(text: str) -> tuple[str, Datetime] | None:
    taken = _take_number(text, 4)
    if taken is None:
        return None
    rest, year = taken
    if not rest.startswith("-"):
        return None
    taken = _take_number(rest[1:], 2)
    if taken is None:
        return None
    rest, month = taken
    if not rest.startswith("-"):
        return None
    taken = _take_number(rest[1:], 2)
    if taken is None:
        return None
    rest, day = taken
    spaces = _SPACES.match(rest)
    if spaces is None:
        return None
    rest = rest[spaces.end():]
    name = _DAYNAME.match(rest)
    dayname = name.group()
    rest = rest[name.end():]

    hour = minute = None
    spaces = _SPACES.match(rest)
    if spaces is not None:
        timed = _parse_time(rest[spaces.end():])
        if timed is not None:
            rest, (hour, minute) = timed

    return rest, Datetime(year, month, day, dayname, hour, minute)


def _parse_bracketed(
    text: str, opening: str, closing: str, single: TimestampKind, ranged: TimestampKind
) -> tuple[str, Timestamp] | None:
    if not text.startswith(opening):
        return None
    parsed = _parse_datetime(text[1:])
    if parsed is None:
        return None
    rest, start = parsed

    if rest.startswith("-"):
        timed = _parse_time(rest[1:])
        if timed is None:
            return None
        rest, (hour, minute) = timed
        rest = rest.lstrip(" \t")
        if not rest.startswith(closing):
            return None
        end = replace(start, hour=hour, minute=minute)
        return rest[1:], Timestamp(ranged, start=start, end=end)

    rest = rest.lstrip(" \t")
    if not rest.startswith(closing):
        return None
    rest = rest[1:]

    separator = "--" + opening
    if rest.startswith(separator):
        parsed = _parse_datetime(rest[len(separator):])
        if parsed is None:
            return None
        rest, end = parsed
        rest = rest.lstrip(" \t")
        if not rest.startswith(closing):
            return None
        return rest[1:], Timestamp(ranged, start=start, end=end)

    return rest, Timestamp(single, start=start)


def parse_active(text: str) -> tuple[str, Timestamp] | None:
    """Parse an active timestamp or active range (``<...>``)."""
    return _parse_bracketed(
        text, "<", ">", TimestampKind.ACTIVE, TimestampKind.ACTIVE_RANGE
    )


def parse_inactive(text: str) -> tuple[str, Timestamp] | None:
    """Parse an inactive timestamp or inactive range (``[...]``)."""
    return _parse_bracketed(
        text, "[", "]", TimestampKind.INACTIVE, TimestampKind.INACTIVE_RANGE
    )


def parse_diary(text: str) -> tuple[str, Timestamp] | None:
    """Parse a diary sexp timestamp (``<%%(...)>``)."""
    prefix = "<%%("
    if not text.startswith(prefix):
        return None
    rest = text[len(prefix):]
    end = len(rest)
    for index, char in enumerate(rest):
        if char in ")>\n":
            end = index
            break
    value = rest[:end]
    rest = rest[end:]
    if not rest.startswith(")>"):
        return None
    return rest[2:], Timestamp(TimestampKind.DIARY, value=value)