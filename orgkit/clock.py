"""Clock element (CLOCK: lines)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from orgkit.lines import blank_lines, eol
from orgkit.timestamp import Datetime, Timestamp, TimestampKind, parse_inactive

_DURATION = re.compile(r"[0-9]+:[0-9]+")


@dataclass
class Clock:
    """A clock line; it is closed when it has an end and a duration."""

    start: Datetime
    end: Datetime | None = None
    repeater: str | None = None
    delay: str | None = None
    duration: str | None = None
    post_blank: int = 0

    @classmethod
    def parse(cls, text: str) -> tuple[str, Clock] | None:
        """Parse a clock line; return the rest of the input and the clock."""
        rest = text.lstrip(" \t")
        if not rest.startswith("CLOCK:"):
            return None
        rest = rest[len("CLOCK:"):].lstrip(" \t")
        parsed = parse_inactive(rest)
        if parsed is None:
            return None
        rest, stamp = parsed

        if stamp.kind is TimestampKind.INACTIVE_RANGE:
            rest = rest.lstrip(" \t")
            if not rest.startswith("=>"):
                return None
            rest = rest[2:].lstrip(" \t")
            match = _DURATION.match(rest)
            if match is None:
                return None
            duration = match.group()
            rest = eol(rest[match.end():])
            if rest is None:
                return None
            rest, blank = blank_lines(rest)
            return rest, cls(
                start=stamp.start,
                end=stamp.end,
                repeater=stamp.repeater,
                delay=stamp.delay,
                duration=duration,
                post_blank=blank,
            )

        rest = eol(rest)
        if rest is None:
            return None
        rest, blank = blank_lines(rest)
        return rest, cls(
            start=stamp.start,
            repeater=stamp.repeater,
            delay=stamp.delay,
            post_blank=blank,
        )

    def is_running(self) -> bool:
        """Return True if the clock has not been stopped."""
        return self.end is None

    def is_closed(self) -> bool:
        """Return True if the clock has been stopped."""
        return self.end is not None

    def value(self) -> Timestamp:
        """Build the inactive timestamp this clock was written with."""
        if self.end is None:
            return Timestamp(
                TimestampKind.INACTIVE,
                start=self.start,
                repeater=self.repeater,
                delay=self.delay,
            )
        return Timestamp(
            TimestampKind.INACTIVE_RANGE,
            start=self.start,
            end=self.end,
            repeater=self.repeater,
            delay=self.delay,
        )