"""Planning line (DEADLINE, SCHEDULED and CLOSED) that follows a headline."""

from __future__ import annotations

from dataclasses import dataclass

from orgkit.timestamp import Timestamp, parse_active, parse_inactive

_KEYWORDS = {
    "DEADLINE:": "deadline",
    "SCHEDULED:": "scheduled",
    "CLOSED:": "closed",
}


@dataclass
class Planning:
    """Timestamps attached to a headline by planning keywords."""

    deadline: Timestamp | None = None
    scheduled: Timestamp | None = None
    closed: Timestamp | None = None

    @classmethod
    def parse(cls, text: str) -> tuple[str, Planning] | None:
        """Parse a planning line; return the rest of the input and the planning."""
        newline = text.find("\n")
        if newline == -1:
            tail, rest = text.strip(), ""
        else:
            tail, rest = text[:newline].strip(), text[newline + 1 :]

        found: dict[str, Timestamp] = {}
        while (space := tail.find(" ")) != -1:
            attribute = _KEYWORDS.get(tail[:space])
            if attribute is None or attribute in found:
                return None
            following = tail[space + 1 :].lstrip()
            parsed = parse_active(following) or parse_inactive(following)
            if parsed is None:
                return None
            new_tail, stamp = parsed
            found[attribute] = stamp
            tail = new_tail.lstrip()

        if not found:
            return None
        return rest, cls(**found)