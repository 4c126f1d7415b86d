"""Parsing of the ``date time`` strings found in ticket records.

Each accepted layout is a small parser that returns ``None`` when the text does
not fit it; :func:`parse_local_datetime` walks them in priority order and raises
:class:`DateTimeParseError` only after every layout has been tried.
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence, Tuple

LOGGER = logging.getLogger(__name__)

_CENTURY = 2000


class DateTimeParseError(ValueError):
    """Raised when a date/time string matches none of the accepted layouts."""

    def __init__(self, text: str, patterns: Sequence[str] = ()) -> None:
        super().__init__(f"Unable to parse date and time: {text}")
        self.text = text
        self.patterns: Tuple[str, ...] = tuple(patterns)


@dataclass(slots=True, frozen=True)
class DateTimeLayout:
    """A named ``dd.MM.yy`` layout backed by an anchored regular expression."""

    name: str
    regex: re.Pattern[str]

    def __call__(self, text: str) -> Optional[datetime]:
        match = self.regex.fullmatch(text)
        if match is None:
            return None
        day, month, year, hour, minute = (int(part) for part in match.groups())
        if not (1 <= day <= 31 and 1 <= month <= 12 and 0 <= minute <= 59):
            return None
        if hour > 24 or (hour == 24 and minute != 0):
            return None
        # a day past the month's end is pulled back to its last day
        day = min(day, calendar.monthrange(_CENTURY + year, month)[1])
        if hour == 24:
            return datetime(_CENTURY + year, month, day) + timedelta(days=1)
        return datetime(_CENTURY + year, month, day, hour, minute)


DATETIME_LAYOUTS: Tuple[Callable[[str], Optional[datetime]], ...] = (
    DateTimeLayout("dd.MM.yy H:mm", re.compile(r"([0-9]{2})\.([0-9]{2})\.([0-9]{2}) ([0-9]{1,2}):([0-9]{2})")),
    DateTimeLayout("dd.MM.yy HH:mm", re.compile(r"([0-9]{2})\.([0-9]{2})\.([0-9]{2}) ([0-9]{2}):([0-9]{2})")),
)


def parse_local_datetime(
    date_part: str,
    time_part: str,
    layouts: Sequence[Callable[[str], Optional[datetime]]] = DATETIME_LAYOUTS,
) -> datetime:
    """Join ``date_part`` and ``time_part`` and parse them with the first matching layout."""

    text = f"{date_part} {time_part}"
    for layout in layouts:
        parsed = layout(text)
        if parsed is not None:
            return parsed
    names = [getattr(layout, "name", repr(layout)) for layout in layouts]
    LOGGER.error("No date/time layout matched %r (tried %s)", text, ", ".join(names))
    raise DateTimeParseError(text, names)


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch, reading a naive ``value`` as local time."""

    return int(round(value.timestamp() * 1000))
