# src/rapgod/tasks/dates.py

"""
Date/time parsing with ordered fallback.

Supported inputs, in priority order:
1. dd/MM/yyyy HHmm    "02/12/2024 1800"
2. dd/MM/yyyy         "02/12/2024" (pattern 1 with " 0000" appended, i.e. midnight)
3. MMM dd yyyy        "Dec 02 2024" (midnight)
4. MMM dd yyyy h:mma  "Dec 2 2024 6:00pm" (hour without zero padding)
5. MMM dd yyyy hh:mma "Dec 02 2024 06:00pm"

The first pattern that matches wins. The order is part of the contract:
reordering would silently reinterpret inputs that fit more than one pattern.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, time

from .errors import InvalidDateFormat

logger = logging.getLogger(__name__)

MIDNIGHT_SUFFIX = " 0000"

_MONTH = r"[A-Za-z]{3}"
_DAY = r"\d{1,2}"
_YEAR = r"\d{4}"
_AMPM = r"[AaPp][Mm]"


def _same_text(text: str) -> str:
    return text


def _same_value(value: datetime) -> datetime:
    return value


def _append_midnight(text: str) -> str:
    return text + MIDNIGHT_SUFFIX


def _start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


@dataclass(frozen=True, slots=True)
class DateTimePattern:
    """
    One fallback attempt.

    `regex` guards the shape (field widths, padding) before strptime runs,
    since strptime alone accepts both padded and unpadded numbers.
    """

    name: str
    regex: re.Pattern[str]
    strptime_format: str
    prepare: Callable[[str], str] = _same_text
    normalize: Callable[[datetime], datetime] = _same_value

    def try_parse(self, text: str) -> datetime | None:
        candidate = self.prepare(text)
        if not self.regex.fullmatch(candidate):
            return None
        try:
            value = datetime.strptime(candidate, self.strptime_format)
        except ValueError:
            return None
        return self.normalize(value)


_NUMERIC = re.compile(r"\d{2}/\d{2}/\d{4} \d{4}")

DATE_TIME_PATTERNS: tuple[DateTimePattern, ...] = (
    DateTimePattern("dd/MM/yyyy HHmm", _NUMERIC, "%d/%m/%Y %H%M"),
    DateTimePattern(
        "dd/MM/yyyy", _NUMERIC, "%d/%m/%Y %H%M", prepare=_append_midnight
    ),
    DateTimePattern(
        "MMM dd yyyy",
        re.compile(rf"{_MONTH} {_DAY} {_YEAR}"),
        "%b %d %Y",
        normalize=_start_of_day,
    ),
    DateTimePattern(
        "MMM dd yyyy h:mma",
        re.compile(rf"{_MONTH} {_DAY} {_YEAR} (?:[1-9]|1[0-2]):\d{{2}}{_AMPM}"),
        "%b %d %Y %I:%M%p",
    ),
    DateTimePattern(
        "MMM dd yyyy hh:mma",
        re.compile(rf"{_MONTH} {_DAY} {_YEAR} (?:0[1-9]|1[0-2]):\d{{2}}{_AMPM}"),
        "%b %d %Y %I:%M%p",
    ),
)

INVALID_DATE_MESSAGE = (
    "Invalid date or time format. Please use formats like 'dd/MM/yyyy HHmm' or 'MMM dd yyyy'."
)


def parse_date_time(text: str | None) -> datetime:
    """Parse `text` with the first matching pattern or raise InvalidDateFormat."""
    if text is None:
        raise InvalidDateFormat(INVALID_DATE_MESSAGE)

    cleaned = text.strip()
    for pattern in DATE_TIME_PATTERNS:
        value = pattern.try_parse(cleaned)
        if value is not None:
            logger.debug("Parsed %r with pattern %r -> %s", cleaned, pattern.name, value)
            return value

    raise InvalidDateFormat(INVALID_DATE_MESSAGE)


def format_date_time(value: datetime) -> str:
    """
    Render a point in time the way display and storage lines show it.

    Midnight renders as a bare date ("Dec 02 2024"), anything else adds a
    12-hour clock ("Dec 02 2024 6:00pm"). Both shapes parse back to `value`
    (minus seconds).
    """
    # %Y does not zero-pad years below 1000, but the parser wants four digits.
    day = f"{value.strftime('%b %d')} {value.year:04d}"
    if value.time() == time.min:
        return day
    hour = value.hour % 12 or 12
    suffix = "am" if value.hour < 12 else "pm"
    return f"{day} {hour}:{value.minute:02d}{suffix}"
