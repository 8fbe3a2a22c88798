"""Input parsing and normalization.

Turns the raw command-line text into a naive datetime:
- A bare `HH:MM` is a time "today", as observed in the local civil zone
- Otherwise `HH:MM` plus a date in one of four fixed layouts
- Two-digit years are mapped into 1969-2068 before the date is validated
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, time

from .errors import InvalidTimeError, UnrecognizedFormatError
from .global_config import LOCAL_TZ, TWO_DIGIT_YEAR_PIVOT
from .utils import civil_today

logger = logging.getLogger(__name__)

# Bare time: exactly two ASCII digits, colon, two ASCII digits, nothing else.
# Range is checked separately so that "24:00" is reported as an invalid time
# rather than an unknown format.
TIME_ONLY_PATTERN = re.compile(r"(?P<hour>\d{2}):(?P<minute>\d{2})", re.ASCII)

UNRECOGNIZED_FORMAT_MESSAGE = (
    "Unrecognized format. Try: HH:MM or HH:MM dd-mm-yy|yyyy or HH:MM dd/mm/yy|yyyy"
)


@dataclass(frozen=True)
class DateTimeLayout:
    """One accepted `HH:MM <date>` layout.

    The separator and the year width fully determine the layout, so two
    layouts can never match the same string.
    """

    pattern: str
    separator: str
    year_width: int

    @property
    def regex(self) -> re.Pattern[str]:
        sep = re.escape(self.separator)
        return re.compile(
            r"(?P<hour>\d{2}):(?P<minute>\d{2}) "
            rf"(?P<day>\d{{2}}){sep}(?P<month>\d{{2}}){sep}"
            rf"(?P<year>\d{{{self.year_width}}})",
            re.ASCII,
        )


# Tried in order; the first match wins.
DATETIME_LAYOUTS: tuple[DateTimeLayout, ...] = (
    DateTimeLayout("HH:MM dd-mm-yyyy", "-", 4),  # 21:00 22-09-2025
    DateTimeLayout("HH:MM dd-mm-yy", "-", 2),  # 21:00 22-09-25
    DateTimeLayout("HH:MM dd/mm/yyyy", "/", 4),  # 21:00 22/09/2025
    DateTimeLayout("HH:MM dd/mm/yy", "/", 2),  # 21:00 22/09/25
)


def map_two_digit_year(year: int) -> int:
    """Map a two-digit year onto a four-digit one.

    0-68 -> 2000-2068, 69-99 -> 1969-1999. Any other value is returned
    unchanged.
    """
    if 0 <= year < TWO_DIGIT_YEAR_PIVOT:
        return 2000 + year
    if TWO_DIGIT_YEAR_PIVOT <= year <= 99:
        return 1900 + year
    return year


def match_layout(raw: str) -> tuple[DateTimeLayout, re.Match[str]] | None:
    """Return the first layout whose shape matches `raw`, with its match."""
    for layout in DATETIME_LAYOUTS:
        match = layout.regex.fullmatch(raw)
        if match:
            return layout, match
    return None


def _parse_time_only(raw: str, *, tz: str) -> datetime | None:
    match = TIME_ONLY_PATTERN.fullmatch(raw)
    if match is None:
        return None

    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    try:
        tod = time(hour, minute)
    except ValueError as e:
        raise InvalidTimeError(f"Invalid time: {raw} (expected 00:00-23:59)") from e

    today = civil_today(tz=tz)
    logger.debug("Time-only input %s, using today's date in %s: %s", raw, tz, today)
    return datetime.combine(today, tod)


def _parse_time_and_date(raw: str) -> datetime:
    found = match_layout(raw)
    if found is None:
        raise UnrecognizedFormatError(UNRECOGNIZED_FORMAT_MESSAGE)

    layout, match = found
    year = int(match.group("year"))
    if 0 <= year <= 99:
        mapped = map_two_digit_year(year)
        logger.debug("Mapped two-digit year %02d to %d", year, mapped)
        year = mapped

    try:
        dt = datetime(
            year,
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
        )
    except ValueError as e:
        raise UnrecognizedFormatError(
            f"{UNRECOGNIZED_FORMAT_MESSAGE} ({raw!r} matches {layout.pattern} "
            f"but is not a valid date/time: {e})"
        ) from e

    logger.debug("Parsed %r with layout %s -> %s", raw, layout.pattern, dt)
    return dt


def parse_input(raw: str, *, tz: str = LOCAL_TZ) -> datetime:
    """Parse raw command-line text into a naive datetime.

    A bare `HH:MM` is tried first and short-circuits on success; its date is
    today's civil date in `tz`. Anything else must match one of
    DATETIME_LAYOUTS.

    Args:
        raw: Command-line arguments joined by a single space.
        tz: Zone whose civil date "today" refers to. Defaults to LOCAL_TZ.

    Returns:
        Naive datetime with seconds set to zero.

    Raises:
        InvalidTimeError: If a bare HH:MM is out of range.
        UnrecognizedFormatError: If no layout matches, or the matched
            fields are not a valid calendar date and time.
    """
    dt = _parse_time_only(raw, tz=tz)
    if dt is not None:
        return dt
    return _parse_time_and_date(raw)
