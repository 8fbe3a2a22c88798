"""Canonical time and zone utilities.

This module provides the single source of truth for zone handling:
- The "now" seam (`utc_now`) every civil-date helper goes through
- Civil date helpers (today's date as observed in a declared zone)
- DST-safe naive timestamp resolution with an explicit three-way outcome
- Display formatting for UTC instants and local wall-clock times

Resolution is modelled as a tagged value (`Single`, `Nonexistent`, `Ambiguous`)
rather than an exception: a gap or an overlap is an expected result of zone
arithmetic. `local_naive_to_utc` is the caller-facing wrapper that turns the
two failure outcomes into errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from ..errors import AmbiguousLocalTimeError, NonexistentLocalTimeError
from ..global_config import LOCAL_TZ

LOCAL_DISPLAY_FORMAT = "%Y-%m-%d %H:%M %Z"


@dataclass(frozen=True)
class Single:
    """Exactly one instant corresponds to the naive local time."""

    local: datetime

    @property
    def utc(self) -> datetime:
        return self.local.astimezone(UTC)


@dataclass(frozen=True)
class Nonexistent:
    """The naive local time falls in a spring-forward gap."""


@dataclass(frozen=True)
class Ambiguous:
    """The naive local time falls in a fall-back overlap.

    Both candidate instants are kept in UTC, earliest first; neither is
    preferred. Local datetimes would compare equal here since same-zone
    comparison ignores `fold`.
    """

    earliest: datetime
    latest: datetime


LocalResolution = Single | Nonexistent | Ambiguous


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def get_zone(tz: str) -> ZoneInfo:
    """Return the ZoneInfo for a valid IANA timezone identifier.

    Args:
        tz: IANA timezone identifier (e.g., "Australia/Brisbane").

    Returns:
        ZoneInfo instance.

    Raises:
        ValueError: If tz is not a valid IANA zone.
    """
    if not isinstance(tz, str):
        raise ValueError(f"Expected string, got {type(tz).__name__}: {tz}")

    try:
        return ZoneInfo(tz)
    except Exception as e:
        raise ValueError(f"Invalid IANA timezone: {tz}") from e


def civil_today(*, tz: str = LOCAL_TZ) -> date:
    """Return today's civil date as observed in the given timezone.

    The date is derived from the current UTC instant, so it does not depend
    on the zone the process itself runs in.

    Args:
        tz: IANA timezone identifier. Defaults to LOCAL_TZ.

    Returns:
        Civil date in `tz`.
    """
    return utc_now().astimezone(get_zone(tz)).date()


def resolve_local(dt_naive: datetime, *, tz: str = LOCAL_TZ) -> LocalResolution:
    """Resolve a naive wall-clock time in a zone to zero, one or two instants.

    Interprets the naive datetime with both `fold` values and checks which of
    the resulting UTC instants convert back to the original wall-clock time.

    Args:
        dt_naive: Naive datetime (no timezone info).
        tz: IANA timezone identifier (e.g., "Australia/Brisbane").

    Returns:
        Single, Nonexistent or Ambiguous.

    Raises:
        ValueError: If dt_naive is aware or tz is not a valid IANA zone.
    """
    if dt_naive.tzinfo is not None:
        raise ValueError(
            f"Expected naive datetime, got timezone-aware: {dt_naive}"
        )

    zone = get_zone(tz)

    dt_fold0 = dt_naive.replace(tzinfo=zone, fold=0)
    dt_fold1 = dt_naive.replace(tzinfo=zone, fold=1)
    utc_fold0 = dt_fold0.astimezone(UTC)
    utc_fold1 = dt_fold1.astimezone(UTC)

    def matches_original(utc_dt: datetime) -> bool:
        """Check if UTC datetime converts back to original naive datetime."""
        return utc_dt.astimezone(zone).replace(tzinfo=None) == dt_naive

    if utc_fold0 != utc_fold1:
        if matches_original(utc_fold0) and matches_original(utc_fold1):
            earliest, latest = sorted((utc_fold0, utc_fold1))
            return Ambiguous(earliest=earliest, latest=latest)
        return Nonexistent()

    if not matches_original(utc_fold0):
        return Nonexistent()

    return Single(local=utc_fold0.astimezone(zone))


def local_naive_to_utc(dt_naive: datetime, *, tz: str = LOCAL_TZ) -> datetime:
    """Convert a naive local datetime to UTC, with DST ambiguity checks.

    Args:
        dt_naive: Naive datetime (no timezone info).
        tz: IANA timezone identifier.

    Returns:
        Tz-aware UTC datetime.

    Raises:
        AmbiguousLocalTimeError: If local time is ambiguous (DST fall-back).
        NonexistentLocalTimeError: If local time does not exist (DST spring-forward).
        ValueError: If tz is not a valid IANA zone.
    """
    resolution = resolve_local(dt_naive, tz=tz)
    iso_str = dt_naive.isoformat(sep=" ", timespec="minutes")

    if isinstance(resolution, Nonexistent):
        raise NonexistentLocalTimeError(
            f"Non-existent local time: {iso_str} in {tz}"
        )
    if isinstance(resolution, Ambiguous):
        raise AmbiguousLocalTimeError(
            f"Ambiguous local time: {iso_str} in {tz} "
            f"(could be {format_rfc3339(resolution.earliest)} "
            f"or {format_rfc3339(resolution.latest)})"
        )
    return resolution.utc


def format_rfc3339(dt: datetime) -> str:
    """Format an aware datetime as an RFC 3339 UTC instant.

    Seconds precision with an explicit zero offset, e.g.
    `2025-09-22T11:00:00+00:00`.

    Raises:
        ValueError: If dt is naive.
    """
    if dt.tzinfo is None:
        raise ValueError(
            f"Cannot format naive datetime {dt}. "
            "Provide timezone context or use local_naive_to_utc() first."
        )
    return dt.astimezone(UTC).isoformat(timespec="seconds")


def format_local_display(dt: datetime, *, tz: str = LOCAL_TZ) -> str:
    """Format an aware datetime as local wall-clock time with zone abbreviation.

    This is a view-only operation; e.g. `2025-09-22 21:00 AEST`.

    Raises:
        ValueError: If dt is naive.
    """
    if dt.tzinfo is None:
        raise ValueError("Cannot display naive datetime")
    return dt.astimezone(get_zone(tz)).strftime(LOCAL_DISPLAY_FORMAT)
