"""Conversion between the local civil zone and UTC."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from .global_config import LOCAL_LABEL, LOCAL_TZ
from .utils import format_local_display, format_rfc3339, get_zone, local_naive_to_utc

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    """Conversion direction, keyed by its menu choice."""

    LOCAL_TO_UTC = "1"
    UTC_TO_LOCAL = "2"


@dataclass(frozen=True)
class ConversionResult:
    """Both representations of one instant, for display only."""

    direction: Direction
    utc: datetime
    local: datetime
    tz: str = LOCAL_TZ
    label: str = LOCAL_LABEL

    @property
    def utc_line(self) -> str:
        return f"UTC: {format_rfc3339(self.utc)}"

    @property
    def local_line(self) -> str:
        return f"{self.label}: {format_local_display(self.local, tz=self.tz)}"

    def lines(self) -> list[str]:
        """Return the display lines, the converted-to side first.

        LOCAL_TO_UTC prints UTC then local; UTC_TO_LOCAL prints local then UTC.
        """
        if self.direction is Direction.LOCAL_TO_UTC:
            return [self.utc_line, self.local_line]
        return [self.local_line, self.utc_line]


def convert(
    ndt: datetime,
    direction: Direction,
    *,
    tz: str = LOCAL_TZ,
    label: str = LOCAL_LABEL,
) -> ConversionResult:
    """Convert a naive wall-clock time in the chosen direction.

    Args:
        ndt: Naive datetime produced by the parser.
        direction: LOCAL_TO_UTC reads `ndt` as wall-clock time in `tz`;
            UTC_TO_LOCAL reads it as UTC wall-clock time.
        tz: IANA zone on the local side. Defaults to LOCAL_TZ.
        label: Display label for the local line.

    Returns:
        ConversionResult holding the aware UTC and local datetimes.

    Raises:
        NonexistentLocalTimeError: LOCAL_TO_UTC only, `ndt` is in a gap.
        AmbiguousLocalTimeError: LOCAL_TO_UTC only, `ndt` is in an overlap.
    """
    if direction is Direction.LOCAL_TO_UTC:
        utc = local_naive_to_utc(ndt, tz=tz)
    else:
        utc = ndt.replace(tzinfo=UTC)
    local = utc.astimezone(get_zone(tz))

    logger.debug(
        "Converted %s (%s): utc=%s local=%s",
        ndt.isoformat(sep=" "),
        direction.name,
        utc.isoformat(),
        local.isoformat(),
    )
    return ConversionResult(
        direction=direction, utc=utc, local=local, tz=tz, label=label
    )
