"""RelativeTimeFormatter — coarse "3 minutes ago" / "in 2 days" phrases.

``now`` is always passed in, never read here, so output is deterministic.

Buckets on ``|now - instant|`` (lower bound inclusive, counts floored):

- under 10s: ``just now``
- 10s to 1 minute: seconds
- 1 minute to 1 hour: minutes
- 1 hour to 1 day: hours
- 1 day to 30 days: days
- 30 days and beyond: the absolute ``date`` format
"""

from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from tznorm.domain.instants import coerce_instant, to_wire
from tznorm.domain.types import FormatMode
from tznorm.domain.zones import UTC_ZONE, coerce_zone
from tznorm.services.formatter import render_local

logger = logging.getLogger(__name__)

JUST_NOW_SECONDS = 10
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
ABSOLUTE_AFTER = 30 * DAY

_UNITS: tuple[tuple[int, str], ...] = (
    (DAY, "day"),
    (HOUR, "hour"),
    (MINUTE, "minute"),
    (1, "second"),
)


def _phrase(count: int, unit: str, *, future: bool) -> str:
    label = unit if count == 1 else f"{unit}s"
    if future:
        return f"in {count} {label}"
    return f"{count} {label} ago"


def format_relative(
    instant: str | datetime,
    now: str | datetime,
    *,
    tz: str | ZoneInfo = UTC_ZONE,
) -> str:
    """Describe *instant* relative to *now*.

    *tz* only matters for the absolute fallback at 30 days and beyond.

    Examples:
        >>> format_relative("2025-01-01T00:00:00Z", "2025-01-01T00:00:59Z")
        '59 seconds ago'
        >>> format_relative("2025-01-01T00:01:00Z", "2025-01-01T00:00:30Z")
        'in 30 seconds'
    """
    moment = coerce_instant(instant)
    reference = coerce_instant(now)
    delta = (reference - moment).total_seconds()
    magnitude = abs(delta)

    if magnitude < JUST_NOW_SECONDS:
        return "just now"
    if magnitude >= ABSOLUTE_AFTER:
        zone = coerce_zone(tz)
        try:
            return render_local(moment.astimezone(zone), FormatMode.DATE)
        except OverflowError:
            logger.debug("Instant %s cannot be projected into %s", moment, zone.key)
            return to_wire(moment)

    seconds = int(magnitude)
    for size, unit in _UNITS:
        if seconds >= size:
            return _phrase(seconds // size, unit, future=delta < 0)
    return "just now"
