"""TemporalFormatter — render a UTC instant for humans in a given zone.

Each :class:`FormatMode` maps to one fixed pattern.  Month names are a
fixed English table so output never depends on the process locale.

============  ================================
Mode          Example (America/New_York)
============  ================================
``date``      ``01 Jan 2025``
``time``      ``19:00``
``datetime``  ``31 Dec 2024, 19:00``
``full``      ``31 Dec 2024, 19:00:00 EST``
``relative``  ``3 minutes ago``
============  ================================

Presentation never raises: an instant that cannot be read is echoed back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from tznorm.domain.instants import InvalidTimestampError, coerce_instant
from tznorm.domain.types import FormatMode
from tznorm.domain.zones import coerce_zone

logger = logging.getLogger(__name__)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def _date_part(local: datetime) -> str:
    return f"{local.day:02d} {MONTHS[local.month - 1]} {local.year:04d}"


def render_local(local: datetime, mode: FormatMode) -> str:
    """Render an already-projected local datetime with a fixed pattern."""
    if mode is FormatMode.DATE:
        return _date_part(local)
    if mode is FormatMode.TIME:
        return f"{local.hour:02d}:{local.minute:02d}"
    if mode is FormatMode.DATETIME:
        return f"{_date_part(local)}, {local.hour:02d}:{local.minute:02d}"
    if mode is FormatMode.FULL:
        abbrev = local.tzname() or ""
        clock = f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        return f"{_date_part(local)}, {clock} {abbrev}".rstrip()
    msg = f"Mode {mode!r} is not an absolute pattern"
    raise ValueError(msg)


def format_instant(
    instant: str | datetime,
    mode: FormatMode | str,
    tz: str | ZoneInfo,
    *,
    now: str | datetime | None = None,
    clock: Clock = utc_now,
) -> str:
    """Format *instant* for display in *tz*.

    The instant is projected using the zone's offset at that instant, so
    DST is honoured.  ``relative`` delegates to :func:`format_relative`
    using *now* (or *clock* when *now* is omitted).
    """
    mode = FormatMode(mode)
    try:
        moment = coerce_instant(instant)
    except InvalidTimestampError:
        logger.debug("Cannot format unparseable instant %r", instant)
        return str(instant)

    zone = coerce_zone(tz)
    if mode is FormatMode.RELATIVE:
        from tznorm.services.relative import format_relative

        reference = clock() if now is None else now
        try:
            return format_relative(moment, reference, tz=zone)
        except InvalidTimestampError:
            logger.debug("Cannot compare against unparseable reference %r", reference)
            return str(instant)
    try:
        return render_local(moment.astimezone(zone), mode)
    except OverflowError:
        logger.debug("Instant %r cannot be projected into %s", instant, zone.key)
        return str(instant)


def format_full(instant: str | datetime, tz: str | ZoneInfo) -> str:
    """The precise hover/tooltip form of *instant*."""
    return format_instant(instant, FormatMode.FULL, tz)
