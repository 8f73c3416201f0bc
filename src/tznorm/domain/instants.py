"""Instant parsing, wire rendering, and wall-clock localization.

Two kinds of temporal strings cross this module:

- **Instants** carry an explicit UTC marker or offset
  (``2025-01-01T00:00:00.000Z``).  They are absolute and zone-safe.
- **Wall times** carry no zone (``2025-03-09 02:30:00``, picker output,
  legacy ``DD-MM-YYYY HH:MM:SS``).  They only mean something once paired
  with a timezone.

INVARIANT: every string produced by :func:`to_wire` is UTC with a ``Z``
suffix and millisecond precision.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta
from enum import StrEnum
from zoneinfo import ZoneInfo


class InvalidTimestampError(ValueError):
    """Raised when explicit input cannot be read as an instant or wall time."""


class WallTimeKind(StrEnum):
    """How a wall-clock time maps onto instants in a given zone."""

    EXISTS = "exists"
    NONEXISTENT = "nonexistent"
    AMBIGUOUS = "ambiguous"


_STRICT_ISO = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<zone>Z|[+-]\d{2}:?\d{2})$"
)

# Secondary (zone-less) patterns, tried in order.
_DMY_DATETIME = re.compile(
    r"^(?P<day>\d{2})-(?P<month>\d{2})-(?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})$"
)
_YMD_DATETIME = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[ T]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?$"
)
_YMD_DATE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$")

_WALL_PATTERNS: tuple[re.Pattern[str], ...] = (_DMY_DATETIME, _YMD_DATETIME, _YMD_DATE)


def _microseconds(fraction: str | None) -> int:
    """Convert a fractional-second digit string to microseconds (truncating)."""
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _build(parts: dict[str, str | None]) -> datetime | None:
    """Build a naive datetime from regex groups, or None for impossible dates."""
    try:
        return datetime(
            int(parts["year"] or 0),
            int(parts["month"] or 0),
            int(parts["day"] or 0),
            int(parts.get("hour") or 0),
            int(parts.get("minute") or 0),
            int(parts.get("second") or 0),
            _microseconds(parts.get("fraction")),
        )
    except ValueError:
        return None


def _offset(zone: str) -> timedelta:
    if zone == "Z":
        return timedelta(0)
    sign = -1 if zone[0] == "-" else 1
    digits = zone[1:].replace(":", "")
    return sign * timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))


def parse_strict_iso(text: str) -> datetime | None:
    """Parse an ISO-8601 instant with an explicit UTC marker or offset.

    Returns an aware UTC datetime, or None when *text* does not match the
    strict pattern or names an impossible calendar date.

    Examples:
        >>> parse_strict_iso("2025-06-01T12:00:00.000Z")
        datetime.datetime(2025, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)
        >>> parse_strict_iso("2025-06-01 12:00:00") is None
        True
    """
    match = _STRICT_ISO.match(text)
    if match is None:
        return None
    naive = _build(match.groupdict())
    if naive is None:
        return None
    offset = _offset(match.group("zone"))
    if abs(offset) >= timedelta(hours=24):
        return None
    try:
        return (naive - offset).replace(tzinfo=UTC)
    except OverflowError:
        return None


def parse_wall_time(text: str) -> datetime | None:
    """Parse a zone-less date/time string into a naive datetime.

    Accepts ``DD-MM-YYYY HH:MM:SS``, ``YYYY-MM-DD HH:MM:SS``, picker output
    ``YYYY-MM-DDTHH:MM[:SS[.fff]]``, and date-only ``YYYY-MM-DD`` (midnight).
    """
    for pattern in _WALL_PATTERNS:
        match = pattern.match(text)
        if match is not None:
            return _build(match.groupdict())
    return None


def is_strict_iso(text: str) -> bool:
    """Whether *text* is a valid strict ISO-8601 instant."""
    return parse_strict_iso(text) is not None


def is_wall_time(text: str) -> bool:
    """Whether *text* is a valid calendar value under a secondary pattern."""
    return parse_wall_time(text) is not None


def coerce_instant(value: str | datetime) -> datetime:
    """Read *value* as an aware UTC instant.

    Naive datetimes and zone-less strings are taken to be UTC, matching the
    wire contract that the backend only ever stores UTC.

    Raises:
        InvalidTimestampError: If *value* is a string that matches no pattern.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    text = value.strip()
    parsed = parse_strict_iso(text)
    if parsed is not None:
        return parsed
    wall = parse_wall_time(text)
    if wall is not None:
        return wall.replace(tzinfo=UTC)
    msg = f"Not a recognisable timestamp: {value!r}"
    raise InvalidTimestampError(msg)


def coerce_wall_time(value: str | datetime | date) -> datetime:
    """Read *value* as a naive wall-clock datetime.

    Raises:
        InvalidTimestampError: If *value* is a string that matches no pattern.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    wall = parse_wall_time(value.strip())
    if wall is None:
        msg = f"Not a recognisable wall-clock time: {value!r}"
        raise InvalidTimestampError(msg)
    return wall


def to_wire(dt: datetime) -> str:
    """Render an instant as UTC ISO-8601 with milliseconds and ``Z``.

    Examples:
        >>> to_wire(datetime(2025, 1, 1, tzinfo=UTC))
        '2025-01-01T00:00:00.000Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    utc = dt.astimezone(UTC)
    return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def to_local_iso(dt: datetime, tz: ZoneInfo) -> str:
    """Render an instant as local ISO-8601 with an explicit numeric offset."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    local = dt.astimezone(tz)
    offset = local.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    stamp = local.replace(tzinfo=None).isoformat(timespec="milliseconds")
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"


def to_wall_time(instant: datetime, tz: ZoneInfo) -> datetime:
    """Project an instant into *tz* and drop the zone (naive wall time)."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(tz).replace(tzinfo=None, fold=0)


def _first_instant_after_gap(tz: ZoneInfo, lo: datetime, hi: datetime) -> datetime:
    """Bisect for the transition instant between two UTC bounds.

    *lo* carries the pre-transition offset and *hi* the post-transition one.
    Transitions fall on whole seconds, so integer bisection is exact.
    """
    target = hi.astimezone(tz).utcoffset()
    lo_ts = int(lo.timestamp())
    hi_ts = int(hi.timestamp())
    while hi_ts - lo_ts > 1:
        mid = (lo_ts + hi_ts) // 2
        if datetime.fromtimestamp(mid, UTC).astimezone(tz).utcoffset() == target:
            hi_ts = mid
        else:
            lo_ts = mid
    return datetime.fromtimestamp(hi_ts, UTC)


def localize(wall: datetime, tz: ZoneInfo) -> datetime:
    """Combine a wall-clock time with *tz* to produce a UTC instant.

    Uses the offset in force at that wall-clock moment, so DST is honoured.

    - Ambiguous times (fall-back overlap) resolve to the earlier occurrence,
      i.e. the pre-transition offset (``fold=0``).
    - Nonexistent times (spring-forward gap) resolve to the first valid
      instant after the gap, i.e. the transition itself.

    Both policies are deterministic: the same wall time always yields the
    same instant.
    """
    wall = wall.replace(tzinfo=None, fold=0)
    first = wall.replace(tzinfo=tz).astimezone(UTC)
    if to_wall_time(first, tz) == wall:
        return first

    second = wall.replace(tzinfo=tz, fold=1).astimezone(UTC)
    lo, hi = sorted((first, second))
    return _first_instant_after_gap(tz, lo, hi)


def wall_time_kind(wall: datetime, tz: ZoneInfo) -> WallTimeKind:
    """Whether *wall* exists once, never (gap), or twice (overlap) in *tz*."""
    wall = wall.replace(tzinfo=None, fold=0)
    first = wall.replace(tzinfo=tz).astimezone(UTC)
    if to_wall_time(first, tz) != wall:
        return WallTimeKind.NONEXISTENT
    second = wall.replace(tzinfo=tz, fold=1).astimezone(UTC)
    if first != second:
        return WallTimeKind.AMBIGUOUS
    return WallTimeKind.EXISTS
