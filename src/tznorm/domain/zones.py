"""IANA timezone validation, loading, and local-zone detection.

Zone data is read through :mod:`zoneinfo`, backed by the ``tzdata``
package when the host has no system database.  Local-zone detection uses
``tzlocal``, which honours the ``TZ`` environment variable.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

logger = logging.getLogger(__name__)

UTC_ZONE = "UTC"

COMMON_TIMEZONES: tuple[tuple[str, str], ...] = (
    ("UTC", "UTC (Coordinated Universal Time)"),
    ("America/New_York", "Eastern Time (ET)"),
    ("America/Chicago", "Central Time (CT)"),
    ("America/Denver", "Mountain Time (MT)"),
    ("America/Los_Angeles", "Pacific Time (PT)"),
    ("Europe/London", "London (GMT/BST)"),
    ("Europe/Paris", "Paris (CET/CEST)"),
    ("Europe/Berlin", "Berlin (CET/CEST)"),
    ("Europe/Rome", "Rome (CET/CEST)"),
    ("Asia/Kolkata", "India Standard Time (IST)"),
    ("Asia/Shanghai", "China Standard Time (CST)"),
    ("Asia/Tokyo", "Japan Standard Time (JST)"),
    ("Asia/Dubai", "Gulf Standard Time (GST)"),
    ("Australia/Sydney", "Sydney (AEST/AEDT)"),
    ("Australia/Melbourne", "Melbourne (AEST/AEDT)"),
    ("Pacific/Auckland", "Auckland (NZST/NZDT)"),
)


class UnknownTimezoneError(ValueError):
    """Raised when a string is not a loadable IANA timezone identifier."""


@lru_cache(maxsize=256)
def _lookup(name: str) -> ZoneInfo | None:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # ValueError/OSError cover malformed keys such as "../etc" or "".
        return None


def is_valid_timezone(name: object) -> bool:
    """Whether *name* is a loadable IANA identifier. Never raises."""
    if not isinstance(name, str) or not name.strip():
        return False
    return _lookup(name.strip()) is not None


def load_zone(name: str) -> ZoneInfo:
    """Load a zone by IANA identifier.

    Raises:
        UnknownTimezoneError: If *name* is not a valid identifier.
    """
    zone = _lookup(name.strip()) if isinstance(name, str) and name.strip() else None
    if zone is None:
        msg = f"Unknown timezone: {name!r}"
        raise UnknownTimezoneError(msg)
    return zone


def coerce_zone(tz: str | ZoneInfo) -> ZoneInfo:
    """Return a usable zone for *tz*, falling back to UTC if it is unknown."""
    if isinstance(tz, ZoneInfo):
        return tz
    try:
        return load_zone(tz)
    except UnknownTimezoneError:
        logger.warning("Unknown timezone %r, using %s", tz, UTC_ZONE)
        return ZoneInfo(UTC_ZONE)


def detect_local_timezone() -> str | None:
    """Detect the runtime environment's IANA zone, or None if undetectable."""
    try:
        name = tzlocal.get_localzone_name()
    except Exception:
        logger.debug("Local timezone detection failed", exc_info=True)
        return None
    if name and is_valid_timezone(name):
        return name
    logger.debug("Detected local timezone %r is not a valid identifier", name)
    return None


def common_timezones() -> list[dict[str, str]]:
    """Curated picker list of ``{"value", "label"}`` entries."""
    return [{"value": value, "label": label} for value, label in COMMON_TIMEZONES]


def utc_offset_hours(tz: str | ZoneInfo, at: datetime | None = None) -> float:
    """UTC offset of *tz* in hours at instant *at* (default: now)."""
    moment = at or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    offset = moment.astimezone(coerce_zone(tz)).utcoffset()
    if offset is None:
        return 0.0
    return offset.total_seconds() / 3600
