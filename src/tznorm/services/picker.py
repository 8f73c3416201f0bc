"""Helpers for date/time picker input and schedule timestamps.

Unlike the payload walk these validate explicit user input, so malformed
values raise :class:`~tznorm.domain.instants.InvalidTimestampError`.
"""

from __future__ import annotations

import re
from datetime import datetime
from zoneinfo import ZoneInfo

from tznorm.domain.instants import (
    InvalidTimestampError,
    coerce_instant,
    coerce_wall_time,
    localize,
    to_wall_time,
    to_wire,
)
from tznorm.domain.types import FormatMode
from tznorm.domain.zones import coerce_zone
from tznorm.services.formatter import format_instant

_SCHEDULE = re.compile(r"^\d{12}$")
_FORM_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def wall_to_wire(value: str | datetime, tz: str | ZoneInfo) -> str:
    """Send a picker wall-clock value to the server as a UTC instant."""
    return to_wire(localize(coerce_wall_time(value), coerce_zone(tz)))


def parse_form_date(value: str, tz: str | ZoneInfo) -> str:
    """A ``YYYY-MM-DD`` picker date, as local midnight in *tz*, on the wire."""
    if not _FORM_DATE.match(value.strip()):
        msg = f"Expected YYYY-MM-DD, got {value!r}"
        raise InvalidTimestampError(msg)
    return wall_to_wire(value, tz)


def form_date(instant: str | datetime, tz: str | ZoneInfo) -> str:
    """The ``YYYY-MM-DD`` a picker should show for *instant* in *tz*."""
    return to_wall_time(coerce_instant(instant), coerce_zone(tz)).date().isoformat()


def schedule_wall_time(value: str) -> datetime:
    """Read a ``YYYYMMDDHHMI`` schedule stamp as a naive wall-clock time."""
    if not _SCHEDULE.match(value):
        msg = f"Invalid schedule timestamp {value!r}; expected YYYYMMDDHHMI"
        raise InvalidTimestampError(msg)
    try:
        return datetime.strptime(value, "%Y%m%d%H%M")
    except ValueError as exc:
        msg = f"Invalid schedule timestamp {value!r}: {exc}"
        raise InvalidTimestampError(msg) from exc


def parse_schedule_timestamp(value: str, tz: str | ZoneInfo) -> str:
    """Convert a local ``YYYYMMDDHHMI`` schedule stamp to a wire instant."""
    return to_wire(localize(schedule_wall_time(value), coerce_zone(tz)))


def format_schedule_timestamp(instant: str | datetime, tz: str | ZoneInfo) -> str:
    """Display form of a stored schedule instant."""
    return format_instant(instant, FormatMode.DATETIME, tz)
