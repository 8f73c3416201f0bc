"""ZoneService — inspect the active zone and the zone catalogue."""

from __future__ import annotations

from datetime import datetime

from tznorm.domain.instants import InvalidTimestampError, coerce_instant
from tznorm.domain.zones import (
    common_timezones,
    detect_local_timezone,
    is_valid_timezone,
    utc_offset_hours,
)
from tznorm.services.base import BaseService
from tznorm.services.result import ServiceResult, failure


class ZoneService(BaseService):
    """Timezone resolution and lookup operations."""

    def resolve(self) -> ServiceResult:
        """Report the active zone alongside the environment-detected one."""
        tz = self._session.timezone
        return ServiceResult(
            ok=True,
            op="zone_resolve",
            data={"timezone": tz, "detected": detect_local_timezone()},
        )

    def list_zones(self) -> ServiceResult:
        """The curated picker list."""
        zones = common_timezones()
        return ServiceResult(ok=True, op="zone_list", data={"items": zones, "count": len(zones)})

    def check(self, name: str) -> ServiceResult:
        """Validate an IANA identifier."""
        op = "zone_check"
        if not is_valid_timezone(name):
            return failure(op, "UNKNOWN_TIMEZONE", f"Unknown timezone: {name!r}", timezone=name)
        return ServiceResult(ok=True, op=op, data={"timezone": name, "valid": True})

    def offset(self, at: str | datetime | None = None) -> ServiceResult:
        """UTC offset of the active zone at an instant (default: now)."""
        op = "zone_offset"
        try:
            moment = coerce_instant(at) if at is not None else self._session.clock()
        except InvalidTimestampError as exc:
            return failure(op, "INVALID_TIMESTAMP", str(exc), value=str(at))
        tz = self._session.timezone
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "timezone": tz,
                "at": moment.isoformat(),
                "offset_hours": utc_offset_hours(tz, moment),
            },
        )
