"""RenderService — display rendering and wall-clock localization."""

from __future__ import annotations

from datetime import datetime

from tznorm.domain.instants import (
    InvalidTimestampError,
    WallTimeKind,
    coerce_instant,
    coerce_wall_time,
    localize,
    to_local_iso,
    to_wire,
    wall_time_kind,
)
from tznorm.domain.types import FormatMode
from tznorm.domain.zones import coerce_zone
from tznorm.services.base import BaseService
from tznorm.services.picker import schedule_wall_time
from tznorm.services.result import ServiceResult, failure


class RenderService(BaseService):
    """Render instants for display and turn picker input into instants."""

    def show(
        self,
        instant: str,
        *,
        mode: FormatMode | str | None = None,
        now: str | None = None,
        show_timezone: bool | None = None,
    ) -> ServiceResult:
        """Render *instant* in the active zone, with its full tooltip form."""
        op = "show"
        try:
            moment = coerce_instant(instant)
            reference = coerce_instant(now) if now is not None else None
        except InvalidTimestampError as exc:
            return failure(op, "INVALID_TIMESTAMP", str(exc), value=instant)

        rendered = self._session.display().render(
            moment, mode, show_timezone=show_timezone, now=reference
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "instant": to_wire(moment),
                "mode": str(rendered.mode),
                "text": rendered.text,
                "tooltip": rendered.tooltip,
            },
            meta=self._meta(),
        )

    def localize(self, wall_time: str | datetime, *, schedule: bool = False) -> ServiceResult:
        """Resolve a wall-clock time in the active zone to a UTC instant.

        With *schedule*, *wall_time* must be a compact ``YYYYMMDDHHMI`` stamp.
        """
        op = "localize"
        try:
            wall = schedule_wall_time(str(wall_time)) if schedule else coerce_wall_time(wall_time)
        except InvalidTimestampError as exc:
            return failure(op, "INVALID_TIMESTAMP", str(exc), value=str(wall_time))

        zone = coerce_zone(self._session.timezone)
        try:
            instant = localize(wall, zone)
            kind = wall_time_kind(wall, zone)
        except OverflowError as exc:
            return failure(op, "INVALID_TIMESTAMP", str(exc), value=str(wall_time))
        stamp = wall.isoformat(sep=" ")
        warnings: list[str] = []
        if kind is WallTimeKind.NONEXISTENT:
            warnings.append(f"{stamp} does not exist in {zone.key}; shifted past the gap")
        elif kind is WallTimeKind.AMBIGUOUS:
            warnings.append(f"{stamp} occurs twice in {zone.key}; using the earlier one")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "wall_time": stamp,
                "instant": to_wire(instant),
                "local": to_local_iso(instant, zone),
                "kind": str(kind),
            },
            warnings=warnings,
            meta=self._meta(),
        )
