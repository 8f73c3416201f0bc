"""DisplayAdapter — what a presentational time widget calls to render.

Every render produces the primary text in the requested mode and the
``full`` form for the hover tooltip, so a compact string always has a
precise one available on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from tznorm.domain.types import FormatMode
from tznorm.services.formatter import Clock, format_full, format_instant, utc_now

if TYPE_CHECKING:
    from tznorm.services.resolver import TimezoneResolver


@dataclass(frozen=True)
class RenderedTime:
    """Primary display text plus its tooltip."""

    text: str
    tooltip: str
    timezone: str
    mode: FormatMode


class DisplayAdapter:
    """Render instants in the session's active timezone."""

    def __init__(
        self,
        resolver: TimezoneResolver,
        *,
        default_mode: FormatMode = FormatMode.DATETIME,
        show_timezone: bool = False,
        clock: Clock = utc_now,
    ) -> None:
        self._resolver = resolver
        self._default_mode = default_mode
        self._show_timezone = show_timezone
        self._clock = clock

    def render(
        self,
        instant: str | datetime,
        mode: FormatMode | str | None = None,
        *,
        show_timezone: bool | None = None,
        now: str | datetime | None = None,
    ) -> RenderedTime:
        tz = self._resolver.resolve()
        mode = FormatMode(mode) if mode is not None else self._default_mode
        text = format_instant(instant, mode, tz, now=now, clock=self._clock)
        append_zone = self._show_timezone if show_timezone is None else show_timezone
        if append_zone and mode is not FormatMode.RELATIVE:
            text = f"{text} ({tz})"
        return RenderedTime(text=text, tooltip=format_full(instant, tz), timezone=tz, mode=mode)
