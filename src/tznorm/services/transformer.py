"""PayloadTransformer — convert timestamp leaves inside arbitrary JSON.

A structural, non-mutating walk: objects stay objects (key order kept),
arrays stay arrays (same length), and only leaves the classifier accepts
are replaced.  Array elements are classified under the key of the object
entry that holds the array; a bare root scalar is classified with an empty
key, so only strict ISO instants match there.

Direction semantics per matched leaf:

``toUTC``
    Strict ISO instants are normalised to wire form.  Zone-less values are
    wall-clock in *tz* and go through :func:`~tznorm.domain.instants.localize`.

``fromUTC``
    Strict ISO instants are projected into *tz*.  Zone-less values come
    from legacy endpoints and are read as UTC.  The result is local ISO
    with an explicit offset, or a display string when *display_mode* is
    given.

The walk is total: any leaf that fails to convert is passed through.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from tznorm.domain.classifier import DEFAULT_CONVENTIONS, KeyConventions, Reason, explain
from tznorm.domain.instants import (
    localize,
    parse_strict_iso,
    parse_wall_time,
    to_local_iso,
    to_wire,
)
from tznorm.domain.types import ConversionDirection, FormatMode, JSONValue
from tznorm.domain.zones import coerce_zone
from tznorm.services.formatter import format_instant

if TYPE_CHECKING:
    from tznorm.services.resolver import TimezoneResolver

logger = logging.getLogger(__name__)


def _read_instant(
    text: str, reason: Reason, direction: ConversionDirection, zone: ZoneInfo
) -> datetime | None:
    """Interpret a matched leaf as an aware instant, or None."""
    if reason is Reason.STRICT_ISO:
        return parse_strict_iso(text)
    wall = parse_wall_time(text)
    if wall is None:
        return None
    if direction is ConversionDirection.TO_UTC:
        return localize(wall, zone)
    return wall.replace(tzinfo=UTC)


def convert_leaf(
    value: str,
    reason: Reason,
    direction: ConversionDirection,
    zone: ZoneInfo,
    display_mode: FormatMode | None = None,
) -> str:
    """Convert one classified leaf, returning *value* unchanged on failure."""
    try:
        instant = _read_instant(value.strip(), reason, direction, zone)
        if instant is None:
            logger.debug("Leaving unparseable timestamp untouched: %r", value)
            return value
        if direction is ConversionDirection.TO_UTC:
            return to_wire(instant)
        if display_mode is not None:
            return format_instant(instant, display_mode, zone)
        return to_local_iso(instant, zone)
    except (ValueError, OverflowError):
        # Out-of-range years near datetime.min/max cannot shift zones.
        logger.debug("Timestamp %r is out of convertible range", value)
        return value


def transform(
    value: JSONValue,
    direction: ConversionDirection | str,
    tz: str | ZoneInfo,
    *,
    conventions: KeyConventions = DEFAULT_CONVENTIONS,
    display_mode: FormatMode | str | None = None,
) -> JSONValue:
    """Return a copy of *value* with timestamp leaves converted.

    Args:
        value: An already-parsed JSON value (dict, list, or scalar).
        direction: ``toUTC`` for outgoing bodies, ``fromUTC`` for incoming.
        tz: Active IANA zone.  Unknown zones fall back to UTC.
        conventions: Key-name rules for zone-less values.
        display_mode: ``fromUTC`` only; render leaves with this pattern
            instead of local ISO.  ``relative`` is not supported here
            because payload conversion must not depend on the wall clock.
    """
    direction = ConversionDirection(direction)
    mode = FormatMode(display_mode) if display_mode is not None else None
    if mode is FormatMode.RELATIVE:
        logger.warning("Relative display mode is not valid for payloads, using datetime")
        mode = FormatMode.DATETIME
    zone = coerce_zone(tz)

    def visit(node: JSONValue, key: str) -> JSONValue:
        if isinstance(node, dict):
            return {k: visit(v, k) for k, v in node.items()}
        if isinstance(node, list):
            return [visit(item, key) for item in node]
        if not isinstance(node, str):
            return node
        decision = explain(key, node, conventions)
        if not decision.matched:
            if decision.reason is Reason.UNPARSEABLE:
                logger.debug("Key %r looks temporal but value did not parse", key)
            return node
        return convert_leaf(node, decision.reason, direction, zone, mode)

    return visit(value, "")


class PayloadTransformer:
    """Transformer bound to a session's resolver and key conventions.

    Every call re-reads :meth:`TimezoneResolver.resolve`, so an
    invalidated preference takes effect on the next payload.
    """

    def __init__(
        self,
        resolver: TimezoneResolver,
        *,
        conventions: KeyConventions = DEFAULT_CONVENTIONS,
        display_mode: FormatMode | None = None,
    ) -> None:
        self._resolver = resolver
        self._conventions = conventions
        self._display_mode = display_mode

    def transform(self, value: JSONValue, direction: ConversionDirection | str) -> JSONValue:
        return transform(
            value,
            direction,
            self._resolver.resolve(),
            conventions=self._conventions,
            display_mode=self._display_mode if direction == ConversionDirection.FROM_UTC else None,
        )

    def to_utc(self, value: JSONValue) -> JSONValue:
        """Outgoing request body: local input to wire format."""
        return self.transform(value, ConversionDirection.TO_UTC)

    def from_utc(self, value: JSONValue) -> JSONValue:
        """Incoming response body: wire format to local-ready values."""
        return self.transform(value, ConversionDirection.FROM_UTC)
