"""TimeSession — the explicit context object for one authenticated session.

Holds the session's :class:`TimezoneResolver` (the only mutable state in
the layer) together with the read-only options every adapter needs.
Nothing here is module-global: two sessions never share a cache.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tznorm.config.models import DisplayConfig, TransportConfig
from tznorm.domain.classifier import DEFAULT_CONVENTIONS, KeyConventions
from tznorm.domain.zones import detect_local_timezone
from tznorm.services.display import DisplayAdapter
from tznorm.services.formatter import Clock, utc_now
from tznorm.services.resolver import PreferenceSource, TimezoneResolver, ZoneDetector
from tznorm.services.transformer import PayloadTransformer
from tznorm.services.transport import Send, TransportAdapter

if TYPE_CHECKING:
    from tznorm.config.settings import TznormSettings


class TimeSession:
    """Session-scoped timezone context.

    Usage::

        session = TimeSession(TimezoneResolver(lambda: user.timezone))
        api = session.transport(http_send)
        api.post("/schedules", {"next_run_at": "2025-03-09 02:30"})
        session.preference_changed()   # after the profile is updated
    """

    def __init__(
        self,
        resolver: TimezoneResolver,
        *,
        conventions: KeyConventions = DEFAULT_CONVENTIONS,
        display: DisplayConfig | None = None,
        transport: TransportConfig | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.resolver = resolver
        self.conventions = conventions
        self.display_config = display or DisplayConfig()
        self.transport_config = transport or TransportConfig()
        self.clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: TznormSettings,
        *,
        preference: PreferenceSource | None = None,
        detector: ZoneDetector = detect_local_timezone,
        clock: Clock = utc_now,
    ) -> TimeSession:
        """Build a session from merged settings.

        *preference* overrides the settings-derived preference source, for
        hosts that read the user's profile themselves.
        """
        resolver = TimezoneResolver(
            preference or (lambda: settings.preference),
            detector=detector,
            fallback=settings.timezone.fallback,
            detect_local=settings.timezone.detect_local,
        )
        return cls(
            resolver,
            conventions=settings.classifier.conventions(),
            display=settings.display,
            transport=settings.transport,
            clock=clock,
        )

    @property
    def timezone(self) -> str:
        """The active zone for this session."""
        return self.resolver.resolve()

    def preference_changed(self) -> None:
        """Hook for the profile collaborator after a successful update."""
        self.resolver.invalidate()

    @property
    def transformer(self) -> PayloadTransformer:
        return PayloadTransformer(
            self.resolver,
            conventions=self.conventions,
            display_mode=self.transport_config.response_mode,
        )

    def display(self) -> DisplayAdapter:
        return DisplayAdapter(
            self.resolver,
            default_mode=self.display_config.default_mode,
            show_timezone=self.display_config.show_timezone,
            clock=self.clock,
        )

    def transport(self, send: Send) -> TransportAdapter:
        return TransportAdapter(
            send,
            self.transformer,
            convert_responses=self.transport_config.convert_responses,
        )
