"""Tests for the display adapter."""

from __future__ import annotations

from datetime import UTC, datetime

from tznorm.domain.types import FormatMode
from tznorm.services.display import DisplayAdapter
from tznorm.services.resolver import TimezoneResolver

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=UTC)
NY = "America/New_York"


def _adapter(**kwargs: object) -> DisplayAdapter:
    return DisplayAdapter(TimezoneResolver.fixed(NY), clock=lambda: NOW, **kwargs)


class TestRender:
    def test_default_mode_with_tooltip(self) -> None:
        rendered = _adapter().render("2025-01-01T00:00:00Z")
        assert rendered.text == "31 Dec 2024, 19:00"
        assert rendered.tooltip == "31 Dec 2024, 19:00:00 EST"
        assert rendered.timezone == NY
        assert rendered.mode is FormatMode.DATETIME

    def test_configured_default_mode(self) -> None:
        rendered = _adapter(default_mode=FormatMode.DATE).render("2025-01-01T00:00:00Z")
        assert rendered.text == "31 Dec 2024"

    def test_show_timezone(self) -> None:
        rendered = _adapter().render("2025-01-01T00:00:00Z", "time", show_timezone=True)
        assert rendered.text == "19:00 (America/New_York)"

    def test_configured_show_timezone_can_be_overridden(self) -> None:
        rendered = _adapter(show_timezone=True).render(
            "2025-01-01T00:00:00Z", "time", show_timezone=False
        )
        assert rendered.text == "19:00"

    def test_relative_uses_clock(self) -> None:
        rendered = _adapter(show_timezone=True).render("2025-06-15T11:57:00Z", "relative")
        assert rendered.text == "3 minutes ago"
        assert rendered.tooltip == "15 Jun 2025, 07:57:00 EDT"

    def test_relative_with_explicit_now(self) -> None:
        rendered = _adapter().render(
            "2025-06-15T11:57:00Z", FormatMode.RELATIVE, now="2025-06-15T13:57:00Z"
        )
        assert rendered.text == "2 hours ago"

    def test_unparseable_echoed(self) -> None:
        rendered = _adapter().render("n/a")
        assert rendered.text == "n/a"
        assert rendered.tooltip == "n/a"

    def test_relative_before_zone_range(self) -> None:
        rendered = _adapter().render(
            "0001-01-01T00:00:00Z", "relative", now="2025-01-01T00:00:00Z"
        )
        assert rendered.text == "0001-01-01T00:00:00.000Z"
        assert rendered.tooltip == "0001-01-01T00:00:00Z"
