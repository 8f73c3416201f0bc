"""Tests for relative time phrases."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tznorm.domain.instants import InvalidTimestampError
from tznorm.services.relative import format_relative

BASE = datetime(2025, 1, 1, tzinfo=UTC)


def _ago(seconds: float) -> str:
    return format_relative(BASE, BASE + timedelta(seconds=seconds))


class TestBuckets:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "just now"),
            (9.9, "just now"),
            (10, "10 seconds ago"),
            (59, "59 seconds ago"),
            (60, "1 minute ago"),
            (119, "1 minute ago"),
            (300, "5 minutes ago"),
            (3599, "59 minutes ago"),
            (3600, "1 hour ago"),
            (7200, "2 hours ago"),
            (86399, "23 hours ago"),
            (86400, "1 day ago"),
            (29 * 86400, "29 days ago"),
        ],
    )
    def test_past(self, seconds: float, expected: str) -> None:
        assert _ago(seconds) == expected

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (-5, "just now"),
            (-30, "in 30 seconds"),
            (-60, "in 1 minute"),
            (-3 * 3600, "in 3 hours"),
            (-2 * 86400, "in 2 days"),
        ],
    )
    def test_future(self, seconds: float, expected: str) -> None:
        assert _ago(seconds) == expected


class TestAbsoluteFallback:
    def test_thirty_days_is_absolute(self) -> None:
        assert _ago(30 * 86400) == "01 Jan 2025"

    def test_future_beyond_thirty_days(self) -> None:
        assert _ago(-45 * 86400) == "01 Jan 2025"

    def test_fallback_uses_zone(self) -> None:
        now = BASE + timedelta(days=31)
        assert format_relative(BASE, now, tz="America/New_York") == "31 Dec 2024"


class TestInputs:
    def test_strings(self) -> None:
        assert format_relative("2025-01-01T00:00:00Z", "2025-01-01T00:00:59Z") == "59 seconds ago"

    def test_offsets_are_normalised(self) -> None:
        result = format_relative("2025-01-01T05:30:00+05:30", "2025-01-01T00:02:00Z")
        assert result == "2 minutes ago"

    def test_fallback_before_zone_range_stays_utc(self) -> None:
        result = format_relative(
            "0001-01-01T00:00:00Z", "2025-01-01T00:00:00Z", tz="America/New_York"
        )
        assert result == "0001-01-01T00:00:00.000Z"

    def test_unparseable_reference_raises(self) -> None:
        with pytest.raises(InvalidTimestampError):
            format_relative("2025-01-01T00:00:00Z", "garbage")
