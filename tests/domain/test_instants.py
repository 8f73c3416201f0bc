"""Tests for instant parsing, wire rendering, and localization."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from tznorm.domain.instants import (
    InvalidTimestampError,
    WallTimeKind,
    coerce_instant,
    coerce_wall_time,
    localize,
    parse_strict_iso,
    parse_wall_time,
    to_local_iso,
    to_wall_time,
    to_wire,
    wall_time_kind,
)

NY = ZoneInfo("America/New_York")


class TestParseStrictIso:
    def test_z_suffix(self) -> None:
        assert parse_strict_iso("2025-06-01T12:00:00.000Z") == datetime(2025, 6, 1, 12, tzinfo=UTC)

    def test_colon_offset(self) -> None:
        assert parse_strict_iso("2025-06-01T12:00:00+05:30") == datetime(
            2025, 6, 1, 6, 30, tzinfo=UTC
        )

    def test_compact_offset(self) -> None:
        assert parse_strict_iso("2025-06-01T12:00:00-0400") == datetime(
            2025, 6, 1, 16, 0, tzinfo=UTC
        )

    def test_nanosecond_fraction_truncated(self) -> None:
        parsed = parse_strict_iso("2025-06-01T12:00:00.123456789Z")
        assert parsed is not None
        assert parsed.microsecond == 123456

    def test_result_is_utc(self) -> None:
        parsed = parse_strict_iso("2025-06-01T12:00:00+02:00")
        assert parsed is not None
        assert parsed.tzinfo is UTC

    @pytest.mark.parametrize(
        "text",
        [
            "2025-06-01T12:00:00",
            "2025-06-01 12:00:00Z",
            "2025-06-01",
            "2025-02-30T00:00:00Z",
            "2025-06-01T25:00:00Z",
            "0001-01-01T00:00:00+01:00",
            "yesterday",
            "",
        ],
    )
    def test_rejects(self, text: str) -> None:
        assert parse_strict_iso(text) is None


class TestParseWallTime:
    def test_day_first_legacy(self) -> None:
        assert parse_wall_time("01-02-2025 10:00:00") == datetime(2025, 2, 1, 10, 0)

    def test_year_first_space(self) -> None:
        assert parse_wall_time("2025-02-01 10:00:00") == datetime(2025, 2, 1, 10, 0)

    def test_picker_output_without_seconds(self) -> None:
        assert parse_wall_time("2025-02-01T10:00") == datetime(2025, 2, 1, 10, 0)

    def test_picker_output_with_millis(self) -> None:
        assert parse_wall_time("2025-02-01T10:00:05.250") == datetime(2025, 2, 1, 10, 0, 5, 250000)

    def test_date_only_is_midnight(self) -> None:
        assert parse_wall_time("2025-02-01") == datetime(2025, 2, 1)

    @pytest.mark.parametrize(
        "text",
        ["31-02-2025 10:00:00", "2025-13-01", "Dubai Festival City Mall", "2025-06-01T12:00:00Z"],
    )
    def test_rejects(self, text: str) -> None:
        assert parse_wall_time(text) is None


class TestCoerce:
    def test_naive_datetime_is_utc(self) -> None:
        assert coerce_instant(datetime(2025, 1, 1)) == datetime(2025, 1, 1, tzinfo=UTC)

    def test_aware_datetime_is_converted(self) -> None:
        local = datetime(2025, 1, 1, 9, tzinfo=ZoneInfo("Asia/Tokyo"))
        assert coerce_instant(local) == datetime(2025, 1, 1, tzinfo=UTC)

    def test_zone_less_string_is_utc(self) -> None:
        assert coerce_instant("01-02-2025 10:00:00") == datetime(2025, 2, 1, 10, tzinfo=UTC)

    def test_garbage_raises(self) -> None:
        with pytest.raises(InvalidTimestampError):
            coerce_instant("not a time")

    def test_wall_time_rejects_instant_string(self) -> None:
        with pytest.raises(InvalidTimestampError):
            coerce_wall_time("2025-01-01T00:00:00Z")

    def test_wall_time_drops_zone(self) -> None:
        aware = datetime(2025, 1, 1, 9, tzinfo=UTC)
        assert coerce_wall_time(aware) == datetime(2025, 1, 1, 9)


class TestRendering:
    def test_to_wire(self) -> None:
        assert to_wire(datetime(2025, 1, 1, tzinfo=UTC)) == "2025-01-01T00:00:00.000Z"

    def test_to_wire_milliseconds(self) -> None:
        dt = datetime(2025, 1, 1, 0, 0, 0, 123999, tzinfo=UTC)
        assert to_wire(dt) == "2025-01-01T00:00:00.123Z"

    def test_to_wire_converts_aware(self) -> None:
        dt = datetime(2025, 1, 1, 5, 30, tzinfo=ZoneInfo("Asia/Kolkata"))
        assert to_wire(dt) == "2025-01-01T00:00:00.000Z"

    def test_to_local_iso_positive_offset(self) -> None:
        dt = datetime(2025, 1, 1, tzinfo=UTC)
        assert to_local_iso(dt, ZoneInfo("Asia/Kolkata")) == "2025-01-01T05:30:00.000+05:30"

    def test_to_local_iso_negative_offset(self) -> None:
        dt = datetime(2025, 1, 1, tzinfo=UTC)
        assert to_local_iso(dt, NY) == "2024-12-31T19:00:00.000-05:00"

    def test_to_wall_time(self) -> None:
        dt = datetime(2025, 7, 4, 16, tzinfo=UTC)
        assert to_wall_time(dt, NY) == datetime(2025, 7, 4, 12)


class TestLocalize:
    def test_ordinary_time(self) -> None:
        assert localize(datetime(2025, 7, 4, 12, 0), NY) == datetime(2025, 7, 4, 16, tzinfo=UTC)

    def test_spring_forward_gap_moves_to_transition(self) -> None:
        """02:30 does not exist on 2025-03-09 in New York; 03:00 EDT is next."""
        result = localize(datetime(2025, 3, 9, 2, 30), NY)
        assert result == datetime(2025, 3, 9, 7, 0, tzinfo=UTC)

    def test_gap_start_boundary(self) -> None:
        result = localize(datetime(2025, 3, 9, 2, 0), NY)
        assert result == datetime(2025, 3, 9, 7, 0, tzinfo=UTC)

    def test_after_gap_is_ordinary(self) -> None:
        result = localize(datetime(2025, 3, 9, 3, 0), NY)
        assert result == datetime(2025, 3, 9, 7, 0, tzinfo=UTC)

    def test_fall_back_overlap_prefers_earlier(self) -> None:
        """01:30 occurs twice on 2025-11-02; the EDT occurrence comes first."""
        result = localize(datetime(2025, 11, 2, 1, 30), NY)
        assert result == datetime(2025, 11, 2, 5, 30, tzinfo=UTC)

    def test_overlap_is_deterministic(self) -> None:
        results = {localize(datetime(2025, 11, 2, 1, 30), NY) for _ in range(5)}
        assert len(results) == 1

    def test_fold_on_input_is_ignored(self) -> None:
        wall = datetime(2025, 11, 2, 1, 30, fold=1)
        assert localize(wall, NY) == datetime(2025, 11, 2, 5, 30, tzinfo=UTC)

    def test_london_gap(self) -> None:
        result = localize(datetime(2025, 3, 30, 1, 30), ZoneInfo("Europe/London"))
        assert result == datetime(2025, 3, 30, 1, 0, tzinfo=UTC)

    def test_southern_hemisphere_gap(self) -> None:
        result = localize(datetime(2025, 10, 5, 2, 30), ZoneInfo("Australia/Sydney"))
        assert result == datetime(2025, 10, 4, 16, 0, tzinfo=UTC)

    def test_southern_hemisphere_overlap(self) -> None:
        result = localize(datetime(2025, 4, 6, 2, 30), ZoneInfo("Australia/Sydney"))
        assert result == datetime(2025, 4, 5, 15, 30, tzinfo=UTC)


class TestWallTimeKind:
    def test_exists(self) -> None:
        assert wall_time_kind(datetime(2025, 7, 4, 12), NY) is WallTimeKind.EXISTS

    def test_nonexistent(self) -> None:
        assert wall_time_kind(datetime(2025, 3, 9, 2, 30), NY) is WallTimeKind.NONEXISTENT

    def test_ambiguous(self) -> None:
        assert wall_time_kind(datetime(2025, 11, 2, 1, 30), NY) is WallTimeKind.AMBIGUOUS

    def test_utc_never_ambiguous(self) -> None:
        assert wall_time_kind(datetime(2025, 11, 2, 1, 30), ZoneInfo("UTC")) is WallTimeKind.EXISTS
