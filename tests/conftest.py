"""Shared pytest fixtures for tznorm tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
import tzlocal
from click.testing import CliRunner

from tznorm.services.resolver import TimezoneResolver
from tznorm.services.session import TimeSession

FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host configuration and the host's local zone out of every test."""
    monkeypatch.delenv("TZNORM_CONFIG", raising=False)
    monkeypatch.delenv("TZNORM_TZ", raising=False)
    monkeypatch.delenv("TZNORM_TIMEZONE__PREFERENCE", raising=False)
    monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: "UTC")


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo the handler swap done by configure_logging during a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package = logging.getLogger("tznorm")
    package_level = package.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(package_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run from an empty directory so no tznorm.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def session_for() -> Callable[[str], TimeSession]:
    """Factory for sessions pinned to one zone with a frozen clock."""

    def build(tz: str) -> TimeSession:
        return TimeSession(TimezoneResolver.fixed(tz), clock=lambda: FIXED_NOW)

    return build


@pytest.fixture
def ny_session(session_for: Callable[[str], TimeSession]) -> TimeSession:
    return session_for("America/New_York")
