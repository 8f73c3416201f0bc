"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from tznorm.config.logging import configure_logging
from tznorm.domain.zones import coerce_zone


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("tznorm").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("tznorm").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("tznorm.test").warning("json test", tz="Asia/Tokyo")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["tz"] == "Asia/Tokyo"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tznorm.test"
        assert "timestamp" in parsed

    def test_stdlib_records_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        coerce_zone("Not/AZone")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Unknown timezone 'Not/AZone', using UTC"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tznorm.domain.zones"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("tznorm.services.transformer").debug("leaf skipped")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("tzlocal").debug("probing /etc/localtime")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
