"""Tests for configuration section models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tznorm.config.models import (
    ClassifierConfig,
    DisplayConfig,
    TimezoneConfig,
    TransportConfig,
    TznormConfig,
)
from tznorm.domain.classifier import DEFAULT_CONVENTIONS
from tznorm.domain.types import FormatMode


class TestDefaults:
    def test_all_sections(self) -> None:
        config = TznormConfig()
        assert config.timezone == TimezoneConfig(preference=None, fallback="UTC", detect_local=True)
        assert config.display.default_mode is FormatMode.DATETIME
        assert config.display.show_timezone is False
        assert config.transport.convert_responses is True
        assert config.transport.response_mode is None

    def test_default_classifier_matches_builtin_conventions(self) -> None:
        assert ClassifierConfig().conventions() == DEFAULT_CONVENTIONS

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            TimezoneConfig().fallback = "Asia/Tokyo"  # type: ignore[misc]


class TestClassifierConfig:
    def test_values_normalised(self) -> None:
        config = ClassifierConfig(suffixes=[" _ON ", ""], exact_names=["When"])
        assert config.suffixes == ["_on"]
        assert config.exact_names == ["when"]

    def test_conventions(self) -> None:
        config = ClassifierConfig(suffixes=["_on"], substrings=[], exact_names=["when"])
        rules = config.conventions()
        assert rules.matches("Published_On")
        assert rules.matches("when")
        assert not rules.matches("created_at")


class TestDisplayConfig:
    def test_mode_from_string(self) -> None:
        assert DisplayConfig(default_mode="relative").default_mode is FormatMode.RELATIVE

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(default_mode="weekday")


class TestTransportConfig:
    def test_absolute_mode(self) -> None:
        assert TransportConfig(response_mode="full").response_mode is FormatMode.FULL

    def test_relative_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            TransportConfig(response_mode="relative")
