"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``tznorm.toml`` only holds
overrides.  An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tznorm.domain.classifier import DEFAULT_CONVENTIONS, KeyConventions
from tznorm.domain.types import FormatMode


class TimezoneConfig(BaseModel):
    """[timezone] section."""

    model_config = {"frozen": True}

    preference: str | None = None
    fallback: str = "UTC"
    detect_local: bool = True


class ClassifierConfig(BaseModel):
    """[classifier] section: the closed key-name conventions."""

    model_config = {"frozen": True}

    suffixes: list[str] = Field(default_factory=lambda: list(DEFAULT_CONVENTIONS.suffixes))
    substrings: list[str] = Field(default_factory=lambda: list(DEFAULT_CONVENTIONS.substrings))
    exact_names: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_CONVENTIONS.exact_names)
    )

    @field_validator("suffixes", "substrings", "exact_names")
    @classmethod
    def _lowercase(cls, values: list[str]) -> list[str]:
        return [v.strip().lower() for v in values if v.strip()]

    def conventions(self) -> KeyConventions:
        """Build the classifier's frozen rule set from this section."""
        return KeyConventions(
            suffixes=tuple(self.suffixes),
            substrings=tuple(self.substrings),
            exact_names=frozenset(self.exact_names),
        )


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    default_mode: FormatMode = FormatMode.DATETIME
    show_timezone: bool = False


class TransportConfig(BaseModel):
    """[transport] section."""

    model_config = {"frozen": True}

    convert_responses: bool = True
    response_mode: FormatMode | None = None

    @field_validator("response_mode")
    @classmethod
    def _absolute_only(cls, value: FormatMode | None) -> FormatMode | None:
        if value is FormatMode.RELATIVE:
            msg = "response_mode must be an absolute format (date, time, datetime, full)"
            raise ValueError(msg)
        return value


class TznormConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    timezone: TimezoneConfig = Field(default_factory=TimezoneConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
