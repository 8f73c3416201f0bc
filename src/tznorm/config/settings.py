"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``TZNORM_*`` prefix, ``__`` for nested sections
               (``TZNORM_TIMEZONE__PREFERENCE=Europe/Paris``)
  3. TOML file: ``tznorm.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tznorm.config.discovery import ConfigError, find_config, read_toml
from tznorm.config.models import ClassifierConfig, DisplayConfig, TimezoneConfig, TransportConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``tznorm.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = dict(read_toml(toml_path))
            except ConfigError as exc:
                raise click.ClickException(str(exc)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is handed to settings_customise_sources during construction.
_tls = threading.local()


class TznormSettings(BaseSettings):
    """Frozen settings for the tznorm CLI, stored on the Click context.

    Attributes:
        tz: ``--tz`` override; takes the place of the stored preference.
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TZNORM_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    tz: str | None = None

    # --- TOML sections ---
    timezone: TimezoneConfig = Field(default_factory=TimezoneConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)

    @property
    def preference(self) -> str | None:
        """The zone the user asked for: ``--tz`` first, then config."""
        return self.tz or self.timezone.preference

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TznormSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when it names a file, otherwise discovers
        ``tznorm.toml`` by walking up from *start* (default: cwd).  Flags
        whose value is None are left to lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            candidate = Path(config_path)
            if candidate.is_file():
                toml_path = candidate
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
