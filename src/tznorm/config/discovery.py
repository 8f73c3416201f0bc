"""Locate and load ``tznorm.toml``.

Lookup order: the ``TZNORM_CONFIG`` env var (an explicit file, no
fallback), then a walk up from the starting directory to the filesystem
root, the way git finds ``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from tznorm.config.models import TznormConfig

CONFIG_FILENAME = "tznorm.toml"
CONFIG_ENV_VAR = "TZNORM_CONFIG"


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be read as TOML."""


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``tznorm.toml`` at or above *start*, or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, object]:
    """Parse *path* as TOML.

    Raises:
        ConfigError: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> TznormConfig:
    """Validate the discovered (or given) config file; defaults when absent."""
    target = path or find_config(cwd)
    if target is None:
        return TznormConfig()
    return TznormConfig.model_validate(read_toml(target))
