"""Configuration loader for Contact Manager.

Loads an optional JSON configuration file and returns a validated
``AppConfig`` instance. Uses module-level caching so each file is only
parsed once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from contact_manager.config.models import AppConfig
from contact_manager.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, AppConfig] = {}


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load and validate the app config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file. If ``None``, built-in defaults are used.

    Returns
    -------
    AppConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist or its content does not match the schema.
    """
    if path is None:
        return AppConfig()

    config_path = Path(path)
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = AppConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    _config_cache[cache_key] = config
    return config


def clear_cache() -> None:
    """Clear the config cache (used by tests)."""
    _config_cache.clear()
