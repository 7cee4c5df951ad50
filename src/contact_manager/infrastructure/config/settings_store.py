"""Key-value preferences persisted as one JSON object.

Implements ``SettingsStorePort``. Numbers are stored as JSON numbers and
blobs as base64 strings, in ``preferences.json`` under the user config
directory (``platformdirs``) unless another directory is given.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import platformdirs

from contact_manager.domain.errors import PersistenceReadError, PersistenceWriteError
from contact_manager.domain.ports.settings_port import SettingsStorePort, SettingValue
from contact_manager.infrastructure.persistence.atomic import write_json_atomic

logger = logging.getLogger(__name__)

APP_NAME = "contact_manager"
SETTINGS_FILENAME = "preferences.json"


class JsonSettingsStore(SettingsStorePort):
    """Concrete implementation of :class:`SettingsStorePort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    filename : str
        Name of the settings file inside *config_dir*.
    """

    def __init__(
        self,
        config_dir: Path | None = None,
        filename: str = SETTINGS_FILENAME,
    ) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_path = self._config_dir / filename

    # -- Public API ----------------------------------------------------------

    def get_number(self, key: str) -> float | None:
        value = self._read().get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PersistenceReadError(f"Setting '{key}' is not a number: {value!r}")
        if not math.isfinite(value):
            raise PersistenceReadError(f"Setting '{key}' is not finite: {value!r}")
        return float(value)

    def get_blob(self, key: str) -> bytes | None:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise PersistenceReadError(f"Setting '{key}' is not a blob: {value!r}")
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise PersistenceReadError(f"Setting '{key}' is not valid base64") from exc

    def write(self, entries: Mapping[str, SettingValue]) -> None:
        """Merge *entries* into the file and replace it atomically."""
        try:
            data = self._read()
        except PersistenceReadError as exc:
            logger.warning("Overwriting unreadable settings file: %s", exc)
            data = {}
        for key, value in entries.items():
            if isinstance(value, bytes):
                data[key] = base64.b64encode(value).decode("ascii")
            else:
                data[key] = value
        try:
            write_json_atomic(self._settings_path, data)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceWriteError(
                f"Could not write settings to {self._settings_path}: {exc}"
            ) from exc

    @property
    def settings_path(self) -> Path:
        """Absolute path to the settings JSON file."""
        return self._settings_path

    # -- Internals -----------------------------------------------------------

    def _read(self) -> dict[str, Any]:
        if not self._settings_path.exists():
            return {}
        try:
            raw = json.loads(self._settings_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceReadError(
                f"Could not read settings from {self._settings_path}: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise PersistenceReadError(f"Unexpected JSON format in {self._settings_path}")
        return raw
