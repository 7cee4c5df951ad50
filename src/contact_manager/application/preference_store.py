"""Use Case: Preference Store.

Restores the font size and background color at startup and writes both
entries to the settings area on every change.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from contact_manager.application.change_notifier import ChangeNotifier
from contact_manager.domain.errors import (
    ColorDecodingError,
    ColorEncodingError,
    PersistenceReadError,
    PersistenceWriteError,
)
from contact_manager.domain.models.preferences import (
    DEFAULT_FONT_SIZE,
    FONT_SIZE_UNSET,
    Color,
    Preferences,
    decode_color,
    encode_color,
)
from contact_manager.domain.ports.settings_port import SettingsStorePort, SettingValue

logger = logging.getLogger(__name__)

FONT_SIZE_KEY = "fontSize"
BACKGROUND_COLOR_KEY = "backgroundColor"

PreferencesObserver = Callable[[Preferences], None]


class PreferenceStore:
    """Write-through store for :class:`Preferences`.

    Parameters
    ----------
    settings : SettingsStorePort
        Key-value area holding ``fontSize`` and ``backgroundColor``.
    """

    def __init__(self, settings: SettingsStorePort) -> None:
        self._settings = settings
        self._preferences = Preferences()
        self._notifier: ChangeNotifier[Preferences] = ChangeNotifier()
        self.last_error: PersistenceWriteError | None = None
        self.load()

    # -- Public API ----------------------------------------------------------

    def load(self) -> None:
        """Read both entries; each falls back to its default on its own."""
        self._preferences = Preferences(
            font_size=self._load_font_size(),
            background_color=self._load_background_color(),
        )
        self._notifier.notify(self._preferences)

    def set_font_size(self, value: float) -> None:
        """Store *value*; NaN and infinities are rejected with ``ValueError``."""
        size = float(value)
        if not math.isfinite(size):
            raise ValueError(f"Font size must be a finite number, got {value!r}")
        self._update(font_size=size)

    def set_background_color(self, color: Color) -> None:
        self._update(background_color=color)

    def persist(self) -> bool:
        """Write both entries. Returns ``False`` if the write failed.

        A color that cannot be encoded is left out of the write, so the
        stored color stays at its last saved value.
        """
        entries: dict[str, SettingValue] = {FONT_SIZE_KEY: self._preferences.font_size}
        try:
            entries[BACKGROUND_COLOR_KEY] = encode_color(self._preferences.background_color)
        except ColorEncodingError as exc:
            logger.debug("Skipping background color: %s", exc)

        try:
            self._settings.write(entries)
        except PersistenceWriteError as exc:
            logger.warning("Failed to save preferences: %s", exc)
            self.last_error = exc
            return False
        self.last_error = None
        return True

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    @property
    def font_size(self) -> float:
        return self._preferences.font_size

    @property
    def background_color(self) -> Color:
        return self._preferences.background_color

    def subscribe(self, callback: PreferencesObserver) -> Callable[[], None]:
        """Call *callback* with the new :class:`Preferences` after every change."""
        return self._notifier.subscribe(callback)

    # -- Internals -----------------------------------------------------------

    def _update(self, **changes: object) -> None:
        self._preferences = self._preferences.model_copy(update=changes)
        self.persist()
        self._notifier.notify(self._preferences)

    def _load_font_size(self) -> float:
        try:
            stored = self._settings.get_number(FONT_SIZE_KEY)
        except PersistenceReadError as exc:
            logger.warning("Failed to load font size: %s", exc)
            return DEFAULT_FONT_SIZE
        if stored is None or stored == FONT_SIZE_UNSET:
            return DEFAULT_FONT_SIZE
        return stored

    def _load_background_color(self) -> Color:
        try:
            blob = self._settings.get_blob(BACKGROUND_COLOR_KEY)
        except PersistenceReadError as exc:
            logger.warning("Failed to load background color: %s", exc)
            return Color.white()
        if blob is None:
            return Color.white()
        try:
            return decode_color(blob)
        except ColorDecodingError as exc:
            logger.warning("Stored background color is unreadable: %s", exc)
            return Color.white()
