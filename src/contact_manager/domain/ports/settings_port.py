"""Port (ABC) for the key-value settings area.

Domain layer interface; infrastructure provides the concrete implementation.
Values are either numbers or opaque binary blobs; a key that was never
written is reported as ``None``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

SettingValue = float | bytes


class SettingsStorePort(ABC):
    """Abstract interface for reading and writing preference entries."""

    @abstractmethod
    def get_number(self, key: str) -> float | None:
        """Return the number stored under *key*, or ``None`` if absent.

        Raises:
            PersistenceReadError: If the stored value is not a number or the
                backend cannot be read.
        """

    @abstractmethod
    def get_blob(self, key: str) -> bytes | None:
        """Return the blob stored under *key*, or ``None`` if absent.

        Raises:
            PersistenceReadError: If the stored value is not a blob or the
                backend cannot be read.
        """

    @abstractmethod
    def write(self, entries: Mapping[str, SettingValue]) -> None:
        """Store all *entries* in a single write, keeping other keys.

        Raises:
            PersistenceWriteError: If the backend cannot be written.
        """
