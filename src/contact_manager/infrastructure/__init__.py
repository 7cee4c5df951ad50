"""Infrastructure layer: file-backed adapters for the domain ports."""

from contact_manager.infrastructure.config.settings_store import JsonSettingsStore
from contact_manager.infrastructure.persistence.json_repository import JsonContactRepository

__all__ = [
    "JsonContactRepository",
    "JsonSettingsStore",
]
