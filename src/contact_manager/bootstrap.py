"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from contact_manager.application.contact_store import ContactStore
from contact_manager.application.preference_store import PreferenceStore
from contact_manager.config import AppConfig, load_config
from contact_manager.domain.ports.contact_repository import ContactRepositoryPort
from contact_manager.domain.ports.settings_port import SettingsStorePort
from contact_manager.infrastructure.config.settings_store import JsonSettingsStore
from contact_manager.infrastructure.persistence.json_repository import JsonContactRepository


class Container:
    """Simple dependency injection container.

    Wires the JSON adapters to the domain ports and builds the stores
    lazily, so each store loads its backend once.

    Usage::

        container = Container(data_dir=Path("/tmp/contacts"))
        store = container.contact_store
        store.add("Ann", "123", "ann@example.com", "Main St 1")
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        *,
        data_dir: Optional[Path] = None,
        config_dir: Optional[Path] = None,
    ) -> None:
        config = load_config(Path(config_path) if config_path else None)
        overrides = {}
        if data_dir is not None:
            overrides["data_dir"] = data_dir
        if config_dir is not None:
            overrides["config_dir"] = config_dir
        self._config: AppConfig = config.model_copy(update=overrides)

        # -- Infrastructure singletons ---------------------------------------
        self._repository = JsonContactRepository(self._config.contacts_path)
        self._settings_store = JsonSettingsStore(
            self._config.resolved_config_dir,
            filename=self._config.settings_filename,
        )

        self._contact_store: ContactStore | None = None
        self._preference_store: PreferenceStore | None = None

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def repository(self) -> ContactRepositoryPort:
        return self._repository

    @property
    def settings_store(self) -> SettingsStorePort:
        return self._settings_store

    # -- Stores --------------------------------------------------------------

    @property
    def contact_store(self) -> ContactStore:
        """The contact store (loaded on first access)."""
        if self._contact_store is None:
            self._contact_store = ContactStore(repository=self._repository)
        return self._contact_store

    @property
    def preference_store(self) -> PreferenceStore:
        """The preference store (loaded on first access)."""
        if self._preference_store is None:
            self._preference_store = PreferenceStore(settings=self._settings_store)
        return self._preference_store
