"""JSON repository: implements ContactRepositoryPort with a single file.

The file holds a JSON array of contact records and is rewritten in full on
every save.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from contact_manager.domain.errors import (
    PersistenceReadError,
    PersistenceWriteError,
    StorageNotFoundError,
)
from contact_manager.domain.models.contact import Contact
from contact_manager.domain.models.contact_book import ContactBook
from contact_manager.domain.ports.contact_repository import ContactRepositoryPort
from contact_manager.infrastructure.persistence.atomic import write_json_atomic

logger = logging.getLogger(__name__)


class JsonContactRepository(ContactRepositoryPort):
    """Persist contacts as a JSON array at *path*."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Absolute path to the contacts JSON file."""
        return self._path

    def save(self, contacts: Sequence[Contact]) -> None:
        """Serialize *contacts* and atomically replace the file."""
        data = [contact.to_record() for contact in contacts]
        try:
            write_json_atomic(self._path, data)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceWriteError(
                f"Could not write contacts to {self._path}: {exc}"
            ) from exc
        logger.debug("Saved %d contacts to %s", len(data), self._path)

    def load(self) -> list[Contact]:
        """Load the contact array from the file."""
        if not self._path.exists():
            raise StorageNotFoundError(f"Contacts file not found: {self._path}")
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceReadError(
                f"Could not read contacts from {self._path}: {exc}"
            ) from exc
        if not isinstance(raw, list):
            raise PersistenceReadError(f"Unexpected JSON format in {self._path}")
        try:
            book = ContactBook.model_validate({"contacts": raw})
        except ValidationError as exc:
            raise PersistenceReadError(
                f"Invalid contact records in {self._path}: {exc}"
            ) from exc
        return book.contacts
