"""Use Case: Contact Store.

Owns the in-memory contact collection and writes the full snapshot through
a ``ContactRepositoryPort`` after every mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from uuid import UUID, uuid4

from contact_manager.application.change_notifier import ChangeNotifier
from contact_manager.domain.errors import (
    ContactNotFoundError,
    PersistenceReadError,
    PersistenceWriteError,
    StorageNotFoundError,
)
from contact_manager.domain.models.contact import Contact
from contact_manager.domain.models.contact_book import ContactBook
from contact_manager.domain.ports.contact_repository import ContactRepositoryPort

logger = logging.getLogger(__name__)

ContactsObserver = Callable[[tuple[Contact, ...]], None]


class ContactStore:
    """Add / edit / delete / search over a write-through contact collection.

    The collection is loaded once on construction. A failed write is logged
    and kept in :attr:`last_error`; the in-memory collection stays the source
    of truth until a later write succeeds.
    """

    def __init__(self, repository: ContactRepositoryPort) -> None:
        self._repository = repository
        self._book = ContactBook()
        self._notifier: ChangeNotifier[tuple[Contact, ...]] = ChangeNotifier()
        self.last_error: PersistenceWriteError | None = None
        self.load()

    # -- Persistence ---------------------------------------------------------

    def load(self) -> None:
        """Replace the collection with the stored one.

        Any read failure leaves the collection empty. A backend with nothing
        stored yet is the normal first run and is only logged at debug level.
        """
        try:
            self._book = ContactBook(contacts=self._repository.load())
        except StorageNotFoundError as exc:
            logger.debug("No stored contacts: %s", exc)
            self._book = ContactBook()
        except PersistenceReadError as exc:
            logger.warning("Failed to load contacts: %s", exc)
            self._book = ContactBook()
        self._notifier.notify(self._book.snapshot())

    def persist(self) -> bool:
        """Write the full collection. Returns ``False`` if the write failed."""
        try:
            self._repository.save(self._book.snapshot())
        except PersistenceWriteError as exc:
            logger.warning("Failed to save contacts: %s", exc)
            self.last_error = exc
            return False
        self.last_error = None
        return True

    # -- CRUD ----------------------------------------------------------------

    def add(self, name: str, phone_number: str, email: str, address: str) -> Contact:
        """Create a contact with a fresh id and append it."""
        contact = Contact(
            id=uuid4(),
            name=name,
            phone_number=phone_number,
            email=email,
            address=address,
        )
        self._book.append(contact)
        self._commit()
        return contact

    def edit(
        self,
        contact_id: UUID,
        new_name: str,
        new_phone_number: str,
        new_email: str,
        new_address: str,
    ) -> None:
        """Overwrite the fields of *contact_id*; unknown ids are ignored."""
        updated = self._book.replace(
            contact_id, new_name, new_phone_number, new_email, new_address
        )
        if updated is None:
            logger.debug("edit: no contact with id %s", contact_id)
            return
        self._commit()

    def delete(self, contact_id: UUID) -> None:
        """Remove *contact_id*; unknown ids are ignored."""
        if not self._book.remove(contact_id):
            logger.debug("delete: no contact with id %s", contact_id)
            return
        self._commit()

    def search(self, query: str) -> list[Contact]:
        """Case-insensitive name search; ``""`` returns every contact."""
        return self._book.search(query)

    # -- Lookup --------------------------------------------------------------

    def find(self, contact_id: UUID) -> Contact | None:
        return self._book.find(contact_id)

    def get(self, contact_id: UUID) -> Contact:
        """Return *contact_id* or raise :class:`ContactNotFoundError`."""
        contact = self._book.find(contact_id)
        if contact is None:
            raise ContactNotFoundError(f"No contact with id {contact_id}.")
        return contact

    @property
    def contacts(self) -> tuple[Contact, ...]:
        """Read-only snapshot of the collection in insertion order."""
        return self._book.snapshot()

    def __len__(self) -> int:
        return len(self._book.contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._book.snapshot())

    # -- Observers -----------------------------------------------------------

    def subscribe(self, callback: ContactsObserver) -> Callable[[], None]:
        """Call *callback* with the new snapshot after every change."""
        return self._notifier.subscribe(callback)

    def _commit(self) -> None:
        self.persist()
        self._notifier.notify(self._book.snapshot())
