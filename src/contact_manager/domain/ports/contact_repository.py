"""Port: Contact repository, save/load the full contact collection."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from contact_manager.domain.models.contact import Contact


class ContactRepositoryPort(ABC):
    """Contract for persisting and retrieving the contact collection."""

    @abstractmethod
    def save(self, contacts: Sequence[Contact]) -> None:
        """Replace the stored collection with *contacts*.

        Raises:
            PersistenceWriteError: If the snapshot cannot be written.
        """
        ...

    @abstractmethod
    def load(self) -> list[Contact]:
        """Return the stored collection in its saved order.

        Raises:
            PersistenceReadError: If the backend is missing or undecodable.
        """
        ...
