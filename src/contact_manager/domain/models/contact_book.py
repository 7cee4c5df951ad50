"""Ordered contact collection.

This module belongs to the Domain layer. Identity lookups are linear scans;
personal contact lists are small enough that no index is kept.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from contact_manager.domain.models.contact import Contact


class ContactBook(BaseModel):
    """Insertion-ordered collection of contacts with unique ids.

    Provides:
    - Append-only ordering (removal is the only reordering)
    - In-place field replacement by id
    - Name search
    """

    contacts: list[Contact] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> ContactBook:
        seen: set[UUID] = set()
        for contact in self.contacts:
            if contact.id in seen:
                raise ValueError(f"Duplicate contact id: {contact.id}")
            seen.add(contact.id)
        return self

    # -- Lookup --------------------------------------------------------------

    def index_of(self, contact_id: UUID) -> int | None:
        """Return the position of *contact_id*, or ``None``."""
        for index, contact in enumerate(self.contacts):
            if contact.id == contact_id:
                return index
        return None

    def find(self, contact_id: UUID) -> Contact | None:
        index = self.index_of(contact_id)
        return None if index is None else self.contacts[index]

    # -- Mutation ------------------------------------------------------------

    def append(self, contact: Contact) -> None:
        """Append *contact* at the end of the collection."""
        if self.index_of(contact.id) is not None:
            raise ValueError(f"Duplicate contact id: {contact.id}")
        self.contacts.append(contact)

    def replace(
        self,
        contact_id: UUID,
        name: str,
        phone_number: str,
        email: str,
        address: str,
    ) -> Contact | None:
        """Overwrite the fields of *contact_id* in place.

        Returns the updated contact, or ``None`` when the id is unknown.
        """
        index = self.index_of(contact_id)
        if index is None:
            return None
        updated = self.contacts[index].with_details(name, phone_number, email, address)
        self.contacts[index] = updated
        return updated

    def remove(self, contact_id: UUID) -> int:
        """Remove every contact with *contact_id* and return how many went."""
        before = len(self.contacts)
        self.contacts = [c for c in self.contacts if c.id != contact_id]
        return before - len(self.contacts)

    # -- Query ---------------------------------------------------------------

    def search(self, query: str) -> list[Contact]:
        """Return contacts whose name contains *query*, ignoring case.

        An empty query returns the whole collection in insertion order.
        """
        if not query:
            return list(self.contacts)
        return [c for c in self.contacts if c.matches_name(query)]

    def snapshot(self) -> tuple[Contact, ...]:
        return tuple(self.contacts)
