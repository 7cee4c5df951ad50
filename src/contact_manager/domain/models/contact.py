"""Contact domain model.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (uuid)
- Pydantic (pragmatic exception for validation and serialization)
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """A single address-book record.

    Instances are immutable: editing a contact produces a copy with the same
    ``id`` (see :meth:`with_details`). Every field is required, so a stored
    record without an ``id`` is rejected instead of being given a new one.
    The on-disk field names follow the contacts file format (``phoneNumber``);
    both spellings are accepted when loading.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID
    name: str
    phone_number: str = Field(alias="phoneNumber")
    email: str
    address: str

    def with_details(
        self,
        name: str,
        phone_number: str,
        email: str,
        address: str,
    ) -> Contact:
        """Return a copy carrying new mutable fields and the same ``id``."""
        return self.model_copy(
            update={
                "name": name,
                "phone_number": phone_number,
                "email": email,
                "address": address,
            }
        )

    def matches_name(self, query: str) -> bool:
        """Case-insensitive substring match against ``name`` only."""
        return query.lower() in self.name.lower()

    def to_record(self) -> dict[str, Any]:
        """Return the JSON-safe record written to the contacts file."""
        return self.model_dump(mode="json", by_alias=True)
