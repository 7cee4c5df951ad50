"""Domain models: public API.

Provides convenient imports for the most commonly used domain entities.
"""

from contact_manager.domain.models.contact import Contact
from contact_manager.domain.models.contact_book import ContactBook
from contact_manager.domain.models.preferences import (
    DEFAULT_FONT_SIZE,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    FONT_SIZE_UNSET,
    Color,
    Preferences,
    decode_color,
    encode_color,
)

__all__ = [
    # Contacts
    "Contact",
    "ContactBook",
    # Preferences
    "Color",
    "Preferences",
    "DEFAULT_FONT_SIZE",
    "FONT_SIZE_MAX",
    "FONT_SIZE_MIN",
    "FONT_SIZE_UNSET",
    "decode_color",
    "encode_color",
]
