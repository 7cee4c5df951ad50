"""Domain errors — custom exceptions for Contact Manager.

These exceptions are raised by infrastructure adapters and domain services
and caught by the application or presentation layers. They carry no
infrastructure dependencies.
"""


class ContactManagerError(Exception):
    """Base exception for all Contact Manager errors."""


class PersistenceError(ContactManagerError):
    """Raised when a persistence backend cannot be read or written."""


class PersistenceReadError(PersistenceError):
    """Raised when stored state is missing, corrupt, or undecodable."""


class StorageNotFoundError(PersistenceReadError):
    """Raised when the backend holds no stored state yet."""


class PersistenceWriteError(PersistenceError):
    """Raised when a snapshot cannot be written to its backend."""


class ColorEncodingError(ContactManagerError, ValueError):
    """Raised when a color cannot be encoded into a settings blob."""


class ColorDecodingError(ContactManagerError, ValueError):
    """Raised when a settings blob does not decode to a color."""


class ContactNotFoundError(ContactManagerError):
    """Raised when a contact cannot be found by identifier."""


class ConfigurationError(ContactManagerError):
    """Raised when configuration is invalid or missing."""
