"""Contact Manager: a personal contact list with persisted display preferences.

- domain: Contact, ContactBook, Color, Preferences, errors, ports.
- application: ContactStore, PreferenceStore (write-through, observable).
- infrastructure: JSON contacts file and JSON key-value settings file.
"""

__version__ = "0.1.0"
