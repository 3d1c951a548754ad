"""
store — in-memory contact collection with whole-list persistence.

Public API
──────────
ContactFields        — editable fields (create/update input, CSV parse output)
ContactRecord        — frozen dataclass representing one saved contact
PersistencePort      — abstract get/set of a named text blob
InMemoryPersistence  — dict-backed port
JsonFilePersistence  — one JSON file per key
ContactStore         — create / update / delete / list / CSV import-export
"""

from contact_saver.store.models import ContactFields, ContactRecord
from contact_saver.store.persistence import (
    InMemoryPersistence,
    JsonFilePersistence,
    PersistencePort,
)
from contact_saver.store.store import ContactStore

__all__ = [
    "ContactFields",
    "ContactRecord",
    "PersistencePort",
    "InMemoryPersistence",
    "JsonFilePersistence",
    "ContactStore",
]
