"""
ContactStore — owner of the in-memory contact collection and its persisted copy.

Usage::

    store = ContactStore(JsonFilePersistence("~/.contact-saver"))
    store.load()

    rec = store.create(ContactFields(name="Alice", location="https://maps.google.com/?q=1,2"))
    store.update(rec.id, ContactFields(name="Alice B.", location=rec.location))
    store.delete(rec.id)

    csv_text = store.export_csv()          # None when empty
    added = store.import_csv(csv_text)     # count of appended contacts

Every mutation builds a new list, writes the whole collection through the
PersistencePort, and only then swaps it in.  A failed write leaves the
in-memory collection exactly as it was.  Calls must be serialised by the host.
"""

import json
import logging
import secrets
import time
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from contact_saver.config import DEFAULT_STORAGE_KEY, StoreConfig
from contact_saver.exceptions import NotFoundError, PersistenceError, ValidationError
from contact_saver.store.models import ContactFields, ContactRecord
from contact_saver.store.persistence import JsonFilePersistence, PersistencePort

__all__ = ["ContactStore"]

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class ContactStore:
    """
    CRUD + CSV interface over one ordered contact collection.

    The collection is read once by load() and held in memory afterwards;
    ContactStore is the only writer of its storage key.
    """

    def __init__(self, port: PersistencePort, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._port = port
        self._key = key
        self._contacts: list[ContactRecord] = []

    @classmethod
    def from_config(cls, config: Optional[StoreConfig] = None) -> "ContactStore":
        """Build a store persisted as JSON under *config*.data_dir (env defaults if None)."""
        config = config or StoreConfig.from_env()
        return cls(JsonFilePersistence(config.data_dir), key=config.storage_key)

    # ── Internal helpers ──────────────────────────────────────────────────

    def _new_id(self, taken: set[str]) -> str:
        """Millisecond timestamp id, suffixed with random hex if already taken."""
        base = str(time.time_ns() // 1_000_000)
        candidate = base
        while candidate in taken:
            candidate = f"{base}-{secrets.token_hex(3)}"
        return candidate

    @staticmethod
    def _validate(contact: ContactFields) -> None:
        missing = contact.missing_required()
        if missing:
            raise ValidationError(missing)

    @staticmethod
    def _check_loaded(contacts: list[ContactRecord]) -> None:
        """Reject a persisted collection with duplicate ids or blank required fields."""
        seen: set[str] = set()
        for c in contacts:
            if c.id in seen:
                raise ValueError(f"Duplicate contact id {c.id!r}")
            seen.add(c.id)
            if c.to_fields().missing_required():
                raise ValueError(f"Contact {c.id!r} has blank required fields")

    def _commit(self, contacts: list[ContactRecord]) -> None:
        """Persist *contacts* and, only on success, make them the current collection."""
        blob = json.dumps([c.to_dict() for c in contacts], ensure_ascii=False)
        try:
            self._port.set(self._key, blob)
        except PersistenceError:
            logger.debug("persisting %d contact(s) failed", len(contacts), exc_info=True)
            raise
        except Exception as exc:
            logger.debug("persisting %d contact(s) failed", len(contacts), exc_info=True)
            raise PersistenceError(f"Failed to save contacts: {exc}") from exc
        self._contacts = contacts

    # ── Public API ────────────────────────────────────────────────────────

    def load(self) -> list[ContactRecord]:
        """
        Read the persisted collection into memory.

        Absent, unreadable or corrupt data yields an empty collection; this
        method never raises.

        Returns:
            The loaded contacts (a copy).
        """
        try:
            blob = self._port.get(self._key)
            if blob is None:
                contacts = []
            else:
                data = json.loads(blob)
                if not isinstance(data, list):
                    raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
                contacts = [ContactRecord.from_dict(item) for item in data]
                self._check_loaded(contacts)
        except Exception as exc:
            logger.warning("Could not load contacts, starting empty: %s", exc)
            contacts = []
        self._contacts = contacts
        logger.info("Loaded %d contact(s)", len(contacts))
        return list(contacts)

    def get(self, record_id: str) -> Optional[ContactRecord]:
        """Return the contact with *record_id*, or None if absent."""
        return next((c for c in self._contacts if c.id == record_id), None)

    def create(self, contact: ContactFields) -> ContactRecord:
        """
        Append a new contact and persist the collection.

        Raises:
            ValidationError: name or location is empty after trimming.
            PersistenceError: The write failed; the collection is unchanged.
        """
        self._validate(contact)
        record = ContactRecord.from_fields(
            record_id=self._new_id({c.id for c in self._contacts}),
            created_at=_now_iso(),
            contact=contact,
        )
        self._commit([*self._contacts, record])
        logger.info("Created contact %s", record.id)
        return record

    def update(self, record_id: str, contact: ContactFields) -> ContactRecord:
        """
        Replace the editable fields of *record_id*, keeping id, created_at and position.

        Raises:
            ValidationError: name or location is empty after trimming.
            NotFoundError: No contact has *record_id*.
            PersistenceError: The write failed; the collection is unchanged.
        """
        self._validate(contact)
        index = next((i for i, c in enumerate(self._contacts) if c.id == record_id), None)
        if index is None:
            raise NotFoundError(record_id)
        old = self._contacts[index]
        record = ContactRecord.from_fields(record_id=old.id, created_at=old.created_at, contact=contact)
        updated = list(self._contacts)
        updated[index] = record
        self._commit(updated)
        logger.info("Updated contact %s", record_id)
        return record

    def delete(self, record_id: str) -> bool:
        """
        Remove the contact with *record_id* if present.

        Returns:
            True if a contact was removed, False if the id was unknown
            (no write is issued in that case).

        Raises:
            PersistenceError: The write failed; the collection is unchanged.
        """
        remaining = [c for c in self._contacts if c.id != record_id]
        if len(remaining) == len(self._contacts):
            return False
        self._commit(remaining)
        logger.info("Deleted contact %s", record_id)
        return True

    def export_csv(self) -> Optional[str]:
        """Return the collection as CSV text, or None when there is nothing to export."""
        from contact_saver.csv_codec import serialize
        return serialize(self._contacts)

    def import_csv(self, text: str) -> int:
        """
        Append every valid CSV row as a new contact and persist once.

        Imported contacts get fresh ids, the current timestamp and no image.
        Existing contacts are never merged or deduplicated.

        Returns:
            Number of contacts imported; 0 (and no write) if no row was valid.

        Raises:
            PersistenceError: The write failed; the collection is unchanged.
        """
        from contact_saver.csv_codec import parse
        rows = parse(text)
        if not rows:
            logger.info("CSV import found no valid contacts")
            return 0
        taken = {c.id for c in self._contacts}
        created_at = _now_iso()
        imported: list[ContactRecord] = []
        for row in rows:
            record_id = self._new_id(taken)
            taken.add(record_id)
            imported.append(ContactRecord.from_fields(
                record_id=record_id,
                created_at=created_at,
                contact=replace(row, image_uri=""),
            ))
        self._commit([*self._contacts, *imported])
        logger.info("Imported %d contact(s) from CSV", len(imported))
        return len(imported)

    # Must stay last: signatures after it would resolve `list[...]` to this method.
    def list(self) -> tuple[ContactRecord, ...]:
        """Return the current collection in insertion order (immutable snapshot)."""
        return tuple(self._contacts)
