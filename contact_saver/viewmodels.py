"""
ViewModels — pure-Python state containers for a contact-saver UI.

No toolkit imports here; every class is testable without a display.
Widgets observe these objects and re-render from them.

Public API
──────────
FormMode               — enum: closed / creating / editing
ContactFormViewModel   — add/edit form state, capture helpers, save
ContactListViewModel   — record list shown on the main screen
"""

import logging
from dataclasses import fields as dc_fields
from enum import Enum
from typing import Optional

from contact_saver.capture.ports import CameraPort, LocationPort, maps_url
from contact_saver.store.models import ContactFields, ContactRecord
from contact_saver.store.store import ContactStore

__all__ = ["FormMode", "ContactFormViewModel", "ContactListViewModel"]

logger = logging.getLogger(__name__)

_EDITABLE = {f.name for f in dc_fields(ContactFields)}


# ── ContactFormViewModel ───────────────────────────────────────────────────────

class FormMode(str, Enum):
    CLOSED   = "closed"
    CREATING = "creating"
    EDITING  = "editing"


class ContactFormViewModel:
    """
    Tracks the add/edit contact form.

    Attributes
    ──────────
    form        — ContactFields being edited
    editing_id  — id of the contact under edit, None when creating
    mode        — FormMode
    """

    def __init__(self) -> None:
        self.form:       ContactFields  = ContactFields()
        self.editing_id: Optional[str]  = None
        self.mode:       FormMode       = FormMode.CLOSED

    def open_new(self) -> None:
        """Open an empty form for a new contact."""
        self.form = ContactFields()
        self.editing_id = None
        self.mode = FormMode.CREATING

    def open_edit(self, record: ContactRecord) -> None:
        """Open the form pre-filled with *record*."""
        self.form = record.to_fields()
        self.editing_id = record.id
        self.mode = FormMode.EDITING

    def close(self) -> None:
        """Discard the form."""
        self.form = ContactFields()
        self.editing_id = None
        self.mode = FormMode.CLOSED

    def set_field(self, name: str, value: str) -> None:
        """Set one editable field; unknown names raise AttributeError."""
        if name not in _EDITABLE:
            raise AttributeError(f"ContactFields has no field {name!r}")
        setattr(self.form, name, value)

    def capture_location(self, port: LocationPort) -> bool:
        """Fill ``location`` with a map link for the current position. False if unavailable."""
        position = port.current_position()
        if position is None:
            return False
        self.form.location = maps_url(*position)
        return True

    def capture_photo(self, port: CameraPort) -> bool:
        """Fill ``image_uri`` from the camera. False if cancelled or denied."""
        uri = port.capture()
        if not uri:
            return False
        self.form.image_uri = uri
        return True

    def save(self, store: ContactStore) -> ContactRecord:
        """
        Create or update via *store*, then close the form.

        Raises:
            ValidationError / NotFoundError / PersistenceError from the store;
            the form keeps its state so the user can correct and retry.
        """
        if self.editing_id is None:
            record = store.create(self.form)
        else:
            record = store.update(self.editing_id, self.form)
        logger.debug("Form saved contact %s (%s)", record.id, self.mode.value)
        self.close()
        return record


# ── ContactListViewModel ───────────────────────────────────────────────────────

class ContactListViewModel:
    """
    Holds the contacts shown on the main screen.

    Attributes
    ──────────
    records    — current snapshot from the store
    can_export — derived: True iff there is anything to export or share
    """

    def __init__(self) -> None:
        self.records: tuple[ContactRecord, ...] = ()

    def refresh(self, store: ContactStore) -> None:
        """Re-read the snapshot after a mutation."""
        self.records = store.list()

    @property
    def can_export(self) -> bool:
        return bool(self.records)

    @staticmethod
    def import_summary(count: int) -> str:
        """User-facing result of a CSV import."""
        if count == 0:
            return "No valid contacts found in CSV"
        return f"Imported {count} contact(s)!"
