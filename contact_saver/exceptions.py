"""
Project-wide custom exception hierarchy.
All modules raise subclasses of ContactSaverError — never bare Exception.
"""

__all__ = [
    "ContactSaverError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
]


class ContactSaverError(Exception):
    """Root exception for all contact-saver errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class ValidationError(ContactSaverError):
    """Raised when a required field (name, location) is missing on create/update."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Required field(s) missing: {', '.join(self.fields)}")


class NotFoundError(ContactSaverError):
    """Raised when an update references an id that is not in the collection."""

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"No contact with id={record_id!r}")


class PersistenceError(ContactSaverError):
    """Raised when the underlying storage read/write fails."""
