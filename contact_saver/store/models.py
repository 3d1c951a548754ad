"""Data models for the store module."""

from dataclasses import asdict, dataclass, fields as dc_fields
from typing import Any

__all__ = ["ContactFields", "ContactRecord", "REQUIRED_FIELDS"]

# Fields that must be non-empty (after trimming) on every stored contact
REQUIRED_FIELDS = ("name", "location")


@dataclass
class ContactFields:
    """
    The user-editable part of a contact.

    Used as input to ContactStore.create() / update() and as the output of
    csv_codec.parse().  Optional fields default to the empty string.
    """
    name:        str = ""
    location:    str = ""      # map URL or free-text reference
    mobile:      str = ""
    email:       str = ""
    address:     str = ""
    description: str = ""
    image_uri:   str = ""      # opaque local image reference

    def missing_required(self) -> list[str]:
        """Return the names of required fields that are empty after trimming."""
        return [f for f in REQUIRED_FIELDS if not getattr(self, f).strip()]


# Python attribute → persisted JSON key
_WIRE_NAMES = {
    "image_uri":  "imageUri",
    "created_at": "createdAt",
}


@dataclass(frozen=True)
class ContactRecord:
    """
    One saved contact.

    Fields
    ──────
    id          — unique, assigned at creation, never changes
    name        — required
    location    — required; map URL or free text
    mobile, email, address, description — optional, "" when unset
    image_uri   — optional local image reference, "" when unset
    created_at  — ISO-8601 UTC timestamp set at creation, kept across updates
    """
    id:          str
    name:        str
    location:    str
    created_at:  str
    mobile:      str = ""
    email:       str = ""
    address:     str = ""
    description: str = ""
    image_uri:   str = ""

    @classmethod
    def from_fields(cls, record_id: str, created_at: str,
                    contact: ContactFields) -> "ContactRecord":
        """Combine identity (*record_id*, *created_at*) with editable *contact* fields."""
        return cls(id=record_id, created_at=created_at, **asdict(contact))

    def to_fields(self) -> ContactFields:
        """Return a mutable copy of the editable fields (e.g. to pre-fill a form)."""
        return ContactFields(
            name=self.name,
            location=self.location,
            mobile=self.mobile,
            email=self.email,
            address=self.address,
            description=self.description,
            image_uri=self.image_uri,
        )

    def to_dict(self) -> dict[str, str]:
        """Serialise to the persisted field-map (camelCase keys for imageUri/createdAt)."""
        return {_WIRE_NAMES.get(k, k): v for k, v in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Any) -> "ContactRecord":
        """
        Rebuild a record from a persisted field-map.

        Raises:
            ValueError: *data* is not a mapping, a required key is missing,
                        or a value is not a string.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")
        kwargs: dict[str, str] = {}
        for f in dc_fields(cls):
            key = _WIRE_NAMES.get(f.name, f.name)
            if key not in data:
                if f.name in ("id", "name", "location", "created_at"):
                    raise ValueError(f"Missing key {key!r}")
                continue
            value = data[key]
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"Key {key!r} must be a string")
            kwargs[f.name] = value
        return cls(**kwargs)

    def __str__(self) -> str:
        return f"ContactRecord(id={self.id}, name={self.name!r})"
