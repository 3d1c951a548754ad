"""
Share-message builders.

The host hands the returned text / URL to its share sheet or messenger; no
device call happens here.
"""

from datetime import date
from typing import Optional, Sequence
from urllib.parse import quote

from contact_saver.store.models import ContactRecord

__all__ = [
    "format_contact_message",
    "format_contact_list_message",
    "whatsapp_url",
    "export_filename",
]


def format_contact_message(record: ContactRecord) -> str:
    """Build the share text for a single contact; empty optional fields are omitted."""
    message = f"📇 *{record.name}*\n\n📍 Location: {record.location}"
    if record.mobile:
        message += f"\n📱 Mobile: {record.mobile}"
    if record.email:
        message += f"\n📧 Email: {record.email}"
    if record.address:
        message += f"\n🏠 Address: {record.address}"
    if record.description:
        message += f"\n\n📝 {record.description}"
    return message


def format_contact_list_message(records: Sequence[ContactRecord]) -> Optional[str]:
    """
    Build a numbered share text for the whole collection.

    Returns:
        None for an empty collection (host warns "nothing to share").
    """
    if not records:
        return None
    entries = []
    for i, rec in enumerate(records, start=1):
        entry = f"{i}. *{rec.name}*\n📍 {rec.location}\n"
        if rec.mobile:
            entry += f"📱 {rec.mobile}\n"
        if rec.email:
            entry += f"📧 {rec.email}\n"
        entries.append(entry)
    return "📇 *My Contacts*\n\n" + "\n".join(entries)


def whatsapp_url(message: str) -> str:
    """Return a whatsapp:// deep link that pre-fills *message*."""
    return f"whatsapp://send?text={quote(message, safe='')}"


def export_filename(today: Optional[date] = None) -> str:
    """File name for a CSV export, e.g. ``contacts_2024-05-01.csv``."""
    return f"contacts_{(today or date.today()).isoformat()}.csv"
