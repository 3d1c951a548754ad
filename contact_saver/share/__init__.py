"""share — text and deep links for sharing contacts."""

from contact_saver.share.formatter import (
    export_filename,
    format_contact_list_message,
    format_contact_message,
    whatsapp_url,
)

__all__ = [
    "export_filename",
    "format_contact_list_message",
    "format_contact_message",
    "whatsapp_url",
]
