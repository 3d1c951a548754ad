"""
CSV text codec for contact export/import.

Format
──────
  Name,Location,Mobile,Email,Address,Description
  "Alice","https://maps.google.com/?q=1,2","555-0100","","",""

Every field is wrapped in double quotes on output.  Embedded double quotes
are NOT escaped and are not unescaped on input, so a value containing '"'
does not survive a round trip.  Commas inside a quoted value do.
"""

import logging
from typing import Optional, Sequence, Union

from contact_saver.store.models import ContactFields, ContactRecord

__all__ = ["CSV_HEADER", "CSV_COLUMNS", "serialize", "parse", "split_row"]

logger = logging.getLogger(__name__)

CSV_HEADER = "Name,Location,Mobile,Email,Address,Description"

# Column order; imageUri / id / createdAt are never written to CSV
CSV_COLUMNS = ("name", "location", "mobile", "email", "address", "description")


# ── Export ────────────────────────────────────────────────────────────────────

def serialize(records: Sequence[Union[ContactRecord, ContactFields]]) -> Optional[str]:
    """
    Render *records* as CSV text, one row per record in input order.

    Returns:
        The CSV text (header + rows joined by "\\n"), or None when *records*
        is empty so callers can warn instead of writing an empty file.
    """
    if not records:
        return None
    rows = [CSV_HEADER]
    for rec in records:
        rows.append(",".join(f'"{getattr(rec, col, "") or ""}"' for col in CSV_COLUMNS))
    logger.debug("Serialised %d contact(s) to CSV", len(records))
    return "\n".join(rows)


# ── Import ────────────────────────────────────────────────────────────────────

def split_row(line: str, limit: int = len(CSV_COLUMNS)) -> list[str]:
    """
    Tokenize one CSV line into at most *limit* values.

    A field is either a double-quoted value (quotes stripped, content taken
    verbatim up to the next '"') or an unquoted run up to the next comma.
    Anything between a closing quote and the following comma is ignored.
    Missing trailing fields are padded with "".
    """
    values: list[str] = []
    pos, end = 0, len(line)
    while len(values) < limit:
        if pos < end and line[pos] == '"':
            close = line.find('"', pos + 1)
            if close == -1:
                values.append(line[pos + 1:])
                break
            values.append(line[pos + 1:close])
            comma = line.find(",", close + 1)
        else:
            comma = line.find(",", pos)
            values.append(line[pos:] if comma == -1 else line[pos:comma])
        if comma == -1:
            break
        pos = comma + 1
    values.extend([""] * (limit - len(values)))
    return values


def parse(text: str) -> list[ContactFields]:
    """
    Parse CSV *text* into contact field-sets.

    The first line is treated as a header and discarded whatever it contains.
    Blank lines are skipped.  Rows whose name or location is empty are
    dropped silently.  Never raises; unusable input yields [].

    Returns:
        Valid rows in file order, without id / created_at (assigned on import).
    """
    lines = (text or "").splitlines()[1:]
    parsed: list[ContactFields] = []
    dropped = 0
    for line in lines:
        if not line.strip():
            continue
        contact = ContactFields(**dict(zip(CSV_COLUMNS, split_row(line))))
        if contact.name and contact.location:
            parsed.append(contact)
        else:
            dropped += 1
    logger.debug("Parsed %d valid CSV row(s), dropped %d", len(parsed), dropped)
    return parsed
