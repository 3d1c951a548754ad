"""
csv_codec — CSV text export/import of the contact collection.

Public API
──────────
serialize  — records → CSV text (None for an empty collection)
parse      — CSV text → list[ContactFields], invalid rows dropped
split_row  — single-line tokenizer used by parse
"""

from contact_saver.csv_codec.codec import CSV_COLUMNS, CSV_HEADER, parse, serialize, split_row

__all__ = ["CSV_COLUMNS", "CSV_HEADER", "parse", "serialize", "split_row"]
