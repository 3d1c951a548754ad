"""
contact_saver — local contact/location bookkeeping core.

Sub-packages
────────────
store      — ContactRecord model, persistence ports, ContactStore
csv_codec  — CSV export/import text codec
share      — share-message formatting
capture    — location / camera capability ports
"""
