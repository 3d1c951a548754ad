"""Runtime configuration for the contact store."""

import os
from dataclasses import dataclass

__all__ = ["StoreConfig", "DEFAULT_DATA_DIR", "DEFAULT_STORAGE_KEY"]

DEFAULT_DATA_DIR    = "~/.contact-saver"
DEFAULT_STORAGE_KEY = "contacts"


@dataclass
class StoreConfig:
    """Where and under which key the contact collection is persisted."""
    data_dir:    str = DEFAULT_DATA_DIR      # expanded with ~ at open time
    storage_key: str = DEFAULT_STORAGE_KEY

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """
        Build a config from environment variables, falling back to defaults.

        CONTACT_SAVER_DATA_DIR     — directory holding the JSON blob
        CONTACT_SAVER_STORAGE_KEY  — key (file stem) of the collection
        """
        return cls(
            data_dir=os.environ.get("CONTACT_SAVER_DATA_DIR") or DEFAULT_DATA_DIR,
            storage_key=os.environ.get("CONTACT_SAVER_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
        )
