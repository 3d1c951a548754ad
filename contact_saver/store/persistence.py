"""
Key/blob persistence ports used by ContactStore.

The store treats persistence as a single named text slot; adapters decide
where the text lives.

Usage::

    port = JsonFilePersistence("~/.contact-saver")
    port.set("contacts", "[]")
    text = port.get("contacts")     # "[]", or None if never written
"""

import contextlib
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from contact_saver.exceptions import PersistenceError

__all__ = ["PersistencePort", "InMemoryPersistence", "JsonFilePersistence"]

logger = logging.getLogger(__name__)


class PersistencePort(ABC):
    """Abstract get/set of a named text blob."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Return the text stored under *key*, or None if nothing was stored.

        Raises:
            PersistenceError: The underlying storage could not be read.
        """
        ...

    @abstractmethod
    def set(self, key: str, text: str) -> None:
        """
        Store *text* under *key*, replacing any previous value.

        Raises:
            PersistenceError: The underlying storage could not be written.
        """
        ...


class InMemoryPersistence(PersistencePort):
    """Dict-backed port for hosts without durable storage, and for tests."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._blobs: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, text: str) -> None:
        self._blobs[key] = text


class JsonFilePersistence(PersistencePort):
    """
    Stores each key as ``<data_dir>/<key>.json``.

    The directory is created on first open.  Writes go to a temporary file in
    the same directory and are moved into place with os.replace(), so a crash
    mid-write never leaves a truncated blob behind.
    """

    def __init__(self, data_dir: str) -> None:
        self._dir = Path(data_dir).expanduser()
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Cannot create data directory {self._dir}: {exc}") from exc

    def path_for(self, key: str) -> Path:
        """Return the file path backing *key*."""
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError(f"Cannot read {path}: {exc}") from exc

    def set(self, key: str, text: str) -> None:
        path = self.path_for(key)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, path)
        except OSError as exc:
            logger.debug("write to %s failed", path, exc_info=True)
            if tmp_name:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {path}: {exc}") from exc
        logger.debug("Wrote %d chars to %s", len(text), path)
