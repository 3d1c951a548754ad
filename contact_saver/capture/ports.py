"""
Device capability ports.

The host implements these on top of its location and camera APIs (including
any permission prompt).  The core only consumes the results to fill the
``location`` and ``image_uri`` fields before create/update.
"""

from abc import ABC, abstractmethod
from typing import Optional

__all__ = ["LocationPort", "CameraPort", "maps_url"]


class LocationPort(ABC):
    """Source of the device's current position."""

    @abstractmethod
    def current_position(self) -> Optional[tuple[float, float]]:
        """
        Return (latitude, longitude), or None if permission was denied or
        no fix is available.
        """
        ...


class CameraPort(ABC):
    """Takes a photo and stores it locally."""

    @abstractmethod
    def capture(self) -> Optional[str]:
        """Return the local URI of the captured image, or None if cancelled/denied."""
        ...


def maps_url(latitude: float, longitude: float) -> str:
    """Map link stored as a contact's location."""
    return f"https://maps.google.com/?q={latitude},{longitude}"
