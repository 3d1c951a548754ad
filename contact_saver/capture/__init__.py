"""capture — host-supplied location / camera ports."""

from contact_saver.capture.ports import CameraPort, LocationPort, maps_url

__all__ = ["CameraPort", "LocationPort", "maps_url"]
