from __future__ import annotations


class CoordinateError(ValueError):
    """Base exception for coordinates outside their valid range."""

    message = "Invalid coordinate"

    def __init__(self, value: float | None = None) -> None:
        super().__init__(self.message)
        self.value = value


class InvalidLatitude(CoordinateError):
    """Raised when a latitude is not strictly between -90 and 90."""

    message = "Invalid Latitude, Latitude should be in between -90 and 90!"


class InvalidLongitude(CoordinateError):
    """Raised when a longitude is not strictly between -180 and 180."""

    message = "Invalid Longitude, Longitude should be in between -180 and 180!"
