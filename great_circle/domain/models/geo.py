from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coordinates:
    """A (latitude, longitude) pair.

    The unit is whatever the caller put in: degrees for user input, radians
    for the calculator's stored reference location.
    """

    latitude: float
    longitude: float

    @staticmethod
    def origin() -> "Coordinates":
        return Coordinates(latitude=0.0, longitude=0.0)
