from __future__ import annotations

import math

from great_circle.domain.exceptions import InvalidLatitude, InvalidLongitude


def is_valid_latitude(latitude: float) -> bool:
    # Poles are excluded.
    return -90.0 < latitude < 90.0


def is_valid_longitude(longitude: float) -> bool:
    # The antimeridian is excluded.
    return -180.0 < longitude < 180.0


def degree_to_radian(value: float) -> float:
    return value * math.pi / 180.0


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise if either coordinate is out of range.

    Latitude is checked first, so when both are invalid only
    InvalidLatitude is raised.
    """

    if not is_valid_latitude(latitude):
        raise InvalidLatitude(latitude)
    if not is_valid_longitude(longitude):
        raise InvalidLongitude(longitude)
