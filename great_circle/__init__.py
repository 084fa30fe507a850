from great_circle.domain.algorithms.great_circle_distance import (
    EARTH_RADIUS_KM,
    GreatCircleDistance,
)
from great_circle.domain.exceptions import (
    CoordinateError,
    InvalidLatitude,
    InvalidLongitude,
)
from great_circle.domain.models import Coordinates

__all__ = [
    "EARTH_RADIUS_KM",
    "Coordinates",
    "CoordinateError",
    "GreatCircleDistance",
    "InvalidLatitude",
    "InvalidLongitude",
]
