from __future__ import annotations

import logging
import math

from great_circle.domain.algorithms.validation import (
    degree_to_radian,
    is_valid_latitude,
    is_valid_longitude,
    validate_coordinates,
)
from great_circle.domain.models import Coordinates

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0

# New Delhi, India.
DEFAULT_LATITUDE = 28.5272803
DEFAULT_LONGITUDE = 77.0688994


def round_km(distance: float) -> float:
    """Round to 2 decimals, ties towards +inf.

    Values too large to scale by 100 are returned unchanged.
    """

    scaled = distance * 100.0 + 0.5
    if not math.isfinite(scaled):
        return distance
    return math.floor(scaled) / 100.0


class GreatCircleDistance:
    """Distance on a sphere from a reference location, in kilometers.

    Uses the spherical law of cosines:

        d = r * acos(sin a * sin b + cos a * cos b * cos(x - y))

    The reference location is stored in radians and replaced as a whole by
    `set_from_location`, so readers never see a half-updated pair. The
    instance is still meant to have a single owner.
    """

    def __init__(self, radius: float = EARTH_RADIUS_KM) -> None:
        self._radius = radius
        self._from_location = Coordinates.origin()

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def from_location(self) -> Coordinates:
        """Reference location in radians."""
        return self._from_location

    def set_from_location(
        self,
        latitude: float = DEFAULT_LATITUDE,
        longitude: float = DEFAULT_LONGITUDE,
    ) -> None:
        validate_coordinates(latitude, longitude)
        self._from_location = Coordinates(
            latitude=self.degree_to_radian(latitude),
            longitude=self.degree_to_radian(longitude),
        )
        logger.debug("Reference location set to lat=%s lon=%s", latitude, longitude)

    def is_valid_latitude(self, latitude: float) -> bool:
        return is_valid_latitude(latitude)

    def is_valid_longitude(self, longitude: float) -> bool:
        return is_valid_longitude(longitude)

    def degree_to_radian(self, value: float) -> float:
        return degree_to_radian(value)

    def get_distance_to_location_in_km(
        self,
        latitude: float = DEFAULT_LATITUDE,
        longitude: float = DEFAULT_LONGITUDE,
    ) -> float:
        """Distance from the reference location to (latitude, longitude).

        Raises InvalidLatitude / InvalidLongitude for out-of-range input.
        The reference location was validated when it was set and is not
        checked again here.
        """

        validate_coordinates(latitude, longitude)

        central_angle = self.get_central_angle(
            self.degree_to_radian(latitude), self.degree_to_radian(longitude)
        )
        distance = round_km(self._radius * central_angle)
        logger.debug(
            "Distance to lat=%s lon=%s is %s km", latitude, longitude, distance
        )
        return distance

    def get_central_angle(self, latitude: float, longitude: float) -> float:
        """Central angle in radians between the reference and a radian target."""

        origin = self._from_location
        diff_longitudes = abs(origin.longitude - longitude)
        cos_angle = math.sin(latitude) * math.sin(origin.latitude) + math.cos(
            latitude
        ) * math.cos(origin.latitude) * math.cos(diff_longitudes)

        # Float drift can push identical or antipodal points just past +-1.
        if cos_angle > 1.0 or cos_angle < -1.0:
            logger.debug("Clamping acos argument %r", cos_angle)
            cos_angle = max(-1.0, min(1.0, cos_angle))

        return math.acos(cos_angle)
