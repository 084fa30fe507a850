from __future__ import annotations

import logging

from great_circle.app.config import CalculatorSettings
from great_circle.domain.algorithms.great_circle_distance import GreatCircleDistance

logger = logging.getLogger(__name__)


def get_distance_calculator(
    settings: CalculatorSettings | None = None,
) -> GreatCircleDistance:
    if settings is None:
        settings = CalculatorSettings.from_env()

    logger.debug("Building distance calculator with radius %s km", settings.radius_km)
    return GreatCircleDistance(radius=settings.radius_km)
