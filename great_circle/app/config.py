from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from great_circle.domain.algorithms.great_circle_distance import EARTH_RADIUS_KM

RADIUS_ENV_VAR = "GREAT_CIRCLE_RADIUS_KM"


class CalculatorSettings(BaseModel):
    """Runtime settings for building a distance calculator."""

    model_config = ConfigDict(frozen=True)

    radius_km: float = Field(default=EARTH_RADIUS_KM, gt=0.0, allow_inf_nan=False)

    @staticmethod
    def from_env() -> "CalculatorSettings":
        """Load settings from the environment.

        GREAT_CIRCLE_RADIUS_KM overrides the sphere radius; unset or blank
        keeps Earth's mean radius. Invalid values raise a pydantic
        ValidationError.
        """

        raw = (os.getenv(RADIUS_ENV_VAR) or "").strip()
        if not raw:
            return CalculatorSettings()
        return CalculatorSettings(radius_km=raw)
