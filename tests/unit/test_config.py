from __future__ import annotations

import pytest
from great_circle.app.config import RADIUS_ENV_VAR, CalculatorSettings
from great_circle.app.factory import get_distance_calculator
from great_circle.domain.algorithms.great_circle_distance import EARTH_RADIUS_KM
from pydantic import ValidationError


def test_settings_default_to_earth_radius(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(RADIUS_ENV_VAR, raising=False)
    assert CalculatorSettings.from_env().radius_km == EARTH_RADIUS_KM


def test_blank_env_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(RADIUS_ENV_VAR, "  ")
    assert CalculatorSettings.from_env().radius_km == EARTH_RADIUS_KM


def test_env_overrides_radius(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(RADIUS_ENV_VAR, "3389.5")
    assert CalculatorSettings.from_env().radius_km == 3389.5


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "inf", "nan"])
def test_invalid_radius_is_rejected(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv(RADIUS_ENV_VAR, raw)
    with pytest.raises(ValidationError):
        CalculatorSettings.from_env()


def test_factory_uses_given_settings() -> None:
    calc = get_distance_calculator(CalculatorSettings(radius_km=1.0))
    assert calc.radius == 1.0


def test_factory_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(RADIUS_ENV_VAR, "1737.4")
    calc = get_distance_calculator()
    assert calc.radius == 1737.4
    calc.set_from_location(0.0, 0.0)
    assert calc.get_distance_to_location_in_km(0.0, 90.0) == 2729.11
