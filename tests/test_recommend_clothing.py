"""Tests for RecommendClothingUseCase."""

import pytest
from conftest import build_estimates
from willitrain.domain.use_cases.recommend_clothing import RecommendClothingUseCase


@pytest.fixture
def use_case():
    return RecommendClothingUseCase()


def ids(items):
    return [item.id for item in items]


def test_cold_band(use_case):
    items = use_case.execute(build_estimates(temperature=30, rain=0))

    assert ids(items) == ["base-thermal", "insulated-jacket", "beanie-gloves"]
    assert [item.essential for item in items] == [True, True, False]


def test_cold_band_with_rain_appends_rain_gear(use_case):
    items = use_case.execute(build_estimates(temperature=30, rain=45))

    assert ids(items) == [
        "base-thermal",
        "insulated-jacket",
        "beanie-gloves",
        "rain-jacket",
        "waterproof-footwear",
    ]
    assert items[3].essential is True
    assert items[4].essential is False


@pytest.mark.parametrize(
    "temperature,first_id",
    [
        (39, "base-thermal"),
        (40, "midlayer"),
        (59, "midlayer"),
        (60, "tee"),
        (75, "tee"),
        (76, "sun-top"),
    ],
)
def test_band_boundaries(use_case, temperature, first_id):
    items = use_case.execute(build_estimates(temperature=temperature, rain=0))
    assert items[0].id == first_id


def test_temperature_is_rounded_before_banding(use_case):
    # 39.5 rounds half-up to 40
    items = use_case.execute(build_estimates(temperature=39.5, rain=0))
    assert items[0].id == "midlayer"


def test_snow_gear_threshold(use_case):
    below = use_case.execute(build_estimates(temperature=35, rain=0, snow=29))
    at = use_case.execute(build_estimates(temperature=35, rain=0, snow=30))

    assert "heavy-coat" not in ids(below)
    assert ids(at)[-2:] == ["heavy-coat", "insulated-boots"]


def test_rain_gear_before_snow_gear(use_case):
    items = use_case.execute(build_estimates(temperature=35, rain=40, snow=30))
    assert ids(items)[-4:] == [
        "rain-jacket",
        "waterproof-footwear",
        "heavy-coat",
        "insulated-boots",
    ]


def test_custom_thresholds():
    use_case = RecommendClothingUseCase(rain_threshold=10, snow_threshold=90)
    items = use_case.execute(build_estimates(temperature=65, rain=10, snow=80))

    assert "rain-jacket" in ids(items)
    assert "heavy-coat" not in ids(items)
