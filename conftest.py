"""Shared pytest fixtures."""

from typing import List, Optional, Sequence

import pytest

from config.settings import ACTIVITY_CATALOG, CONDITION_DEFINITIONS
from willitrain.application.services.outlook_service import OutlookService
from willitrain.domain.entities.climate import Climate
from willitrain.domain.entities.condition_estimate import ConditionEstimate, ConditionId
from willitrain.domain.entities.current_conditions import CurrentConditions
from willitrain.domain.entities.daily_observation import DailyObservation
from willitrain.domain.entities.historical_sample import HistoricalSample
from willitrain.domain.entities.weather_series import WeatherSeries
from willitrain.domain.repositories.current_conditions_repository import CurrentConditionsRepository
from willitrain.domain.repositories.weather_repository import WeatherRepository
from willitrain.infrastructure.repositories.json_saved_query_repository import JsonSavedQueryRepository


def build_sample(
    temperature: Sequence[Optional[float]],
    precipitation: Sequence[Optional[float]],
    wind_speed: Sequence[Optional[float]],
    snow_depth: Sequence[Optional[float]],
    month_day: str = "0704",
    first_year: int = 2020,
) -> HistoricalSample:
    """One observation per position; pass None for a missing value."""
    observations = tuple(
        DailyObservation(
            date=f"{first_year + i}{month_day}",
            temperature=t,
            precipitation=p,
            wind_speed=w,
            snow_depth=s,
        )
        for i, (t, p, w, s) in enumerate(
            zip(temperature, precipitation, wind_speed, snow_depth)
        )
    )
    return HistoricalSample(month_day=month_day, observations=observations)


def build_estimates(
    temperature: float, rain: int, snow: int = 0, wind: int = 0
) -> List[ConditionEstimate]:
    climate = Climate(
        temperature_mean=temperature,
        temperature_high=temperature + 10,
        temperature_low=temperature - 10,
        sample_size=5,
    )
    return [
        ConditionEstimate(ConditionId.RAIN, "Rain", rain, "rainy", "#4A90E2", climate),
        ConditionEstimate(ConditionId.SNOW, "Snow", snow, "snow", "#87CEEB", climate),
        ConditionEstimate(ConditionId.WIND, "Wind", wind, "leaf", "#32CD32", climate),
    ]


@pytest.fixture
def condition_definitions():
    return CONDITION_DEFINITIONS


@pytest.fixture
def activity_catalog():
    return ACTIVITY_CATALOG


@pytest.fixture
def weather_series() -> WeatherSeries:
    """Three years of July 3-5 data plus one malformed key."""
    temperature, precipitation, wind_speed, snow_depth = {}, {}, {}, {}
    for i, year in enumerate((2022, 2020, 2021)):
        for day in ("03", "04", "05"):
            key = f"{year}07{day}"
            temperature[key] = 60.0 + 10 * i
            precipitation[key] = 0.1 * (i + 1)
            wind_speed[key] = 5.0 + i
            snow_depth[key] = 0.0
    temperature["2021-07-04"] = 99.0
    return WeatherSeries(
        temperature=temperature,
        precipitation=precipitation,
        wind_speed=wind_speed,
        snow_depth=snow_depth,
    )


class FakeWeatherRepository(WeatherRepository):
    """Serves a fixed series, or raises a fixed error."""

    def __init__(self, series: Optional[WeatherSeries] = None, error: Optional[Exception] = None):
        self.series = series
        self.error = error
        self.calls = []

    def get_weather_series(self, latitude, longitude, start_date, end_date) -> WeatherSeries:
        self.calls.append((latitude, longitude, start_date, end_date))
        if self.error is not None:
            raise self.error
        return self.series


class FakeCurrentConditionsRepository(CurrentConditionsRepository):
    def get_current_conditions(self, latitude, longitude) -> CurrentConditions:
        return CurrentConditions(
            temperature=72.0,
            condition="clear",
            wind_speed=4.0,
            precipitation=0.0,
            humidity=40,
            weather_code=0,
            timestamp="2025-07-04T12:00",
        )


@pytest.fixture
def weather_repo(weather_series) -> FakeWeatherRepository:
    return FakeWeatherRepository(weather_series)


@pytest.fixture
def outlook_service(weather_repo, tmp_path) -> OutlookService:
    return OutlookService(
        weather_repo=weather_repo,
        activity_catalog=ACTIVITY_CATALOG,
        condition_definitions=CONDITION_DEFINITIONS,
        current_conditions_repo=FakeCurrentConditionsRepository(),
        saved_query_repo=JsonSavedQueryRepository(str(tmp_path / "saved_queries.json")),
        export_dir=tmp_path / "exports",
    )
