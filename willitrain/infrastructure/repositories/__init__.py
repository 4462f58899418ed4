"""Concrete repository implementations."""

from .nasa_power_weather_repository import NASAPowerWeatherRepository
from .open_meteo_current_conditions_repository import OpenMeteoCurrentConditionsRepository
from .json_saved_query_repository import JsonSavedQueryRepository

__all__ = [
    "NASAPowerWeatherRepository",
    "OpenMeteoCurrentConditionsRepository",
    "JsonSavedQueryRepository",
]
