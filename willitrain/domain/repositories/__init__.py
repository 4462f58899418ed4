"""Repository interfaces."""

from .weather_repository import WeatherRepository
from .current_conditions_repository import CurrentConditionsRepository
from .saved_query_repository import SavedQueryRepository

__all__ = [
    "WeatherRepository",
    "CurrentConditionsRepository",
    "SavedQueryRepository",
]
