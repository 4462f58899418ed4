"""Use cases - core business operations."""

from .collect_weather_data import CollectWeatherDataUseCase
from .extract_calendar_day_sample import ExtractCalendarDaySampleUseCase
from .classify_conditions import ClassifyConditionsUseCase
from .condition_readings import ConditionReadings
from .recommend_activities import RecommendActivitiesUseCase
from .recommend_clothing import RecommendClothingUseCase
from .summarize_outlook import SummarizeOutlookUseCase
from .export_outlook_csv import ExportOutlookCsvUseCase

__all__ = [
    "CollectWeatherDataUseCase",
    "ExtractCalendarDaySampleUseCase",
    "ClassifyConditionsUseCase",
    "ConditionReadings",
    "RecommendActivitiesUseCase",
    "RecommendClothingUseCase",
    "SummarizeOutlookUseCase",
    "ExportOutlookCsvUseCase",
]
