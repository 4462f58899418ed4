"""Domain entities."""

from .location import Location
from .weather_series import TimeSeries, WeatherSeries
from .daily_observation import DailyObservation
from .historical_sample import HistoricalSample
from .aggregate_stats import AggregateStats
from .climate import Climate
from .condition_estimate import ConditionEstimate, ConditionId
from .recommendation import PlannerTier, Recommendation
from .activity import Activity
from .clothing_item import ClothingItem
from .outlook import DayOutlook, OutlookSummary, TemperatureBand
from .current_conditions import CurrentConditions
from .saved_query import SavedQuery

__all__ = [
    "Location",
    "TimeSeries",
    "WeatherSeries",
    "DailyObservation",
    "HistoricalSample",
    "AggregateStats",
    "Climate",
    "ConditionEstimate",
    "ConditionId",
    "PlannerTier",
    "Recommendation",
    "Activity",
    "ClothingItem",
    "DayOutlook",
    "OutlookSummary",
    "TemperatureBand",
    "CurrentConditions",
    "SavedQuery",
]
