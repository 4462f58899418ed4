"""Condition estimate entity."""

from dataclasses import dataclass
from enum import Enum
from .climate import Climate


class ConditionId(str, Enum):
    """Conditions estimated from the historical sample."""

    RAIN = "rain"
    SNOW = "snow"
    WIND = "wind"


@dataclass(frozen=True)
class ConditionEstimate:
    """Display-ready likelihood of one condition.

    ``probability`` is a bounded 0-100 severity index derived from the
    average observed magnitude, not a frequency of occurrence.
    """

    id: ConditionId
    label: str
    probability: int
    icon: str
    color: str
    climate: Climate

    @property
    def temperature_mean(self) -> float:
        return self.climate.temperature_mean

    @property
    def temperature_high(self) -> float:
        return self.climate.temperature_high

    @property
    def temperature_low(self) -> float:
        return self.climate.temperature_low

    def __str__(self) -> str:
        return f"{self.label}: {self.probability}%"
