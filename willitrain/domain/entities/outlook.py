"""Day outlook entities."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from .activity import Activity
from .clothing_item import ClothingItem
from .condition_estimate import ConditionEstimate, ConditionId
from .historical_sample import HistoricalSample
from .location import Location


@dataclass(frozen=True)
class TemperatureBand:
    """Display band for a representative temperature."""

    label: str  # 'Cold', 'Cool', 'Warm', 'Sunny'
    color: str
    icon: str


@dataclass(frozen=True)
class OutlookSummary:
    """Headline text describing an outlook."""

    headline: str
    text: str
    temperature_band: TemperatureBand


@dataclass(frozen=True)
class DayOutlook:
    """Everything computed for one location and calendar day."""

    location: Location
    target_date: date
    sample: HistoricalSample
    estimates: List[ConditionEstimate]
    activities: List[Activity]
    clothing: List[ClothingItem]
    summary: OutlookSummary

    def estimate(self, condition_id: ConditionId) -> Optional[ConditionEstimate]:
        """Get the estimate for a condition."""
        for estimate in self.estimates:
            if estimate.id == condition_id:
                return estimate
        return None

    @property
    def temperature_mean(self) -> float:
        return self.estimates[0].temperature_mean

    def __str__(self) -> str:
        return f"{self.location} on {self.target_date.isoformat()}"
