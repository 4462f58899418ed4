"""Daily observation entity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DailyObservation:
    """Represents one day of historical observations."""

    date: str  # YYYYMMDD
    temperature: Optional[float] = None  # Fahrenheit
    precipitation: Optional[float] = None  # inches
    wind_speed: Optional[float] = None  # mph
    snow_depth: Optional[float] = None  # inches

    @property
    def year(self) -> int:
        return int(self.date[:4])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "temperature": self.temperature,
            "precipitation": self.precipitation,
            "wind_speed": self.wind_speed,
            "snow_depth": self.snow_depth,
        }
