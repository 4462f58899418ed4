"""Current conditions entity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CurrentConditions:
    """Live weather snapshot for a location."""

    temperature: Optional[float]  # Fahrenheit
    condition: str  # e.g. 'clear', 'rain', 'snow'
    wind_speed: Optional[float] = None
    precipitation: Optional[float] = None
    humidity: Optional[float] = None  # percentage
    weather_code: Optional[int] = None
    timestamp: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "condition": self.condition,
            "wind_speed": self.wind_speed,
            "precipitation": self.precipitation,
            "humidity": self.humidity,
            "weather_code": self.weather_code,
            "timestamp": self.timestamp,
        }
