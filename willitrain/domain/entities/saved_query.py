"""Saved query entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class SavedQuery:
    """A location/date lookup the user chose to keep."""

    id: str
    location: str
    date: str  # YYYY-MM-DD
    time: str
    lat: str
    lon: str
    conditions: List[str] = field(default_factory=list)
    temperature: Optional[int] = None
    weather_icon: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavedQuery":
        """Create SavedQuery from its stored representation."""
        return cls(
            id=str(data["id"]),
            location=data.get("location", ""),
            date=data.get("date", ""),
            time=data.get("time", ""),
            lat=str(data.get("lat", "")),
            lon=str(data.get("lon", "")),
            conditions=list(data.get("conditions") or []),
            temperature=data.get("temperature"),
            weather_icon=data.get("weatherIcon", data.get("weather_icon")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "location": self.location,
            "date": self.date,
            "time": self.time,
            "lat": self.lat,
            "lon": self.lon,
            "conditions": list(self.conditions),
            "temperature": self.temperature,
            "weatherIcon": self.weather_icon,
        }
