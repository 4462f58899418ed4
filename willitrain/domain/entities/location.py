"""Location entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Represents a geographic point queried by the user."""

    latitude: float
    longitude: float
    name: Optional[str] = None

    def __str__(self) -> str:
        return self.name or f"{self.latitude:.4f}, {self.longitude:.4f}"
