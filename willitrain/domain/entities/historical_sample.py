"""Historical sample entity."""

from dataclasses import dataclass
from typing import Tuple
from .daily_observation import DailyObservation


@dataclass(frozen=True)
class HistoricalSample:
    """Observations sharing one calendar day across all available years.

    Observations are ordered by ascending date key. A quantity missing for a
    given year is absent from that quantity's sequence only, so the
    sequences may differ in length.
    """

    month_day: str  # MMDD
    observations: Tuple[DailyObservation, ...] = ()

    def _values(self, attribute: str) -> Tuple[float, ...]:
        values = (getattr(o, attribute) for o in self.observations)
        return tuple(v for v in values if v is not None)

    @property
    def dates(self) -> Tuple[str, ...]:
        return tuple(o.date for o in self.observations)

    @property
    def temperature(self) -> Tuple[float, ...]:
        return self._values("temperature")

    @property
    def precipitation(self) -> Tuple[float, ...]:
        return self._values("precipitation")

    @property
    def wind_speed(self) -> Tuple[float, ...]:
        return self._values("wind_speed")

    @property
    def snow_depth(self) -> Tuple[float, ...]:
        return self._values("snow_depth")

    @property
    def size(self) -> int:
        """Number of matched days usable for every quantity."""
        return min(
            len(self.temperature),
            len(self.precipitation),
            len(self.wind_speed),
            len(self.snow_depth),
        )

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def __len__(self) -> int:
        return len(self.observations)

    def __str__(self) -> str:
        return f"{self.month_day} ({len(self.observations)} days)"
