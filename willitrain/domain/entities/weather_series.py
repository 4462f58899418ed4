"""Weather series entity."""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

# YYYYMMDD -> observed value
TimeSeries = Dict[str, float]


@dataclass
class WeatherSeries:
    """The four daily time series returned by the historical-observation provider."""

    temperature: TimeSeries = field(default_factory=dict)  # Fahrenheit
    precipitation: TimeSeries = field(default_factory=dict)  # inches
    wind_speed: TimeSeries = field(default_factory=dict)  # mph
    snow_depth: TimeSeries = field(default_factory=dict)  # inches
    units: Dict[str, str] = field(default_factory=dict)

    # NASA POWER parameter names
    PARAMETER_FIELDS = {
        "T2M": "temperature",
        "PRECTOTCORR": "precipitation",
        "WS2M": "wind_speed",
        "SNODP": "snow_depth",
    }

    @classmethod
    def from_parameters(
        cls,
        parameters: Mapping[str, Mapping[str, float]],
        units: Optional[Mapping[str, str]] = None,
    ) -> "WeatherSeries":
        """Create WeatherSeries from a parameter-name -> TimeSeries mapping."""
        kwargs = {
            attr: dict(parameters.get(name) or {})
            for name, attr in cls.PARAMETER_FIELDS.items()
        }
        return cls(**kwargs, units=dict(units or {}))

    def as_columns(self) -> Dict[str, TimeSeries]:
        """Get the series keyed by field name."""
        return {
            "temperature": self.temperature,
            "precipitation": self.precipitation,
            "wind_speed": self.wind_speed,
            "snow_depth": self.snow_depth,
        }

    def __len__(self) -> int:
        return len(set().union(*(s.keys() for s in self.as_columns().values())))
