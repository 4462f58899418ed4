"""Climate entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Climate:
    """Temperature statistics shared by every condition estimate of one outlook."""

    temperature_mean: float  # Fahrenheit
    temperature_high: float
    temperature_low: float
    sample_size: int
