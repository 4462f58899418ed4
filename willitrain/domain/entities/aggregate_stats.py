"""Aggregate statistics entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AggregateStats:
    """Mean, minimum and maximum of a numeric sample."""

    mean: float
    min: float
    max: float
