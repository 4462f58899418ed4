"""Aggregate statistics and probability normalization."""

import math
from typing import Sequence
import numpy as np
from .entities.aggregate_stats import AggregateStats
from .exceptions import InsufficientDataError


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))


def aggregate(values: Sequence[float]) -> AggregateStats:
    """
    Reduce a numeric sample to mean, minimum and maximum.

    Args:
        values: Numeric sample

    Returns:
        AggregateStats for the sample

    Raises:
        InsufficientDataError: If the sample is empty
    """
    if len(values) == 0:
        raise InsufficientDataError("Cannot aggregate an empty sample")

    arr = np.asarray(values, dtype=float)
    return AggregateStats(
        mean=float(arr.mean()),
        min=float(arr.min()),
        max=float(arr.max()),
    )


def to_percent(magnitude: float, sample_size: int) -> int:
    """
    Map an aggregate magnitude onto a bounded 0-100 score.

    The magnitude is treated as if it were a count out of ``sample_size``.
    The result is a severity index, not a frequency of occurrence: an
    average of 5 inches of rain over 3 years scores 100.

    Args:
        magnitude: Aggregate magnitude (e.g. mean precipitation)
        sample_size: Number of matched days

    Returns:
        Integer percentage in [0, 100]

    Raises:
        InsufficientDataError: If sample_size is not positive
    """
    if sample_size <= 0:
        raise InsufficientDataError("Cannot normalize against an empty sample")

    raw_percentage = 100.0 * magnitude / sample_size
    return round_half_up(min(100.0, max(0.0, raw_percentage)))
