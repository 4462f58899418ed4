"""Domain errors."""

from typing import Optional


class WeatherOutlookError(Exception):
    """Base class for errors raised by the outlook engine."""


class InsufficientDataError(WeatherOutlookError, ValueError):
    """The matched historical sample is empty, so no statistic is defined."""


class MalformedSeriesError(WeatherOutlookError, ValueError):
    """A time series key is not an 8-digit YYYYMMDD date."""

    def __init__(self, key: object):
        super().__init__(f"Malformed date key: {key!r}")
        self.key = key


class ProviderUnavailableError(WeatherOutlookError, RuntimeError):
    """A weather provider failed or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
