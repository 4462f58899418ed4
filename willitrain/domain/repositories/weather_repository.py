"""Weather repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from ..entities.weather_series import WeatherSeries


class WeatherRepository(ABC):
    """Abstract repository for historical daily observations."""

    @abstractmethod
    def get_weather_series(
        self,
        latitude: float,
        longitude: float,
        start_date: date,
        end_date: date,
    ) -> WeatherSeries:
        """
        Retrieve daily temperature, precipitation, wind and snow depth series.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            start_date: Start date (inclusive)
            end_date: End date (inclusive)

        Returns:
            WeatherSeries keyed by YYYYMMDD

        Raises:
            ProviderUnavailableError: If the provider cannot answer
        """
        pass
