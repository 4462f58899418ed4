"""Use case for collecting historical weather data."""

import logging
from datetime import date
from ..entities.location import Location
from ..entities.weather_series import WeatherSeries
from ..repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class CollectWeatherDataUseCase:
    """Use case to collect historical weather series from repository."""

    def __init__(self, repository: WeatherRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for historical observations
        """
        self.repository = repository

    def execute(
        self,
        location: Location,
        start_date: date,
        end_date: date,
    ) -> WeatherSeries:
        """
        Execute the use case.

        Args:
            location: Point to collect observations for
            start_date: Start date (inclusive)
            end_date: End date (inclusive)

        Returns:
            WeatherSeries for the location
        """
        logger.info(
            f"Collecting weather data: location={location}, "
            f"start={start_date}, end={end_date}"
        )
        series = self.repository.get_weather_series(
            location.latitude, location.longitude, start_date, end_date
        )
        logger.info(f"Collected {len(series)} daily records")
        return series
