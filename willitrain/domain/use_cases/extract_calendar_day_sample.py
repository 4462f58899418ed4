"""Use case for extracting the observations of one calendar day across years."""

import logging
import re
from datetime import date, datetime
from typing import Dict, Optional
import pandas as pd
from ..entities.daily_observation import DailyObservation
from ..entities.historical_sample import HistoricalSample
from ..entities.weather_series import TimeSeries, WeatherSeries
from ..exceptions import MalformedSeriesError

logger = logging.getLogger(__name__)

DATE_KEY_PATTERN = re.compile(r"^\d{8}$")


def _optional(value: float) -> Optional[float]:
    return None if pd.isna(value) else float(value)


class ExtractCalendarDaySampleUseCase:
    """Use case to select every year's value for a target month and day."""

    def __init__(self, fill_value: float = -999.0):
        """
        Initialize use case.

        Args:
            fill_value: Provider marker for a missing observation
        """
        self.fill_value = fill_value

    @staticmethod
    def parse_key(key: object) -> str:
        """
        Validate a YYYYMMDD key.

        Raises:
            MalformedSeriesError: If the key is not a valid 8-digit date
        """
        text = str(key)
        if not DATE_KEY_PATTERN.match(text):
            raise MalformedSeriesError(key)
        try:
            datetime.strptime(text, "%Y%m%d")
        except ValueError:
            raise MalformedSeriesError(key) from None
        return text

    def _to_series(self, name: str, values: TimeSeries) -> pd.Series:
        """Convert one time series to a numeric pandas Series, skipping bad keys."""
        valid: Dict[str, object] = {}
        for key, value in values.items():
            try:
                valid[self.parse_key(key)] = value
            except MalformedSeriesError as e:
                logger.warning(f"Skipping {name} entry: {e}")

        series = pd.to_numeric(pd.Series(valid, dtype=object), errors="coerce").astype(float)
        return series.mask(series == self.fill_value)

    def execute(self, series: WeatherSeries, target_date: date) -> HistoricalSample:
        """
        Execute extraction.

        Args:
            series: Multi-year daily series
            target_date: Day of interest; only month and day are used

        Returns:
            HistoricalSample ordered by ascending date key (possibly empty)
        """
        month_day = target_date.strftime("%m%d")

        frame = pd.DataFrame(
            {name: self._to_series(name, values) for name, values in series.as_columns().items()}
        )
        if frame.empty:
            logger.warning(f"No observations available for {month_day}")
            return HistoricalSample(month_day=month_day)

        mask = [str(key)[-4:] == month_day for key in frame.index]
        matched = frame.loc[mask].sort_index().dropna(how="all")

        observations = tuple(
            DailyObservation(
                date=str(key),
                temperature=_optional(row["temperature"]),
                precipitation=_optional(row["precipitation"]),
                wind_speed=_optional(row["wind_speed"]),
                snow_depth=_optional(row["snow_depth"]),
            )
            for key, row in matched.iterrows()
        )
        sample = HistoricalSample(month_day=month_day, observations=observations)
        logger.info(f"Matched {len(sample)} historical days for {month_day}")
        return sample
