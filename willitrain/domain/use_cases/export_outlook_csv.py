"""Use case for exporting a calendar-day sample as CSV."""

import logging
from typing import List, Optional, Sequence
import pandas as pd
from ..entities.condition_estimate import ConditionEstimate
from ..entities.historical_sample import HistoricalSample
from ..exceptions import InsufficientDataError
from ..statistics import aggregate
from .condition_readings import ConditionReadings

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["date", "temperature", "precipitation", "snow_depth", "wind_speed"]
UNITS_ROW = ["Parameters", "F", "in", "in", "mph"]


def format_value(value: Optional[float]) -> str:
    """Format an observation the way it was received (no trailing '.0')."""
    if value is None:
        return ""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class ExportOutlookCsvUseCase:
    """Use case to render matched days, averages and percentages as a CSV table."""

    def execute(
        self, sample: HistoricalSample, estimates: Sequence[ConditionEstimate]
    ) -> str:
        """
        Execute export.

        Args:
            sample: Calendar-day sample
            estimates: Rain, snow and wind estimates for the sample

        Returns:
            CSV text: header, one row per matched day, then the
            Average, Percentages and Parameters rows

        Raises:
            InsufficientDataError: If the sample is empty
        """
        if sample.is_empty:
            raise InsufficientDataError(f"Nothing to export for {sample.month_day}")
        readings = ConditionReadings.from_estimates(estimates)

        rows: List[List[str]] = [
            [o.date] + [format_value(getattr(o, column)) for column in CSV_COLUMNS[1:]]
            for o in sample.observations
        ]
        rows.append(
            ["Average"]
            + [f"{aggregate(getattr(sample, column)).mean:.2f}" for column in CSV_COLUMNS[1:]]
        )
        rows.append(
            ["Percentages", "", str(readings.rain), str(readings.snow), str(readings.wind)]
        )
        rows.append(UNITS_ROW)

        df = pd.DataFrame(rows, columns=CSV_COLUMNS)
        logger.info(f"Exported {len(sample)} days for {sample.month_day}")
        return df.to_csv(index=False, lineterminator="\n")
