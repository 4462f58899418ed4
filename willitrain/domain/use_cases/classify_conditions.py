"""Use case for classifying a historical sample into condition estimates."""

import logging
from typing import Any, Dict, List
from ..entities.climate import Climate
from ..entities.condition_estimate import ConditionEstimate, ConditionId
from ..entities.historical_sample import HistoricalSample
from ..exceptions import InsufficientDataError
from ..statistics import aggregate, to_percent

logger = logging.getLogger(__name__)


class ClassifyConditionsUseCase:
    """Use case to turn a calendar-day sample into rain, snow and wind estimates."""

    def __init__(self, condition_definitions: Dict[str, Dict[str, Any]]):
        """
        Initialize use case.

        Args:
            condition_definitions: Mapping of condition id to its
                'label', 'icon' and 'color'
        """
        self.condition_definitions = condition_definitions

    def _build_estimate(
        self, condition_id: ConditionId, probability: int, climate: Climate
    ) -> ConditionEstimate:
        definition = self.condition_definitions.get(condition_id.value, {})
        return ConditionEstimate(
            id=condition_id,
            label=definition.get("label", condition_id.value.title()),
            probability=probability,
            icon=definition.get("icon", ""),
            color=definition.get("color", ""),
            climate=climate,
        )

    def execute(self, sample: HistoricalSample) -> List[ConditionEstimate]:
        """
        Execute classification.

        Args:
            sample: Calendar-day sample

        Returns:
            Estimates for rain, snow and wind, in that order

        Raises:
            InsufficientDataError: If the sample has no usable days
        """
        n = sample.size
        if n == 0:
            raise InsufficientDataError(
                f"No historical observations for {sample.month_day}"
            )

        temperature = aggregate(sample.temperature)
        climate = Climate(
            temperature_mean=temperature.mean,
            temperature_high=temperature.max,
            temperature_low=temperature.min,
            sample_size=n,
        )

        magnitudes = {
            ConditionId.RAIN: aggregate(sample.precipitation).mean,
            ConditionId.SNOW: aggregate(sample.snow_depth).mean,
            ConditionId.WIND: aggregate(sample.wind_speed).mean,
        }
        estimates = [
            self._build_estimate(condition_id, to_percent(magnitude, n), climate)
            for condition_id, magnitude in magnitudes.items()
        ]

        logger.info(
            f"Classified {n} days for {sample.month_day}: "
            + ", ".join(str(e) for e in estimates)
        )
        return estimates
