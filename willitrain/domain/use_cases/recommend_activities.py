"""Use case for rating activities against condition estimates."""

import logging
from typing import List, Sequence, Tuple
from ..entities.activity import Activity
from ..entities.condition_estimate import ConditionEstimate
from ..entities.recommendation import Recommendation
from .condition_readings import ConditionReadings

logger = logging.getLogger(__name__)


class RecommendActivitiesUseCase:
    """Threshold rules mapping condition estimates to an activity tier.

    Base tiers, first match wins:

    * ideal: pleasant temperature, rain < 30, snow < 10, wind < 30
    * okay: tolerable temperature, rain < 60, snow < 30
    * avoid: otherwise

    Climbing, gardening and fishing then apply their own adjustments.
    Indoor activities are always ideal.
    """

    def __init__(
        self,
        pleasant_temp: Tuple[int, int] = (55, 80),
        tolerable_temp: Tuple[int, int] = (40, 90),
    ):
        """
        Initialize use case.

        Args:
            pleasant_temp: Inclusive Fahrenheit range for the ideal tier
            tolerable_temp: Inclusive Fahrenheit range for the okay tier
        """
        self.pleasant_temp = pleasant_temp
        self.tolerable_temp = tolerable_temp

    @staticmethod
    def _within(value: int, bounds: Tuple[int, int]) -> bool:
        return bounds[0] <= value <= bounds[1]

    def base_recommendation(self, readings: ConditionReadings) -> Recommendation:
        """Classify conditions without activity-specific adjustments."""
        if (
            self._within(readings.temperature, self.pleasant_temp)
            and readings.rain < 30
            and readings.snow < 10
            and readings.wind < 30
        ):
            return Recommendation.IDEAL
        if (
            self._within(readings.temperature, self.tolerable_temp)
            and readings.rain < 60
            and readings.snow < 30
        ):
            return Recommendation.OKAY
        return Recommendation.AVOID

    def apply_override(
        self, activity_id: str, recommendation: Recommendation, readings: ConditionReadings
    ) -> Recommendation:
        """Apply the activity-specific adjustment to a base tier."""
        if activity_id == "climbing":
            if readings.wind >= 25 or readings.rain >= 40:
                return Recommendation.AVOID
        elif activity_id == "gardening":
            if (
                10 <= readings.rain <= 40
                and readings.snow < 10
                and self._within(readings.temperature, self.tolerable_temp)
                and recommendation == Recommendation.AVOID
            ):
                return Recommendation.OKAY
        elif activity_id == "fishing":
            if (
                10 <= readings.rain <= 50
                and readings.snow < 20
                and recommendation != Recommendation.AVOID
            ):
                return Recommendation.IDEAL
        return recommendation

    def recommend(
        self, activity: Activity, estimates: Sequence[ConditionEstimate]
    ) -> Recommendation:
        """
        Rate a single activity.

        Indoor activities are rated before the estimates are read, so they
        rate ideal even when no estimates are available.

        Args:
            activity: Catalog activity
            estimates: Rain, snow and wind estimates

        Returns:
            Recommendation tier

        Raises:
            InsufficientDataError: If an outdoor activity is rated without estimates
        """
        if activity.indoor:
            return Recommendation.IDEAL
        return self._rate(activity, ConditionReadings.from_estimates(estimates))

    def _rate(self, activity: Activity, readings: ConditionReadings) -> Recommendation:
        if activity.indoor:
            return Recommendation.IDEAL
        return self.apply_override(activity.id, self.base_recommendation(readings), readings)

    def execute(
        self, catalog: Sequence[Activity], estimates: Sequence[ConditionEstimate]
    ) -> List[Activity]:
        """
        Rate every catalog activity in one pass.

        Args:
            catalog: Activities to rate
            estimates: Rain, snow and wind estimates

        Returns:
            Catalog activities with their recommendation set, in catalog order
        """
        readings = ConditionReadings.from_estimates(estimates)
        rated = [
            activity.with_recommendation(self._rate(activity, readings))
            for activity in catalog
        ]
        logger.info(
            "Rated activities: "
            + ", ".join(f"{a.id}={a.recommendation.value}" for a in rated)
        )
        return rated
