"""Rule-engine inputs read off a set of condition estimates."""

from dataclasses import dataclass
from typing import Sequence
from ..entities.condition_estimate import ConditionEstimate, ConditionId
from ..exceptions import InsufficientDataError
from ..statistics import round_half_up


@dataclass(frozen=True)
class ConditionReadings:
    """Rounded temperature and per-condition percentages."""

    temperature: int  # Fahrenheit
    rain: int
    snow: int
    wind: int

    @classmethod
    def from_estimates(cls, estimates: Sequence[ConditionEstimate]) -> "ConditionReadings":
        """
        Read the rule inputs off a set of estimates.

        Raises:
            InsufficientDataError: If an estimate is missing
        """
        by_id = {estimate.id: estimate for estimate in estimates}
        missing = [c.value for c in ConditionId if c not in by_id]
        if missing:
            raise InsufficientDataError(f"Missing condition estimates: {', '.join(missing)}")

        return cls(
            temperature=round_half_up(by_id[ConditionId.RAIN].temperature_mean),
            rain=by_id[ConditionId.RAIN].probability,
            snow=by_id[ConditionId.SNOW].probability,
            wind=by_id[ConditionId.WIND].probability,
        )
