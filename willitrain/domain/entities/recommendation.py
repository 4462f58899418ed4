"""Recommendation tier enumerations."""

from enum import Enum


class PlannerTier(str, Enum):
    """Coarse tiers used by the activity planner view."""

    RECOMMENDED = "recommended"
    CAUTION = "caution"
    NOT_RECOMMENDED = "not-recommended"


class Recommendation(str, Enum):
    """Suitability of an activity for the estimated conditions."""

    IDEAL = "ideal"
    OKAY = "okay"
    AVOID = "avoid"

    def to_planner_tier(self) -> PlannerTier:
        """Convert to the planner view tier."""
        mapping = {
            Recommendation.IDEAL: PlannerTier.RECOMMENDED,
            Recommendation.OKAY: PlannerTier.CAUTION,
            Recommendation.AVOID: PlannerTier.NOT_RECOMMENDED,
        }
        return mapping[self]

    def describe(self) -> str:
        """Short human-readable advice."""
        mapping = {
            Recommendation.IDEAL: "Great day for it",
            Recommendation.OKAY: "Possible with precautions",
            Recommendation.AVOID: "Better to skip",
        }
        return mapping[self]

    @property
    def color(self) -> str:
        mapping = {
            Recommendation.IDEAL: "#4CAF50",
            Recommendation.OKAY: "#FFC107",
            Recommendation.AVOID: "#FF5252",
        }
        return mapping[self]
