"""Activity entity."""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
from .recommendation import PlannerTier, Recommendation


@dataclass(frozen=True)
class Activity:
    """Catalog activity, optionally rated for a set of conditions."""

    id: str
    name: str
    description: str
    indoor: bool = False
    recommendation: Optional[Recommendation] = None

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "Activity":
        """Create Activity from a catalog definition."""
        return cls(
            id=definition["id"],
            name=definition["name"],
            description=definition.get("description", ""),
            indoor=bool(definition.get("indoor", False)),
        )

    def with_recommendation(self, recommendation: Recommendation) -> "Activity":
        return replace(self, recommendation=recommendation)

    @property
    def planner_tier(self) -> Optional[PlannerTier]:
        if self.recommendation is None:
            return None
        return self.recommendation.to_planner_tier()

    def __str__(self) -> str:
        return self.name
