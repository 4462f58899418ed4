"""Current conditions repository interface."""

from abc import ABC, abstractmethod
from ..entities.current_conditions import CurrentConditions


class CurrentConditionsRepository(ABC):
    """Abstract repository for live weather snapshots."""

    @abstractmethod
    def get_current_conditions(self, latitude: float, longitude: float) -> CurrentConditions:
        """
        Retrieve the current weather at a point.

        Raises:
            ProviderUnavailableError: If the provider cannot answer
        """
        pass
