"""Saved query repository interface."""

from abc import ABC, abstractmethod
from typing import List
from ..entities.saved_query import SavedQuery


class SavedQueryRepository(ABC):
    """Abstract repository for user-saved queries."""

    @abstractmethod
    def list_queries(self) -> List[SavedQuery]:
        """
        List saved queries, newest first.

        Returns:
            List of SavedQuery entities
        """
        pass

    @abstractmethod
    def add_query(self, query: SavedQuery) -> None:
        """
        Save a query in front of the existing ones.

        Args:
            query: SavedQuery to store
        """
        pass

    @abstractmethod
    def delete_query(self, query_id: str) -> bool:
        """
        Delete a saved query.

        Args:
            query_id: Identifier of the query

        Returns:
            True if a query was removed, False otherwise
        """
        pass
