"""JSON file saved query repository implementation."""

import json
import logging
from pathlib import Path
from typing import List
from ...domain.entities.saved_query import SavedQuery
from ...domain.repositories.saved_query_repository import SavedQueryRepository

logger = logging.getLogger(__name__)


class JsonSavedQueryRepository(SavedQueryRepository):
    """Repository storing saved queries as a JSON list in a file."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to the JSON file (created on first save)
        """
        self.data_file = Path(data_file)
        self.data_file.parent.mkdir(parents=True, exist_ok=True)

    def list_queries(self) -> List[SavedQuery]:
        """Load saved queries; an unreadable file lists as empty."""
        if not self.data_file.exists():
            return []

        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
            return [SavedQuery.from_dict(item) for item in raw]
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.warning(f"Could not read saved queries from {self.data_file}: {e}")
            return []

    def _write(self, queries: List[SavedQuery]) -> None:
        with open(self.data_file, "w", encoding="utf-8") as f:
            json.dump([q.to_dict() for q in queries], f, ensure_ascii=False, indent=2)

    def add_query(self, query: SavedQuery) -> None:
        """Save a query in front of the existing ones."""
        queries = self.list_queries()
        queries.insert(0, query)
        self._write(queries)
        logger.info(f"Saved query {query.id} for {query.location or 'unnamed location'}")

    def delete_query(self, query_id: str) -> bool:
        """Delete a saved query by id."""
        queries = self.list_queries()
        remaining = [q for q in queries if q.id != query_id]
        if len(remaining) == len(queries):
            return False
        self._write(remaining)
        logger.info(f"Deleted saved query {query_id}")
        return True
