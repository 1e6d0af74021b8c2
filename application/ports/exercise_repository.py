"""
Exercise repository port (interface).

This Protocol defines the contract for exercise catalog access.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Dict, List, Protocol

from models.exercise import ExerciseRecord


class ExerciseRepository(Protocol):
    """
    Repository interface for the exercise catalog.

    Generation only reads from the catalog. Writes happen exclusively through
    the catalog sync job via upsert_many.
    """

    def count(self) -> int:
        """
        Count every exercise in the catalog.

        Used to tell an empty catalog apart from a query with no matches.

        Returns:
            Total number of catalog records
        """
        ...

    def find_by_equipment(
        self,
        equipment: List[str],
        limit: int = 200,
    ) -> List[ExerciseRecord]:
        """
        Get exercises whose equipment tag is one of the given tags.

        Args:
            equipment: Equipment tags to match (exact tag equality)
            limit: Maximum number of results

        Returns:
            Matching exercises ordered alphabetically by name
        """
        ...

    def upsert_many(self, rows: List[Dict]) -> int:
        """
        Insert catalog rows, skipping rows whose api_id already exists.

        Args:
            rows: Exercise rows in catalog column format

        Returns:
            Number of rows written
        """
        ...
