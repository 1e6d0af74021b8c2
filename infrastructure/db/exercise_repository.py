"""
Supabase implementation of ExerciseRepository.

Queries the ``exercises`` table, which holds the catalog synced from
ExerciseDB (columns: id, api_id, name, body_part, target, equipment,
instructions, gif_url).
"""

import logging
from typing import Dict, List

from supabase import Client

from models.exercise import ExerciseRecord

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = "id, api_id, name, body_part, target, equipment, instructions, gif_url"


class SupabaseExerciseRepository:
    """
    Supabase-backed exercise catalog.

    Read operations return ExerciseRecord models; the sync job writes plain
    rows through upsert_many.
    """

    TABLE = "exercises"

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def count(self) -> int:
        """
        Count every exercise in the catalog.

        Returns:
            Total number of catalog records
        """
        response = (
            self._client.table(self.TABLE)
            .select("id", count="exact")
            .limit(1)
            .execute()
        )
        return response.count or 0

    def find_by_equipment(
        self,
        equipment: List[str],
        limit: int = 200,
    ) -> List[ExerciseRecord]:
        """
        Get exercises whose equipment tag is one of the given tags.

        Args:
            equipment: Equipment tags to match
            limit: Maximum number of results

        Returns:
            Matching exercises ordered by name
        """
        if not equipment:
            return []

        response = (
            self._client.table(self.TABLE)
            .select(CATALOG_COLUMNS)
            .in_("equipment", equipment)
            .order("name")
            .limit(limit)
            .execute()
        )
        return [ExerciseRecord.model_validate(row) for row in response.data or []]

    def upsert_many(self, rows: List[Dict]) -> int:
        """
        Insert catalog rows, skipping rows whose api_id already exists.

        Args:
            rows: Exercise rows in catalog column format

        Returns:
            Number of rows written
        """
        if not rows:
            return 0

        response = (
            self._client.table(self.TABLE)
            .upsert(rows, on_conflict="api_id", ignore_duplicates=True)
            .execute()
        )
        written = len(response.data or [])
        logger.info(f"Upserted {written} of {len(rows)} exercise rows")
        return written
