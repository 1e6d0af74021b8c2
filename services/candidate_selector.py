"""
Candidate selection for workout generation.

Picks the catalog exercises the generator may choose from: every exercise
whose equipment tag is one of the user's declared equipment tags, in
alphabetical catalog order, capped at a fixed size. The same list is later
the only universe the exercise matcher resolves into.
"""

import logging
from typing import List

from application.exceptions import CatalogEmpty, NoCandidates
from application.ports import ExerciseRepository
from core.constants import DEFAULT_CANDIDATE_LIMIT
from core.sanitization import normalize_equipment_name
from models.exercise import ExerciseRecord

logger = logging.getLogger(__name__)


class CandidateSelector:
    """Read-only selector over the exercise catalog."""

    def __init__(self, exercise_repo: ExerciseRepository):
        """
        Initialize the candidate selector.

        Args:
            exercise_repo: Repository for exercise catalog access
        """
        self._exercise_repo = exercise_repo

    def select(
        self,
        equipment: List[str],
        limit: int = DEFAULT_CANDIDATE_LIMIT,
    ) -> List[ExerciseRecord]:
        """
        Select candidate exercises for the given equipment.

        Args:
            equipment: Equipment tags the user has
            limit: Maximum number of candidates

        Returns:
            Candidates in catalog order, at most ``limit`` long

        Raises:
            CatalogEmpty: If the catalog holds no exercises at all
            NoCandidates: If no exercise uses any of the given equipment
        """
        if self._exercise_repo.count() == 0:
            logger.warning("Exercise catalog is empty; a catalog sync is required")
            raise CatalogEmpty()

        wanted: List[str] = []
        for item in equipment:
            tag = normalize_equipment_name(item)
            if tag and tag not in wanted:
                wanted.append(tag)

        records = self._exercise_repo.find_by_equipment(wanted, limit=limit)
        wanted_set = set(wanted)
        candidates = [
            record
            for record in records
            if normalize_equipment_name(record.equipment) in wanted_set
        ][:limit]

        if not candidates:
            logger.info(f"No catalog exercises for equipment {wanted}")
            raise NoCandidates(wanted or list(equipment))

        logger.debug(f"Selected {len(candidates)} candidates for equipment {wanted}")
        return candidates
