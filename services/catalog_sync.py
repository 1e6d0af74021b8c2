"""
Catalog sync from ExerciseDB.

Populates the exercise catalog that workout generation reads from. Pages are
fetched in batches of concurrent requests (10 by default) so the upstream
rate limit is not overwhelmed; the sync stops after the first batch that
contains a short or empty page.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from application.exceptions import NotConfigured
from application.ports import ExerciseRepository, ExerciseSource
from models.exercise import SyncResult, SyncStatus

logger = logging.getLogger(__name__)


def to_catalog_row(source_row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Convert an ExerciseDB exercise into a catalog row.

    Rows without an id or a name are skipped. Instruction steps are joined
    with newlines.

    Returns:
        Catalog row dict, or None if the source row is unusable
    """
    api_id = source_row.get("id")
    name = source_row.get("name")
    if not api_id or not isinstance(name, str) or not name.strip():
        return None

    instructions = source_row.get("instructions")
    if isinstance(instructions, list):
        instructions = "\n".join(str(step) for step in instructions if step)
    elif not isinstance(instructions, str):
        instructions = None

    return {
        "api_id": str(api_id),
        "name": name.strip(),
        "body_part": str(source_row.get("bodyPart") or "").strip(),
        "target": str(source_row.get("target") or "").strip(),
        "equipment": str(source_row.get("equipment") or "").strip().lower(),
        "instructions": instructions or None,
        "gif_url": source_row.get("gifUrl"),
    }


class CatalogSyncService:
    """Copies the upstream exercise catalog into the exercise repository."""

    DEFAULT_BATCH_SIZE = 10
    DEFAULT_PAGE_SIZE = 100
    DEFAULT_MAX_PAGES = 50

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        source: ExerciseSource,
        batch_size: int = DEFAULT_BATCH_SIZE,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        """
        Initialize the sync service.

        Args:
            exercise_repo: Catalog to write into
            source: Upstream catalog to read from
            batch_size: Concurrent page requests per batch
            page_size: Exercises per page
            max_pages: Hard cap on pages fetched in one sync
        """
        if batch_size < 1 or page_size < 1 or max_pages < 1:
            raise ValueError("batch_size, page_size and max_pages must be >= 1")
        self._exercise_repo = exercise_repo
        self._source = source
        self._batch_size = batch_size
        self._page_size = page_size
        self._max_pages = max_pages

    def check_sync(self) -> SyncStatus:
        """Report whether the catalog has any exercises."""
        count = self._exercise_repo.count()
        return SyncStatus(synced=count > 0, count=count)

    async def fetch_all(self) -> List[Dict[str, Any]]:
        """
        Fetch every page from the source, one concurrent batch at a time.

        Returns:
            Raw source rows in page order

        Raises:
            NotConfigured: If the source has no credentials
            UpstreamError, NetworkError: If any page request fails
        """
        if not self._source.is_configured:
            raise NotConfigured(
                "ExerciseDB API key not configured. Set EXERCISEDB_API_KEY.",
                setting="exercisedb_api_key",
            )

        rows: List[Dict[str, Any]] = []
        page = 0
        while page < self._max_pages:
            batch_pages = range(page, min(page + self._batch_size, self._max_pages))
            pages = await asyncio.gather(
                *(
                    self._source.fetch_page(offset=p * self._page_size, limit=self._page_size)
                    for p in batch_pages
                )
            )
            logger.debug(f"Fetched pages {batch_pages.start}-{batch_pages.stop - 1}")

            exhausted = False
            for page_rows in pages:
                rows.extend(page_rows)
                if len(page_rows) < self._page_size:
                    exhausted = True
                    break
            if exhausted:
                return rows
            page = batch_pages.stop

        logger.warning(f"Stopped catalog fetch at max_pages={self._max_pages}")
        return rows

    async def sync(self) -> SyncResult:
        """
        Sync the catalog from the source.

        Returns:
            SyncResult with the number of rows fetched and written
        """
        source_rows = await self.fetch_all()

        catalog_rows: List[Dict[str, Any]] = []
        seen_ids = set()
        for source_row in source_rows:
            row = to_catalog_row(source_row)
            if row is None or row["api_id"] in seen_ids:
                continue
            seen_ids.add(row["api_id"])
            catalog_rows.append(row)

        count = await asyncio.get_running_loop().run_in_executor(
            None, self._exercise_repo.upsert_many, catalog_rows
        )
        logger.info(f"Catalog sync wrote {count} of {len(source_rows)} fetched exercises")
        return SyncResult(
            count=count,
            fetched=len(source_rows),
            message=f"Successfully synced {count} exercises",
        )
