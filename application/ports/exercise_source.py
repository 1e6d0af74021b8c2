"""
Exercise source port (interface).

The upstream catalog (ExerciseDB) that the sync job reads pages from.
"""

from typing import Dict, List, Protocol


class ExerciseSource(Protocol):
    """Paginated read access to an external exercise catalog."""

    @property
    def is_configured(self) -> bool:
        """Whether credentials for the source are available."""
        ...

    async def fetch_page(self, offset: int, limit: int) -> List[Dict]:
        """
        Fetch one page of raw exercise rows.

        Args:
            offset: Index of the first row to return
            limit: Maximum number of rows to return

        Returns:
            Raw source rows; fewer than ``limit`` means the last page
        """
        ...
