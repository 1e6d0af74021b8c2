"""
HTTP client for the ExerciseDB catalog source.

ExerciseDB is served through RapidAPI. The client reads the exercise list
one page at a time using ``limit``/``offset`` query parameters.
"""

import logging
from typing import Dict, List, Optional

import httpx

from application.exceptions import NetworkError, NotConfigured, UpstreamError

logger = logging.getLogger(__name__)


class ExerciseDBClient:
    """
    Paginated ExerciseDB reader.

    Satisfies the ExerciseSource port used by the catalog sync job.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://exercisedb.p.rapidapi.com",
        timeout: float = 30.0,
    ):
        """
        Initialize the ExerciseDB client.

        Args:
            api_key: RapidAPI key (None means not configured)
            base_url: ExerciseDB base URL
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _headers(self) -> Dict[str, str]:
        host = httpx.URL(self._base_url).host
        return {
            "X-RapidAPI-Key": self._api_key or "",
            "X-RapidAPI-Host": host,
        }

    async def fetch_page(self, offset: int, limit: int) -> List[Dict]:
        """
        Fetch one page of exercises.

        Args:
            offset: Index of the first exercise
            limit: Page size

        Returns:
            List of raw ExerciseDB exercise objects

        Raises:
            NotConfigured: If no API key is set
            UpstreamError: If ExerciseDB returns an error or a non-list body
            NetworkError: If ExerciseDB is not reachable
        """
        if not self.is_configured:
            raise NotConfigured(
                "ExerciseDB API key not configured. Set EXERCISEDB_API_KEY.",
                setting="exercisedb_api_key",
            )

        url = f"{self._base_url}/exercises"
        params = {"limit": limit, "offset": offset}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.error(f"ExerciseDB timeout at offset {offset}: {e}")
            raise NetworkError("ExerciseDB request timed out") from e
        except httpx.TransportError as e:
            logger.error(f"ExerciseDB unavailable: {e}")
            raise NetworkError(f"ExerciseDB is not available at {self._base_url}") from e

        if response.status_code != 200:
            logger.error(f"ExerciseDB error: {response.status_code} - {response.text[:200]}")
            raise UpstreamError(
                "Failed to fetch exercises from ExerciseDB",
                upstream_status=response.status_code,
                body=response.text,
            )

        data = response.json()
        if not isinstance(data, list):
            raise UpstreamError(
                "Unexpected ExerciseDB response format",
                upstream_status=response.status_code,
                body=response.text,
            )
        return data
