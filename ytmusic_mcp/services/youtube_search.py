"""
YouTube Data API search client.
"""
from typing import List, Optional, Sequence
from ..models.errors import SearchError
from ..models.track import SearchQuery, VideoCandidate
import httpx
import logging

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"


class YouTubeSearchClient:
    """
    Resolves free-text queries to video candidates.

    Results keep the upstream order; the first one is the best candidate.
    A client without an API key is disabled and refuses to search.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = 30.0,
    ):
        self.api_key = api_key or None
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.api_key is not None

    async def search(self, query: SearchQuery) -> List[VideoCandidate]:
        if not self.enabled:
            raise SearchError("YouTube API key is not configured", code="SEARCH_DISABLED")

        params = {
            "key": self.api_key,
            "part": "snippet",
            "maxResults": query.max_results,
            "type": "video",
            "q": query.text,
        }

        logger.info(f"Searching YouTube for: {query.text} (max {query.max_results})")
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
            try:
                response = await client.get("/search", params=params)
            except httpx.HTTPError as e:
                raise SearchError(f"YouTube API search failed: {e!r}") from e

        if response.status_code >= 400:
            raise SearchError(
                f"YouTube API search failed: status code {response.status_code}"
                f"{self._upstream_message(response)}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise SearchError(f"YouTube API search failed: invalid JSON response ({e})") from e

        items = payload.get("items") if isinstance(payload, dict) else None
        items = items or []
        candidates = [VideoCandidate.from_search_item(item) for item in items if isinstance(item, dict)]
        logger.info(f"Found {len(candidates)} result(s) for: {query.text}")
        return candidates

    @staticmethod
    def pick_best(candidates: Sequence[VideoCandidate]) -> Optional[VideoCandidate]:
        return candidates[0] if candidates else None

    @staticmethod
    def _upstream_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return ""
        error = payload.get("error") if isinstance(payload, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        return f" - {message}" if message else ""
