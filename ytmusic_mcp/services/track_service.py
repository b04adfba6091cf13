"""
Track search, playback and download orchestration.
"""
from typing import Optional, Tuple
from ..models.errors import (
    AcquisitionError,
    LaunchError,
    ProcessError,
    ResolutionError,
    SearchError,
)
from ..models.track import SearchQuery, ToolResponse, VideoCandidate
from .acquisition import AudioAcquirer
from .launcher import PlatformLauncher
from .youtube_search import YouTubeSearchClient
import json
import logging

logger = logging.getLogger(__name__)

PLAY_MODE_BROWSER = "browser"
PLAY_MODE_DOWNLOAD = "download"
SEARCH_RESULT_COUNT = 5


def no_results_message(track_name: str) -> str:
    return f"No search results found for: {track_name}"


class TrackService:
    """
    Facade behind the three music tools.

    Search, download and launch failures come back as error responses.
    A top result without a video id is raised as ResolutionError because it
    means the upstream data is malformed, not that nothing matched.
    """

    def __init__(
        self,
        resolver: YouTubeSearchClient,
        acquirer: AudioAcquirer,
        launcher: PlatformLauncher,
        play_mode: str = PLAY_MODE_DOWNLOAD,
    ):
        if play_mode not in (PLAY_MODE_BROWSER, PLAY_MODE_DOWNLOAD):
            raise ValueError(f"Unsupported play mode: {play_mode}")
        self.resolver = resolver
        self.acquirer = acquirer
        self.launcher = launcher
        self.play_mode = play_mode

    async def search_track(self, track_name: str) -> ToolResponse:
        try:
            candidates = await self.resolver.search(
                SearchQuery(text=track_name, max_results=SEARCH_RESULT_COUNT)
            )
        except SearchError as e:
            logger.error(f"Error in searchTrack: {e.message}")
            return ToolResponse.error(f"Error searching YouTube: {e.message}")

        if not candidates:
            return ToolResponse(texts=[no_results_message(track_name)])

        payload = [candidate.model_dump() for candidate in candidates]
        return ToolResponse(texts=[json.dumps(payload, indent=2, ensure_ascii=False)])

    async def play_track(self, track_name: str) -> ToolResponse:
        if self.play_mode == PLAY_MODE_BROWSER:
            return await self._open_in_browser(track_name)
        return await self._download(
            track_name,
            headline="Downloaded audio for playback",
            error_prefix="Error downloading track for playback",
        )

    async def download_track(self, track_name: str) -> ToolResponse:
        return await self._download(
            track_name,
            headline="Downloaded audio",
            error_prefix="Error downloading track",
        )

    async def resolve_best(self, track_name: str) -> Tuple[Optional[VideoCandidate], Optional[str]]:
        """
        Return the best candidate and its video id, or (None, None) if nothing
        matched. Raises SearchError and ResolutionError.
        """
        candidates = await self.resolver.search(SearchQuery(text=track_name, max_results=1))
        best = self.resolver.pick_best(candidates)
        if best is None:
            return None, None
        if not best.video_id:
            logger.error(f"Could not find video ID in top search result: {best!r}")
            raise ResolutionError(
                ResolutionError.MISSING_VIDEO_ID,
                "Could not extract video ID from YouTube search result.",
            )
        return best, best.video_id

    async def _download(self, track_name: str, headline: str, error_prefix: str) -> ToolResponse:
        try:
            best, video_id = await self.resolve_best(track_name)
            if best is None:
                return ToolResponse(texts=[no_results_message(track_name)])
            result = await self.acquirer.acquire(video_id)
        except ResolutionError as e:
            if e.code == ResolutionError.MISSING_VIDEO_ID:
                raise
            logger.error(f"{error_prefix}: {e.message}")
            return ToolResponse.error(f"{error_prefix}: {e.message}")
        except (SearchError, AcquisitionError, ProcessError) as e:
            logger.error(f"{error_prefix}: {e.message}")
            return ToolResponse.error(f"{error_prefix}: {e.message}")

        return ToolResponse(texts=[f"{headline}: {best.title}", f"File path: {result.file_path}"])

    async def _open_in_browser(self, track_name: str) -> ToolResponse:
        error_prefix = "Error opening track in browser"
        try:
            best, _ = await self.resolve_best(track_name)
            if best is None:
                return ToolResponse(texts=[no_results_message(track_name)])
            await self.launcher.open(best.music_url)
        except (SearchError, LaunchError, ProcessError) as e:
            logger.error(f"{error_prefix}: {e.message}")
            return ToolResponse.error(f"{error_prefix}: {e.message}")

        return ToolResponse(texts=[f"Opened in browser: {best.title}", f"URL: {best.music_url}"])
