"""
Music tools for YouTube track search, playback and download.
"""
from typing import Annotated, Dict, List
from pydantic import Field
from fastmcp.exceptions import ToolError
from mcp.types import TextContent
from ..models.base import RichToolDescription
from ..models.errors import ResolutionError
from ..models.track import ToolResponse
from ..services.track_service import TrackService
import logging

logger = logging.getLogger(__name__)

TrackName = Annotated[str, Field(description="The name of the track to search for")]


def to_text_content(response: ToolResponse) -> list[TextContent]:
    """Convert a response to MCP content, raising ToolError for error responses."""
    if response.is_error:
        raise ToolError("\n".join(response.texts))
    return [TextContent(type="text", text=text) for text in response.texts]


UPSTREAM_DATA_ERROR_PREFIX = "Malformed YouTube search result"


def to_upstream_error(error: ResolutionError) -> ToolError:
    """
    Error for a malformed upstream result.

    Raised rather than returned so it is never mistaken for an empty search;
    FastMCP still reports it to the client as an isError result, with this
    prefix and the error code in the text.
    """
    return ToolError(f"{UPSTREAM_DATA_ERROR_PREFIX} [{error.code}]: {error.message}")


def register_music_tools(
    mcp,
    track_service: TrackService,
    descriptions: Dict[str, RichToolDescription],
) -> List[str]:
    """Register music-related tools with the MCP server."""

    logger.info("Registering music tools...")

    @mcp.tool(name="searchTrack", description=descriptions["searchTrack"].model_dump_json())
    async def search_track(trackName: TrackName) -> list[TextContent]:
        """Search for tracks on YouTube Music by name."""
        logger.info(f"searchTrack: {trackName}")
        return to_text_content(await track_service.search_track(trackName))

    @mcp.tool(name="playTrack", description=descriptions["playTrack"].model_dump_json())
    async def play_track(trackName: TrackName) -> list[TextContent]:
        """Play the best YouTube match for a track name."""
        logger.info(f"playTrack: {trackName}")
        try:
            response = await track_service.play_track(trackName)
        except ResolutionError as e:
            logger.error(f"Error in playTrack tool: {e.message}")
            raise to_upstream_error(e) from e
        return to_text_content(response)

    @mcp.tool(name="downloadTrack", description=descriptions["downloadTrack"].model_dump_json())
    async def download_track(trackName: TrackName) -> list[TextContent]:
        """Download the audio of the best YouTube match for a track name."""
        logger.info(f"downloadTrack: {trackName}")
        try:
            response = await track_service.download_track(trackName)
        except ResolutionError as e:
            logger.error(f"Error in downloadTrack tool: {e.message}")
            raise to_upstream_error(e) from e
        return to_text_content(response)

    return ["searchTrack", "playTrack", "downloadTrack"]
