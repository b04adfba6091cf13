"""Tests for MCP tool registration and response conversion."""
import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from conftest import FakeAcquirer, FakeLauncher, FakeResolver
from ytmusic_mcp.models.errors import ResolutionError, SearchError
from ytmusic_mcp.models.track import ToolResponse, VideoCandidate
from ytmusic_mcp.server import MCPServer
from ytmusic_mcp.services.music_service import MusicService, MusicServiceConfig
from ytmusic_mcp.services.track_service import TrackService
from ytmusic_mcp.tools.music_tools import (
    UPSTREAM_DATA_ERROR_PREFIX,
    register_music_tools,
    to_text_content,
    to_upstream_error,
)

TOOL_NAMES = {"searchTrack", "playTrack", "downloadTrack"}


def _mcp_with(resolver, play_mode="download") -> FastMCP:
    mcp = FastMCP("test")
    service = TrackService(
        resolver=resolver, acquirer=FakeAcquirer(), launcher=FakeLauncher(), play_mode=play_mode
    )
    descriptions = MusicService(MusicServiceConfig(api_key="k")).get_tool_descriptions()
    register_music_tools(mcp, service, descriptions)
    return mcp


def test_to_text_content_splits_segments():
    content = to_text_content(ToolResponse(texts=["Downloaded audio: A", "File path: /tmp/a.mp3"]))
    assert [c.text for c in content] == ["Downloaded audio: A", "File path: /tmp/a.mp3"]
    assert all(c.type == "text" for c in content)


def test_to_text_content_raises_tool_error_for_error_response():
    with pytest.raises(ToolError, match="quota"):
        to_text_content(ToolResponse.error("Error searching YouTube: quota"))


def test_to_upstream_error_names_code_and_message():
    err = to_upstream_error(ResolutionError(ResolutionError.MISSING_VIDEO_ID, "no id"))
    assert isinstance(err, ToolError)
    assert str(err) == f"{UPSTREAM_DATA_ERROR_PREFIX} [MISSING_VIDEO_ID]: no id"


@pytest.mark.asyncio
async def test_tools_registered_when_api_key_present():
    server = MCPServer(MusicServiceConfig(api_key="k"))
    tools = await server.get_mcp_instance().get_tools()
    assert set(tools) == TOOL_NAMES
    assert set(server.get_registry().registered_tools) == TOOL_NAMES


@pytest.mark.asyncio
async def test_no_tools_without_api_key():
    server = MCPServer(MusicServiceConfig(api_key=None))
    tools = await server.get_mcp_instance().get_tools()
    assert tools == {}
    assert server.get_registry().registered_tools == []


@pytest.mark.asyncio
async def test_search_track_over_client():
    mcp = _mcp_with(FakeResolver([VideoCandidate(video_id="fJ9rUzIMcZQ", title="Bohemian Rhapsody")]))
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("searchTrack", {"trackName": "Bohemian Rhapsody"})
    assert result.isError is False
    assert "fJ9rUzIMcZQ" in result.content[0].text


@pytest.mark.asyncio
async def test_download_track_over_client():
    mcp = _mcp_with(FakeResolver([VideoCandidate(video_id="fJ9rUzIMcZQ", title="Bohemian Rhapsody")]))
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("downloadTrack", {"trackName": "Bohemian Rhapsody"})
    assert result.isError is False
    assert [c.text for c in result.content] == [
        "Downloaded audio: Bohemian Rhapsody",
        "File path: /tmp/youtube-audio/Bohemian Rhapsody.mp3",
    ]


@pytest.mark.asyncio
async def test_soft_error_sets_error_flag_over_client():
    mcp = _mcp_with(FakeResolver(error=SearchError("YouTube API search failed: status code 403")))
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("searchTrack", {"trackName": "x"})
    assert result.isError is True
    assert "status code 403" in result.content[0].text


@pytest.mark.asyncio
@pytest.mark.parametrize("tool", ["downloadTrack", "playTrack"])
@pytest.mark.parametrize("play_mode", ["download", "browser"])
async def test_missing_video_id_over_client(tool, play_mode):
    mcp = _mcp_with(FakeResolver([VideoCandidate(title="Broken")]), play_mode=play_mode)
    async with Client(mcp) as client:
        result = await client.call_tool_mcp(tool, {"trackName": "Broken"})
    assert result.isError is True
    text = result.content[0].text
    assert f"{UPSTREAM_DATA_ERROR_PREFIX} [MISSING_VIDEO_ID]" in text
    assert "Could not extract video ID" in text
    assert "No search results" not in text
