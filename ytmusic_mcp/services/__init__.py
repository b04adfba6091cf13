"""
Services package for the MCP server.
"""
from .youtube_search import YouTubeSearchClient
from .launcher import PlatformLauncher
from .acquisition import (
    AudioAcquirer,
    PathResolutionStrategy,
    MarkerLineResolver,
    RecentFileResolver,
)
from .track_service import TrackService
from .music_service import MusicService, MusicServiceConfig

__all__ = [
    "YouTubeSearchClient",
    "PlatformLauncher",
    "AudioAcquirer",
    "PathResolutionStrategy",
    "MarkerLineResolver",
    "RecentFileResolver",
    "TrackService",
    "MusicService",
    "MusicServiceConfig",
]
