"""
Music service for track search, playback and download.
"""
from typing import Dict, List, Optional
from ..models.base import RichToolDescription, ToolService, BaseServiceConfig
from ..utils.process import CommandRunner
from .acquisition import AudioAcquirer, DEFAULT_DOWNLOAD_ROOT
from .launcher import PlatformLauncher
from .track_service import TrackService, PLAY_MODE_DOWNLOAD
from .youtube_search import YouTubeSearchClient, DEFAULT_BASE_URL
from .. import config as settings
import logging

logger = logging.getLogger(__name__)


class MusicServiceConfig(BaseServiceConfig):
    """Configuration for music service."""
    api_key: Optional[str] = None
    api_base_url: str = DEFAULT_BASE_URL
    play_mode: str = PLAY_MODE_DOWNLOAD
    download_dir: str = DEFAULT_DOWNLOAD_ROOT
    isolate_downloads: bool = True
    audio_format: str = "mp3"
    ytdlp_path: str = "yt-dlp"
    download_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "MusicServiceConfig":
        return cls(
            api_key=settings.YOUTUBE_API_KEY,
            api_base_url=settings.YOUTUBE_API_BASE_URL,
            play_mode=settings.PLAY_MODE,
            download_dir=settings.DOWNLOAD_DIR,
            isolate_downloads=settings.ISOLATE_DOWNLOADS,
            audio_format=settings.AUDIO_FORMAT,
            ytdlp_path=settings.YTDLP_PATH,
            timeout=settings.REQUEST_TIMEOUT,
            download_timeout=settings.DOWNLOAD_TIMEOUT,
        )


class MusicService(ToolService):
    """Music service for YouTube track search, playback and download."""

    def __init__(self, config: MusicServiceConfig = None):
        super().__init__("music")
        self.config = config or MusicServiceConfig()

    @property
    def enabled(self) -> bool:
        return bool(self.config.api_key)

    def build_track_service(self) -> TrackService:
        runner = CommandRunner()
        return TrackService(
            resolver=YouTubeSearchClient(
                api_key=self.config.api_key,
                base_url=self.config.api_base_url,
                timeout=self.config.timeout,
            ),
            acquirer=AudioAcquirer(
                runner=runner,
                download_root=self.config.download_dir,
                audio_format=self.config.audio_format,
                executable=self.config.ytdlp_path,
                isolate_downloads=self.config.isolate_downloads,
                timeout=self.config.download_timeout,
            ),
            launcher=PlatformLauncher(runner=runner),
            play_mode=self.config.play_mode,
        )

    def get_tool_descriptions(self) -> Dict[str, RichToolDescription]:
        """Get tool descriptions for music service."""
        if self.config.play_mode == PLAY_MODE_DOWNLOAD:
            play_description = RichToolDescription(
                description="Search for a track on YouTube Music, download the audio, and return the file path for playback.",
                use_when="When the user wants to listen to a track by name.",
                side_effects="Runs yt-dlp and writes an audio file to the download directory.",
            )
        else:
            play_description = RichToolDescription(
                description="Search for a track on YouTube Music and open it in the default browser.",
                use_when="When the user wants to listen to a track by name.",
                side_effects="Launches the system browser on the machine running the server.",
            )
        return {
            "searchTrack": RichToolDescription(
                description="Search for tracks on YouTube Music by name.",
                use_when="When you need a list of matching videos for a track name.",
                side_effects="Makes a request to the YouTube Data API and counts against its quota.",
            ),
            "playTrack": play_description,
            "downloadTrack": RichToolDescription(
                description="Search for a track on YouTube Music, download the audio, and return the file path.",
                use_when="When the user wants a local audio file for a track.",
                side_effects="Runs yt-dlp and writes an audio file to the download directory.",
            ),
        }

    def register_tools(self, mcp) -> List[str]:
        """Register music tools with the MCP server."""
        if not self.enabled:
            self.logger.error("YOUTUBE_API_KEY environment variable is not set. YouTube tools will not be registered.")
            return []

        from ..tools.music_tools import register_music_tools

        self.logger.info("Registering music tools...")
        names = register_music_tools(mcp, self.build_track_service(), self.get_tool_descriptions())
        self.logger.info("Music tools registered successfully")
        return names
