"""
Configuration module for the MCP server.
"""
import os
import tempfile
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default=None):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return float(value)


# Server settings
SERVER_NAME = "youtube-music-mcp"
SERVER_VERSION = "0.1.0"
TRANSPORT = os.getenv("MCP_TRANSPORT", "stdio")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8085"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# YouTube API
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY") or None
YOUTUBE_API_BASE_URL = os.getenv("YOUTUBE_API_BASE_URL", "https://www.googleapis.com/youtube/v3")

# Playback / download
PLAY_MODE = os.getenv("PLAY_MODE", "download").strip().lower()
DOWNLOAD_DIR = os.getenv("DOWNLOAD_DIR") or os.path.join(tempfile.gettempdir(), "youtube-audio")
ISOLATE_DOWNLOADS = _env_bool("ISOLATE_DOWNLOADS", True)
AUDIO_FORMAT = os.getenv("AUDIO_FORMAT", "mp3")
YTDLP_PATH = os.getenv("YTDLP_PATH", "yt-dlp")

# Request settings
REQUEST_TIMEOUT = _env_float("REQUEST_TIMEOUT", 30.0)
DOWNLOAD_TIMEOUT = _env_float("DOWNLOAD_TIMEOUT")
