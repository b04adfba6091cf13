"""
Data models for track search, acquisition and tool responses.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_TITLE = "Unknown Title"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
YOUTUBE_MUSIC_WATCH_URL = "https://music.youtube.com/watch?v={video_id}"


class SearchQuery(BaseModel):
    """A single search request."""
    model_config = ConfigDict(frozen=True)

    text: str
    max_results: int = Field(default=5, gt=0)


class VideoCandidate(BaseModel):
    """One search result, in upstream order."""
    model_config = ConfigDict(frozen=True)

    video_id: Optional[str] = None
    title: str = UNKNOWN_TITLE
    channel_title: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[str] = None
    thumbnail_url: Optional[str] = None

    @classmethod
    def from_search_item(cls, item: dict) -> "VideoCandidate":
        """Build a candidate from a YouTube Data API search item."""
        ids = item.get("id") or {}
        snippet = item.get("snippet") or {}
        thumbnails = snippet.get("thumbnails") or {}
        thumbnail = thumbnails.get("high") or thumbnails.get("default") or {}
        return cls(
            video_id=ids.get("videoId") if isinstance(ids, dict) else None,
            title=snippet.get("title") or UNKNOWN_TITLE,
            channel_title=snippet.get("channelTitle"),
            description=snippet.get("description"),
            published_at=snippet.get("publishedAt"),
            thumbnail_url=thumbnail.get("url"),
        )

    @property
    def watch_url(self) -> Optional[str]:
        if not self.video_id:
            return None
        return YOUTUBE_WATCH_URL.format(video_id=self.video_id)

    @property
    def music_url(self) -> Optional[str]:
        if not self.video_id:
            return None
        return YOUTUBE_MUSIC_WATCH_URL.format(video_id=self.video_id)


class AcquisitionRequest(BaseModel):
    video_id: str
    output_dir: Optional[str] = None
    output_template: str = "%(title)s.%(ext)s"

    @property
    def source_url(self) -> str:
        return YOUTUBE_WATCH_URL.format(video_id=self.video_id)


class AcquisitionResult(BaseModel):
    file_path: str
    video_id: Optional[str] = None
    source_url: Optional[str] = None


class CommandSpec(BaseModel):
    """An external process invocation as an argument vector."""
    executable: str
    args: List[str] = Field(default_factory=list)

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.args]

    def display(self) -> str:
        return " ".join(self.argv)


class CommandResult(BaseModel):
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def success(self) -> bool:
        return self.returncode == 0


class ToolResponse(BaseModel):
    """Text segments returned to the tool caller, plus an error flag."""
    texts: List[str] = Field(default_factory=list)
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResponse":
        return cls(texts=[message], is_error=True)
