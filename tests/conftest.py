"""Shared fakes for the track pipeline tests."""
from pathlib import Path
from typing import List, Optional

import pytest

from ytmusic_mcp.models.errors import ProcessError
from ytmusic_mcp.models.track import AcquisitionResult, CommandResult, CommandSpec, VideoCandidate
from ytmusic_mcp.services.youtube_search import YouTubeSearchClient


class FakeRunner:
    """Records commands; optionally writes files into the -o directory."""

    def __init__(self, stdout: str = "", error: Optional[ProcessError] = None, produce: List[str] = None):
        self.stdout = stdout
        self.error = error
        self.produce = produce or []
        self.calls: List[CommandSpec] = []

    async def run(self, spec: CommandSpec, timeout=None) -> CommandResult:
        self.calls.append(spec)
        if self.error:
            raise self.error
        if "-o" in spec.args:
            directory = Path(spec.args[spec.args.index("-o") + 1]).parent
            for name in self.produce:
                (directory / name).write_bytes(b"audio")
        return CommandResult(stdout=self.stdout.format(dir=self._dir(spec)), stderr="", returncode=0)

    @staticmethod
    def _dir(spec: CommandSpec) -> str:
        if "-o" in spec.args:
            return str(Path(spec.args[spec.args.index("-o") + 1]).parent)
        return ""


class FakeResolver:
    def __init__(self, candidates=None, error=None):
        self.candidates = candidates or []
        self.error = error
        self.queries = []

    async def search(self, query):
        self.queries.append(query)
        if self.error:
            raise self.error
        return list(self.candidates)[: query.max_results]

    pick_best = staticmethod(YouTubeSearchClient.pick_best)


class FakeAcquirer:
    def __init__(self, file_path: str = "/tmp/youtube-audio/Bohemian Rhapsody.mp3", error=None):
        self.file_path = file_path
        self.error = error
        self.video_ids = []

    async def acquire(self, video_id, output_dir=None):
        self.video_ids.append(video_id)
        if self.error:
            raise self.error
        return AcquisitionResult(file_path=self.file_path, video_id=video_id)


class FakeLauncher:
    def __init__(self, error=None):
        self.error = error
        self.urls = []

    async def open(self, url, platform_name=None):
        self.urls.append(url)
        if self.error:
            raise self.error


@pytest.fixture
def bohemian() -> VideoCandidate:
    return VideoCandidate(video_id="fJ9rUzIMcZQ", title="Bohemian Rhapsody")


@pytest.fixture
def search_item() -> dict:
    return {
        "kind": "youtube#searchResult",
        "id": {"kind": "youtube#video", "videoId": "fJ9rUzIMcZQ"},
        "snippet": {
            "title": "Bohemian Rhapsody",
            "channelTitle": "Queen Official",
            "description": "Official video",
            "publishedAt": "2008-08-01T11:06:40Z",
            "thumbnails": {"default": {"url": "https://i.ytimg.com/vi/fJ9rUzIMcZQ/default.jpg"}},
        },
    }
