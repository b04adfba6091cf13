"""
Audio acquisition with yt-dlp.

The downloader is run as an external process. Its stdout is only
semi-structured, so the produced file is located with an ordered list of
path resolution strategies: the extraction marker line first, then a scan
of the target directory for the most recently modified audio file.
"""
from typing import List, Optional, Sequence
from abc import ABC, abstractmethod
from pathlib import Path
from ..models.errors import AcquisitionError, ProcessError, ResolutionError
from ..models.track import AcquisitionRequest, AcquisitionResult, CommandSpec
from ..utils.process import CommandRunner
import asyncio
import tempfile
import os
import logging

logger = logging.getLogger(__name__)

EXTRACT_AUDIO_MARKER = "[ExtractAudio] Destination:"
DEFAULT_DOWNLOAD_ROOT = os.path.join(tempfile.gettempdir(), "youtube-audio")


class PathResolutionStrategy(ABC):
    """Finds the file the downloader produced."""

    name: str = "strategy"

    @abstractmethod
    async def resolve(self, stdout: str, directory: Path) -> Optional[str]:
        """Return the artifact path, or None if this strategy cannot tell."""
        pass


class MarkerLineResolver(PathResolutionStrategy):
    """Reads the path from the downloader's extraction marker line."""

    name = "marker"

    def __init__(self, marker: str = EXTRACT_AUDIO_MARKER):
        self.marker = marker

    async def resolve(self, stdout: str, directory: Path) -> Optional[str]:
        for line in stdout.splitlines():
            if self.marker in line:
                path = line.split(self.marker, 1)[1].strip()
                if path:
                    return path if os.path.isabs(path) else os.path.abspath(path)
        return None


class RecentFileResolver(PathResolutionStrategy):
    """
    Picks the most recently modified file with the audio extension.

    Only safe when the directory is not shared with concurrent downloads.
    """

    name = "recent-file"

    def __init__(self, extension: str = "mp3"):
        self.extension = "." + extension.lstrip(".").lower()

    async def resolve(self, stdout: str, directory: Path) -> Optional[str]:
        return await asyncio.to_thread(self._scan, directory)

    def _scan(self, directory: Path) -> Optional[str]:
        if not directory.is_dir():
            return None
        newest, newest_mtime = None, None
        for entry in directory.iterdir():
            if not self._is_candidate(entry):
                continue
            try:
                mtime = os.stat(entry).st_mtime
            except FileNotFoundError:
                # renamed or removed by a concurrent download
                continue
            if newest_mtime is None or mtime > newest_mtime:
                newest, newest_mtime = entry, mtime
        return str(newest.resolve()) if newest is not None else None

    def _is_candidate(self, entry: Path) -> bool:
        # yt-dlp writes intermediate files as <name>.temp.<ext>
        if entry.suffix.lower() != self.extension or ".temp." in entry.name:
            return False
        return entry.is_file()


class AudioAcquirer:
    """Downloads the audio track of a video and returns the file's path."""

    def __init__(
        self,
        runner: CommandRunner = None,
        download_root: str = DEFAULT_DOWNLOAD_ROOT,
        audio_format: str = "mp3",
        executable: str = "yt-dlp",
        isolate_downloads: bool = True,
        strategies: Sequence[PathResolutionStrategy] = None,
        timeout: Optional[float] = None,
    ):
        self.runner = runner or CommandRunner()
        self.download_root = download_root
        self.audio_format = audio_format
        self.executable = executable
        self.isolate_downloads = isolate_downloads
        self.timeout = timeout
        self.strategies: List[PathResolutionStrategy] = list(strategies) if strategies else [
            MarkerLineResolver(),
            RecentFileResolver(audio_format),
        ]

    def build_command(self, request: AcquisitionRequest, directory: Path) -> CommandSpec:
        return CommandSpec(
            executable=self.executable,
            args=[
                "-x",
                "--audio-format", self.audio_format,
                "-o", str(directory / request.output_template),
                request.source_url,
            ],
        )

    async def acquire(self, video_id: str, output_dir: Optional[str] = None) -> AcquisitionResult:
        request = AcquisitionRequest(video_id=video_id, output_dir=output_dir)
        directory = self._prepare_directory(request)
        spec = self.build_command(request, directory)

        logger.info(f"Downloading audio for {video_id} into {directory}")
        try:
            result = await self.runner.run(spec, timeout=self.timeout)
        except ProcessError as e:
            logger.error(f"Download failed for {video_id}: {e.message}")
            raise AcquisitionError(f"YouTube audio download failed: {e.message}") from e

        file_path = await self.resolve_path(result.stdout, directory)
        logger.info(f"Downloaded audio to: {file_path}")
        return AcquisitionResult(
            file_path=file_path,
            video_id=video_id,
            source_url=request.source_url,
        )

    async def resolve_path(self, stdout: str, directory: Path) -> str:
        for strategy in self.strategies:
            path = await strategy.resolve(stdout, directory)
            if path:
                logger.debug(f"Resolved download path with {strategy.name} strategy")
                return path
        raise ResolutionError(
            ResolutionError.PATH_UNKNOWN,
            "Download likely succeeded but could not determine downloaded file path",
        )

    def _prepare_directory(self, request: AcquisitionRequest) -> Path:
        try:
            if request.output_dir:
                directory = Path(request.output_dir)
                directory.mkdir(parents=True, exist_ok=True)
                return directory.resolve()

            root = Path(self.download_root)
            root.mkdir(parents=True, exist_ok=True)
            if self.isolate_downloads:
                return Path(tempfile.mkdtemp(prefix=f"{request.video_id}-", dir=root)).resolve()
            return root.resolve()
        except OSError as e:
            raise AcquisitionError(
                f"Could not create download directory: {e}", code="DIRECTORY_FAILED"
            ) from e
