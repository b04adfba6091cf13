"""
Open a URL in the user's browser with the platform's native opener.
"""
from typing import Optional
from ..models.errors import LaunchError, ProcessError
from ..models.track import CommandSpec
from ..utils.process import CommandRunner
import platform
import logging

logger = logging.getLogger(__name__)

MACOS_NAMES = {"darwin", "macos", "mac"}
WINDOWS_NAMES = {"windows", "win32", "cygwin"}


def _applescript_string(value: str) -> str:
    """Quote a value as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _cmd_escape(value: str) -> str:
    """Escape cmd.exe metacharacters; `start` re-parses its arguments."""
    for char in ("^", "&", "|", "<", ">"):
        value = value.replace(char, f"^{char}")
    return value


class PlatformLauncher:
    """Builds and runs the OS-specific "open URL" command."""

    def __init__(self, runner: CommandRunner = None):
        self.runner = runner or CommandRunner()

    @staticmethod
    def build_command(url: str, platform_name: Optional[str] = None) -> CommandSpec:
        system = (platform_name or platform.system()).lower()
        if system in MACOS_NAMES:
            return CommandSpec(
                executable="osascript",
                args=["-e", f"open location {_applescript_string(url)}"],
            )
        if system in WINDOWS_NAMES:
            # The empty argument is the window title expected by `start`.
            return CommandSpec(
                executable="cmd",
                args=["/c", "start", "", _cmd_escape(url)],
            )
        return CommandSpec(executable="xdg-open", args=[url])

    async def open(self, url: str, platform_name: Optional[str] = None) -> None:
        spec = self.build_command(url, platform_name)
        logger.info(f"Opening {url} with {spec.executable}")
        try:
            await self.runner.run(spec)
        except ProcessError as e:
            logger.error(f"Failed to open {url}: {e.message}")
            raise LaunchError(f"Failed to open URL in browser: {e.message}") from e
