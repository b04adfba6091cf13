"""
Async external process execution.
"""
from typing import Optional
from ..models.errors import ProcessError
from ..models.track import CommandSpec, CommandResult
import asyncio
import logging

logger = logging.getLogger(__name__)

STDERR_TAIL_CHARS = 500


class CommandRunner:
    """Runs one external process per call and captures its output."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    async def run(self, spec: CommandSpec, timeout: Optional[float] = None) -> CommandResult:
        """
        Run the command and wait for it to exit.

        Raises ProcessError if the process cannot be spawned, exits non-zero,
        or outlives the timeout. Stderr on a successful run is only logged.
        """
        timeout = timeout if timeout is not None else self.timeout
        logger.info(f"Running command: {spec.display()}")

        try:
            proc = await asyncio.create_subprocess_exec(
                spec.executable,
                *spec.args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ProcessError(f"Executable not found: {spec.executable}") from e
        except OSError as e:
            raise ProcessError(f"Failed to start {spec.executable}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise ProcessError(f"{spec.executable} timed out after {timeout}s") from e
        finally:
            # Reached with the child still running on timeout or cancellation
            if proc.returncode is None:
                try:
                    proc.kill()
                except ProcessLookupError:
                    pass
                await proc.wait()

        result = CommandResult(
            stdout=stdout.decode("utf-8", errors="replace") if stdout else "",
            stderr=stderr.decode("utf-8", errors="replace") if stderr else "",
            returncode=proc.returncode,
        )

        if not result.success:
            tail = result.stderr.strip()[-STDERR_TAIL_CHARS:]
            raise ProcessError(
                f"{spec.executable} exited with code {result.returncode}: {tail}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        if result.stderr.strip():
            logger.warning(f"{spec.executable} stderr: {result.stderr.strip()}")

        return result
