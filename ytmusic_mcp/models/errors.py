"""
Error taxonomy for the track pipeline.
"""


class MusicToolError(Exception):
    """Base error carrying a machine-readable code and a readable message."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class SearchError(MusicToolError):
    """Upstream search API or transport failure."""

    def __init__(self, message: str, code: str = "SEARCH_FAILED"):
        super().__init__(code, message)


class ResolutionError(MusicToolError):
    """A candidate or an artifact path could not be resolved."""

    MISSING_VIDEO_ID = "MISSING_VIDEO_ID"
    PATH_UNKNOWN = "PATH_UNKNOWN"

    def __init__(self, code: str, message: str):
        super().__init__(code, message)


class ProcessError(MusicToolError):
    def __init__(self, message: str, returncode: int = None, stderr: str = ""):
        super().__init__("PROCESS_FAILED", message)
        self.returncode = returncode
        self.stderr = stderr


class AcquisitionError(MusicToolError):
    def __init__(self, message: str, code: str = "DOWNLOAD_FAILED"):
        super().__init__(code, message)


class LaunchError(MusicToolError):
    def __init__(self, message: str):
        super().__init__("LAUNCH_FAILED", message)
