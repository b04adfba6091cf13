"""
Models package for the MCP server.
"""
from .base import (
    RichToolDescription,
    BaseServiceConfig,
    ToolService,
    ToolRegistry,
)
from .errors import (
    MusicToolError,
    SearchError,
    ResolutionError,
    ProcessError,
    AcquisitionError,
    LaunchError,
)
from .track import (
    SearchQuery,
    VideoCandidate,
    AcquisitionRequest,
    AcquisitionResult,
    CommandSpec,
    CommandResult,
    ToolResponse,
)

__all__ = [
    "RichToolDescription",
    "BaseServiceConfig",
    "ToolService",
    "ToolRegistry",
    "MusicToolError",
    "SearchError",
    "ResolutionError",
    "ProcessError",
    "AcquisitionError",
    "LaunchError",
    "SearchQuery",
    "VideoCandidate",
    "AcquisitionRequest",
    "AcquisitionResult",
    "CommandSpec",
    "CommandResult",
    "ToolResponse",
]
