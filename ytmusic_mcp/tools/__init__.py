"""
Tools package for the MCP server.
"""
from .music_tools import register_music_tools

__all__ = [
    "register_music_tools",
]
