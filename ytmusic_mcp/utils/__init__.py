"""
Utility helpers for the MCP server.
"""
from .process import CommandRunner

__all__ = ["CommandRunner"]
