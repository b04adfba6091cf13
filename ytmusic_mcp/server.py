"""
Main MCP server implementation with modular architecture.
"""
from fastmcp import FastMCP
from .models.base import ToolRegistry
from .services.music_service import MusicService, MusicServiceConfig
from . import config as settings
import logging

logger = logging.getLogger(__name__)

HTTP_TRANSPORTS = ("streamable-http", "http", "sse")


class MCPServer:
    """Main MCP server class with modular tool registration."""

    def __init__(self, music_config: MusicServiceConfig = None, name: str = settings.SERVER_NAME):
        logger.info(f"Initializing MCPServer with name={name}")
        self.name = name
        self.music_config = music_config or MusicServiceConfig.from_env()
        self.mcp = FastMCP(name)
        self.registry = ToolRegistry()
        self._setup_services()
        self._register_all_tools()

    def _setup_services(self):
        """Setup all tool services."""
        self.registry.register_service(MusicService(self.music_config))
        logger.info("Services setup complete")

    def _register_all_tools(self):
        """Register all available tools with the MCP server."""
        self.registry.register_all_tools(self.mcp)
        if self.registry.registered_tools:
            logger.info(f"Registered tools: {', '.join(self.registry.registered_tools)}")
        else:
            logger.warning("No tools registered; the server will expose an empty tool list")

    async def run(self, transport: str = settings.TRANSPORT, host: str = settings.HOST, port: int = settings.PORT):
        """Run the MCP server."""
        if transport in HTTP_TRANSPORTS:
            logger.info(f"Starting {self.name} ({transport}) on {host}:{port}")
            await self.mcp.run_async(transport, host=host, port=port)
        else:
            logger.info(f"Starting {self.name} ({transport})")
            await self.mcp.run_async(transport)

    def get_mcp_instance(self) -> FastMCP:
        """Get the underlying FastMCP instance."""
        return self.mcp

    def get_registry(self) -> ToolRegistry:
        """Get the tool registry."""
        return self.registry
