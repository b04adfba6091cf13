from ytmusic_mcp import config
from ytmusic_mcp.server import MCPServer
import asyncio
import logging
import sys

# Logs go to stderr so they never mix with stdio protocol frames
logging.basicConfig(level=config.LOG_LEVEL, stream=sys.stderr)
logger = logging.getLogger(__name__)


async def main():
    """
    Main entry point for the YouTube Music MCP server.

    Exposes three tools:
    - searchTrack: list YouTube matches for a track name
    - playTrack: open the best match in a browser or download it, per PLAY_MODE
    - downloadTrack: download the best match as an audio file
    """
    server = MCPServer()
    await server.run()


def run():
    logger.info(f"{config.SERVER_NAME} {config.SERVER_VERSION} starting up...")
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    run()
