"""
Base models and classes for the MCP server.
"""
from typing import Optional, Dict, List
from abc import ABC, abstractmethod
from pydantic import BaseModel
import logging

logger = logging.getLogger(__name__)


class RichToolDescription(BaseModel):
    """Rich tool description model for MCP server compatibility."""
    description: str
    use_when: str
    side_effects: Optional[str] = None


class BaseServiceConfig(BaseModel):
    """Base configuration for services."""
    timeout: float = 30.0


class ToolService(ABC):
    """Base class for tool services."""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"ToolService.{name}")

    @abstractmethod
    def get_tool_descriptions(self) -> Dict[str, RichToolDescription]:
        """Get tool descriptions for this service."""
        pass

    @abstractmethod
    def register_tools(self, mcp) -> List[str]:
        """Register tools with the MCP server and return their names."""
        pass


class ToolRegistry:
    """Central registry for managing tool services."""

    def __init__(self):
        self.services: Dict[str, ToolService] = {}
        self.registered_tools: List[str] = []
        self.logger = logging.getLogger("ToolRegistry")

    def register_service(self, service: ToolService):
        """Register a tool service."""
        self.services[service.name] = service
        self.logger.info(f"Registered service: {service.name}")

    def get_service(self, name: str) -> Optional[ToolService]:
        """Get a service by name."""
        return self.services.get(name)

    def get_all_services(self) -> List[ToolService]:
        """Get all registered services."""
        return list(self.services.values())

    def register_all_tools(self, mcp):
        """Register all tools from all services."""
        for service in self.services.values():
            try:
                names = service.register_tools(mcp)
                self.registered_tools.extend(names)
                self.logger.info(f"Registered {len(names)} tool(s) for service: {service.name}")
            except Exception as e:
                self.logger.error(f"Failed to register tools for service {service.name}: {e}")
                raise
