"""Service façade: owns shared resources and the composed tool router."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from mcp.types import CallToolResult, Tool

from .config import ServerConfig
from .http_client import HttpClient
from .router import ToolRouter
from .tools.echo import echo_tools
from .tools.fetch import fetch_tools
from .tools.fs import fs_tools

logger = logging.getLogger(__name__)

INSTRUCTIONS = "default mcp server for dive client"


@dataclass(frozen=True)
class ServerInfo:
    """Static self-description reported during initialization."""
    instructions: str
    tools: bool = True
    tools_list_changed: bool = True


class DiveDefaultService:
    """Default local tool server: echo, fetch and filesystem tools."""

    def __init__(self, config: Optional[ServerConfig] = None, http_client: Optional[HttpClient] = None):
        """
        Build the service and its registry.

        Args:
            config: Server settings (defaults if omitted)
            http_client: Shared client for fetch; created from config if omitted

        Raises:
            DuplicateToolError: If the tool groups overlap
        """
        self.config = config or ServerConfig()
        self.http_client = http_client or HttpClient(
            timeout=self.config.fetch_timeout,
            user_agent=self.config.user_agent,
        )
        self.tool_router: ToolRouter = (
            echo_tools()
            + fetch_tools(self.http_client)
            + fs_tools()
        )
        logger.info("Registered %d tools: %s", len(self.tool_router), ", ".join(self.tool_router.names()))

    def get_info(self) -> ServerInfo:
        return ServerInfo(instructions=INSTRUCTIONS)

    def list_tools(self) -> List[Tool]:
        return self.tool_router.list_tools()

    async def dispatch(self, name: str, arguments: Any) -> CallToolResult:
        """Route one invocation; ToolError propagates unchanged."""
        return await self.tool_router.call(name, arguments)

    def close(self) -> None:
        """Release the shared HTTP connection pool."""
        self.http_client.close()
