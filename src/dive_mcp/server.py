"""MCP server setup and tool registration for dive-mcp."""

from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.shared.exceptions import McpError
from mcp.types import CallToolRequest, ServerResult, Tool

from . import __version__
from .errors import ToolError
from .service import DiveDefaultService


def create_server(service: DiveDefaultService) -> Server:
    """
    Create an MCP server exposing the service's tools.

    tools/call is registered as a raw request handler rather than through
    the SDK's call_tool decorator, which turns every exception into an
    isError text result. Here a ToolError leaves as McpError, so the session
    answers with a JSON-RPC error carrying its code and data. The router
    validates after resolving the tool name, so unknown tools are reported
    first.

    Args:
        service: Façade that owns the tool router

    Returns:
        Configured MCP Server
    """
    app = Server("dive-mcp", version=__version__, instructions=service.get_info().instructions)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """
        List all available tools.

        Returns:
            List of Tool descriptions for MCP
        """
        return service.list_tools()

    async def call_tool(req: CallToolRequest) -> ServerResult:
        """
        Execute a tool with the request's arguments.

        Raises:
            McpError: TOOL_NOT_FOUND, INVALID_PARAMS or INTERNAL_ERROR
        """
        try:
            result = await service.dispatch(req.params.name, req.params.arguments or {})
        except ToolError as e:
            raise McpError(e.to_error_data()) from e
        return ServerResult(result)

    app.request_handlers[CallToolRequest] = call_tool

    return app


def initialization_options(app: Server, service: DiveDefaultService) -> InitializationOptions:
    """Initialization options advertising tool support and list-change notifications."""
    info = service.get_info()
    return app.create_initialization_options(
        notification_options=NotificationOptions(tools_changed=info.tools_list_changed),
    )
