"""Tool registry composed from tool groups, with dispatch and result wrapping."""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional

from mcp.types import CallToolResult, Tool

from .errors import DuplicateToolError, ToolError
from .tools import ToolHandler

logger = logging.getLogger(__name__)


class ToolRouter:
    """Immutable mapping from tool name to handler."""

    def __init__(self, handlers: Iterable[ToolHandler] = ()):
        """
        Build a registry from handlers.

        Raises:
            DuplicateToolError: If two handlers share a name
        """
        registry: Dict[str, ToolHandler] = {}
        for handler in handlers:
            if handler.name in registry:
                raise DuplicateToolError(f"Tool '{handler.name}' is registered more than once")
            registry[handler.name] = handler
        self._handlers = MappingProxyType(registry)

    def __add__(self, other: "ToolRouter") -> "ToolRouter":
        if not isinstance(other, ToolRouter):
            return NotImplemented
        return ToolRouter([*self._handlers.values(), *other._handlers.values()])

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def names(self) -> List[str]:
        return list(self._handlers)

    def get(self, name: str) -> Optional[ToolHandler]:
        return self._handlers.get(name)

    def list_tools(self) -> List[Tool]:
        """Tool descriptors in registration order."""
        return [handler.get_tool_description() for handler in self._handlers.values()]

    async def call(self, name: str, arguments: Any) -> CallToolResult:
        """
        Dispatch one invocation.

        The tool is resolved before the arguments are looked at, so an unknown
        name is always reported as TOOL_NOT_FOUND.

        Args:
            name: Tool name
            arguments: Raw argument payload from the caller

        Returns:
            CallToolResult with the handler's content items

        Raises:
            ToolError: TOOL_NOT_FOUND, INVALID_PARAMS or INTERNAL_ERROR
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("Unknown tool requested: %s", name)
            raise ToolError.not_found(name, self.names())

        logger.debug("Dispatching %s", name)
        try:
            params = handler.parse_arguments(arguments)
            content = await handler.run_tool(params)
        except ToolError as e:
            logger.warning("Tool %s failed: %s", name, e.message)
            raise
        return CallToolResult(content=list(content), isError=False)
