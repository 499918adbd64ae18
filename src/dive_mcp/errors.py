"""Structured errors returned to MCP callers instead of tool results."""

from enum import Enum
from typing import Any, Dict, Optional

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolErrorKind(Enum):
    """Closed set of failure categories a tool invocation can produce."""

    TOOL_NOT_FOUND = METHOD_NOT_FOUND
    INVALID_PARAMS = INVALID_PARAMS
    INTERNAL_ERROR = INTERNAL_ERROR

    @property
    def code(self) -> int:
        """JSON-RPC error code for this category."""
        return self.value


class ToolError(Exception):
    """Raised by handlers and the router; carries exactly one error category."""

    def __init__(self, kind: ToolErrorKind, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.data = data

    @classmethod
    def not_found(cls, name: str, available: list) -> "ToolError":
        return cls(
            ToolErrorKind.TOOL_NOT_FOUND,
            f"Unknown tool: {name}",
            {"tool": name, "available": list(available)},
        )

    @classmethod
    def invalid_params(cls, name: str, errors: list) -> "ToolError":
        return cls(
            ToolErrorKind.INVALID_PARAMS,
            f"Invalid parameters for {name}",
            {"tool": name, "errors": errors},
        )

    @classmethod
    def internal(cls, verb: str, cause: Any, **details: Any) -> "ToolError":
        """
        Wrap an OS, network or encoding fault.

        Args:
            verb: Operation that failed, rendered as "Failed to <verb>"
            cause: Underlying exception or description

        Returns:
            ToolError of kind INTERNAL_ERROR
        """
        data = {"operation": verb}
        data.update(details)
        return cls(ToolErrorKind.INTERNAL_ERROR, f"Failed to {verb}: {cause}", data)

    def to_error_data(self) -> ErrorData:
        """Convert to the MCP wire representation."""
        return ErrorData(code=self.kind.code, message=self.message, data=self.data)

    def __repr__(self) -> str:
        return f"ToolError({self.kind.name}, {self.message!r})"


class DuplicateToolError(ValueError):
    """Raised when two tool groups register the same tool name."""
    pass
