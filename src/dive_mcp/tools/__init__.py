"""Tool handler base class and parameter validation for MCP tools."""

from typing import Any, Sequence, Type

from mcp.types import TextContent, Tool
from pydantic import BaseModel, ValidationError

from ..errors import ToolError


class ToolHandler:
    """Base class for MCP tool handlers."""

    description: str = ""
    params_model: Type[BaseModel]

    def __init__(self, name: str):
        """Initialize tool handler with name."""
        self.name = name
        self._tool = Tool(
            name=name,
            description=self.description,
            inputSchema=self.params_model.model_json_schema(),
        )

    def get_tool_description(self) -> Tool:
        """
        Get MCP tool description with input schema.

        The schema is generated once from params_model.

        Returns:
            Tool description for MCP
        """
        return self._tool

    def parse_arguments(self, arguments: Any) -> BaseModel:
        """
        Validate raw arguments against params_model.

        Raises:
            ToolError: INVALID_PARAMS with one entry per validation problem
        """
        try:
            return self.params_model.model_validate(arguments)
        except ValidationError as e:
            errors = [
                {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
                for err in e.errors()
            ]
            raise ToolError.invalid_params(self.name, errors) from e

    async def run_tool(self, params: BaseModel) -> Sequence[TextContent]:
        """
        Execute the tool with validated parameters.

        Must be implemented by subclasses. Failures are raised as ToolError.

        Args:
            params: Instance of params_model

        Returns:
            Sequence of TextContent responses
        """
        raise NotImplementedError
