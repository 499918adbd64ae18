"""Tests for tool registry composition and dispatch ordering."""

from typing import Sequence
from unittest.mock import AsyncMock

import pytest
from mcp.types import TextContent
from pydantic import BaseModel, Field

from dive_mcp.errors import DuplicateToolError, ToolError, ToolErrorKind
from dive_mcp.router import ToolRouter
from dive_mcp.tools import ToolHandler
from dive_mcp.tools.echo import echo_tools
from dive_mcp.tools.fs import fs_tools


class CountParams(BaseModel):
    n: int = Field(description="How many")


class CountTool(ToolHandler):
    description = "Counts"
    params_model = CountParams

    def __init__(self, name="count"):
        super().__init__(name)

    async def run_tool(self, params: CountParams) -> Sequence[TextContent]:
        return [TextContent(type="text", text=str(params.n))]


class BrokenTool(CountTool):
    async def run_tool(self, params: CountParams) -> Sequence[TextContent]:
        raise ToolError.internal("count", "disk on fire")


def test_compose_groups_keeps_order():
    router = echo_tools() + fs_tools()
    assert router.names()[0] == "echo"
    assert len(router) == 6
    assert "list_directory" in router


def test_duplicate_name_in_one_group_rejected():
    with pytest.raises(DuplicateToolError, match="count"):
        ToolRouter([CountTool(), CountTool()])


def test_duplicate_name_across_groups_rejected():
    with pytest.raises(DuplicateToolError, match="echo"):
        echo_tools() + echo_tools()


def test_add_rejects_non_router():
    with pytest.raises(TypeError):
        echo_tools() + [CountTool()]


def test_registry_is_read_only():
    router = ToolRouter([CountTool()])
    with pytest.raises(TypeError):
        router._handlers["other"] = CountTool("other")


def test_list_tools_uses_pydantic_schema():
    tool = ToolRouter([CountTool()]).list_tools()[0]
    assert tool.name == "count"
    assert tool.description == "Counts"
    assert tool.inputSchema["properties"]["n"]["type"] == "integer"
    assert tool.inputSchema["required"] == ["n"]


@pytest.mark.asyncio
async def test_call_success_wraps_content():
    result = await ToolRouter([CountTool()]).call("count", {"n": 3})
    assert result.isError is False
    assert [c.text for c in result.content] == ["3"]


@pytest.mark.asyncio
async def test_unknown_tool_is_reported_before_validation():
    """Arguments that would fail validation still yield TOOL_NOT_FOUND."""
    router = ToolRouter([CountTool()])
    with pytest.raises(ToolError) as exc_info:
        await router.call("nope", "definitely not an object")

    err = exc_info.value
    assert err.kind is ToolErrorKind.TOOL_NOT_FOUND
    assert err.data == {"tool": "nope", "available": ["count"]}


@pytest.mark.asyncio
async def test_invalid_params_never_reach_handler():
    tool = CountTool()
    tool.run_tool = AsyncMock()
    router = ToolRouter([tool])

    with pytest.raises(ToolError) as exc_info:
        await router.call("count", {"n": "three"})

    assert exc_info.value.kind is ToolErrorKind.INVALID_PARAMS
    assert exc_info.value.data["tool"] == "count"
    tool.run_tool.assert_not_called()


@pytest.mark.asyncio
async def test_non_object_arguments_are_invalid_params():
    with pytest.raises(ToolError) as exc_info:
        await ToolRouter([CountTool()]).call("count", ["n", 1])
    assert exc_info.value.kind is ToolErrorKind.INVALID_PARAMS


@pytest.mark.asyncio
async def test_handler_error_is_forwarded_unchanged():
    with pytest.raises(ToolError) as exc_info:
        await ToolRouter([BrokenTool()]).call("count", {"n": 1})

    err = exc_info.value
    assert err.kind is ToolErrorKind.INTERNAL_ERROR
    assert err.message == "Failed to count: disk on fire"
