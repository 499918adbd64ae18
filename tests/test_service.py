"""Tests for the service façade and end-to-end dispatch."""

import pytest

from dive_mcp.errors import ToolError, ToolErrorKind
from dive_mcp.service import INSTRUCTIONS, DiveDefaultService

EXPECTED_TOOLS = [
    "echo",
    "fetch",
    "read_file",
    "write_file",
    "list_directory",
    "create_directory",
    "delete_file",
]


def test_lists_all_groups(service):
    assert [tool.name for tool in service.list_tools()] == EXPECTED_TOOLS


def test_every_parameter_has_a_description(service):
    missing = [
        f"{tool.name}.{param}"
        for tool in service.list_tools()
        for param, definition in tool.inputSchema.get("properties", {}).items()
        if not definition.get("description")
    ]
    assert not missing


def test_server_info(service):
    info = service.get_info()
    assert info.instructions == INSTRUCTIONS == "default mcp server for dive client"
    assert info.tools is True
    assert info.tools_list_changed is True


def test_fetch_group_shares_the_service_client(service, http_client):
    assert service.tool_router.get("fetch").client is http_client


def test_default_client_built_from_config():
    svc = DiveDefaultService()
    try:
        assert svc.http_client.timeout == 30.0
    finally:
        svc.close()


@pytest.mark.asyncio
async def test_dispatch_round_trip(service, tmp_path):
    path = str(tmp_path / "t.txt")

    written = await service.dispatch("write_file", {"path": path, "content": "hello"})
    assert path in written.content[0].text

    read = await service.dispatch("read_file", {"path": path})
    assert read.content[0].text == "hello"


@pytest.mark.asyncio
async def test_dispatch_unknown_tool(service):
    with pytest.raises(ToolError) as exc_info:
        await service.dispatch("format_disk", {"path": 1, "bogus": True})

    err = exc_info.value
    assert err.kind is ToolErrorKind.TOOL_NOT_FOUND
    assert err.data["available"] == EXPECTED_TOOLS
