"""Echo tool: returns its input unchanged."""

import asyncio
from typing import Optional, Sequence

from mcp.types import TextContent
from pydantic import BaseModel, Field

from . import ToolHandler
from ..router import ToolRouter


class EchoParams(BaseModel):
    message: str = Field(description="Message to return unchanged")
    delay_ms: Optional[int] = Field(
        default=None, ge=0, description="Optional delay in milliseconds before replying"
    )


class EchoTool(ToolHandler):
    """Liveness probe for the dispatch pipeline."""

    description = "Echo the message back unchanged, optionally after a delay"
    params_model = EchoParams

    def __init__(self):
        super().__init__("echo")

    async def run_tool(self, params: EchoParams) -> Sequence[TextContent]:
        if params.delay_ms:
            await asyncio.sleep(params.delay_ms / 1000)
        return [TextContent(type="text", text=params.message)]


def echo_tools() -> ToolRouter:
    """Echo tool group."""
    return ToolRouter([EchoTool()])
