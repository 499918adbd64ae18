"""Fetch tool: outbound HTTP request through the shared client."""

import asyncio
from typing import Dict, Literal, Optional, Sequence
from urllib.parse import urlparse

from mcp.types import TextContent
from pydantic import BaseModel, Field, field_validator

from . import ToolHandler
from ..binary import contains_null_byte, encode_binary
from ..errors import ToolError
from ..http_client import HttpClient, HttpResponse
from ..router import ToolRouter


class FetchParams(BaseModel):
    url: str = Field(description="The http or https URL to fetch")
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"] = Field(
        default="GET", description="HTTP method to use"
    )
    headers: Optional[Dict[str, str]] = Field(default=None, description="Extra request headers")
    body: Optional[str] = Field(default=None, description="Request body, sent as UTF-8")

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("url must be an absolute http or https URL")
        return value

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value):
        return value.upper() if isinstance(value, str) else value


def _decode_body(response: HttpResponse) -> str:
    if contains_null_byte(response.content):
        return encode_binary(response.content)
    return response.content.decode(response.encoding or "utf-8")


class FetchTool(ToolHandler):
    """Perform an HTTP request and return status line plus body."""

    description = """Fetch a URL over HTTP(S).

Returns two text items: the status line and content type, then the response body.
Binary bodies are returned base64-encoded with a marker line.
Non-2xx responses are reported as errors."""
    params_model = FetchParams

    def __init__(self, client: HttpClient):
        super().__init__("fetch")
        self.client = client

    async def run_tool(self, params: FetchParams) -> Sequence[TextContent]:
        response = await asyncio.to_thread(
            self.client.request, params.method, params.url, params.headers, params.body
        )

        if not response.success:
            raise ToolError.internal("fetch", response.error, url=params.url, status=None)

        if not response.ok:
            raise ToolError.internal(
                "fetch",
                f"HTTP {response.status} {response.reason}".rstrip(),
                url=params.url,
                status=response.status,
            )

        try:
            text = _decode_body(response)
        except (UnicodeDecodeError, LookupError) as e:
            raise ToolError.internal("decode response body", e, url=params.url, status=response.status) from e

        meta = [f"Status: {response.status} {response.reason}".rstrip()]
        if response.content_type:
            meta.append(f"Content-Type: {response.content_type}")

        return [
            TextContent(type="text", text="\n".join(meta)),
            TextContent(type="text", text=text),
        ]


def fetch_tools(client: HttpClient) -> ToolRouter:
    """Fetch tool group bound to the shared HTTP client."""
    return ToolRouter([FetchTool(client)])
