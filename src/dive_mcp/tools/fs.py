"""Filesystem tools: read_file, write_file, list_directory, create_directory, delete_file."""

import asyncio
import os
from typing import List, Sequence

from mcp.types import TextContent
from pydantic import BaseModel, Field

from . import ToolHandler
from ..binary import encode_binary, is_binary_file
from ..errors import ToolError
from ..router import ToolRouter


class ReadFileParams(BaseModel):
    path: str = Field(description="The path to the file to read")


class WriteFileParams(BaseModel):
    path: str = Field(description="The path to the file to write")
    content: str = Field(description="The content to write to the file")


class ListDirectoryParams(BaseModel):
    path: str = Field(description="The path to the directory to list")


class CreateDirectoryParams(BaseModel):
    path: str = Field(description="The path to the directory to create")


class DeleteFileParams(BaseModel):
    path: str = Field(description="The path to the file to delete")


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def _read_text(path: str) -> str:
    # newline="" keeps line endings exactly as stored
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def _list_entries(path: str) -> List[str]:
    """
    Enumerate immediate children as "<name> (<directory|file>)" lines.

    Entries whose name is not valid UTF-8, or whose type cannot be looked
    up, are skipped rather than reported.
    """
    items = []
    with os.scandir(path) as entries:
        for entry in entries:
            # Undecodable name bytes come back as lone surrogates, which fail to encode
            try:
                entry.name.encode("utf-8")
            except UnicodeEncodeError:
                continue
            try:
                kind = "directory" if entry.is_dir() else "file"
            except OSError:
                continue
            items.append(f"{entry.name} ({kind})")
    return items


class ReadFileTool(ToolHandler):
    """Read a file, base64-encoding it when it looks binary."""

    description = "Read file content from the specified path"
    params_model = ReadFileParams

    def __init__(self):
        super().__init__("read_file")

    async def run_tool(self, params: ReadFileParams) -> Sequence[TextContent]:
        try:
            binary = await is_binary_file(params.path)
        except (OSError, ValueError) as e:
            raise ToolError.internal("check file type", e, path=params.path) from e

        if binary:
            try:
                data = await asyncio.to_thread(_read_bytes, params.path)
            except (OSError, ValueError) as e:
                raise ToolError.internal("read binary file", e, path=params.path) from e
            return [TextContent(type="text", text=encode_binary(data))]

        try:
            text = await asyncio.to_thread(_read_text, params.path)
        except (OSError, ValueError) as e:
            raise ToolError.internal("read file", e, path=params.path) from e
        return [TextContent(type="text", text=text)]


class WriteFileTool(ToolHandler):
    """Create or truncate a file with the given text."""

    description = "Write content to a file at the specified path"
    params_model = WriteFileParams

    def __init__(self):
        super().__init__("write_file")

    async def run_tool(self, params: WriteFileParams) -> Sequence[TextContent]:
        try:
            await asyncio.to_thread(_write_text, params.path, params.content)
        except (OSError, ValueError) as e:
            raise ToolError.internal("write file", e, path=params.path) from e
        return [TextContent(type="text", text=f"Successfully wrote to {params.path}")]


class ListDirectoryTool(ToolHandler):
    """Non-recursive directory listing."""

    description = "List all files and directories in the specified path"
    params_model = ListDirectoryParams

    def __init__(self):
        super().__init__("list_directory")

    async def run_tool(self, params: ListDirectoryParams) -> Sequence[TextContent]:
        try:
            items = await asyncio.to_thread(_list_entries, params.path)
        except (OSError, ValueError) as e:
            raise ToolError.internal("list directory", e, path=params.path) from e
        return [TextContent(type="text", text="\n".join(items))]


class CreateDirectoryTool(ToolHandler):
    """Create a directory and any missing parents."""

    description = "Create a new directory at the specified path"
    params_model = CreateDirectoryParams

    def __init__(self):
        super().__init__("create_directory")

    async def run_tool(self, params: CreateDirectoryParams) -> Sequence[TextContent]:
        try:
            await asyncio.to_thread(os.makedirs, params.path, exist_ok=True)
        except (OSError, ValueError) as e:
            raise ToolError.internal("create directory", e, path=params.path) from e
        return [TextContent(type="text", text=f"Successfully created directory: {params.path}")]


class DeleteFileTool(ToolHandler):
    """Remove a single file. Directories are refused."""

    description = "Delete a file at the specified path"
    params_model = DeleteFileParams

    def __init__(self):
        super().__init__("delete_file")

    async def run_tool(self, params: DeleteFileParams) -> Sequence[TextContent]:
        try:
            await asyncio.to_thread(os.remove, params.path)
        except (OSError, ValueError) as e:
            raise ToolError.internal("delete file", e, path=params.path) from e
        return [TextContent(type="text", text=f"Successfully deleted file: {params.path}")]


def fs_tools() -> ToolRouter:
    """Filesystem tool group."""
    return ToolRouter([
        ReadFileTool(),
        WriteFileTool(),
        ListDirectoryTool(),
        CreateDirectoryTool(),
        DeleteFileTool(),
    ])
