"""Text vs. binary classification for file and HTTP content."""

import asyncio
import base64
from pathlib import Path
from typing import Union

# Only this many leading bytes are inspected, whatever the file size.
BINARY_SAMPLE_SIZE = 8192
BINARY_MARKER = "[Binary file encoded as base64]\n"


def contains_null_byte(sample: bytes) -> bool:
    """
    Classify a byte sample as binary.

    Only the first BINARY_SAMPLE_SIZE bytes are considered. Binary formats
    without a null byte in that window are reported as text.

    Args:
        sample: Leading bytes of the content

    Returns:
        True if the sample contains a null byte
    """
    return b"\x00" in sample[:BINARY_SAMPLE_SIZE]


def _read_prefix(path: Union[str, Path]) -> bytes:
    with open(path, "rb") as f:
        return f.read(BINARY_SAMPLE_SIZE)


async def is_binary_file(path: Union[str, Path]) -> bool:
    """
    Check whether a file is binary by sampling its first 8 KiB.

    Raises:
        OSError: If the file cannot be opened or read
    """
    sample = await asyncio.to_thread(_read_prefix, path)
    return contains_null_byte(sample)


def encode_binary(data: bytes) -> str:
    """Render raw bytes as the marker line followed by standard base64."""
    return BINARY_MARKER + base64.b64encode(data).decode("ascii")
