"""Server configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from . import __version__

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_FETCH_TIMEOUT = 30.0


@dataclass
class ServerConfig:
    """Process-wide settings for the dive MCP server."""

    log_level: str = DEFAULT_LOG_LEVEL
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    user_agent: Optional[str] = None

    @classmethod
    def from_environment(cls) -> 'ServerConfig':
        """
        Load configuration from environment variables.

        Reads DIVE_MCP_LOG_LEVEL, DIVE_MCP_FETCH_TIMEOUT and DIVE_MCP_USER_AGENT.
        Unknown log levels and unparseable or non-positive timeouts fall back
        to the defaults.

        Returns:
            ServerConfig with defaults for anything unset
        """
        log_level = os.getenv('DIVE_MCP_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = DEFAULT_LOG_LEVEL

        timeout = DEFAULT_FETCH_TIMEOUT
        raw_timeout = os.getenv('DIVE_MCP_FETCH_TIMEOUT')
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                # Invalid format, keep default
                pass
            if not timeout > 0:
                timeout = DEFAULT_FETCH_TIMEOUT

        user_agent = os.getenv('DIVE_MCP_USER_AGENT') or f"dive-mcp/{__version__}"

        return cls(log_level=log_level, fetch_timeout=timeout, user_agent=user_agent)
