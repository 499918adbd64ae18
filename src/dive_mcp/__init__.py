"""dive-mcp: default local MCP tool server (echo, fetch, filesystem)."""

import asyncio
import logging
import sys

__version__ = "0.1.0"


async def main():
    """
    Main entry point for the dive-mcp server.

    Sets up stdio-based MCP server and runs it.
    """
    from mcp.server.stdio import stdio_server

    from .config import ServerConfig
    from .server import create_server, initialization_options
    from .service import DiveDefaultService

    config = ServerConfig.from_environment()
    service = DiveDefaultService(config)
    app = create_server(service)

    try:
        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                initialization_options(app, service),
            )
    finally:
        service.close()


def run():
    """Synchronous wrapper for main() to use as console script entry point."""
    from .config import ServerConfig

    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=ServerConfig.from_environment().log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\ndive-mcp server stopped.", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


__all__ = ["main", "run", "__version__"]
