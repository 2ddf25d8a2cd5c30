"""
MCP server for jest-checks.

Exposes the result pipeline as two tools over stdio:
- summarize_test_results: offline summary of a Jest result file
- publish_test_results: check run and coverage comment on GitHub

Handlers live in jest_checks_mcp.handlers; this module only registers and
routes them.
"""


from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .handlers.core import HANDLERS as CORE_HANDLERS
from .handlers.core import TOOLS as CORE_TOOLS
from .handlers.github import HANDLERS as GITHUB_HANDLERS
from .handlers.github import TOOLS as GITHUB_TOOLS

logger = logging.getLogger(__name__)

server = Server("jest-checks", version=__version__)

# Offline tools first, then the ones that talk to GitHub
ALL_TOOLS: list[Tool] = [*CORE_TOOLS, *GITHUB_TOOLS]
ALL_HANDLERS = {**CORE_HANDLERS, **GITHUB_HANDLERS}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List the registered tools."""
    return ALL_TOOLS


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Dispatch a tool call to its handler."""
    handler = ALL_HANDLERS.get(name)
    if handler is None:
        logger.warning(f"Unknown tool requested: {name}")
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    logger.info(f"Tool called: {name}")
    return await handler(arguments or {})


async def run_server():
    """Serve MCP requests on stdin/stdout until the client disconnects."""
    logger.info(f"Starting jest-checks MCP server {__version__}")
    logger.info(f"Tools: {', '.join(t.name for t in ALL_TOOLS)}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Entry point."""
    # stdout carries the protocol
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
