"""
MCP server wiring.

create_server() builds a low-level MCP Server around a set of tools;
serve() binds it to stdio and runs until the host closes the channel.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from linkchecker.config.settings import Settings
from linkchecker.tools import CheckLinkTool, Tool, text_result

logger = logging.getLogger(__name__)


def create_server(settings: Settings, tools: Sequence[Tool] | None = None) -> Server:
    """
    Build an MCP server exposing the given tools.

    Args:
        settings: Application settings (server metadata, probe configuration)
        tools: Tools to register. Defaults to the check_link tool.

    Returns:
        Configured server, not yet bound to a transport
    """
    if tools is None:
        tools = [CheckLinkTool(settings.probe)]
    registry = {tool.name: tool for tool in tools}

    server = Server(settings.server.name, version=settings.server.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [tool.definition() for tool in registry.values()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        tool = registry.get(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            return text_result(f"Unknown tool: {name}", is_error=True)
        logger.debug(f"Calling {name} with {arguments}")
        return await tool.run(arguments or {})

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the host disconnects."""
    server = create_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        # Never below the configured threshold: this line is always emitted
        logger.log(
            max(logging.INFO, logger.getEffectiveLevel()),
            "Link Checker MCP server is running...",
        )
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
