"""
MCP client for the link checker server.

Spawns ``python -m linkchecker serve`` as a subprocess and talks to it over
stdio, the same way a tool-calling host does.
"""

import os
import sys
from typing import Any

from mcp import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client


class LinkCheckerClient:
    """
    Client-side adapter for the link checker MCP server.

    Spawns the server as a subprocess and communicates via JSON-RPC over stdio.
    """

    def __init__(
        self,
        command: str | None = None,
        args: list[str] | None = None,
        env: dict[str, str] | None = None,
    ):
        """Initialize the client.

        Args:
            command: Executable that starts the server. Defaults to the
                current interpreter.
            args: Arguments for the command. Defaults to ``-m linkchecker serve``.
            env: Extra environment variables for the server process, on top
                of the current environment.
        """
        self._initialized = False
        self._session = None
        self._stdio_context = None
        self._session_context = None

        self._command = command or sys.executable
        self._args = args if args is not None else ["-m", "linkchecker", "serve"]
        self._env = {**os.environ, **(env or {})}

    async def initialize(self) -> None:
        """Start the server subprocess and perform the MCP handshake.

        If any step fails, whatever was already opened is closed before
        the error propagates.
        """
        server_params = StdioServerParameters(
            command=self._command,
            args=self._args,
            env=self._env,
        )

        try:
            stdio_context = stdio_client(server_params)
            read_stream, write_stream = await stdio_context.__aenter__()
            self._stdio_context = stdio_context

            session_context = ClientSession(read_stream, write_stream)
            self._session = await session_context.__aenter__()
            self._session_context = session_context

            await self._session.initialize()
        except BaseException:
            await self._close_contexts()
            raise

        self._initialized = True

    async def shutdown(self) -> None:
        """Close the session and terminate the server subprocess."""
        if not self._initialized:
            return

        await self._close_contexts()
        self._initialized = False

    async def _close_contexts(self) -> None:
        session_context, self._session_context, self._session = self._session_context, None, None
        stdio_context, self._stdio_context = self._stdio_context, None
        # Session first, then the subprocess it talks to
        try:
            if session_context is not None:
                await session_context.__aexit__(None, None, None)
        finally:
            if stdio_context is not None:
                await stdio_context.__aexit__(None, None, None)

    async def __aenter__(self):
        """Async context manager entry - start the server."""
        await self.initialize()
        return self

    async def __aexit__(self, *_args):
        """Async context manager exit - stop the server."""
        await self.shutdown()
        return None  # Don't suppress exceptions

    async def call(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Call a tool on the server.

        Returns:
            {"text": joined text blocks, "is_error": the result's error flag}
        """
        if not self._initialized:
            raise RuntimeError("Link checker client not initialized")

        result = await self._session.call_tool(tool_name, arguments)

        text_parts = [content.text for content in result.content if hasattr(content, "text")]
        return {
            "text": " ".join(text_parts),
            "is_error": bool(result.isError),
        }

    async def list_tools(self) -> list[dict[str, Any]]:
        """List the tools the server advertises."""
        if not self._initialized:
            raise RuntimeError("Link checker client not initialized")

        result = await self._session.list_tools()
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.inputSchema,
            }
            for tool in result.tools
        ]
