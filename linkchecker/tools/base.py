"""
Base class for tools served over MCP.

Provides the abstract interface the server uses to advertise and dispatch
tools, so that registering a tool never requires touching the transport code.
"""

from abc import ABC, abstractmethod
from typing import Any

from mcp import types


class Tool(ABC):
    """
    Abstract base class for server-side tools.

    Subclasses declare their metadata as class attributes and implement run().
    The server turns definition() into a ``tools/list`` entry and routes
    ``tools/call`` requests with a matching name to run().
    """

    name: str
    description: str
    input_schema: dict[str, Any]

    @abstractmethod
    async def run(self, arguments: dict[str, Any]) -> types.CallToolResult:
        """
        Execute the tool.

        Args:
            arguments: Tool arguments as sent by the host

        Returns:
            Result with content blocks and the error flag. Implementations
            report failures in the result instead of raising.
        """
        pass

    def definition(self) -> types.Tool:
        """Return the MCP tool definition advertised to the host."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    """Build a result holding a single text block."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )
