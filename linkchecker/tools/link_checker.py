"""
The check_link tool.

Wraps check_link() for the MCP server: one URL in, one text block out.
"""

from typing import Any

import httpx
from mcp import types

from linkchecker.checks import check_link
from linkchecker.config.settings import ProbeSettings
from linkchecker.tools.base import Tool, text_result


class CheckLinkTool(Tool):
    """Checks whether a URL answers an HTTP probe."""

    name = "check_link"
    description = (
        "Checks if a URL returns a valid response. "
        "Accepts a URL and makes an HTTP request to verify it works."
    )
    input_schema = {
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "format": "uri",
                "description": "The URL to check",
            },
        },
        "required": ["url"],
        "additionalProperties": False,
    }

    def __init__(
        self,
        settings: ProbeSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the tool.

        Args:
            settings: Probe configuration. Defaults to ProbeSettings().
            transport: httpx transport override, used to keep tests offline.
        """
        self._settings = settings or ProbeSettings()
        self._transport = transport

    async def run(self, arguments: dict[str, Any]) -> types.CallToolResult:
        result = await check_link(
            arguments.get("url"), self._settings, transport=self._transport
        )
        return text_result(result.message, is_error=result.is_error)
