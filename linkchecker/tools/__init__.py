"""
Tools served to the host over MCP.
"""

from linkchecker.tools.base import Tool, text_result
from linkchecker.tools.link_checker import CheckLinkTool

__all__ = ["CheckLinkTool", "Tool", "text_result"]
