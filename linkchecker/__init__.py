"""
Link Checker - MCP tool server for checking whether a URL is reachable.

This package exposes a single ``check_link`` tool to an LLM tool-calling host
over the Model Context Protocol stdio transport.
"""

__version__ = "1.0.0"
