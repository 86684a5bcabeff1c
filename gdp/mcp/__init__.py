"""GDP MCP - Model Context Protocol server for Drive document projects.

This module provides an MCP server that exposes GDP functionality
to LLM clients.
"""

from .server import mcp, run_server

__all__ = ["mcp", "run_server"]
