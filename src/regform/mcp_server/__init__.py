"""
MCP Server module for regform.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from regform.mcp_server.server import create_mcp_server, create_sse_app, run_mcp_server
from regform.mcp_server.tools import dispatch_tool, get_mcp_tools

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "dispatch_tool",
    "get_mcp_tools",
]
