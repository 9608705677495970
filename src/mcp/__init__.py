"""MCP (Model Context Protocol) server for spec2app.

This module exposes the Design Contract pipeline to MCP clients.

Example:
    # Start server in STDIO mode
    >>> from src.mcp.server import run_server
    >>> run_server()

    # Start server in HTTP mode
    >>> from src.mcp.server import run_server, TransportType
    >>> run_server(transport=TransportType.HTTP, port=3000)

Available Tools:
    - analyze_specification: Natural language to validated Design Contract
    - validate_contract: Validate and normalize an existing contract
    - info: Server metadata
    - status: Health check
"""

from .lib import (
    ServerConfig,
    TransportType,
    get_server_capabilities,
    get_server_info,
    get_server_version,
)

# Conditionally import server module (requires fastmcp)
try:
    from .server import create_server, mcp, run_server

    _FASTMCP_AVAILABLE = True
except ImportError:
    create_server = None  # type: ignore[assignment,misc]
    mcp = None  # type: ignore[assignment]
    run_server = None  # type: ignore[assignment]
    _FASTMCP_AVAILABLE = False

__all__ = [
    # Server instance (requires fastmcp)
    "mcp",
    "create_server",
    "run_server",
    # Configuration
    "ServerConfig",
    "TransportType",
    # Utilities
    "get_server_version",
    "get_server_capabilities",
    "get_server_info",
]
