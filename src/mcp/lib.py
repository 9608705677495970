"""Core MCP server logic for spec2app.

Provides configuration and metadata helpers for creating MCP server instances.
"""

from dataclasses import dataclass
from enum import Enum

from src.config import EnvVar, get_environment

SERVER_NAME = "spec2app"
SERVER_TITLE = "Spec2App API"
SERVER_DESCRIPTION = "Transform natural language specifications into Design Contracts"


class TransportType(str, Enum):
    """Supported MCP transport types."""

    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"


@dataclass
class ServerConfig:
    """Configuration for MCP server.

    Attributes:
        name: Server display name.
        transport: Transport type for communication.
        host: Bind address for HTTP/SSE transports.
        port: Port for HTTP/SSE transports.
        path: URL path for HTTP transport.
    """

    name: str = SERVER_NAME
    transport: TransportType = TransportType.STDIO
    host: str = "0.0.0.0"
    port: int = 3000
    path: str = "/mcp"

    @classmethod
    def from_env(
        cls,
        transport: TransportType | None = None,
    ) -> "ServerConfig":
        """Create config from environment variables.

        Args:
            transport: Override transport type (default: MCP_TRANSPORT).

        Returns:
            ServerConfig with values from environment.
        """
        return cls(
            name=SERVER_NAME,
            transport=transport or TransportType(get_environment(EnvVar.MCP_TRANSPORT)),
            host=get_environment(EnvVar.MCP_HOST),
            port=get_environment(EnvVar.MCP_PORT),
        )


def get_server_version() -> str:
    """Get server version string."""
    return "0.1.0"


def get_server_capabilities() -> dict:
    """Get server capabilities for MCP protocol.

    Returns:
        Dictionary of capability flags.
    """
    return {
        "tools": True,
        "resources": True,
        "prompts": False,
        "logging": True,
    }


def get_server_info() -> dict:
    """Name, version and description of the service."""
    return {
        "name": SERVER_TITLE,
        "version": get_server_version(),
        "description": SERVER_DESCRIPTION,
    }


__all__ = [
    "SERVER_NAME",
    "TransportType",
    "ServerConfig",
    "get_server_version",
    "get_server_capabilities",
    "get_server_info",
]
