"""Unit tests for MCP server module.

Tests cover:
- Server configuration
- Server instance creation
- Tool registration
- Basic tool functionality
"""

import asyncio
import json

import pytest

from .lib import (
    ServerConfig,
    TransportType,
    get_server_capabilities,
    get_server_info,
    get_server_version,
)

# Conditionally import server module (requires fastmcp)
try:
    from .server import _cached_contract_schema, create_server, mcp

    FASTMCP_AVAILABLE = True
except ImportError:
    _cached_contract_schema = None  # type: ignore[assignment]
    create_server = None  # type: ignore[assignment,misc]
    mcp = None  # type: ignore[assignment]
    FASTMCP_AVAILABLE = False

# Skip marker for tests requiring fastmcp
requires_fastmcp = pytest.mark.skipif(
    not FASTMCP_AVAILABLE,
    reason="fastmcp not installed",
)

# =============================================================================
# Configuration Tests
# =============================================================================


class TestServerConfig:
    """Tests for ServerConfig dataclass."""

    @pytest.mark.unit
    def test_default_config(self):
        """Default config has expected values."""
        config = ServerConfig()

        assert config.name == "spec2app"
        assert config.transport == TransportType.STDIO
        assert config.host == "0.0.0.0"
        assert config.port == 3000
        assert config.path == "/mcp"

    @pytest.mark.unit
    def test_from_env_default(self, monkeypatch):
        """from_env falls back to configured defaults."""
        for name in ("MCP_TRANSPORT", "MCP_HOST", "MCP_PORT"):
            monkeypatch.delenv(name, raising=False)

        config = ServerConfig.from_env()

        assert config.transport == TransportType.STDIO
        assert config.port == 3000
        assert config.name == "spec2app"

    @pytest.mark.unit
    def test_from_env_reads_environment(self, monkeypatch):
        """Transport, host and port come from the environment."""
        monkeypatch.setenv("MCP_TRANSPORT", "sse")
        monkeypatch.setenv("MCP_HOST", "127.0.0.1")
        monkeypatch.setenv("MCP_PORT", "8123")

        config = ServerConfig.from_env()

        assert config.transport == TransportType.SSE
        assert config.host == "127.0.0.1"
        assert config.port == 8123

    @pytest.mark.unit
    def test_from_env_with_transport(self):
        """from_env respects transport override."""
        config = ServerConfig.from_env(transport=TransportType.HTTP)

        assert config.transport == TransportType.HTTP


class TestTransportType:
    """Tests for TransportType enum."""

    @pytest.mark.unit
    def test_transport_from_string(self):
        """Transport can be created from string."""
        assert TransportType("stdio") == TransportType.STDIO
        assert TransportType("http") == TransportType.HTTP
        assert TransportType("sse") == TransportType.SSE


# =============================================================================
# Server Utility Tests
# =============================================================================


class TestServerUtilities:
    """Tests for server utility functions."""

    @pytest.mark.unit
    def test_get_server_version(self):
        """Server version is 0.1.0."""
        assert get_server_version() == "0.1.0"

    @pytest.mark.unit
    def test_get_server_capabilities(self):
        """Server capabilities contains expected keys."""
        caps = get_server_capabilities()

        assert caps["tools"] is True
        assert caps["resources"] is True

    @pytest.mark.unit
    def test_get_server_info(self):
        """Server info carries name, version and description."""
        assert get_server_info() == {
            "name": "Spec2App API",
            "version": "0.1.0",
            "description": "Transform natural language specifications into Design Contracts",
        }


# =============================================================================
# Server Instance Tests
# =============================================================================


@requires_fastmcp
class TestServerInstance:
    """Tests for FastMCP server instance."""

    @pytest.mark.unit
    def test_create_server_returns_mcp(self):
        """create_server returns the mcp instance."""
        assert create_server() is mcp

    @pytest.mark.unit
    def test_server_has_name(self):
        """Server has correct name."""
        assert mcp.name == "spec2app"

    @pytest.mark.unit
    def test_contract_schema_resource(self):
        """Schema resource serves the Design Contract JSON Schema."""
        schema = json.loads(_cached_contract_schema())

        assert schema["title"] == "DesignContract"
        assert "metadata" in schema["properties"]


# =============================================================================
# MCP Protocol Integration Tests
# =============================================================================


@pytest.mark.mcp
class TestMCPProtocol:
    """Integration tests using the in-memory MCP client."""

    def test_client_can_list_tools(self, mcp_server):
        """All contract and status tools are exposed."""
        from fastmcp import Client

        async def list_tool_names():
            async with Client(mcp_server) as client:
                return {tool.name for tool in await client.list_tools()}

        assert asyncio.run(list_tool_names()) == {
            "analyze_specification",
            "validate_contract",
            "info",
            "status",
        }

    def test_client_can_call_status(self, mcp_server):
        """Client can call status tool."""
        from fastmcp import Client

        async def call_status():
            async with Client(mcp_server) as client:
                return await client.call_tool("status", {})

        assert asyncio.run(call_status()) is not None
