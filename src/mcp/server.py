"""FastMCP server instance for spec2app.

This module exposes the Design Contract pipeline to MCP clients:

    1. analyze_specification: natural language -> validated Design Contract
    2. validate_contract: existing contract -> validated, normalized contract

Usage:
    # STDIO mode
    python -m src.mcp.server

    # HTTP mode
    python -m src.mcp.server --transport http --port 3000

    # Via CLI
    python . mcp run
    python . mcp serve --port 3000
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from fastmcp import FastMCP

from src.core import setup_logging

from .lib import (
    SERVER_NAME,
    TransportType,
    get_server_info,
    get_server_version,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Server Instructions (LLM Guidance)
# =============================================================================

SERVER_INSTRUCTIONS = """\
## Spec2App MCP Server

Turns a natural-language application description into a Design Contract:
metadata, entities, services and UI routes/components.

### Tools
- `analyze_specification(specification)` - Extract and validate a contract
- `validate_contract(contract)` - Validate and normalize an existing contract
- `info()` - Server name, version and tool list
- `status()` - Health check

### Resources
- `schema://contract` - JSON Schema of the Design Contract
"""

# =============================================================================
# Server Instance
# =============================================================================

mcp = FastMCP(
    name=SERVER_NAME,
    instructions=SERVER_INSTRUCTIONS,
)


# =============================================================================
# Contract Tools
# =============================================================================


@mcp.tool
def analyze_specification(specification: str) -> dict[str, Any]:
    """Analyze a natural-language specification into a Design Contract.

    The text is run through metadata, entity, service and UI extraction,
    then validated, consistency-checked and normalized.

    Args:
        specification: Description of the application, e.g.
            "Create TaskFlow, a todo app. A Task has title, dueDate."

    Returns:
        Dictionary with either `success: true` and `contract`, or
        `success: false`, `error` and `details`.
    """
    from .tools.analyze import analyze_specification as _analyze

    return _analyze(specification)


@mcp.tool
def validate_contract(contract: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize an existing Design Contract.

    Args:
        contract: Contract JSON with metadata, entities, services and ui.

    Returns:
        Dictionary with either `valid: true` and the normalized `contract`,
        or `valid: false` and `errors`.
    """
    from .tools.validate import validate_contract as _validate

    return _validate(contract)


# =============================================================================
# Status Tools
# =============================================================================


@mcp.tool
def info() -> dict[str, Any]:
    """Describe the server.

    Returns:
        Dictionary with name, version, description and the available tools.
    """
    result = get_server_info()
    result["tools"] = ["analyze_specification", "validate_contract", "info", "status"]
    return result


@mcp.tool
def status() -> dict[str, Any]:
    """Check server health.

    Returns:
        Dictionary with:
        - status: "ok"
        - version: Server version
        - timestamp: Current UTC time, ISO-8601
    """
    return {
        "status": "ok",
        "version": get_server_version(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================================================
# Resources (Schema Reference)
# =============================================================================


@lru_cache(maxsize=1)
def _cached_contract_schema() -> str:
    """Cached contract schema."""
    from src.schema import export_json_schema

    return json.dumps(export_json_schema(), indent=2)


@mcp.resource("schema://contract")
def get_contract_schema() -> str:
    """Get the Design Contract JSON schema."""
    return _cached_contract_schema()


# =============================================================================
# Server Factory & Runner
# =============================================================================


def create_server() -> FastMCP:
    """Create and configure the MCP server instance.

    Returns:
        Configured FastMCP server instance.
    """
    return mcp


def run_server(
    transport: TransportType = TransportType.STDIO,
    host: str = "0.0.0.0",
    port: int = 3000,
) -> None:
    """Run the MCP server with specified transport.

    Args:
        transport: Transport type (stdio, http, sse).
        host: Bind address for HTTP/SSE.
        port: Port for HTTP/SSE.
    """
    logger.info(f"Starting {SERVER_NAME} server v{get_server_version()}")
    logger.info(f"Transport: {transport.value}")

    if transport == TransportType.STDIO:
        mcp.run()
    elif transport == TransportType.HTTP:
        logger.info(f"Running in HTTP mode at http://{host}:{port}/mcp")
        mcp.run(
            transport="http",
            host=host,
            port=port,
            path="/mcp",
        )
    elif transport == TransportType.SSE:
        logger.info(f"Running in SSE mode at http://{host}:{port}")
        mcp.run(
            transport="sse",
            host=host,
            port=port,
        )
    else:
        raise ValueError(f"Unknown transport: {transport}")


# =============================================================================
# CLI Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for MCP server.

    Args:
        argv: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 for success).
    """
    from .lib import ServerConfig

    config = ServerConfig.from_env()

    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server for natural language to Design Contract analysis",
    )
    parser.add_argument(
        "--transport",
        "-t",
        type=str,
        choices=[t.value for t in TransportType],
        default=config.transport.value,
        help=f"Transport type (default: {config.transport.value})",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=config.host,
        help=f"Bind address for HTTP/SSE (default: {config.host})",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=config.port,
        help=f"Port for HTTP/SSE (default: {config.port})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        run_server(
            transport=TransportType(args.transport),
            host=args.host,
            port=args.port,
        )
        return 0
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.error(f"Server error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
