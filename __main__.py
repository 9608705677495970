"""CLI entry point for spec2app.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config import get_log_level, get_max_spec_length
from src.core import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _emit(data: dict, output: Path | None) -> None:
    """Print JSON to stdout or write it to a file."""
    text = json.dumps(data, indent=2)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Saved to {output}")
    else:
        print(text)


# =============================================================================
# Analyze Command
# =============================================================================


def _read_specification(args: argparse.Namespace) -> str:
    """Specification text from the positional argument or --file."""
    if args.file:
        return args.file.read_text(encoding="utf-8")
    return " ".join(args.text)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the analyze command."""
    from src.analyst import Analyst
    from src.orchestrator import Orchestrator

    try:
        specification = _read_specification(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read specification: {e}")
        return 1

    if not specification.strip():
        logger.error("Specification is required (pass TEXT or --file)")
        return 1

    limit = get_max_spec_length()
    if len(specification) > limit:
        logger.error(f"Specification is too long ({len(specification)} characters, max {limit})")
        return 1

    candidate = Analyst().analyze(specification)

    if args.raw:
        _emit(candidate, args.output)
        return 0

    result = Orchestrator().process(candidate)
    if not result.success:
        logger.error("Invalid design contract:")
        for error in result.errors:
            logger.error(f"  {error}")
        return 1

    _emit(result.contract.to_dict(), args.output)
    return 0


def handle_analyze_command(argv: list[str]) -> int:
    """Handle analyze command with argparse."""
    parser = argparse.ArgumentParser(
        prog="python . analyze",
        description="Analyze a natural-language specification into a Design Contract",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Specification text (or use --file)",
    )
    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        help="Read the specification from a file",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the extracted candidate without validation or normalization",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the contract to a file instead of stdout",
    )

    args = parser.parse_args(argv)
    return cmd_analyze(args)


# =============================================================================
# Validate Command
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    from src.orchestrator import Orchestrator

    try:
        candidate = json.loads(args.file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Could not load contract from {args.file}: {e}")
        return 1

    result = Orchestrator().process(candidate)
    if not result.success:
        logger.error(f"Contract is invalid ({len(result.errors)} error(s)):")
        for error in result.errors:
            logger.error(f"  {error}")
        return 1

    logger.info("Contract is valid")
    _emit(result.contract.to_dict(), args.output)
    return 0


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate command with argparse."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Validate, cross-check and normalize a Design Contract JSON file",
    )
    parser.add_argument("file", type=Path, help="Contract JSON file")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the normalized contract to a file instead of stdout",
    )

    args = parser.parse_args(argv)
    return cmd_validate(args)


# =============================================================================
# Schema Command
# =============================================================================


def handle_schema_command(argv: list[str]) -> int:
    """Print the Design Contract JSON Schema."""
    from src.schema import export_json_schema

    parser = argparse.ArgumentParser(
        prog="python . schema",
        description="Print the Design Contract JSON Schema",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the schema to a file instead of stdout",
    )

    args = parser.parse_args(argv)
    _emit(export_json_schema(), args.output)
    return 0


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test --integration  # Run integration tests
        python . test --mcp          # Run MCP protocol tests
        python . test -k "entity"    # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--mcp": ["-m", "mcp"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# MCP Command
# =============================================================================


def handle_mcp_command(argv: list[str]) -> int:
    """Handle MCP server commands.

    Usage:
        python . mcp run              # Start in STDIO mode
        python . mcp serve            # Start in HTTP mode
        python . mcp serve --port 8080
        python . mcp info             # Show server info
    """
    if not argv:
        print("MCP Server Commands")
        print("\nUsage: python . mcp {command} [options]")
        print("\nCommands:")
        print("  run                 Start server in STDIO mode")
        print("  serve               Start server in HTTP mode")
        print("  info                Show server information")
        print("\nOptions for 'serve':")
        print("  --host HOST         Bind address (default: MCP_HOST or 0.0.0.0)")
        print("  --port PORT         Port number (default: MCP_PORT or 3000)")
        print("  --transport TYPE    Transport: http or sse (default: http)")
        return 1

    subcommand = argv[0]
    subargs = argv[1:]

    if subcommand == "run":
        from src.mcp.server import TransportType, run_server

        logger.info("Starting MCP server in STDIO mode...")
        run_server(transport=TransportType.STDIO)
        return 0

    elif subcommand == "serve":
        from src.mcp import ServerConfig
        from src.mcp.server import TransportType, run_server

        config = ServerConfig.from_env(transport=TransportType.HTTP)

        parser = argparse.ArgumentParser(prog="python . mcp serve")
        parser.add_argument("--host", default=config.host)
        parser.add_argument("--port", type=int, default=config.port)
        parser.add_argument(
            "--transport",
            choices=[TransportType.HTTP.value, TransportType.SSE.value],
            default=config.transport.value,
        )
        args = parser.parse_args(subargs)

        transport = TransportType(args.transport)
        logger.info(f"Starting MCP server in {transport.value} mode...")
        logger.info(f"Listening on {args.host}:{args.port}")
        run_server(transport=transport, host=args.host, port=args.port)
        return 0

    elif subcommand == "info":
        from src.mcp import get_server_capabilities, get_server_info

        info = get_server_info()
        print(info["name"])
        print("=" * 40)
        print(f"Version: {info['version']}")
        print(info["description"])
        print("\nCapabilities:")
        for cap, enabled in get_server_capabilities().items():
            status = "enabled" if enabled else "disabled"
            print(f"  {cap}: {status}")
        print("\nAvailable Tools:")
        print("  - analyze_specification: Natural language to Design Contract")
        print("  - validate_contract: Validate and normalize a contract")
        print("  - info: Server metadata")
        print("  - status: Health check")
        return 0

    else:
        logger.error(f"Unknown mcp command: {subcommand}")
        return handle_mcp_command([])


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Contracts ===")
    print("  analyze    Analyze a specification into a Design Contract")
    print("  validate   Validate and normalize a contract JSON file")
    print("  schema     Print the Design Contract JSON Schema")
    print("\n=== MCP Server ===")
    print("  mcp        Run MCP server (STDIO or HTTP mode)")
    print("\n=== Development ===")
    print("  test       Run the test suite (--unit, --integration, --mcp)")
    print("\nExamples:")
    print('  python . analyze "Create TaskFlow, a todo app. A Task has title, dueDate."')
    print("  python . analyze -f spec.txt -o contract.json")
    print("  python . analyze --raw -f spec.txt")
    print("  python . validate contract.json")
    print("  python . mcp serve --port 3000")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        show_help()
        return 1

    command = argv[0]
    rest_args = argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "analyze": lambda: handle_analyze_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "schema": lambda: handle_schema_command(rest_args),
        "mcp": lambda: handle_mcp_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        try:
            return commands[command]()
        except Exception as e:
            logger.error(f"{command} failed: {e}")
            return 1

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
