"""Centralized configuration management for spec2app.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> port = get_environment(EnvVar.MCP_PORT)  # Returns int: 3000
    >>>
    >>> # Override at runtime
    >>> port = get_environment(EnvVar.MCP_PORT, override=9000)
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("service"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    logging: Log level for CLI and server
    analysis: Limits on accepted specification text
    service: MCP server transport, host and port
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    get_max_spec_length,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_max_spec_length",
    # Introspection
    "list_environment_variables",
]
