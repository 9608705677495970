"""Centralized environment configuration management for spec2app.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> port = get_environment(EnvVar.MCP_PORT)  # Returns int
    >>> level = get_environment(EnvVar.SPEC2APP_LOG_LEVEL)  # Returns str
    >>>
    >>> # Override at runtime
    >>> port = get_environment(EnvVar.MCP_PORT, override=9000)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "MCP_PORT").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str or int).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by spec2app.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - logging: Log output configuration
        - analysis: Limits applied to specification text at the outer surfaces
        - service: MCP server transport, host and port
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    SPEC2APP_LOG_LEVEL = EnvConfig(
        name="SPEC2APP_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI and MCP server (DEBUG, INFO, ...)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Analysis Limits
    # -------------------------------------------------------------------------
    SPEC2APP_MAX_SPEC_LENGTH = EnvConfig(
        name="SPEC2APP_MAX_SPEC_LENGTH",
        default=20000,
        var_type=int,
        description="Maximum accepted specification length in characters",
        category="analysis",
    )

    # -------------------------------------------------------------------------
    # Service Configuration
    # -------------------------------------------------------------------------
    MCP_HOST = EnvConfig(
        name="MCP_HOST",
        default="0.0.0.0",
        var_type=str,
        description="MCP server bind address",
        category="service",
    )
    MCP_PORT = EnvConfig(
        name="MCP_PORT",
        default=3000,
        var_type=int,
        description="MCP server port for HTTP/SSE transports",
        category="service",
    )
    MCP_TRANSPORT = EnvConfig(
        name="MCP_TRANSPORT",
        default="stdio",
        var_type=str,
        description="MCP transport: stdio, http or sse",
        category="service",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str or int).

    Example:
        >>> get_environment(EnvVar.MCP_PORT)
        3000
        >>> get_environment(EnvVar.MCP_PORT, override=9000)
        9000
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)

    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name, upper-cased."""
    return str(get_environment(EnvVar.SPEC2APP_LOG_LEVEL, override=override)).upper()


def get_max_spec_length(override: int | None = None) -> int:
    """Get the maximum accepted specification length in characters."""
    return get_environment(EnvVar.SPEC2APP_MAX_SPEC_LENGTH, override=override)


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, analysis, service).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


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
