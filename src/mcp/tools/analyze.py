"""Analyze specification tool for MCP server.

Runs a natural-language specification through the Analyst and then the
Orchestrator pipeline, returning the normalized Design Contract.
"""

import logging
from typing import Any

from src.analyst import Analyst
from src.config import get_max_spec_length
from src.orchestrator import Orchestrator

logger = logging.getLogger(__name__)

INVALID_CONTRACT_ERROR = "Invalid design contract"


def check_specification(specification: Any, max_length: int | None = None) -> str:
    """Validate the specification argument.

    Args:
        specification: Value passed by the client.
        max_length: Upper bound on accepted characters (default: config).

    Returns:
        The specification, unchanged.

    Raises:
        ValueError: If the specification is not a non-empty string within
            the configured length.
    """
    if not isinstance(specification, str):
        raise ValueError("Specification must be a string")
    if not specification.strip():
        raise ValueError("Specification is required")

    limit = get_max_spec_length(max_length)
    if len(specification) > limit:
        raise ValueError(
            f"Specification is too long ({len(specification)} characters, max {limit})"
        )
    return specification


def analyze_specification(specification: str) -> dict[str, Any]:
    """Analyze a specification into a validated Design Contract.

    Args:
        specification: Natural-language description of an application.

    Returns:
        Dictionary containing either:
        - success: True
        - contract: The normalized Design Contract
        or:
        - success: False
        - error: "Invalid design contract"
        - details: Validation or consistency errors

    Raises:
        ValueError: If the specification is empty, not a string or too long.

    Example:
        >>> result = analyze_specification("Create a simple todo app.")
        >>> result["contract"]["metadata"]["name"]
        'TaskManager'
    """
    check_specification(specification)

    candidate = Analyst().analyze(specification)
    result = Orchestrator().process(candidate)

    if not result.success:
        logger.warning(f"Analysis produced an invalid contract: {result.errors}")
        return {
            "success": False,
            "error": INVALID_CONTRACT_ERROR,
            "details": result.errors,
        }

    return {"success": True, "contract": result.contract.to_dict()}


__all__ = ["analyze_specification", "check_specification", "INVALID_CONTRACT_ERROR"]
