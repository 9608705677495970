"""Validate contract tool for MCP server.

This tool runs an externally authored Design Contract through the
Orchestrator pipeline without any extraction.
"""

import logging
from typing import Any

from src.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


def validate_contract(contract: Any) -> dict[str, Any]:
    """Validate, cross-check and normalize a Design Contract.

    Args:
        contract: Contract JSON, usually a dict with metadata, entities,
            services and ui.

    Returns:
        Dictionary containing either:
        - valid: True
        - contract: The normalized contract
        or:
        - valid: False
        - errors: Errors from the first failing stage

    Example:
        >>> result = validate_contract({"metadata": {...}, ...})
        >>> if not result["valid"]:
        ...     for error in result["errors"]:
        ...         print(error)
    """
    result = Orchestrator().process(contract)

    if not result.success:
        logger.info(f"Contract validation failed with {len(result.errors)} error(s)")
        return {"valid": False, "errors": result.errors}

    return {"valid": True, "contract": result.contract.to_dict()}


__all__ = ["validate_contract"]
