"""Schema validation stage for Design Contracts.

The Validator runs a candidate (any JSON-like value) against the canonical
contract schema and flattens every structural, naming-convention and
refinement failure into an addressed "<path>: <message>" string.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.schema import DesignContract, errors_from_exception, parse_contract

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of schema validation.

    Attributes:
        valid: True when the candidate satisfies the schema.
        errors: Flat "<path>: <message>" strings; empty iff valid.
        contract: Parsed contract when valid, None otherwise.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    contract: DesignContract | None = None


class Validator:
    """Validates candidates against the Design Contract schema.

    Holds no per-call state; a single instance may be shared.

    Example:
        >>> result = Validator().validate({"metadata": {...}})
        >>> if not result.valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def validate(self, candidate: Any) -> ValidationResult:
        """Validate a candidate contract.

        Args:
            candidate: Dictionary decoded from JSON, or a DesignContract.

        Returns:
            ValidationResult with flattened error messages.
        """
        try:
            contract = parse_contract(candidate)
        except PydanticValidationError as e:
            errors = [str(err) for err in errors_from_exception(e)]
            logger.debug(f"Schema validation failed with {len(errors)} error(s)")
            return ValidationResult(valid=False, errors=errors)

        return ValidationResult(valid=True, contract=contract)


def validate_contract(candidate: Any) -> ValidationResult:
    """Validate a candidate contract with a default Validator.

    Args:
        candidate: Dictionary decoded from JSON, or a DesignContract.

    Returns:
        ValidationResult with flattened error messages.
    """
    return Validator().validate(candidate)


def is_valid(candidate: Any) -> bool:
    """Check if a candidate satisfies the contract schema.

    Convenience function that returns True if no validation errors exist.
    """
    return validate_contract(candidate).valid


__all__ = ["ValidationResult", "Validator", "validate_contract", "is_valid"]
