"""Design Contract validation: schema stage and consistency checks."""

from src.validation.consistency import (
    ConsistencyChecker,
    ConsistencyResult,
    check_consistency,
)
from src.validation.lib import (
    ValidationResult,
    Validator,
    is_valid,
    validate_contract,
)

__all__ = [
    # Schema stage
    "ValidationResult",
    "Validator",
    "validate_contract",
    "is_valid",
    # Consistency
    "ConsistencyResult",
    "ConsistencyChecker",
    "check_consistency",
]
