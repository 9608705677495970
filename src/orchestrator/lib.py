"""Orchestrator: validate, cross-check and normalize a candidate contract.

Stages run strictly in sequence and stop at the first failing stage:

    Validator -> ConsistencyChecker -> Normalizer

Only the failing stage's errors are reported; schema and consistency
problems are never mixed in one result.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from src.normalizer import Normalizer
from src.schema import DesignContract
from src.validation import ConsistencyChecker, Validator

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Outcome of processing a candidate contract.

    Attributes:
        success: True when every stage passed.
        contract: Normalized contract on success, None otherwise.
        errors: Errors of the failing stage; empty on success.
    """

    success: bool
    contract: DesignContract | None = None
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view of the result."""
        data: dict[str, Any] = {"success": self.success, "errors": list(self.errors)}
        if self.contract is not None:
            data["contract"] = self.contract.to_dict()
        return data


class Orchestrator:
    """Runs the validation pipeline over candidate contracts.

    Holds no per-call state; a single instance may be shared.

    Example:
        >>> result = Orchestrator().process(candidate)
        >>> if result.success:
        ...     print(result.contract.to_dict())
    """

    def __init__(
        self,
        validator: Validator | None = None,
        consistency_checker: ConsistencyChecker | None = None,
        normalizer: Normalizer | None = None,
    ) -> None:
        self.validator = validator or Validator()
        self.consistency_checker = consistency_checker or ConsistencyChecker()
        self.normalizer = normalizer or Normalizer()

    def process(self, candidate: Any) -> ProcessResult:
        """Process a candidate contract.

        Args:
            candidate: JSON-like value (usually a dict) or DesignContract.
                It is never modified.

        Returns:
            ProcessResult with the normalized contract or the failing
            stage's errors.
        """
        validation = self.validator.validate(candidate)
        if not validation.valid or validation.contract is None:
            logger.warning(
                f"Contract rejected by schema validation ({len(validation.errors)} error(s))"
            )
            return ProcessResult(success=False, errors=list(validation.errors))

        consistency = self.consistency_checker.check(validation.contract)
        if not consistency.consistent:
            logger.warning(
                f"Contract rejected by consistency check ({len(consistency.issues)} issue(s))"
            )
            return ProcessResult(success=False, errors=list(consistency.issues))

        normalized = self.normalizer.normalize(validation.contract)
        logger.info(f"Processed contract {normalized.metadata.name}")
        return ProcessResult(success=True, contract=normalized)


def process_contract(candidate: Any) -> ProcessResult:
    """Process a candidate with a default Orchestrator."""
    return Orchestrator().process(candidate)


__all__ = ["ProcessResult", "Orchestrator", "process_contract"]
