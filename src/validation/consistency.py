"""Cross-reference consistency checks for Design Contracts.

These are semantic rules that a per-field schema cannot express:
- Unique entity and service names
- Service naming convention (names end with "Service")
- Operation type references resolve to a primitive, an entity,
  or a convention-named payload type

All checks run to completion; issues are accumulated, never short-circuited.
"""

import logging
from dataclasses import dataclass, field

from src.schema import (
    DesignContract,
    is_payload_type,
    is_primitive_type,
    strip_array_suffix,
)

logger = logging.getLogger(__name__)

SERVICE_SUFFIX = "Service"


@dataclass
class ConsistencyResult:
    """Outcome of a consistency check.

    Attributes:
        consistent: True when no issues were found.
        issues: Human-readable issue descriptions.
    """

    consistent: bool
    issues: list[str] = field(default_factory=list)


class ConsistencyChecker:
    """Checks logical consistency of a schema-valid Design Contract.

    Example:
        >>> result = ConsistencyChecker().check(contract)
        >>> if not result.consistent:
        ...     print("\\n".join(result.issues))
    """

    def check(self, contract: DesignContract) -> ConsistencyResult:
        """Run every consistency rule against a contract.

        Args:
            contract: Parsed contract that already passed schema validation.

        Returns:
            ConsistencyResult listing all issues found.
        """
        entity_names = [entity.name for entity in contract.entities]
        service_names = [service.name for service in contract.services]

        issues: list[str] = []
        issues.extend(_duplicate_issues(entity_names, "entity"))
        issues.extend(_duplicate_issues(service_names, "service"))
        issues.extend(_naming_convention_issues(contract))
        issues.extend(_type_reference_issues(contract, set(entity_names)))

        if issues:
            logger.debug(f"Consistency check found {len(issues)} issue(s)")

        return ConsistencyResult(consistent=not issues, issues=issues)


def _find_duplicates(names: list[str]) -> list[str]:
    """Return names occurring more than once, in first-seen order."""
    counts: dict[str, int] = {}
    for name in names:
        counts[name] = counts.get(name, 0) + 1
    return [name for name, count in counts.items() if count > 1]


def _duplicate_issues(names: list[str], kind: str) -> list[str]:
    """One issue listing every duplicated name of the given kind."""
    duplicates = _find_duplicates(names)
    if not duplicates:
        return []
    return [f"Found duplicate {kind} names: {', '.join(duplicates)}"]


def _naming_convention_issues(contract: DesignContract) -> list[str]:
    """One issue per service whose name does not end with 'Service'."""
    return [
        f"Service '{service.name}' does not follow naming convention "
        f"(should end with '{SERVICE_SUFFIX}')"
        for service in contract.services
        if not service.name.endswith(SERVICE_SUFFIX)
    ]


def _is_resolvable(type_ref: str, entity_names: set[str]) -> bool:
    """Check whether a stripped type reference resolves."""
    return (
        is_primitive_type(type_ref)
        or type_ref in entity_names
        or is_payload_type(type_ref)
    )


def _type_reference_issues(
    contract: DesignContract, entity_names: set[str]
) -> list[str]:
    """Issues for operation inputs/outputs that name no known type."""
    issues: list[str] = []

    for service in contract.services:
        for operation in service.operations:
            output_type = strip_array_suffix(operation.output)
            if not _is_resolvable(output_type, entity_names):
                issues.append(
                    f"Service '{service.name}' operation '{operation.name}' "
                    f"references non-existent entity '{output_type}'"
                )

            input_type = strip_array_suffix(operation.input)
            if not _is_resolvable(input_type, entity_names):
                issues.append(
                    f"Service '{service.name}' operation '{operation.name}' "
                    f"references non-existent entity '{input_type}' as input"
                )

    return issues


def check_consistency(contract: DesignContract) -> ConsistencyResult:
    """Check a contract with a default ConsistencyChecker."""
    return ConsistencyChecker().check(contract)


__all__ = ["ConsistencyResult", "ConsistencyChecker", "check_consistency"]
