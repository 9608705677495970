"""Service extraction: services and their operations."""

import logging
import re
from typing import Any

from src.schema import HTTPMethod

from .text import relevant_sentences, to_camel_case

logger = logging.getLogger(__name__)

SERVICE_SUFFIX = "Service"

_SERVICE_TOKEN_RE = re.compile(r"([A-Z][a-zA-Z]*Service)")
# The CRUD keyword is matched in any case; the entity noun must be capitalized.
_CRUD_PHRASE_RE = re.compile(
    r"(?i:CRUD)\s+(?i:operations?\s+)?(?i:for|on)\s+(?i:the\s+)?([A-Z][a-zA-Z]*)"
)
_CRUD_MENTION_RE = re.compile(r"crud", re.IGNORECASE)

# "archiveTask operation (POST)" and "archiveTask (POST)"
# The bare form would also capture the keyword itself from the first form.
OPERATION_DECLARATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\w+)\s+operation\s+\(([A-Z]+)\)", re.IGNORECASE),
    re.compile(r"(\w+)\s+\(([A-Z]+)\)"),
)
_OPERATION_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9]*$")
_OPERATION_KEYWORD = "operation"

VERB_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:create|add|insert)\s+(?:a\s+)?(\w+)", re.IGNORECASE),
    re.compile(r"\b(?:get|fetch|retrieve)\s+(?:a\s+)?(\w+)", re.IGNORECASE),
    re.compile(r"\b(?:update|modify|edit)\s+(?:a\s+)?(\w+)", re.IGNORECASE),
    re.compile(r"\b(?:delete|remove)\s+(?:a\s+)?(\w+)", re.IGNORECASE),
    re.compile(r"\b(?:list|get\s+all)\s+(\w+)", re.IGNORECASE),
)

VERB_METHODS: dict[str, HTTPMethod] = {
    "create": HTTPMethod.POST,
    "add": HTTPMethod.POST,
    "insert": HTTPMethod.POST,
    "get": HTTPMethod.GET,
    "fetch": HTTPMethod.GET,
    "retrieve": HTTPMethod.GET,
    "list": HTTPMethod.GET,
    "update": HTTPMethod.PUT,
    "modify": HTTPMethod.PUT,
    "edit": HTTPMethod.PUT,
    "delete": HTTPMethod.DELETE,
    "remove": HTTPMethod.DELETE,
}

_SUPPORTED_METHODS = frozenset(method.value for method in HTTPMethod)


def base_entity_name(service_name: str) -> str:
    """Entity a service is about: `TaskService` -> `Task`."""
    return service_name.replace(SERVICE_SUFFIX, "", 1)


def verb_to_method(verb: str) -> HTTPMethod:
    """HTTP method for a CRUD verb, GET when unknown."""
    return VERB_METHODS.get(verb.lower(), HTTPMethod.GET)


def infer_input_output(
    operation_name: str, entity_name: str, method: HTTPMethod
) -> tuple[str, str]:
    """Input and output type references for a synthesized operation.

    Args:
        operation_name: Operation name, consulted for list-style reads.
        entity_name: Entity the operation acts on.
        method: HTTP method of the operation.

    Returns:
        Tuple of (input, output) type references.
    """
    if method == HTTPMethod.POST:
        return f"{entity_name}Input", entity_name
    if method in (HTTPMethod.PUT, HTTPMethod.PATCH):
        return f"{entity_name}Update", entity_name
    if method == HTTPMethod.DELETE:
        return "string", "void"

    lower = operation_name.lower()
    if "list" in lower or "all" in lower:
        return "void", f"{entity_name}[]"
    return "string", entity_name


def _operation(name: str, input_type: str, output_type: str, method: HTTPMethod) -> dict[str, Any]:
    return {"name": name, "input": input_type, "output": output_type, "method": method.value}


def crud_operations(entity_name: str) -> list[dict[str, Any]]:
    """The four canonical create/get/update/delete operations for an entity."""
    return [
        _operation(f"create{entity_name}", f"{entity_name}Input", entity_name, HTTPMethod.POST),
        _operation(f"get{entity_name}", "string", entity_name, HTTPMethod.GET),
        _operation(f"update{entity_name}", f"{entity_name}Update", entity_name, HTTPMethod.PUT),
        _operation(f"delete{entity_name}", "string", "void", HTTPMethod.DELETE),
    ]


class ServiceExtractor:
    """Derives services and operations from a specification.

    Operation sources are applied in a fixed order (CRUD mention, explicit
    declarations, CRUD verbs). A later operation whose name is already
    taken within the service is dropped.
    """

    def extract(self, text: str) -> list[dict[str, Any]]:
        """Extract services.

        Args:
            text: Natural-language specification.

        Returns:
            Service dicts in first-seen order. Services without operations
            are dropped, so the list may be empty.
        """
        services: list[dict[str, Any]] = []

        for name in self.extract_names(text):
            operations = self.extract_operations(text, name)
            if operations:
                services.append({"name": name, "operations": operations})
            else:
                logger.debug(f"Discarding service {name}: no operations found")

        return services

    def extract_names(self, text: str) -> list[str]:
        """Literal `XxxService` tokens, then services implied by CRUD phrases."""
        names: dict[str, None] = {}
        for match in _SERVICE_TOKEN_RE.finditer(text):
            names.setdefault(match.group(1))
        for match in _CRUD_PHRASE_RE.finditer(text):
            names.setdefault(f"{match.group(1)}{SERVICE_SUFFIX}")
        return list(names)

    def extract_operations(self, text: str, service_name: str) -> list[dict[str, Any]]:
        """Operations for one service."""
        entity_name = base_entity_name(service_name)
        operations: list[dict[str, Any]] = []

        if _CRUD_MENTION_RE.search(text):
            operations.extend(crud_operations(entity_name))

        relevant_text = " ".join(relevant_sentences(text, service_name, entity_name))

        for operation in self._declared_operations(relevant_text, entity_name):
            _add_unique(operations, operation)
        for operation in self._verb_operations(relevant_text, entity_name):
            _add_unique(operations, operation)

        return operations

    def _declared_operations(self, relevant_text: str, entity_name: str) -> list[dict[str, Any]]:
        declared: list[dict[str, Any]] = []

        for pattern in OPERATION_DECLARATION_PATTERNS:
            for match in pattern.finditer(relevant_text):
                raw_name, raw_method = match.group(1), match.group(2).upper()
                if not _OPERATION_NAME_RE.match(raw_name) or raw_method not in _SUPPORTED_METHODS:
                    continue
                if raw_name.lower() == _OPERATION_KEYWORD:
                    continue

                method = HTTPMethod(raw_method)
                input_type, output_type = infer_input_output(raw_name, entity_name, method)
                declared.append(
                    _operation(to_camel_case(raw_name), input_type, output_type, method)
                )

        return declared

    def _verb_operations(self, relevant_text: str, entity_name: str) -> list[dict[str, Any]]:
        synthesized: list[dict[str, Any]] = []

        for pattern in VERB_PATTERNS:
            for match in pattern.finditer(relevant_text):
                verb = match.group(0).split()[0].lower()
                method = verb_to_method(verb)
                name = f"{verb}{entity_name}"
                input_type, output_type = infer_input_output(name, entity_name, method)
                synthesized.append(_operation(name, input_type, output_type, method))

        return synthesized


def _add_unique(operations: list[dict[str, Any]], operation: dict[str, Any]) -> None:
    """Append unless an operation with the same name is already present."""
    if not any(existing["name"] == operation["name"] for existing in operations):
        operations.append(operation)


__all__ = [
    "VERB_METHODS",
    "ServiceExtractor",
    "base_entity_name",
    "verb_to_method",
    "infer_input_output",
    "crud_operations",
]
