"""Schema module - authoritative source for Design Contract definitions.

This module provides:
- Pydantic models for every part of a Design Contract
- Naming convention rules and the enum refinement
- Type-reference helpers (primitives, payload types, array suffix)
- JSON Schema export and dict-level validation utilities

Example usage:
    >>> from src.schema import export_json_schema, validate_contract_dict
    >>> schema = export_json_schema()
    >>> errors = validate_contract_dict({"metadata": {...}, ...})
"""

from .lib import (
    CAMEL_CASE_PATTERN,
    KEBAB_CASE_PATTERN,
    LOCALE_PATTERN,
    PASCAL_CASE_PATTERN,
    PAYLOAD_MARKERS,
    PRIMITIVE_TYPES,
    ROUTE_PATTERN,
    UI,
    Attribute,
    AttributeType,
    DesignContract,
    Entity,
    HTTPMethod,
    Metadata,
    Operation,
    SchemaValidationError,
    Service,
    errors_from_exception,
    export_json_schema,
    format_location,
    is_camel_case,
    is_pascal_case,
    is_payload_type,
    is_primitive_type,
    is_valid_contract_dict,
    parse_contract,
    strip_array_suffix,
    validate_contract_dict,
)

__all__ = [
    # Conventions
    "PASCAL_CASE_PATTERN",
    "CAMEL_CASE_PATTERN",
    "KEBAB_CASE_PATTERN",
    "LOCALE_PATTERN",
    "ROUTE_PATTERN",
    "is_pascal_case",
    "is_camel_case",
    # Enums
    "AttributeType",
    "HTTPMethod",
    # Type references
    "PRIMITIVE_TYPES",
    "PAYLOAD_MARKERS",
    "strip_array_suffix",
    "is_primitive_type",
    "is_payload_type",
    # Models
    "Metadata",
    "Attribute",
    "Entity",
    "Operation",
    "Service",
    "UI",
    "DesignContract",
    # Schema generation
    "export_json_schema",
    # Validation
    "SchemaValidationError",
    "format_location",
    "errors_from_exception",
    "parse_contract",
    "validate_contract_dict",
    "is_valid_contract_dict",
]
