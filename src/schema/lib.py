"""Authoritative Schema Module for Design Contracts.

This module is the single source of truth for the shape of a Design Contract.
It provides:
- Pydantic models for metadata, entities, services, operations and UI
- Naming convention rules (PascalCase, camelCase, kebab-case, locale, routes)
- The enum refinement (an enum attribute must declare its allowed values)
- Type-reference helpers shared by the consistency checker
- JSON Schema export and dict-level validation helpers

All schema-related queries should route through this module.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

# =============================================================================
# Naming Conventions
# =============================================================================

PASCAL_CASE_PATTERN = r"^[A-Z][a-zA-Z0-9]*$"
CAMEL_CASE_PATTERN = r"^[a-z][a-zA-Z0-9]*$"
KEBAB_CASE_PATTERN = r"^[a-z][a-z0-9-]*$"
LOCALE_PATTERN = r"^[a-z]{2}-[A-Z]{2}$"
ROUTE_PATTERN = r"^/[a-z0-9/:_-]*$"

_PASCAL_CASE_RE = re.compile(PASCAL_CASE_PATTERN)
_CAMEL_CASE_RE = re.compile(CAMEL_CASE_PATTERN)
_KEBAB_CASE_RE = re.compile(KEBAB_CASE_PATTERN)
_LOCALE_RE = re.compile(LOCALE_PATTERN)
_ROUTE_RE = re.compile(ROUTE_PATTERN, re.IGNORECASE)


def _convention(
    regex: re.Pattern[str], error_type: str, message: str
) -> AfterValidator:
    """Build a validator that enforces a naming convention with a readable message."""

    def check(value: str) -> str:
        if not regex.match(value):
            raise PydanticCustomError(error_type, message)
        return value

    return AfterValidator(check)


def _named(
    regex: re.Pattern[str], pattern: str, error_type: str, message: str
) -> Any:
    """Annotated non-empty string type carrying a naming convention."""
    return Annotated[
        str,
        Field(min_length=1, json_schema_extra={"pattern": pattern}),
        _convention(regex, error_type, message),
    ]


AppName = _named(
    _PASCAL_CASE_RE, PASCAL_CASE_PATTERN, "pascal_case", "Name must be in PascalCase"
)
DomainName = _named(
    _KEBAB_CASE_RE, KEBAB_CASE_PATTERN, "kebab_case", "Domain must be in kebab-case"
)
EntityName = _named(
    _PASCAL_CASE_RE,
    PASCAL_CASE_PATTERN,
    "pascal_case",
    "Entity name must be in PascalCase",
)
AttributeName = _named(
    _CAMEL_CASE_RE,
    CAMEL_CASE_PATTERN,
    "camel_case",
    "Attribute name must be in camelCase",
)
ServiceName = _named(
    _PASCAL_CASE_RE,
    PASCAL_CASE_PATTERN,
    "pascal_case",
    "Service name must be in PascalCase",
)
OperationName = _named(
    _CAMEL_CASE_RE,
    CAMEL_CASE_PATTERN,
    "camel_case",
    "Operation name must be in camelCase",
)
ComponentName = Annotated[
    str,
    Field(json_schema_extra={"pattern": PASCAL_CASE_PATTERN}),
    _convention(
        _PASCAL_CASE_RE, "pascal_case", "Component name must be in PascalCase"
    ),
]
Route = Annotated[
    str,
    Field(json_schema_extra={"pattern": ROUTE_PATTERN}),
    _convention(_ROUTE_RE, "route_format", "Invalid route format"),
]
Locale = Annotated[
    str,
    Field(json_schema_extra={"pattern": LOCALE_PATTERN}),
    _convention(
        _LOCALE_RE,
        "locale_format",
        "Locale must be in format: xx-XX (e.g., en-US)",
    ),
]
TypeReference = Annotated[str, Field(min_length=1)]


# =============================================================================
# Enumerations
# =============================================================================


class AttributeType(str, Enum):
    """Supported attribute types for entity fields."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    UUID = "uuid"
    ENUM = "enum"
    GEO = "geo"


class HTTPMethod(str, Enum):
    """HTTP methods supported by service operations."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# Type References
# =============================================================================

# Primitive type references accepted as operation input/output.
PRIMITIVE_TYPES: tuple[str, ...] = ("string", "number", "boolean", "date", "uuid", "void")

# Substrings marking convention-named payload types (e.g. TaskInput, TaskUpdate).
PAYLOAD_MARKERS: tuple[str, ...] = ("Input", "Update")

ARRAY_SUFFIX = "[]"


def strip_array_suffix(type_ref: str) -> str:
    """Remove the first `[]` suffix from a type reference (`Task[]` -> `Task`)."""
    return type_ref.replace(ARRAY_SUFFIX, "", 1)


def is_primitive_type(type_ref: str) -> bool:
    """Check whether a type reference names a primitive (case-insensitive)."""
    return type_ref.lower() in PRIMITIVE_TYPES


def is_payload_type(type_ref: str) -> bool:
    """Check whether a type reference is a convention-named payload type."""
    return any(marker in type_ref for marker in PAYLOAD_MARKERS)


# =============================================================================
# Contract Models
# =============================================================================


class Metadata(BaseModel):
    """Basic information about the described application.

    Attributes:
        name: Application name in PascalCase.
        domain: Business domain in kebab-case (e.g. "civic-tech").
        locale: Locale in xx-XX form (e.g. "en-US").
        version: Contract version, filled in by normalization when absent.
        description: Optional one-sentence summary.
    """

    name: AppName = Field(..., description="Application name (PascalCase)")
    domain: DomainName = Field(..., description="Business domain (kebab-case)")
    locale: Locale = Field(..., description="Locale in xx-XX format")
    version: str | None = Field(None, description="Contract version")
    description: str | None = Field(None, description="Short application summary")


class Attribute(BaseModel):
    """A typed field of an entity.

    An enum attribute must carry its allowed values in `validation`,
    pipe-delimited (e.g. "OPEN|CLOSED").
    """

    name: AttributeName = Field(..., description="Attribute name (camelCase)")
    type: AttributeType = Field(..., description="Attribute type")
    required: StrictBool = Field(..., description="Whether a value is mandatory")
    validation: str | None = Field(
        None, description="Validation rule; allowed values for enum attributes"
    )
    description: str | None = Field(None, description="Attribute description")

    model_config = ConfigDict(use_enum_values=True)

    @model_validator(mode="after")
    def _enum_requires_validation(self) -> "Attribute":
        if self.type == AttributeType.ENUM and not self.validation:
            raise PydanticCustomError(
                "enum_validation", "Validation is required for enum type"
            )
        return self


class Entity(BaseModel):
    """A named domain object with typed attributes."""

    name: EntityName = Field(..., description="Entity name (PascalCase)")
    description: str | None = Field(None, description="Entity description")
    attributes: list[Attribute] = Field(
        ..., min_length=1, description="Entity attributes (at least one)"
    )


class Operation(BaseModel):
    """An API-like action exposed by a service."""

    name: OperationName = Field(..., description="Operation name (camelCase)")
    description: str | None = Field(None, description="Operation description")
    input: TypeReference = Field(..., description="Input type reference")
    output: TypeReference = Field(..., description="Output type reference")
    method: HTTPMethod = Field(..., description="HTTP method")
    path: str | None = Field(None, description="Optional URL path")

    model_config = ConfigDict(use_enum_values=True)


class Service(BaseModel):
    """A named group of operations over entities."""

    name: ServiceName = Field(..., description="Service name (PascalCase)")
    description: str | None = Field(None, description="Service description")
    operations: list[Operation] = Field(
        ..., min_length=1, description="Service operations (at least one)"
    )


class UI(BaseModel):
    """Frontend surface: routes, components and optional presentation hints."""

    routes: list[Route] = Field(
        ..., min_length=1, description="Application routes (at least one)"
    )
    components: list[ComponentName] = Field(
        ..., min_length=1, description="UI component names (at least one)"
    )
    theme: str | None = Field(None, description="Theme preference (dark/light)")
    layout: str | None = Field(None, description="Layout preference")


class DesignContract(BaseModel):
    """Canonical description of an application.

    This is the interface between the Analyst (which produces candidates from
    free text) and the Orchestrator (which validates and normalizes them).
    """

    metadata: Metadata
    entities: list[Entity] = Field(..., min_length=1)
    services: list[Service] = Field(..., min_length=1)
    ui: UI

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# Schema Export
# =============================================================================


def export_json_schema() -> dict[str, Any]:
    """Export the complete DesignContract JSON Schema.

    Returns:
        JSON Schema dictionary.
    """
    return DesignContract.model_json_schema()


# =============================================================================
# Dict Validation
# =============================================================================


@dataclass
class SchemaValidationError:
    """Represents a schema validation error.

    Attributes:
        path: Dotted field path (e.g. "entities.0.name"), "root" for the top level.
        message: Human-readable error description.
        error_type: Machine-readable error classification.
    """

    path: str
    message: str
    error_type: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def format_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted path."""
    return ".".join(str(part) for part in loc) or "root"


def errors_from_exception(exc: ValidationError) -> list[SchemaValidationError]:
    """Flatten a pydantic ValidationError into addressed schema errors."""
    return [
        SchemaValidationError(
            path=format_location(err["loc"]),
            message=err["msg"],
            error_type=err["type"],
        )
        for err in exc.errors()
    ]


def parse_contract(data: Any) -> DesignContract:
    """Parse raw data into a DesignContract.

    Args:
        data: Dictionary (or DesignContract) to parse. A model instance is
            dumped and validated again, so changes made after parsing are
            checked too.

    Returns:
        The parsed contract.

    Raises:
        pydantic.ValidationError: If the data does not satisfy the schema.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return DesignContract.model_validate(data)


def validate_contract_dict(data: Any) -> list[SchemaValidationError]:
    """Validate raw data against the Design Contract schema.

    Args:
        data: Candidate contract, usually a dict decoded from JSON.

    Returns:
        List of validation errors found (empty if valid).
    """
    try:
        parse_contract(data)
    except ValidationError as e:
        return errors_from_exception(e)
    return []


def is_valid_contract_dict(data: Any) -> bool:
    """Check if raw data is a schema-valid Design Contract."""
    return not validate_contract_dict(data)


def is_pascal_case(value: str) -> bool:
    """Check whether a name follows the PascalCase convention."""
    return bool(_PASCAL_CASE_RE.match(value))


def is_camel_case(value: str) -> bool:
    """Check whether a name follows the camelCase convention."""
    return bool(_CAMEL_CASE_RE.match(value))


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
    # Export
    "export_json_schema",
    # Validation
    "SchemaValidationError",
    "format_location",
    "errors_from_exception",
    "parse_contract",
    "validate_contract_dict",
    "is_valid_contract_dict",
]
