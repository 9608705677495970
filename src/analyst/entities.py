"""Entity extraction: domain objects and their typed attributes."""

import logging
import re
from typing import Any

from .text import alphanumeric_length, relevant_sentences, to_camel_case

logger = logging.getLogger(__name__)

# "(a/an) Report entity", "need a Task model", "User table"
_ENTITY_DECLARATION_RE = re.compile(
    r"(?:create|build|add|need)?\s*(?:a|an)?\s*([A-Z][a-zA-Z]*)\s*(?:entity|model|table)",
    re.IGNORECASE,
)
# "Task has ...", "Project with ...", "Order contains ..."
_ENTITY_OWNERSHIP_RE = re.compile(r"([A-Z][a-zA-Z]*)\s+(?:has|have|with|contains?)")

ENTITY_NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    _ENTITY_DECLARATION_RE,
    _ENTITY_OWNERSHIP_RE,
)

_ENTITY_NAME_RE = re.compile(r"^[A-Z][a-zA-Z]*$")
ENTITY_STOPWORDS = frozenset({"create", "build", "add", "with", "and", "the", "a", "an"})

# name(type), name(optional type), name(enum: A, B)
_TYPED_ATTRIBUTE_RE = re.compile(
    r"(\w+)\s*\((optional\s+)?(\w+)(?::\s*([^)]+))?\)", re.IGNORECASE
)
# name (required type)
_REQUIRED_ATTRIBUTE_RE = re.compile(r"(\w+)\s+\((?:required\s+)?(\w+)\)", re.IGNORECASE)

_ATTRIBUTE_LIST_RE = re.compile(
    r"(?:with|has|have)\s+([a-z][a-zA-Z0-9]*(?:,\s*(?:and\s+)?[a-z][a-zA-Z0-9]*)*)"
)
_ATTRIBUTE_LIST_SEPARATOR_RE = re.compile(r",\s*(?:and\s+)?")
_SIMPLE_ATTRIBUTE_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_ENUM_VALUE_SEPARATOR_RE = re.compile(r"[,|]")

MAX_ATTRIBUTE_NAME_LENGTH = 50
SIMPLE_ATTRIBUTE_LENGTH = (2, 30)

TYPE_ALIASES: dict[str, str] = {
    "str": "string",
    "text": "string",
    "int": "number",
    "integer": "number",
    "float": "number",
    "double": "number",
    "bool": "boolean",
    "datetime": "date",
    "timestamp": "date",
    "location": "geo",
    "coordinates": "geo",
    "enum": "enum",
    "uuid": "uuid",
    "id": "uuid",
}

# Ordered name-fragment -> type table for attributes declared without a type.
TYPE_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("date", "time"), "date"),
    (("count", "age", "priority"), "number"),
    (("active", "completed", "enabled"), "boolean"),
    (("location", "position"), "geo"),
    (("status", "type", "role"), "enum"),
)


def normalize_type(type_token: str) -> str:
    """Map a declared type token onto the contract's attribute types.

    Unknown tokens are returned lower-cased and left for validation to reject.
    """
    normalized = type_token.strip().lower()
    return TYPE_ALIASES.get(normalized, normalized)


def infer_type(attribute_name: str) -> str:
    """Infer an attribute type from its name."""
    lower = attribute_name.lower()
    if lower.endswith("id"):
        return "uuid"
    for fragments, attribute_type in TYPE_HINTS:
        if any(fragment in lower for fragment in fragments):
            return attribute_type
    return "string"


def is_valid_entity_name(name: str) -> bool:
    """PascalCase letters only and not a common word."""
    return bool(_ENTITY_NAME_RE.match(name)) and name.lower() not in ENTITY_STOPWORDS


def is_valid_attribute_name(name: str) -> bool:
    """Declared attribute names need 1 to 49 alphanumerics."""
    return 0 < alphanumeric_length(name) < MAX_ATTRIBUTE_NAME_LENGTH


def is_simple_attribute_name(name: str) -> bool:
    """Listed attribute names: lower-case start, alphanumeric, 2 to 29 chars."""
    low, high = SIMPLE_ATTRIBUTE_LENGTH
    return bool(_SIMPLE_ATTRIBUTE_RE.match(name)) and low <= len(name) < high


def _enum_validation(values: str) -> str:
    return "|".join(
        value.strip().upper() for value in _ENUM_VALUE_SEPARATOR_RE.split(values)
    )


class EntityExtractor:
    """Derives entities and their attributes from a specification.

    Entity names come from declaration phrases over the whole text. Attributes
    are read only from the sentences that mention the entity.
    """

    def extract(self, text: str) -> list[dict[str, Any]]:
        """Extract entities.

        Args:
            text: Natural-language specification.

        Returns:
            Entity dicts in first-seen order. Entities without attributes
            are dropped, so the list may be empty.
        """
        entities: list[dict[str, Any]] = []

        for name in self.extract_names(text):
            attributes = self.extract_attributes(text, name)
            if attributes:
                entities.append({"name": name, "attributes": attributes})
            else:
                logger.debug(f"Discarding entity {name}: no attributes found")

        return entities

    def extract_names(self, text: str) -> list[str]:
        """Candidate entity names, deduplicated in first-seen order."""
        names: dict[str, None] = {}
        for pattern in ENTITY_NAME_PATTERNS:
            for match in pattern.finditer(text):
                name = match.group(1)
                if name and is_valid_entity_name(name):
                    names.setdefault(name)
        return list(names)

    def extract_attributes(self, text: str, entity_name: str) -> list[dict[str, Any]]:
        """Attributes for one entity, read from the sentences that mention it.

        Explicit `name(type)` declarations are collected from every relevant
        sentence. The loose "with a, b, c" list is only consulted for a
        sentence while nothing has been collected yet.
        """
        attributes: list[dict[str, Any]] = []

        for sentence in relevant_sentences(text, entity_name):
            for attribute in self._declared_attributes(sentence):
                _add_unique(attributes, attribute)

            if not attributes:
                for attribute in self._listed_attributes(sentence):
                    _add_unique(attributes, attribute)

        return attributes

    def _declared_attributes(self, sentence: str) -> list[dict[str, Any]]:
        declared: list[dict[str, Any]] = []

        for match in _TYPED_ATTRIBUTE_RE.finditer(sentence):
            name, optional, type_token, enum_values = match.groups()
            attribute = _declared_attribute(name, type_token, not optional, enum_values)
            if attribute:
                declared.append(attribute)

        for match in _REQUIRED_ATTRIBUTE_RE.finditer(sentence):
            name, type_token = match.groups()
            attribute = _declared_attribute(name, type_token, True, None)
            if attribute:
                declared.append(attribute)

        return declared

    def _listed_attributes(self, sentence: str) -> list[dict[str, Any]]:
        match = _ATTRIBUTE_LIST_RE.search(sentence)
        if not match:
            return []

        return [
            {"name": to_camel_case(word), "type": infer_type(word), "required": True}
            for word in (
                part.strip() for part in _ATTRIBUTE_LIST_SEPARATOR_RE.split(match.group(1))
            )
            if word and is_simple_attribute_name(word)
        ]


def _declared_attribute(
    name: str, type_token: str, required: bool, enum_values: str | None
) -> dict[str, Any] | None:
    if not is_valid_attribute_name(name):
        return None

    attribute_type = normalize_type(type_token)
    attribute: dict[str, Any] = {
        "name": to_camel_case(name),
        "type": attribute_type,
        "required": required,
    }
    if attribute_type == "enum" and enum_values:
        attribute["validation"] = _enum_validation(enum_values)
    return attribute


def _add_unique(attributes: list[dict[str, Any]], attribute: dict[str, Any]) -> None:
    """Append unless an attribute with the same name is already present."""
    if not any(existing["name"] == attribute["name"] for existing in attributes):
        attributes.append(attribute)


__all__ = [
    "TYPE_ALIASES",
    "TYPE_HINTS",
    "EntityExtractor",
    "normalize_type",
    "infer_type",
    "is_valid_entity_name",
    "is_valid_attribute_name",
    "is_simple_attribute_name",
]
