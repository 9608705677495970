"""Analyst module: natural-language specification to candidate contract.

Provides:
- Analyst: composes the extractors and applies fallback defaults
- MetadataExtractor, EntityExtractor, ServiceExtractor, UIExtractor

Example:
    >>> from src.analyst import Analyst
    >>> candidate = Analyst().analyze("Build TaskFlow, a todo app.")
"""

from .entities import EntityExtractor, infer_type, normalize_type
from .lib import Analyst, analyze, default_entity, default_service
from .metadata import NAME_MATCHERS, MetadataExtractor
from .services import ServiceExtractor, infer_input_output, verb_to_method
from .text import to_camel_case
from .ui import UIExtractor, pluralize

__all__ = [
    "Analyst",
    "analyze",
    "default_entity",
    "default_service",
    "MetadataExtractor",
    "NAME_MATCHERS",
    "EntityExtractor",
    "infer_type",
    "normalize_type",
    "ServiceExtractor",
    "infer_input_output",
    "verb_to_method",
    "UIExtractor",
    "pluralize",
    "to_camel_case",
]
