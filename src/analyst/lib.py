"""Analyst: turns a natural-language specification into a candidate contract.

The four extractors run independently over the same text. Defaults for a
missing entity or service are substituted afterwards, in one visible step,
so the extractors themselves stay free of fallback policy.

The Analyst does not validate its output. The candidate is a plain JSON-like
dict that callers hand to the Orchestrator (or to `Analyst.validate`).
"""

import logging
from typing import Any

from src.validation import ValidationResult, Validator

from .entities import EntityExtractor
from .metadata import MetadataExtractor
from .services import ServiceExtractor
from .ui import UIExtractor

logger = logging.getLogger(__name__)

DEFAULT_ENTITY_NAME = "Item"


def default_entity() -> dict[str, Any]:
    """Entity substituted when nothing could be extracted."""
    return {
        "name": DEFAULT_ENTITY_NAME,
        "attributes": [
            {"name": "id", "type": "uuid", "required": True},
            {"name": "name", "type": "string", "required": True},
            {"name": "createdAt", "type": "date", "required": True},
        ],
    }


def default_service(entity_name: str) -> dict[str, Any]:
    """Service substituted when nothing could be extracted."""
    return {
        "name": f"{entity_name}Service",
        "operations": [
            {
                "name": f"create{entity_name}",
                "input": f"{entity_name}Input",
                "output": entity_name,
                "method": "POST",
            },
            {
                "name": f"get{entity_name}",
                "input": "string",
                "output": entity_name,
                "method": "GET",
            },
        ],
    }


class Analyst:
    """Composes the extractors into a candidate Design Contract.

    Extractors hold no per-call state, so one Analyst may be shared.

    Example:
        >>> contract = Analyst().analyze("Create a simple todo app.")
        >>> contract["entities"][0]["name"]
        'Item'
    """

    def __init__(self) -> None:
        self.metadata_extractor = MetadataExtractor()
        self.entity_extractor = EntityExtractor()
        self.service_extractor = ServiceExtractor()
        self.ui_extractor = UIExtractor()
        self.validator = Validator()

    def analyze(self, specification: str) -> dict[str, Any]:
        """Analyze a specification.

        Never fails; missing pieces are filled with defaults.

        Args:
            specification: Natural-language description of an application.

        Returns:
            Candidate contract dict with metadata, entities, services and ui.
        """
        metadata = self.metadata_extractor.extract(specification)
        entities = self.entity_extractor.extract(specification)
        services = self.service_extractor.extract(specification)
        ui = self.ui_extractor.extract(
            specification, [entity["name"] for entity in entities]
        )

        entities, services = self._apply_defaults(entities, services)

        logger.info(
            f"Analyzed specification into {metadata['name']}: "
            f"{len(entities)} entity(ies), {len(services)} service(s)"
        )
        return {
            "metadata": metadata,
            "entities": entities,
            "services": services,
            "ui": ui,
        }

    def validate(self, candidate: Any) -> ValidationResult:
        """Schema-check a candidate without normalizing it."""
        return self.validator.validate(candidate)

    def _apply_defaults(
        self, entities: list[dict[str, Any]], services: list[dict[str, Any]]
    ) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
        """Substitute the default entity and service when extraction found none."""
        if not entities:
            logger.debug("No entities extracted, using default entity")
            entities = [default_entity()]
        if not services:
            logger.debug("No services extracted, using default service")
            services = [default_service(entities[0]["name"])]
        return entities, services


def analyze(specification: str) -> dict[str, Any]:
    """Analyze a specification with a default Analyst."""
    return Analyst().analyze(specification)


__all__ = ["Analyst", "analyze", "default_entity", "default_service"]
