"""Deterministic canonicalization of Design Contracts.

Normalization fills defaults and fixes ordering so that equal contracts
serialize identically. It assumes the contract already passed schema and
consistency checks and performs no re-validation.
"""

import logging

from src.schema import Attribute, AttributeType, DesignContract

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "1.0.0"


def _has_attribute(attributes: list[Attribute], name: str) -> bool:
    return any(attribute.name == name for attribute in attributes)


def _system_attribute(name: str, attribute_type: AttributeType) -> Attribute:
    return Attribute(name=name, type=attribute_type, required=True)


class Normalizer:
    """Produces the canonical form of a contract.

    Steps, in order:
        1. Default `metadata.version` to 1.0.0.
        2. Sort entities by name.
        3. Per entity, prepend `id` and append `createdAt`/`updatedAt`
           when missing.
        4. Sort services by name.
        5. Sort UI routes.
        6. Sort UI components.

    The input contract is never modified; a deep copy is normalized and
    returned. Applying the Normalizer twice yields the same contract.
    """

    def normalize(self, contract: DesignContract) -> DesignContract:
        """Normalize a contract.

        Args:
            contract: Schema-valid, consistent contract.

        Returns:
            New normalized contract.
        """
        normalized = contract.model_copy(deep=True)

        if not normalized.metadata.version:
            normalized.metadata.version = DEFAULT_VERSION

        normalized.entities.sort(key=lambda entity: entity.name)

        for entity in normalized.entities:
            if not _has_attribute(entity.attributes, "id"):
                entity.attributes.insert(0, _system_attribute("id", AttributeType.UUID))
            if not _has_attribute(entity.attributes, "createdAt"):
                entity.attributes.append(_system_attribute("createdAt", AttributeType.DATE))
            if not _has_attribute(entity.attributes, "updatedAt"):
                entity.attributes.append(_system_attribute("updatedAt", AttributeType.DATE))

        normalized.services.sort(key=lambda service: service.name)
        normalized.ui.routes.sort()
        normalized.ui.components.sort()

        logger.debug(f"Normalized contract {normalized.metadata.name}")
        return normalized


def normalize_contract(contract: DesignContract) -> DesignContract:
    """Normalize a contract with a default Normalizer."""
    return Normalizer().normalize(contract)


__all__ = ["DEFAULT_VERSION", "Normalizer", "normalize_contract"]
