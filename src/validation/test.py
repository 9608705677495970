"""Unit tests for the schema validation stage."""

import pytest

from src.schema import DesignContract, parse_contract
from src.validation import ValidationResult, Validator, is_valid, validate_contract


class TestValidator:
    """Tests for Validator.validate."""

    @pytest.mark.unit
    def test_valid_contract(self, valid_contract_dict):
        """Valid contracts report no errors and carry the parsed model."""
        result = Validator().validate(valid_contract_dict)

        assert result.valid is True
        assert result.errors == []
        assert isinstance(result.contract, DesignContract)

    @pytest.mark.unit
    def test_missing_metadata(self, valid_contract_dict):
        """Missing metadata is reported with its path."""
        del valid_contract_dict["metadata"]
        result = Validator().validate(valid_contract_dict)

        assert result.valid is False
        assert result.errors == ["metadata: Field required"]
        assert result.contract is None

    @pytest.mark.unit
    def test_zero_entities_is_invalid(self, valid_contract_dict):
        """An empty entity list violates the minimum length."""
        valid_contract_dict["entities"] = []
        result = Validator().validate(valid_contract_dict)

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].startswith("entities: ")

    @pytest.mark.unit
    def test_zero_services_is_invalid(self, valid_contract_dict):
        """An empty service list violates the minimum length."""
        valid_contract_dict["services"] = []
        result = Validator().validate(valid_contract_dict)

        assert result.valid is False
        assert result.errors[0].startswith("services: ")

    @pytest.mark.unit
    def test_errors_are_addressed(self, valid_contract_dict):
        """Every error is rendered as '<dotted path>: <message>'."""
        valid_contract_dict["entities"][1]["attributes"][0]["name"] = "ID"
        valid_contract_dict["ui"]["components"] = ["taskList"]
        result = Validator().validate(valid_contract_dict)

        assert result.errors == [
            "entities.1.attributes.0.name: Attribute name must be in camelCase",
            "ui.components.0: Component name must be in PascalCase",
        ]

    @pytest.mark.unit
    def test_enum_refinement_message(self, valid_contract_dict):
        """The enum rule is reported alongside its attribute path."""
        del valid_contract_dict["entities"][0]["attributes"][1]["validation"]
        result = Validator().validate(valid_contract_dict)

        assert result.errors == [
            "entities.0.attributes.1: Validation is required for enum type"
        ]

    @pytest.mark.unit
    def test_non_object_candidate(self):
        """Arbitrary values are rejected rather than raising."""
        for candidate in (None, 42, "contract", []):
            result = Validator().validate(candidate)
            assert result.valid is False
            assert result.errors[0].startswith("root: ")

    @pytest.mark.unit
    def test_mutated_contract_instance_is_revalidated(self, valid_contract_dict):
        """A parsed contract changed afterwards is checked again."""
        contract = parse_contract(valid_contract_dict)
        contract.entities.clear()
        contract.ui.routes.append("not a route")

        result = Validator().validate(contract)

        assert result.valid is False
        assert result.contract is None
        assert result.errors[0].startswith("entities: ")
        assert "ui.routes.3: Invalid route format" in result.errors

    @pytest.mark.unit
    def test_candidate_is_not_mutated(self, valid_contract_dict):
        """Validation leaves the caller's data untouched."""
        snapshot = repr(valid_contract_dict)
        Validator().validate(valid_contract_dict)
        assert repr(valid_contract_dict) == snapshot


class TestConvenienceFunctions:
    """Tests for module-level helpers."""

    @pytest.mark.unit
    def test_validate_contract(self, valid_contract_dict):
        """validate_contract mirrors Validator.validate."""
        result = validate_contract(valid_contract_dict)
        assert isinstance(result, ValidationResult)
        assert result.valid

    @pytest.mark.unit
    def test_is_valid(self, valid_contract_dict):
        """is_valid returns a plain boolean."""
        assert is_valid(valid_contract_dict) is True
        assert is_valid({}) is False
