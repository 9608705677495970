"""Unit tests for the Schema module."""

import pytest

from src.schema import (
    PRIMITIVE_TYPES,
    AttributeType,
    DesignContract,
    HTTPMethod,
    SchemaValidationError,
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


def _paths(errors: list[SchemaValidationError]) -> list[str]:
    return [e.path for e in errors]


class TestNamingConventions:
    """Tests for naming convention predicates."""

    @pytest.mark.unit
    def test_pascal_case(self):
        """PascalCase names start upper-case and are alphanumeric."""
        assert is_pascal_case("TaskManager")
        assert is_pascal_case("Task2")
        assert not is_pascal_case("taskManager")
        assert not is_pascal_case("Task_Manager")
        assert not is_pascal_case("")

    @pytest.mark.unit
    def test_camel_case(self):
        """camelCase names start lower-case and are alphanumeric."""
        assert is_camel_case("createdAt")
        assert not is_camel_case("CreatedAt")
        assert not is_camel_case("created_at")


class TestTypeReferences:
    """Tests for type-reference helpers."""

    @pytest.mark.unit
    def test_strip_array_suffix(self):
        """Array suffix is removed once."""
        assert strip_array_suffix("Task[]") == "Task"
        assert strip_array_suffix("Task") == "Task"

    @pytest.mark.unit
    def test_primitives_are_case_insensitive(self):
        """Primitive detection ignores case."""
        for primitive in PRIMITIVE_TYPES:
            assert is_primitive_type(primitive)
        assert is_primitive_type("String")
        assert not is_primitive_type("Task")

    @pytest.mark.unit
    def test_payload_types(self):
        """Input/Update names are convention payloads."""
        assert is_payload_type("TaskInput")
        assert is_payload_type("TaskUpdate")
        assert not is_payload_type("Task")


class TestContractModel:
    """Tests for parsing valid contracts."""

    @pytest.mark.unit
    def test_parse_valid_contract(self, valid_contract_dict):
        """A well-formed contract parses into typed models."""
        contract = parse_contract(valid_contract_dict)

        assert isinstance(contract, DesignContract)
        assert contract.metadata.name == "TaskManager"
        assert contract.entities[0].attributes[1].type == AttributeType.ENUM
        assert contract.services[0].operations[0].method == HTTPMethod.POST

    @pytest.mark.unit
    def test_enum_values_dump_as_strings(self, valid_contract_dict):
        """Dumped contracts use plain string enum values."""
        data = parse_contract(valid_contract_dict).to_dict()

        assert data["entities"][0]["attributes"][1]["type"] == "enum"
        assert data["services"][0]["operations"][0]["method"] == "POST"

    @pytest.mark.unit
    def test_to_dict_omits_unset_optionals(self, valid_contract_dict):
        """Optional fields that were never set are not emitted."""
        data = parse_contract(valid_contract_dict).to_dict()

        assert "version" not in data["metadata"]
        assert "theme" not in data["ui"]

    @pytest.mark.unit
    def test_unknown_fields_are_ignored(self, valid_contract_dict):
        """Extra keys are dropped rather than rejected."""
        valid_contract_dict["extra"] = {"anything": 1}
        assert is_valid_contract_dict(valid_contract_dict)


class TestValidateContractDict:
    """Tests for dict-level schema validation."""

    @pytest.mark.unit
    def test_valid_contract_has_no_errors(self, valid_contract_dict):
        """Valid contracts produce an empty error list."""
        assert validate_contract_dict(valid_contract_dict) == []

    @pytest.mark.unit
    def test_missing_metadata(self, valid_contract_dict):
        """Missing top-level sections are reported by name."""
        del valid_contract_dict["metadata"]
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["metadata"]
        assert errors[0].error_type == "missing"

    @pytest.mark.unit
    def test_empty_entities_and_services(self, valid_contract_dict):
        """Both lists require at least one item."""
        valid_contract_dict["entities"] = []
        valid_contract_dict["services"] = []
        errors = validate_contract_dict(valid_contract_dict)

        assert set(_paths(errors)) == {"entities", "services"}
        assert all(e.error_type == "too_short" for e in errors)

    @pytest.mark.unit
    def test_entity_name_must_be_pascal_case(self, valid_contract_dict):
        """Entity names are checked against PascalCase."""
        valid_contract_dict["entities"][0]["name"] = "task"
        errors = validate_contract_dict(valid_contract_dict)

        assert len(errors) == 1
        assert errors[0].path == "entities.0.name"
        assert errors[0].message == "Entity name must be in PascalCase"

    @pytest.mark.unit
    def test_attribute_name_must_be_camel_case(self, valid_contract_dict):
        """Attribute names are checked against camelCase."""
        valid_contract_dict["entities"][0]["attributes"][0]["name"] = "Title"
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["entities.0.attributes.0.name"]

    @pytest.mark.unit
    def test_enum_requires_validation(self, valid_contract_dict):
        """An enum attribute without allowed values is rejected."""
        del valid_contract_dict["entities"][0]["attributes"][1]["validation"]
        errors = validate_contract_dict(valid_contract_dict)

        assert len(errors) == 1
        assert errors[0].path == "entities.0.attributes.1"
        assert errors[0].message == "Validation is required for enum type"
        assert errors[0].error_type == "enum_validation"

    @pytest.mark.unit
    def test_enum_with_empty_validation_rejected(self, valid_contract_dict):
        """An empty validation string does not satisfy the enum rule."""
        valid_contract_dict["entities"][0]["attributes"][1]["validation"] = ""
        assert not is_valid_contract_dict(valid_contract_dict)

    @pytest.mark.unit
    def test_unknown_attribute_type(self, valid_contract_dict):
        """Attribute types outside the supported set are rejected."""
        valid_contract_dict["entities"][0]["attributes"][0]["type"] = "blob"
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["entities.0.attributes.0.type"]

    @pytest.mark.unit
    def test_required_must_be_boolean(self, valid_contract_dict):
        """The required flag is not coerced from strings."""
        valid_contract_dict["entities"][0]["attributes"][0]["required"] = "yes"
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["entities.0.attributes.0.required"]

    @pytest.mark.unit
    def test_invalid_http_method(self, valid_contract_dict):
        """Only the five supported HTTP methods are accepted."""
        valid_contract_dict["services"][0]["operations"][0]["method"] = "HEAD"
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["services.0.operations.0.method"]

    @pytest.mark.unit
    def test_empty_type_reference(self, valid_contract_dict):
        """Operation input and output must be non-empty."""
        valid_contract_dict["services"][0]["operations"][0]["input"] = ""
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["services.0.operations.0.input"]

    @pytest.mark.unit
    def test_metadata_formats(self, valid_contract_dict):
        """Domain and locale follow their formats."""
        valid_contract_dict["metadata"]["domain"] = "Civic Tech"
        valid_contract_dict["metadata"]["locale"] = "english"
        errors = validate_contract_dict(valid_contract_dict)

        assert set(_paths(errors)) == {"metadata.domain", "metadata.locale"}

    @pytest.mark.unit
    def test_routes_are_case_insensitive(self, valid_contract_dict):
        """Route format accepts upper-case letters."""
        valid_contract_dict["ui"]["routes"].append("/Reports/:id")
        assert is_valid_contract_dict(valid_contract_dict)

    @pytest.mark.unit
    def test_invalid_route(self, valid_contract_dict):
        """Routes must start with a slash."""
        valid_contract_dict["ui"]["routes"].append("reports")
        errors = validate_contract_dict(valid_contract_dict)

        assert _paths(errors) == ["ui.routes.3"]
        assert errors[0].message == "Invalid route format"

    @pytest.mark.unit
    def test_non_dict_input(self):
        """Non-object input is reported at the root."""
        errors = validate_contract_dict("not a contract")

        assert len(errors) == 1
        assert errors[0].path == "root"

    @pytest.mark.unit
    def test_error_renders_as_path_and_message(self):
        """SchemaValidationError renders as 'path: message'."""
        error = SchemaValidationError("entities.0.name", "bad", "custom")
        assert str(error) == "entities.0.name: bad"

    @pytest.mark.unit
    def test_format_location(self):
        """Locations are dotted; empty locations are the root."""
        assert format_location(("entities", 0, "name")) == "entities.0.name"
        assert format_location(()) == "root"


class TestExportJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_schema_has_top_level_sections(self):
        """Exported schema lists the four contract sections."""
        schema = export_json_schema()

        assert schema["title"] == "DesignContract"
        assert set(schema["required"]) == {"metadata", "entities", "services", "ui"}

    @pytest.mark.unit
    def test_schema_carries_naming_patterns(self):
        """Naming conventions are visible to schema consumers."""
        schema = export_json_schema()
        entity = schema["$defs"]["Entity"]

        assert entity["properties"]["name"]["pattern"] == "^[A-Z][a-zA-Z0-9]*$"
