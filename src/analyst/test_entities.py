"""Unit tests for entity extraction."""

import pytest

from src.analyst.entities import (
    EntityExtractor,
    infer_type,
    is_valid_entity_name,
    normalize_type,
)
from src.analyst.text import to_camel_case


class TestEntityExtractor:
    """Tests for EntityExtractor.extract."""

    @pytest.mark.unit
    def test_pothole_specification(self, pothole_specification):
        entities = EntityExtractor().extract(pothole_specification)

        assert [entity["name"] for entity in entities] == ["Report"]
        assert entities[0]["attributes"] == [
            {"name": "id", "type": "uuid", "required": True},
            {"name": "location", "type": "geo", "required": True},
            {"name": "description", "type": "string", "required": True},
            {
                "name": "status",
                "type": "enum",
                "required": True,
                "validation": "OPEN|IN_PROGRESS|CLOSED",
            },
        ]

    @pytest.mark.unit
    def test_overlapping_declarations_collapse(self):
        """Both declaration shapes match `id (uuid)`; it is kept once."""
        text = "We need a Report entity with id (uuid), location (geo), status (enum: OPEN, CLOSED)."
        entities = EntityExtractor().extract(text)

        assert len(entities) == 1
        assert [a["name"] for a in entities[0]["attributes"]] == ["id", "location", "status"]

    @pytest.mark.unit
    def test_optional_declaration(self):
        entities = EntityExtractor().extract(
            "Note model with title (string) and body (optional text)."
        )

        assert entities == [
            {
                "name": "Note",
                "attributes": [
                    {"name": "title", "type": "string", "required": True},
                    {"name": "body", "type": "string", "required": False},
                ],
            }
        ]

    @pytest.mark.unit
    def test_required_declaration(self):
        entities = EntityExtractor().extract("Book entity with isbn (required str).")

        assert entities[0]["attributes"] == [
            {"name": "isbn", "type": "string", "required": True}
        ]

    @pytest.mark.unit
    def test_enum_values_are_normalized(self):
        entities = EntityExtractor().extract("Ticket entity with priority (enum: low|high).")

        assert entities[0]["attributes"][0]["validation"] == "LOW|HIGH"

    @pytest.mark.unit
    def test_type_aliases(self):
        text = (
            "Event entity with startsAt (datetime), seats (int), "
            "place (coordinates), uid (id)."
        )
        attributes = EntityExtractor().extract(text)[0]["attributes"]

        assert {a["name"]: a["type"] for a in attributes} == {
            "startsAt": "date",
            "seats": "number",
            "place": "geo",
            "uid": "uuid",
        }

    @pytest.mark.unit
    def test_loose_attribute_list(self):
        entities = EntityExtractor().extract("A Task has title, dueDate, and priority.")

        assert entities == [
            {
                "name": "Task",
                "attributes": [
                    {"name": "title", "type": "string", "required": True},
                    {"name": "dueDate", "type": "date", "required": True},
                    {"name": "priority", "type": "number", "required": True},
                ],
            }
        ]

    @pytest.mark.unit
    def test_loose_list_then_declaration(self):
        """A listed sentence first still lets later declarations through."""
        entities = EntityExtractor().extract(
            "Task has title, notes. Task stores dueDate (date)."
        )

        assert [a["name"] for a in entities[0]["attributes"]] == ["title", "notes", "dueDate"]

    @pytest.mark.unit
    def test_declaration_then_loose_list(self):
        """Once declarations were found, later loose lists are ignored."""
        entities = EntityExtractor().extract(
            "Task stores dueDate (date). Task has title, notes."
        )

        assert [a["name"] for a in entities[0]["attributes"]] == ["dueDate"]

    @pytest.mark.unit
    def test_entity_without_attributes_is_discarded(self):
        assert EntityExtractor().extract("The Dashboard model is pretty.") == []

    @pytest.mark.unit
    def test_no_entities(self):
        assert EntityExtractor().extract("Create a simple todo app.") == []


class TestEntityHelpers:
    """Tests for name filters, type inference and aliasing."""

    @pytest.mark.unit
    def test_is_valid_entity_name(self):
        assert is_valid_entity_name("Task")
        assert not is_valid_entity_name("And")
        assert not is_valid_entity_name("task")
        assert not is_valid_entity_name("Task2")

    @pytest.mark.unit
    def test_infer_type(self):
        assert infer_type("id") == "uuid"
        assert infer_type("userId") == "uuid"
        assert infer_type("startTime") == "date"
        assert infer_type("viewCount") == "number"
        assert infer_type("isActive") == "boolean"
        assert infer_type("position") == "geo"
        assert infer_type("role") == "enum"
        assert infer_type("title") == "string"

    @pytest.mark.unit
    def test_normalize_type(self):
        assert normalize_type("Integer") == "number"
        assert normalize_type("timestamp") == "date"
        assert normalize_type("foo") == "foo"

    @pytest.mark.unit
    def test_to_camel_case(self):
        assert to_camel_case("due_date") == "dueDate"
        assert to_camel_case("createdAt") == "createdAt"
        assert to_camel_case("Status") == "status"
        assert to_camel_case("first name") == "firstName"
        assert to_camel_case("__") == ""
