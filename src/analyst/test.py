"""Unit tests for the Analyst."""

import pytest

from src.analyst import Analyst, EntityExtractor, analyze
from src.analyst.lib import default_entity, default_service

REPORT_TEXT = (
    "We need a Report entity with id (uuid), location (geo), "
    "status (enum: OPEN, CLOSED)."
)


class TestAnalyst:
    """Tests for Analyst.analyze."""

    @pytest.mark.unit
    def test_simple_todo_app(self):
        """A bare description still yields a complete candidate."""
        contract = Analyst().analyze("Create a simple todo app.")

        assert len(contract["entities"]) >= 1
        assert len(contract["services"]) >= 1
        assert "/" in contract["ui"]["routes"]
        assert contract["metadata"]["name"] == "TaskManager"

    @pytest.mark.unit
    def test_defaults_are_substituted(self):
        contract = Analyst().analyze("Create a simple todo app.")

        assert contract["entities"] == [default_entity()]
        assert contract["services"] == [default_service("Item")]
        assert contract["ui"]["components"] == ["HomePage"]

    @pytest.mark.unit
    def test_extractors_do_not_default(self):
        """Fallback policy lives in the Analyst only."""
        assert EntityExtractor().extract("Create a simple todo app.") == []

    @pytest.mark.unit
    def test_report_entity(self):
        contract = Analyst().analyze(REPORT_TEXT)

        assert [entity["name"] for entity in contract["entities"]] == ["Report"]
        attributes = contract["entities"][0]["attributes"]
        assert len(attributes) == 3

        status = next(a for a in attributes if a["name"] == "status")
        assert status["type"] == "enum"
        assert "OPEN" in status["validation"]
        assert "CLOSED" in status["validation"]

    @pytest.mark.unit
    def test_default_service_uses_first_entity(self):
        contract = Analyst().analyze(REPORT_TEXT)

        assert contract["services"] == [default_service("Report")]
        assert [op["method"] for op in contract["services"][0]["operations"]] == [
            "POST",
            "GET",
        ]

    @pytest.mark.unit
    def test_ui_is_seeded_by_entities(self):
        contract = Analyst().analyze(REPORT_TEXT)

        assert contract["ui"]["routes"] == ["/", "/reports", "/reports/:id"]
        assert contract["ui"]["components"] == ["ReportForm", "ReportList"]

    @pytest.mark.unit
    def test_analyzed_specification_is_valid(self, pothole_specification):
        analyst = Analyst()
        result = analyst.validate(analyst.analyze(pothole_specification))

        assert result.valid, result.errors

    @pytest.mark.unit
    def test_validate_rejects_bad_candidate(self):
        result = Analyst().validate({"metadata": {}})

        assert result.valid is False
        assert result.errors

    @pytest.mark.unit
    def test_analyze_helper(self):
        assert analyze("Create a simple todo app.") == Analyst().analyze(
            "Create a simple todo app."
        )
