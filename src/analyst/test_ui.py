"""Unit tests for UI extraction."""

import pytest

from src.analyst.ui import UIExtractor, pluralize


class TestUIExtractor:
    """Tests for UIExtractor.extract."""

    @pytest.mark.unit
    def test_pothole_specification(self, pothole_specification):
        ui = UIExtractor().extract(pothole_specification, ["Report"])

        assert ui == {
            "routes": ["/", "/reports", "/reports/:id"],
            "components": ["MapView", "ReportForm", "ReportList"],
        }

    @pytest.mark.unit
    def test_defaults_without_entities(self):
        assert UIExtractor().extract("Nothing here.") == {
            "routes": ["/"],
            "components": ["HomePage"],
        }

    @pytest.mark.unit
    def test_entity_routes_and_components(self):
        ui = UIExtractor().extract("Plain text.", ["Category"])

        assert ui["routes"] == ["/", "/categories", "/categories/:id"]
        assert ui["components"] == ["CategoryForm", "CategoryList"]

    @pytest.mark.unit
    def test_explicit_routes_sorted(self):
        ui = UIExtractor().extract("Pages: /zeta, /alpha.")
        assert ui["routes"] == ["/", "/alpha", "/zeta"]

    @pytest.mark.unit
    def test_page_keywords(self):
        extractor = UIExtractor()
        assert extractor.extract_routes("Users need a login page and a dashboard.", []) == [
            "/",
            "/dashboard",
            "/login",
        ]
        assert "/register" in extractor.extract_routes("Add a signup page.", [])
        assert "/settings" in extractor.extract_routes("Account settings", [])

    @pytest.mark.unit
    def test_theme(self):
        extractor = UIExtractor()
        assert extractor.extract_theme("Use dark mode and a light theme") == "dark"
        assert extractor.extract_theme("Prefer Light Mode") == "light"
        assert extractor.extract_theme("No preference") is None
        assert "theme" not in extractor.extract("No preference")

    @pytest.mark.unit
    def test_layout_priority(self):
        extractor = UIExtractor()
        assert extractor.extract_layout("A sidebar and a navbar") == "sidebar"
        assert extractor.extract_layout("Top navigation please") == "navbar"
        assert extractor.extract_layout("Use a dashboard layout") == "dashboard"
        assert extractor.extract_layout("Plain") is None


class TestPluralize:
    """Tests for pluralize."""

    @pytest.mark.unit
    def test_rules(self):
        assert pluralize("story") == "stories"
        assert pluralize("box") == "boxes"
        assert pluralize("bus") == "buses"
        assert pluralize("quiz") == "quizes"
        assert pluralize("task") == "tasks"
