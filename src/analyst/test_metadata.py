"""Unit tests for metadata extraction."""

import pytest

from src.analyst.metadata import (
    NAME_MATCHERS,
    MetadataExtractor,
    is_valid_app_name,
    match_appositive,
    match_called,
    match_create_app,
    match_create_comma,
)


class TestNameMatchers:
    """Tests for the individual name matchers and their order."""

    @pytest.mark.unit
    def test_called(self):
        assert match_called("Build an app called TaskFlow for teams.") == "TaskFlow"

    @pytest.mark.unit
    def test_create_comma(self):
        assert match_create_comma("Please create TaskFlow, then ship it.") == "TaskFlow"

    @pytest.mark.unit
    def test_appositive(self):
        assert match_appositive("Create PotholeReporter, a civic app.") == "PotholeReporter"

    @pytest.mark.unit
    def test_create_app(self):
        assert match_create_app("We want to build an app TaskFlow today.") == "TaskFlow"

    @pytest.mark.unit
    def test_invalid_capture_is_rejected(self):
        """A match on a stoplisted word yields nothing."""
        assert match_called("a variable named The thing") is None

    @pytest.mark.unit
    def test_chain_order(self):
        """'called X' outranks the other shapes."""
        assert NAME_MATCHERS[0] is match_called
        text = "Please build ZetaApp, called AlphaApp later."
        assert MetadataExtractor().extract_name(text) == "AlphaApp"

    @pytest.mark.unit
    def test_is_valid_app_name(self):
        assert is_valid_app_name("TaskFlow")
        assert not is_valid_app_name("Create")
        assert not is_valid_app_name("Ab")
        assert not is_valid_app_name("taskFlow")
        assert not is_valid_app_name("Task1")


class TestMetadataExtractor:
    """Tests for MetadataExtractor."""

    @pytest.mark.unit
    def test_pothole_specification(self, pothole_specification):
        metadata = MetadataExtractor().extract(pothole_specification)

        assert metadata == {
            "name": "PotholeReporter",
            "domain": "civic-tech",
            "locale": "en-US",
            "description": (
                "Create PotholeReporter, a civic tech app for reporting potholes in Miami"
            ),
        }

    @pytest.mark.unit
    def test_name_falls_back_to_domain_default(self):
        extractor = MetadataExtractor()
        assert extractor.extract_name("Create a simple todo app.") == "TaskManager"
        assert extractor.extract_name("Something about banking.") == "FinanceApp"
        assert extractor.extract_name("Hello world.") == "MyApp"

    @pytest.mark.unit
    def test_domain_table_order(self):
        """Earlier keywords win when several are present."""
        extractor = MetadataExtractor()
        assert extractor.extract_domain("A community shop") == "civic-tech"
        assert extractor.extract_domain("An online store for selling") == "e-commerce"
        assert extractor.extract_domain("task chat") == "productivity"
        assert extractor.extract_domain("A project management tool") == "productivity"
        assert extractor.extract_domain("A medical app") == "healthcare"
        assert extractor.extract_domain("Hello world") == "general"

    @pytest.mark.unit
    def test_locale(self):
        extractor = MetadataExtractor()
        assert extractor.extract_locale("Use the fr-CA locale") == "fr-CA"
        assert extractor.extract_locale("An app in Spanish") == "es-ES"
        assert extractor.extract_locale("Spanish app for es-MX") == "es-MX"
        assert extractor.extract_locale("No hints here") == "en-US"

    @pytest.mark.unit
    def test_description_bounds(self):
        """Only first sentences of 11 to 199 characters are kept."""
        extractor = MetadataExtractor()
        assert extractor.extract_description("a" * 10) is None
        assert extractor.extract_description("a" * 11) == "a" * 11
        assert extractor.extract_description("a" * 199) == "a" * 199
        assert extractor.extract_description("a" * 200) is None
        assert extractor.extract_description("Build TaskFlow for teams. More.") == (
            "Build TaskFlow for teams"
        )

    @pytest.mark.unit
    def test_description_omitted(self):
        assert MetadataExtractor().extract("Hi.") == {
            "name": "MyApp",
            "domain": "general",
            "locale": "en-US",
        }
