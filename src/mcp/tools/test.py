"""Unit tests for MCP tools."""

import pytest

from src.mcp.tools import analyze_specification, check_specification, validate_contract


class TestCheckSpecification:
    """Tests for specification argument validation."""

    @pytest.mark.unit
    def test_accepts_text(self):
        assert check_specification("Create a simple todo app.") == "Create a simple todo app."

    @pytest.mark.unit
    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="required"):
            check_specification("   ")

    @pytest.mark.unit
    def test_rejects_non_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            check_specification(42)

    @pytest.mark.unit
    def test_rejects_too_long(self):
        with pytest.raises(ValueError, match="too long"):
            check_specification("a" * 11, max_length=10)

    @pytest.mark.unit
    def test_limit_from_environment(self, monkeypatch):
        monkeypatch.setenv("SPEC2APP_MAX_SPEC_LENGTH", "5")
        with pytest.raises(ValueError, match="max 5"):
            check_specification("abcdef")


class TestAnalyzeSpecification:
    """Tests for analyze_specification."""

    @pytest.mark.unit
    def test_success(self, pothole_specification):
        result = analyze_specification(pothole_specification)

        assert result["success"] is True
        contract = result["contract"]
        assert contract["metadata"]["name"] == "PotholeReporter"
        assert contract["metadata"]["version"] == "1.0.0"
        assert contract["entities"][0]["name"] == "Report"

    @pytest.mark.unit
    def test_invalid_extraction_reports_details(self):
        """Unknown declared types surface as schema details."""
        result = analyze_specification("We need a Report entity with id (foo).")

        assert result["success"] is False
        assert result["error"] == "Invalid design contract"
        assert any(detail.startswith("entities.0.attributes.0.type") for detail in result["details"])

    @pytest.mark.unit
    def test_empty_specification(self):
        with pytest.raises(ValueError):
            analyze_specification("")


class TestValidateContract:
    """Tests for validate_contract."""

    @pytest.mark.unit
    def test_valid(self, valid_contract_dict):
        result = validate_contract(valid_contract_dict)

        assert result["valid"] is True
        assert result["contract"]["metadata"]["version"] == "1.0.0"
        assert "description" not in result["contract"]["metadata"]

    @pytest.mark.unit
    def test_invalid(self, valid_contract_dict):
        del valid_contract_dict["metadata"]
        result = validate_contract(valid_contract_dict)

        assert result == {"valid": False, "errors": ["metadata: Field required"]}
