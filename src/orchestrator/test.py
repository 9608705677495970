"""Unit tests for the Orchestrator pipeline."""

import copy

import pytest

from src.analyst import Analyst
from src.orchestrator import Orchestrator, ProcessResult, process_contract
from src.schema import parse_contract


class TestOrchestrator:
    """Tests for Orchestrator.process."""

    @pytest.mark.unit
    def test_valid_contract(self, valid_contract_dict):
        """Valid, consistent contracts come back normalized."""
        result = Orchestrator().process(valid_contract_dict)

        assert result.success is True
        assert result.errors == []
        contract = result.contract
        assert contract.metadata.version == "1.0.0"
        assert [e.name for e in contract.entities] == ["Project", "Task"]
        assert [s.name for s in contract.services] == ["ProjectService", "TaskService"]
        assert contract.ui.routes == sorted(contract.ui.routes)
        assert contract.ui.components == sorted(contract.ui.components)
        for entity in contract.entities:
            names = [a.name for a in entity.attributes]
            assert names[0] == "id"
            assert "createdAt" in names
            assert "updatedAt" in names

    @pytest.mark.unit
    def test_missing_metadata_short_circuits(self, valid_contract_dict):
        """Schema failures stop the pipeline before consistency checking."""
        del valid_contract_dict["metadata"]
        # Would also fail consistency if that stage ran.
        valid_contract_dict["services"][0]["name"] = "Tasks"

        result = Orchestrator().process(valid_contract_dict)

        assert result.success is False
        assert result.contract is None
        assert result.errors == ["metadata: Field required"]
        assert not any("naming convention" in error for error in result.errors)

    @pytest.mark.unit
    def test_consistency_failure(self, valid_contract_dict):
        valid_contract_dict["services"][1]["operations"][0]["output"] = "Invoice"

        result = Orchestrator().process(valid_contract_dict)

        assert result.success is False
        assert result.contract is None
        assert len(result.errors) == 1
        assert "'Invoice'" in result.errors[0]

    @pytest.mark.unit
    def test_empty_collections_rejected(self, valid_contract_dict):
        valid_contract_dict["entities"] = []
        valid_contract_dict["services"] = []

        result = Orchestrator().process(valid_contract_dict)

        assert result.success is False
        assert len(result.errors) == 2

    @pytest.mark.unit
    def test_candidate_dict_untouched(self, valid_contract_dict):
        snapshot = copy.deepcopy(valid_contract_dict)
        Orchestrator().process(valid_contract_dict)
        assert valid_contract_dict == snapshot

    @pytest.mark.unit
    def test_contract_instance_untouched(self, valid_contract_dict):
        contract = parse_contract(valid_contract_dict)
        result = Orchestrator().process(contract)

        assert result.success
        assert result.contract is not contract
        assert contract.metadata.version is None
        assert [e.name for e in contract.entities] == ["Task", "Project"]

    @pytest.mark.unit
    def test_mutated_contract_instance_rejected(self, valid_contract_dict):
        contract = parse_contract(valid_contract_dict)
        contract.entities.clear()
        for service in contract.services:
            for operation in service.operations:
                operation.input = "string"
                operation.output = "string"

        result = Orchestrator().process(contract)

        assert result.success is False
        assert result.contract is None
        assert result.errors[0].startswith("entities: ")

    @pytest.mark.unit
    def test_process_is_idempotent(self, valid_contract_dict):
        first = process_contract(valid_contract_dict)
        second = process_contract(first.contract.to_dict())

        assert second.success
        assert second.contract == first.contract

    @pytest.mark.unit
    def test_to_dict(self, valid_contract_dict):
        data = Orchestrator().process(valid_contract_dict).to_dict()

        assert data["success"] is True
        assert data["errors"] == []
        assert data["contract"]["metadata"]["version"] == "1.0.0"
        assert ProcessResult(success=False, errors=["x"]).to_dict() == {
            "success": False,
            "errors": ["x"],
        }


class TestAnalystToOrchestrator:
    """End-to-end: text through extraction and the pipeline."""

    @pytest.mark.integration
    def test_pothole_specification(self, pothole_specification):
        result = Orchestrator().process(Analyst().analyze(pothole_specification))

        assert result.success, result.errors
        report = result.contract.entities[0]
        assert report.name == "Report"
        assert [a.name for a in report.attributes] == [
            "id",
            "location",
            "description",
            "status",
            "createdAt",
            "updatedAt",
        ]
        assert result.contract.services[0].name == "ReportService"

    @pytest.mark.integration
    def test_todo_app(self):
        result = Orchestrator().process(Analyst().analyze("Create a simple todo app."))

        assert result.success, result.errors
        item = result.contract.entities[0]
        assert [a.name for a in item.attributes] == ["id", "name", "createdAt", "updatedAt"]
