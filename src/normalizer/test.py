"""Unit tests for the Normalizer."""

import pytest

from src.normalizer import Normalizer, normalize_contract
from src.schema import parse_contract


class TestNormalizer:
    """Tests for Normalizer.normalize."""

    @pytest.mark.unit
    def test_default_version(self, valid_contract_dict):
        normalized = Normalizer().normalize(parse_contract(valid_contract_dict))
        assert normalized.metadata.version == "1.0.0"

    @pytest.mark.unit
    def test_existing_version_kept(self, valid_contract_dict):
        valid_contract_dict["metadata"]["version"] = "2.3.1"
        normalized = Normalizer().normalize(parse_contract(valid_contract_dict))
        assert normalized.metadata.version == "2.3.1"

    @pytest.mark.unit
    def test_sorted_collections(self, valid_contract_dict):
        normalized = Normalizer().normalize(parse_contract(valid_contract_dict))

        assert [e.name for e in normalized.entities] == ["Project", "Task"]
        assert [s.name for s in normalized.services] == ["ProjectService", "TaskService"]
        assert normalized.ui.routes == ["/", "/projects/:id", "/tasks"]
        assert normalized.ui.components == ["ProjectForm", "TaskList"]

    @pytest.mark.unit
    def test_system_attributes(self, valid_contract_dict):
        normalized = Normalizer().normalize(parse_contract(valid_contract_dict))
        project, task = normalized.entities

        assert [a.name for a in task.attributes] == [
            "id",
            "title",
            "status",
            "createdAt",
            "updatedAt",
        ]
        # Project already declares id; it is not duplicated or moved.
        assert [a.name for a in project.attributes] == ["id", "name", "createdAt", "updatedAt"]

        added = task.attributes[0]
        assert (added.type, added.required) == ("uuid", True)
        assert task.attributes[-1].type == "date"

    @pytest.mark.unit
    def test_existing_timestamps_not_duplicated(self, valid_contract_dict):
        valid_contract_dict["entities"][0]["attributes"].insert(
            0, {"name": "updatedAt", "type": "date", "required": False}
        )
        normalized = Normalizer().normalize(parse_contract(valid_contract_dict))
        task = normalized.entities[1]

        assert [a.name for a in task.attributes] == [
            "id",
            "updatedAt",
            "title",
            "status",
            "createdAt",
        ]
        assert task.attributes[1].required is False

    @pytest.mark.unit
    def test_input_untouched(self, valid_contract_dict):
        contract = parse_contract(valid_contract_dict)
        snapshot = contract.model_dump()

        Normalizer().normalize(contract)

        assert contract.model_dump() == snapshot
        assert contract.metadata.version is None

    @pytest.mark.unit
    def test_idempotent(self, valid_contract_dict):
        once = normalize_contract(parse_contract(valid_contract_dict))
        twice = normalize_contract(once)

        assert twice == once
        assert twice.to_dict() == once.to_dict()
