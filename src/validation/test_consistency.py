"""Unit tests for the consistency checker."""

import pytest

from src.schema import parse_contract
from src.validation import ConsistencyChecker, check_consistency


def _check(data):
    return ConsistencyChecker().check(parse_contract(data))


class TestConsistencyChecker:
    """Tests for ConsistencyChecker.check."""

    @pytest.mark.unit
    def test_consistent_contract(self, valid_contract_dict):
        """A contract with resolvable references has no issues."""
        result = _check(valid_contract_dict)

        assert result.consistent is True
        assert result.issues == []

    @pytest.mark.unit
    def test_duplicate_service_names(self, valid_contract_dict):
        """Two services named UserService are reported as duplicates."""
        valid_contract_dict["entities"].append(
            {
                "name": "User",
                "attributes": [{"name": "email", "type": "string", "required": True}],
            }
        )
        operation = {"name": "getUser", "input": "string", "output": "User", "method": "GET"}
        valid_contract_dict["services"] = [
            {"name": "UserService", "operations": [operation]},
            {"name": "UserService", "operations": [operation]},
        ]
        result = _check(valid_contract_dict)

        assert result.consistent is False
        assert len(result.issues) == 1
        assert "duplicate" in result.issues[0]
        assert "UserService" in result.issues[0]

    @pytest.mark.unit
    def test_duplicate_entity_names_listed_once(self, valid_contract_dict):
        """Each duplicated entity name appears once in a single issue."""
        task = valid_contract_dict["entities"][0]
        project = valid_contract_dict["entities"][1]
        valid_contract_dict["entities"] = [task, project, task, project, task]
        result = _check(valid_contract_dict)

        assert result.issues == ["Found duplicate entity names: Task, Project"]

    @pytest.mark.unit
    def test_service_naming_convention(self, valid_contract_dict):
        """Each service not ending in 'Service' gets its own issue."""
        valid_contract_dict["services"][0]["name"] = "Tasks"
        valid_contract_dict["services"][1]["name"] = "ProjectApi"
        result = _check(valid_contract_dict)

        assert len(result.issues) == 2
        assert "'Tasks'" in result.issues[0]
        assert "'ProjectApi'" in result.issues[1]

    @pytest.mark.unit
    def test_unknown_output_reference(self, valid_contract_dict):
        """An output naming no entity is reported exactly."""
        valid_contract_dict["services"][1]["operations"][0]["output"] = "Invoice"
        result = _check(valid_contract_dict)

        assert result.issues == [
            "Service 'ProjectService' operation 'getProject' "
            "references non-existent entity 'Invoice'"
        ]

    @pytest.mark.unit
    def test_unknown_input_reference(self, valid_contract_dict):
        """An input naming no entity is reported with the 'as input' suffix."""
        valid_contract_dict["services"][1]["operations"][0]["input"] = "Filter"
        result = _check(valid_contract_dict)

        assert result.issues == [
            "Service 'ProjectService' operation 'getProject' "
            "references non-existent entity 'Filter' as input"
        ]

    @pytest.mark.unit
    def test_array_suffix_is_stripped(self, valid_contract_dict):
        """Array references resolve through their element type."""
        valid_contract_dict["services"][1]["operations"][0]["output"] = "Ghost[]"
        result = _check(valid_contract_dict)

        assert len(result.issues) == 1
        assert "'Ghost'" in result.issues[0]

    @pytest.mark.unit
    def test_payload_types_pass_unchecked(self, valid_contract_dict):
        """Names containing Input/Update pass even without a matching entity."""
        operation = valid_contract_dict["services"][0]["operations"][0]
        operation["input"] = "WidgetInput"
        operation["output"] = "GadgetUpdate"

        assert _check(valid_contract_dict).consistent is True

    @pytest.mark.unit
    def test_primitives_pass(self, valid_contract_dict):
        """Every primitive is accepted as input and output."""
        operation = valid_contract_dict["services"][0]["operations"][0]
        for primitive in ("string", "number", "boolean", "date", "uuid", "void"):
            operation["input"] = primitive
            operation["output"] = primitive
            assert _check(valid_contract_dict).consistent is True

    @pytest.mark.unit
    def test_all_issues_accumulate(self, valid_contract_dict):
        """Checks never short-circuit; every issue is collected."""
        valid_contract_dict["entities"].append(valid_contract_dict["entities"][0])
        valid_contract_dict["services"][0]["name"] = "Tasks"
        valid_contract_dict["services"][1]["operations"][0]["output"] = "Missing"
        result = _check(valid_contract_dict)

        assert len(result.issues) == 3
        assert result.issues[0].startswith("Found duplicate entity names")
        assert "naming convention" in result.issues[1]
        assert "'Missing'" in result.issues[2]

    @pytest.mark.unit
    def test_check_consistency_helper(self, valid_contract_dict):
        """Module helper delegates to a default checker."""
        result = check_consistency(parse_contract(valid_contract_dict))
        assert result.consistent
