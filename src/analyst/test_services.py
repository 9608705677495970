"""Unit tests for service extraction."""

import pytest

from src.analyst.services import (
    ServiceExtractor,
    base_entity_name,
    infer_input_output,
    verb_to_method,
)
from src.schema import HTTPMethod


class TestServiceExtractor:
    """Tests for ServiceExtractor.extract."""

    @pytest.mark.unit
    def test_crud_phrase(self):
        """'CRUD operations for Task' synthesizes TaskService with four operations."""
        services = ServiceExtractor().extract("Provide CRUD operations for Task.")

        assert services == [
            {
                "name": "TaskService",
                "operations": [
                    {"name": "createTask", "input": "TaskInput", "output": "Task", "method": "POST"},
                    {"name": "getTask", "input": "string", "output": "Task", "method": "GET"},
                    {"name": "updateTask", "input": "TaskUpdate", "output": "Task", "method": "PUT"},
                    {"name": "deleteTask", "input": "string", "output": "void", "method": "DELETE"},
                ],
            }
        ]

    @pytest.mark.unit
    def test_crud_phrase_needs_capitalized_noun(self):
        assert ServiceExtractor().extract("Add crud for posts.") == []

    @pytest.mark.unit
    def test_crud_duplicates_suppress_verbs(self):
        """Verb phrases that rename a CRUD operation are dropped."""
        services = ServiceExtractor().extract(
            "Support CRUD for Task. Users can create a task and delete tasks."
        )

        assert [op["name"] for op in services[0]["operations"]] == [
            "createTask",
            "getTask",
            "updateTask",
            "deleteTask",
        ]

    @pytest.mark.unit
    def test_declared_operation(self):
        """`name (METHOD)` declarations need an upper-case method."""
        services = ServiceExtractor().extract(
            "The OrderService exposes cancelOrder (POST) and refundOrder (put)."
        )

        assert services == [
            {
                "name": "OrderService",
                "operations": [
                    {
                        "name": "cancelOrder",
                        "input": "OrderInput",
                        "output": "Order",
                        "method": "POST",
                    }
                ],
            }
        ]

    @pytest.mark.unit
    def test_declared_operation_keyword(self):
        """`name operation (method)` accepts any case."""
        services = ServiceExtractor().extract("The OrderService has an archive operation (patch).")

        assert services[0]["operations"] == [
            {"name": "archive", "input": "OrderUpdate", "output": "Order", "method": "PATCH"}
        ]

    @pytest.mark.unit
    def test_declared_operation_keyword_upper_case_method(self):
        """The keyword itself is never taken as an operation name."""
        services = ServiceExtractor().extract("The OrderService has an archive operation (POST).")

        assert services[0]["operations"] == [
            {"name": "archive", "input": "OrderInput", "output": "Order", "method": "POST"}
        ]

    @pytest.mark.unit
    def test_unsupported_method_is_ignored(self):
        assert ServiceExtractor().extract("The OrderService offers ship (SEND).") == []

    @pytest.mark.unit
    def test_verb_phrases(self):
        services = ServiceExtractor().extract(
            "The NoteService lets users create a note, fetch notes and list notes."
        )

        assert services[0]["operations"] == [
            {"name": "createNote", "input": "NoteInput", "output": "Note", "method": "POST"},
            {"name": "fetchNote", "input": "string", "output": "Note", "method": "GET"},
            {"name": "listNote", "input": "void", "output": "Note[]", "method": "GET"},
        ]

    @pytest.mark.unit
    def test_verbs_need_word_boundary(self):
        assert ServiceExtractor().extract("The CartService supports readd requests.") == []

    @pytest.mark.unit
    def test_service_without_operations_is_dropped(self):
        assert ServiceExtractor().extract("The PaymentService is planned.") == []

    @pytest.mark.unit
    def test_names_in_first_seen_order(self):
        text = "UserService and AuthService. CRUD on the Invoice."
        assert ServiceExtractor().extract_names(text) == [
            "UserService",
            "AuthService",
            "InvoiceService",
        ]


class TestServiceHelpers:
    """Tests for method and type inference."""

    @pytest.mark.unit
    def test_base_entity_name(self):
        assert base_entity_name("TaskService") == "Task"

    @pytest.mark.unit
    def test_verb_to_method(self):
        assert verb_to_method("insert") == HTTPMethod.POST
        assert verb_to_method("retrieve") == HTTPMethod.GET
        assert verb_to_method("edit") == HTTPMethod.PUT
        assert verb_to_method("remove") == HTTPMethod.DELETE
        assert verb_to_method("archive") == HTTPMethod.GET

    @pytest.mark.unit
    def test_infer_input_output(self):
        assert infer_input_output("addTask", "Task", HTTPMethod.POST) == ("TaskInput", "Task")
        assert infer_input_output("patchTask", "Task", HTTPMethod.PATCH) == ("TaskUpdate", "Task")
        assert infer_input_output("dropTask", "Task", HTTPMethod.DELETE) == ("string", "void")
        assert infer_input_output("getAllTasks", "Task", HTTPMethod.GET) == ("void", "Task[]")
        assert infer_input_output("getTask", "Task", HTTPMethod.GET) == ("string", "Task")
