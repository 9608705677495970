"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample Design Contract fixtures shared across module tests
- Sample natural-language specifications
"""

from __future__ import annotations

from typing import Any

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Specification Fixtures
# =============================================================================

POTHOLE_SPECIFICATION = """
Create PotholeReporter, a civic tech app for reporting potholes in Miami.

We need a Report entity with id (uuid), location (geo), description (string),
and status (enum: OPEN, IN_PROGRESS, CLOSED).

The UI should have pages for home (/), reports list (/reports), and report details (/reports/:id).
Include components: ReportForm, ReportList, MapView.
"""


@pytest.fixture
def pothole_specification() -> str:
    """Multi-paragraph specification for a civic reporting app."""
    return POTHOLE_SPECIFICATION


# =============================================================================
# Contract Fixtures
# =============================================================================


def _valid_contract() -> dict[str, Any]:
    return {
        "metadata": {
            "name": "TaskManager",
            "domain": "productivity",
            "locale": "en-US",
        },
        "entities": [
            {
                "name": "Task",
                "attributes": [
                    {"name": "title", "type": "string", "required": True},
                    {
                        "name": "status",
                        "type": "enum",
                        "required": True,
                        "validation": "OPEN|DONE",
                    },
                ],
            },
            {
                "name": "Project",
                "attributes": [
                    {"name": "id", "type": "uuid", "required": True},
                    {"name": "name", "type": "string", "required": True},
                ],
            },
        ],
        "services": [
            {
                "name": "TaskService",
                "operations": [
                    {
                        "name": "createTask",
                        "input": "TaskInput",
                        "output": "Task",
                        "method": "POST",
                    },
                    {
                        "name": "listTasks",
                        "input": "void",
                        "output": "Task[]",
                        "method": "GET",
                    },
                ],
            },
            {
                "name": "ProjectService",
                "operations": [
                    {
                        "name": "getProject",
                        "input": "string",
                        "output": "Project",
                        "method": "GET",
                    },
                ],
            },
        ],
        "ui": {
            "routes": ["/tasks", "/", "/projects/:id"],
            "components": ["TaskList", "ProjectForm"],
        },
    }


@pytest.fixture
def valid_contract_dict() -> dict[str, Any]:
    """Schema-valid, consistent contract with deliberately unsorted lists.

    A fresh copy is built for every test so tests may mutate it freely.
    """
    return _valid_contract()
