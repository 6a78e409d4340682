"""Test configuration ensuring local package import when editable install not active.

Also provides REST payloads shaped like the Spira assigned-artifact endpoints.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def requirement_record():
    return {
        "ProjectId": 12.0,
        "RequirementId": 503.0,
        "ImportanceName": "High",
        "ProjectName": "Acme",
        "Name": "Login flow",
        "StatusName": "In Progress",
        "RequirementTypeName": "Feature",
        "Description": None,
    }


@pytest.fixture
def task_record():
    return {
        "ProjectId": 12.0,
        "TaskId": 88.0,
        "TaskPriorityName": "2 - High",
        "ProjectName": "Acme",
        "Name": "Write login tests",
        "TaskStatusName": "Not Started",
        "TaskTypeName": "Development",
        "Description": "<p>Cover the <b>happy path</b></p>",
    }


@pytest.fixture
def incident_record():
    return {
        "ProjectId": 7.0,
        "IncidentId": 1204.0,
        "PriorityName": "1 - Critical",
        "ProjectName": "Billing",
        "Name": "Invoice total off by one cent",
        "IncidentStatusName": "Open",
        "IncidentTypeName": "Bug",
        "Description": "Rounding error in tax line",
    }
