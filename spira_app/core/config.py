"""Central configuration: artifact kinds, REST field mappings, and app defaults."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

# =============================================================================
# Spira Connection Settings
# =============================================================================
SPIRA_DEFAULT_SERVER = "https://your-company.spiraservice.net"
SPIRA_API_PATH = "/Services/v5_0/RestService.svc"
REQUEST_TIMEOUT_SECONDS: float = 30.0

# =============================================================================
# Artifact Kinds
# =============================================================================
REQUIREMENT = "requirement"
TASK = "task"
INCIDENT = "incident"

# Fixed display and load order for the list region
KIND_ORDER: Sequence[str] = (REQUIREMENT, TASK, INCIDENT)

SECTION_TITLES: dict[str, str] = {
    REQUIREMENT: "Requirements",
    TASK: "Tasks",
    INCIDENT: "Incidents",
}

# REST resource serving the artifacts assigned to the authenticated user
KIND_RESOURCES: dict[str, str] = {
    REQUIREMENT: "requirements",
    TASK: "tasks",
    INCIDENT: "incidents",
}

# =============================================================================
# REST Field Mappings
# =============================================================================
SHARED_FIELDS = {
    "project_id": "ProjectId",
    "project_name": "ProjectName",
    "name": "Name",
    "description": "Description",
}


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """Source field names for the kind-specific attributes of one artifact kind."""

    id_field: str
    priority_field: str
    status_field: str
    type_field: str
    # Requirements expose a type name in the payload but the panel never shows it
    apply_type: bool = True


FIELD_MAPPINGS: dict[str, FieldMapping] = {
    REQUIREMENT: FieldMapping(
        id_field="RequirementId",
        priority_field="ImportanceName",
        status_field="StatusName",
        type_field="RequirementTypeName",
        apply_type=False,
    ),
    TASK: FieldMapping(
        id_field="TaskId",
        priority_field="TaskPriorityName",
        status_field="TaskStatusName",
        type_field="TaskTypeName",
    ),
    INCIDENT: FieldMapping(
        id_field="IncidentId",
        priority_field="PriorityName",
        status_field="IncidentStatusName",
        type_field="IncidentTypeName",
    ),
}

# =============================================================================
# Detail Region Labels
# =============================================================================
DETAIL_LABELS: dict[str, str] = {
    "type": "Type",
    "project": "Project",
    "priority": "Priority",
    "status": "Status",
    "description": "Description",
}

ARTIFACT_TABLE_COLUMNS: Sequence[str] = (
    "kind",
    "key",
    "artifact_id",
    "name",
    "project_id",
    "project_name",
    "priority",
    "status",
    "type",
    "description",
)


@dataclass(slots=True)
class AppSettings:
    api_path: str = SPIRA_API_PATH
    timeout: float = REQUEST_TIMEOUT_SECONDS
    section_titles: dict[str, str] = field(default_factory=lambda: dict(SECTION_TITLES))
    download_encoding: str = "utf-8"
