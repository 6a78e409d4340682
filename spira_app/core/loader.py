"""Mapping raw Spira REST records into typed Artifact instances."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from numbers import Real
from typing import Any

import pandas as pd

from .config import ARTIFACT_TABLE_COLUMNS, FIELD_MAPPINGS, SHARED_FIELDS
from .errors import LoadFailure
from .models import ARTIFACT_CLASSES, Artifact


def _require(record: Mapping[str, Any], field: str, kind: str) -> Any:
    value = record.get(field)
    if value is None:
        raise LoadFailure(kind, f"record is missing required field {field!r}")
    return value


def _as_int(value: Any, field: str, kind: str) -> int:
    # JSON numbers arrive as floats; truncate toward zero, never round
    if isinstance(value, bool) or not isinstance(value, Real):
        raise LoadFailure(kind, f"field {field!r} is not numeric: {value!r}")
    try:
        return int(value)
    except (OverflowError, ValueError) as exc:
        raise LoadFailure(kind, f"field {field!r} is not a finite number: {value!r}") from exc


def _optional_str(record: Mapping[str, Any], field: str) -> str | None:
    value = record.get(field)
    if value is None:
        return None
    return str(value)


def map_artifact(kind: str, record: Mapping[str, Any]) -> Artifact:
    mapping = FIELD_MAPPINGS[kind]
    cls = ARTIFACT_CLASSES[kind]
    if not isinstance(record, Mapping):
        raise LoadFailure(kind, f"expected a JSON object, got {type(record).__name__}")

    project_id = _as_int(_require(record, SHARED_FIELDS["project_id"], kind), SHARED_FIELDS["project_id"], kind)
    artifact_id = _as_int(_require(record, mapping.id_field, kind), mapping.id_field, kind)
    project_name = str(_require(record, SHARED_FIELDS["project_name"], kind))
    name = str(_require(record, SHARED_FIELDS["name"], kind))

    artifact = cls(
        project_id=project_id,
        project_name=project_name,
        artifact_id=artifact_id,
        name=name,
        priority_name=_optional_str(record, mapping.priority_field),
    )
    artifact.description = _optional_str(record, SHARED_FIELDS["description"])
    artifact.status = _optional_str(record, mapping.status_field)
    if mapping.apply_type:
        artifact.type = _optional_str(record, mapping.type_field)
    return artifact


def load_artifacts(kind: str, records: Any) -> list[Artifact]:
    """Map one kind's record list; the first bad record fails the whole pass."""
    if kind not in FIELD_MAPPINGS:
        raise ValueError(f"Unknown artifact kind: {kind!r}")
    if records is None:
        raise LoadFailure(kind, "no payload returned")
    if not isinstance(records, list):
        raise LoadFailure(kind, f"expected a JSON array, got {type(records).__name__}")
    return [map_artifact(kind, record) for record in records]


def artifacts_to_dataframe(artifacts: Iterable[Artifact]) -> pd.DataFrame:
    rows = []
    for a in artifacts:
        rows.append(
            {
                "kind": a.kind,
                "key": a.key,
                "artifact_id": a.artifact_id,
                "name": a.name,
                "project_id": a.project_id,
                "project_name": a.project_name,
                "priority": a.priority_name,
                "status": a.status,
                "type": a.type,
                "description": a.description,
            }
        )
    return pd.DataFrame(rows, columns=list(ARTIFACT_TABLE_COLUMNS))
