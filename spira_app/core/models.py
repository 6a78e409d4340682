"""Domain data models for assigned Spira artifacts (requirements, tasks, incidents)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .config import INCIDENT, REQUIREMENT, TASK

# Identity fields are fixed once the artifact has been built
_READ_ONLY_FIELDS = frozenset({"project_id", "project_name", "artifact_id", "name"})


@dataclass(slots=True, eq=False)
class Artifact:
    """Common base for the three artifact kinds shown in the assignments panel."""

    kind: ClassVar[str] = ""
    prefix: ClassVar[str] = ""
    url_token: ClassVar[str] = ""

    project_id: int
    project_name: str
    artifact_id: int
    name: str
    priority_name: str | None
    description: str | None = None
    status: str | None = None
    type: str | None = None

    def __post_init__(self):
        if type(self) is Artifact:
            raise TypeError("Artifact is abstract; build a Requirement, Task or Incident")

    def __setattr__(self, name, value):
        if name in _READ_ONLY_FIELDS and hasattr(self, name):
            raise AttributeError(f"{name} is read-only once the artifact is built")
        object.__setattr__(self, name, value)

    @property
    def key(self) -> str:
        return f"{self.prefix}:{self.artifact_id}"


@dataclass(slots=True, eq=False)
class Requirement(Artifact):
    kind: ClassVar[str] = REQUIREMENT
    prefix: ClassVar[str] = "RQ"
    url_token: ClassVar[str] = "Requirement"


@dataclass(slots=True, eq=False)
class Task(Artifact):
    kind: ClassVar[str] = TASK
    prefix: ClassVar[str] = "TK"
    url_token: ClassVar[str] = "Task"


@dataclass(slots=True, eq=False)
class Incident(Artifact):
    kind: ClassVar[str] = INCIDENT
    prefix: ClassVar[str] = "IN"
    url_token: ClassVar[str] = "Incident"


ARTIFACT_CLASSES: dict[str, type[Artifact]] = {
    REQUIREMENT: Requirement,
    TASK: Task,
    INCIDENT: Incident,
}
