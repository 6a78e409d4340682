"""Render models and controller for the assignments panel (no Streamlit).

The list region groups assigned artifacts into collapsible per-kind sections;
the detail region describes the selected artifact. Any host (Streamlit page,
terminal, test) renders these models and forwards user events to
``PanelController.on_toggle_section`` and ``PanelController.on_select``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .config import DETAIL_LABELS, INCIDENT, KIND_ORDER, REQUIREMENT, SECTION_TITLES, TASK
from .links import open_url, resolve_url
from .models import Artifact
from .service import ActivationResult

Resolver = Callable[[Artifact, str], str]
Opener = Callable[[str], object]


@dataclass(frozen=True, slots=True)
class RowModel:
    label: str
    artifact: Artifact


@dataclass(frozen=True, slots=True)
class SectionModel:
    kind: str
    title: str
    rows: tuple[RowModel, ...]
    expanded: bool = False

    @property
    def visible_rows(self) -> tuple[RowModel, ...]:
        # Collapsed sections keep their rows built, just not shown
        return self.rows if self.expanded else ()


@dataclass(frozen=True, slots=True)
class ErrorBanner:
    kind: str
    title: str
    message: str


@dataclass(frozen=True, slots=True)
class ListRegionModel:
    sections: tuple[SectionModel, ...] = ()
    errors: tuple[ErrorBanner, ...] = ()

    def section(self, kind: str) -> SectionModel | None:
        for section in self.sections:
            if section.kind == kind:
                return section
        return None

    @property
    def is_empty(self) -> bool:
        return not self.sections and not self.errors


@dataclass(frozen=True, slots=True)
class DetailRow:
    field: str
    label: str
    value: str
    url: str | None = None
    markup: bool = False


@dataclass(frozen=True, slots=True)
class DetailRegionModel:
    artifact: Artifact
    rows: tuple[DetailRow, ...]

    @property
    def title(self) -> DetailRow:
        return self.rows[0]

    @property
    def url(self) -> str | None:
        return self.title.url

    def fields(self) -> list[str]:
        return [row.field for row in self.rows]


def build_sections(
    requirements: Sequence[Artifact],
    tasks: Sequence[Artifact],
    incidents: Sequence[Artifact],
    *,
    expanded: dict[str, bool] | None = None,
    titles: dict[str, str] | None = None,
    errors: Sequence[ErrorBanner] = (),
) -> ListRegionModel:
    """Group artifacts into sections, Requirements then Tasks then Incidents.

    Kinds with no artifacts get no section at all.
    """
    expanded = expanded or {}
    titles = titles or SECTION_TITLES
    by_kind = {REQUIREMENT: requirements, TASK: tasks, INCIDENT: incidents}
    sections = []
    for kind in KIND_ORDER:
        artifacts = by_kind[kind]
        if not artifacts:
            continue
        rows = tuple(RowModel(label=a.name, artifact=a) for a in artifacts)
        sections.append(
            SectionModel(
                kind=kind,
                title=titles.get(kind, SECTION_TITLES[kind]),
                rows=rows,
                expanded=bool(expanded.get(kind, False)),
            )
        )
    return ListRegionModel(sections=tuple(sections), errors=tuple(errors))


def render_detail(artifact: Artifact, base_url: str, resolve: Resolver = resolve_url) -> DetailRegionModel:
    """Describe ``artifact`` as title, type, project, priority, status, description.

    Optional fields that are unset produce no row. The title always links to
    the artifact's web page, so a resolver failure propagates to the caller.
    """
    url = resolve(artifact, base_url)
    rows = [
        DetailRow(
            field="title",
            label=artifact.key,
            value=f"{artifact.prefix}:{artifact.artifact_id} - {artifact.name}",
            url=url,
        )
    ]
    if artifact.type is not None:
        rows.append(DetailRow("type", DETAIL_LABELS["type"], artifact.type))
    rows.append(DetailRow("project", DETAIL_LABELS["project"], artifact.project_name))
    if artifact.priority_name is not None:
        rows.append(DetailRow("priority", DETAIL_LABELS["priority"], artifact.priority_name))
    if artifact.status is not None:
        rows.append(DetailRow("status", DETAIL_LABELS["status"], artifact.status))
    if artifact.description is not None:
        rows.append(DetailRow("description", DETAIL_LABELS["description"], artifact.description, markup=True))
    return DetailRegionModel(artifact=artifact, rows=tuple(rows))


@dataclass
class PanelController:
    """Owns the current artifacts, selection, and per-section expand state."""

    base_url: str
    resolve: Resolver = resolve_url
    opener: Opener = open_url
    titles: dict[str, str] = field(default_factory=lambda: dict(SECTION_TITLES))
    artifacts: dict[str, list[Artifact]] = field(default_factory=lambda: {k: [] for k in KIND_ORDER})
    errors: dict[str, str] = field(default_factory=dict)
    expanded: dict[str, bool] = field(default_factory=lambda: {k: False for k in KIND_ORDER})
    selected: Artifact | None = None
    _detail: DetailRegionModel | None = field(default=None, init=False, repr=False)

    def refresh(self, activation: ActivationResult) -> ListRegionModel:
        """Discard the previous load and rebuild from ``activation``."""
        self.artifacts = {kind: activation.artifacts(kind) for kind in KIND_ORDER}
        self.errors = {
            kind: result.error.reason
            for kind, result in activation.results.items()
            if result.error is not None
        }
        self.expanded = {kind: False for kind in KIND_ORDER}
        self.selected = None
        self._detail = None
        return self.list_region()

    def list_region(self) -> ListRegionModel:
        banners = [
            ErrorBanner(kind=kind, title=self.titles.get(kind, SECTION_TITLES[kind]), message=self.errors[kind])
            for kind in KIND_ORDER
            if kind in self.errors
        ]
        return build_sections(
            self.artifacts[REQUIREMENT],
            self.artifacts[TASK],
            self.artifacts[INCIDENT],
            expanded=self.expanded,
            titles=self.titles,
            errors=banners,
        )

    def on_toggle_section(self, kind: str) -> bool:
        if kind not in self.expanded:
            raise KeyError(kind)
        self.expanded[kind] = not self.expanded[kind]
        return self.expanded[kind]

    def on_select(self, artifact: Artifact) -> DetailRegionModel:
        self._detail = None
        self.selected = None
        detail = render_detail(artifact, self.base_url, self.resolve)
        self.selected = artifact
        self._detail = detail
        return detail

    def detail_region(self) -> DetailRegionModel | None:
        return self._detail

    def open_selected(self) -> str | None:
        if self.selected is None:
            return None
        url = self.resolve(self.selected, self.base_url)
        self.opener(url)
        return url
