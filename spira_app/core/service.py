"""ArtifactService: loads every assigned artifact kind for one panel activation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .config import KIND_ORDER, SECTION_TITLES, AppSettings
from .errors import LoadFailure, SpiraAPIError
from .loader import load_artifacts
from .models import Artifact
from .settings import load_settings
from .spira_client import SpiraAPI

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int | None, int | None], None]


@dataclass(slots=True)
class LoadResult:
    """Outcome of loading one artifact kind: artifacts on success, the failure otherwise."""

    kind: str
    artifacts: list[Artifact] = field(default_factory=list)
    error: LoadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ActivationResult:
    results: dict[str, LoadResult] = field(default_factory=dict)

    def artifacts(self, kind: str) -> list[Artifact]:
        result = self.results.get(kind)
        return list(result.artifacts) if result is not None and result.ok else []

    @property
    def failures(self) -> list[LoadFailure]:
        return [r.error for r in self.results.values() if r.error is not None]

    @property
    def ok(self) -> bool:
        return not self.failures


class ArtifactService:
    def __init__(self, api: SpiraAPI):
        self.api = api

    @property
    def base_url(self) -> str:
        return self.api.server

    def load_kind(self, kind: str) -> list[Artifact]:
        try:
            records = self.api.fetch_assigned(kind)
        except SpiraAPIError as exc:
            raise LoadFailure(kind, str(exc)) from exc
        return load_artifacts(kind, records)

    def activate(self, *, progress: ProgressCallback | None = None) -> ActivationResult:
        """Load requirements, tasks and incidents in order.

        Each kind is loaded independently so a failing kind never hides the
        others; failures are logged and recorded on the returned result
        instead of being raised.
        """
        activation = ActivationResult()
        total = len(KIND_ORDER)
        for idx, kind in enumerate(KIND_ORDER):
            if progress:
                progress(f"Loading assigned {SECTION_TITLES[kind].lower()}", idx, total)
            try:
                artifacts = self.load_kind(kind)
            except LoadFailure as exc:
                logger.error("Load failure for %s: %s", kind, exc.reason)
                activation.results[kind] = LoadResult(kind=kind, error=exc)
                continue
            logger.debug("Loaded %s %s artifact(s)", len(artifacts), kind)
            activation.results[kind] = LoadResult(kind=kind, artifacts=artifacts)
        if progress:
            progress("Assignments loaded", total, total)
        return activation


def build_service(server: str, username: str, api_key: str, settings: AppSettings | None = None) -> ArtifactService:
    """Create an ArtifactService backed by a fresh SpiraAPI client."""
    settings = settings or load_settings()
    api = SpiraAPI(server, username, api_key, api_path=settings.api_path, timeout=settings.timeout)
    return ArtifactService(api)
