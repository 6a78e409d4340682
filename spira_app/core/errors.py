"""Exceptions raised while fetching, loading, and linking Spira artifacts."""

from __future__ import annotations


class SpiraAPIError(RuntimeError):
    """Transport or HTTP-level failure talking to the Spira REST service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LoadFailure(RuntimeError):
    """Fetching or mapping the records of one artifact kind failed."""

    def __init__(self, kind: str, reason: str):
        super().__init__(f"Failed to load {kind} artifacts: {reason}")
        self.kind = kind
        self.reason = reason


class URLResolutionError(ValueError):
    """No web location can be built for an artifact."""
