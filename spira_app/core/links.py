"""Web locations for artifacts and the browser launcher."""

from __future__ import annotations

import webbrowser
from urllib.parse import urlparse

from .errors import URLResolutionError
from .models import Artifact


def resolve_url(artifact: Artifact, base_url: str | None) -> str:
    """Build the artifact's page on the Spira web UI.

    Spira serves artifact pages at ``{base}/{project_id}/{Kind}/{artifact_id}.aspx``.
    """
    if not base_url or not str(base_url).strip():
        raise URLResolutionError("No Spira base URL configured")
    base = str(base_url).strip().rstrip("/")
    parsed = urlparse(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise URLResolutionError(f"Not an http(s) base URL: {base_url!r}")
    return f"{base}/{artifact.project_id}/{artifact.url_token}/{artifact.artifact_id}.aspx"


def open_url(uri: str) -> bool:
    return webbrowser.open(uri)
