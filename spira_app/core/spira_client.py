"""Spira REST API client wrapper (assigned artifacts per kind)."""

from __future__ import annotations

import logging
from typing import Any

import requests

from .config import KIND_RESOURCES, REQUEST_TIMEOUT_SECONDS, SPIRA_API_PATH
from .errors import SpiraAPIError

logger = logging.getLogger(__name__)


class SpiraAPI:
    def __init__(
        self,
        server: str,
        username: str,
        api_key: str,
        *,
        api_path: str = SPIRA_API_PATH,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.server = server.rstrip("/")
        self.username = username
        self.api_key = api_key
        self.api_path = "/" + api_path.strip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _url(self, resource: str) -> str:
        return f"{self.server}{self.api_path}/{resource}"

    def get_json(self, resource: str) -> Any:
        url = self._url(resource)
        params = {"username": self.username, "api-key": self.api_key}
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SpiraAPIError(f"Request to {url} failed: {exc}") from exc
        if resp.status_code >= 400:
            raise SpiraAPIError(
                f"Spira request failed {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise SpiraAPIError(f"Spira returned a non-JSON body for {resource}") from exc

    def fetch_assigned(self, kind: str) -> list[dict[str, Any]]:
        """Return the raw records of one artifact kind assigned to the current user."""
        try:
            resource = KIND_RESOURCES[kind]
        except KeyError:
            raise ValueError(f"Unknown artifact kind: {kind!r}") from None
        data = self.get_json(resource)
        logger.debug("Fetched %s assigned %s", len(data) if isinstance(data, list) else "?", resource)
        return data

    def get_assigned_requirements(self) -> list[dict[str, Any]]:
        return self.fetch_assigned("requirement")

    def get_assigned_tasks(self) -> list[dict[str, Any]]:
        return self.fetch_assigned("task")

    def get_assigned_incidents(self) -> list[dict[str, Any]]:
        return self.fetch_assigned("incident")
