import pytest
import requests

from spira_app.core.errors import SpiraAPIError
from spira_app.core.spira_client import SpiraAPI


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def api():
    return SpiraAPI("https://acme.spiraservice.net/", "fred", "{KEY}")


def _patch_get(monkeypatch, api, response):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(api.session, "get", fake_get)
    return calls


def test_fetch_assigned_builds_request(monkeypatch, api):
    calls = _patch_get(monkeypatch, api, FakeResponse(payload=[{"TaskId": 1.0}]))
    assert api.get_assigned_tasks() == [{"TaskId": 1.0}]
    url, params, timeout = calls[0]
    assert url == "https://acme.spiraservice.net/Services/v5_0/RestService.svc/tasks"
    assert params == {"username": "fred", "api-key": "{KEY}"}
    assert timeout == 30.0
    assert api.session.headers["Accept"] == "application/json"


def test_resources_per_kind(monkeypatch, api):
    calls = _patch_get(monkeypatch, api, FakeResponse(payload=[]))
    api.get_assigned_requirements()
    api.get_assigned_incidents()
    assert [c[0].rsplit("/", 1)[1] for c in calls] == ["requirements", "incidents"]


def test_every_fetch_hits_the_server(monkeypatch, api):
    calls = _patch_get(monkeypatch, api, FakeResponse(payload=[]))
    api.fetch_assigned("incident")
    api.fetch_assigned("incident")
    assert len(calls) == 2


def test_http_error_raises(monkeypatch, api):
    _patch_get(monkeypatch, api, FakeResponse(status_code=401, text="Unauthorized"))
    with pytest.raises(SpiraAPIError) as info:
        api.fetch_assigned("requirement")
    assert info.value.status_code == 401
    assert "Unauthorized" in str(info.value)


def test_transport_error_raises(monkeypatch, api):
    _patch_get(monkeypatch, api, requests.ConnectionError("boom"))
    with pytest.raises(SpiraAPIError):
        api.fetch_assigned("task")


def test_non_json_body_raises(monkeypatch, api):
    _patch_get(monkeypatch, api, FakeResponse(payload=ValueError("no json")))
    with pytest.raises(SpiraAPIError):
        api.fetch_assigned("task")


def test_unknown_kind_rejected(api):
    with pytest.raises(ValueError):
        api.fetch_assigned("epic")
