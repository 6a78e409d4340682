import pytest

from spira_app.core.errors import LoadFailure, URLResolutionError
from spira_app.core.models import Incident, Requirement, Task
from spira_app.core.panel import PanelController, build_sections, render_detail
from spira_app.core.service import ActivationResult, LoadResult

BASE = "https://acme.spiraservice.net"


def _req():
    req = Requirement(12, "Acme", 503, "Login flow", "High")
    req.status = "In Progress"
    return req


def _task(**kwargs):
    task = Task(12, "Acme", 88, "Write login tests", kwargs.get("priority"))
    task.type = kwargs.get("type")
    task.status = kwargs.get("status")
    task.description = kwargs.get("description")
    return task


def _incident():
    return Incident(7, "Billing", 1204, "Invoice off by one cent", None)


def test_sections_follow_fixed_order():
    region = build_sections([_req()], [_task()], [_incident()])
    assert [s.kind for s in region.sections] == ["requirement", "task", "incident"]
    assert [s.title for s in region.sections] == ["Requirements", "Tasks", "Incidents"]
    assert region.sections[0].rows[0].label == "Login flow"


def test_empty_kind_has_no_section():
    region = build_sections([_req()], [_task()], [])
    assert region.section("incident") is None
    assert "Incidents" not in [s.title for s in region.sections]


def test_all_empty_renders_nothing():
    region = build_sections([], [], [])
    assert region.sections == ()
    assert region.is_empty


def test_sections_start_collapsed_with_rows_built():
    section = build_sections([_req(), _req()], [], []).section("requirement")
    assert section.expanded is False
    assert section.visible_rows == ()
    assert len(section.rows) == 2


def test_toggle_twice_restores_initial_state():
    controller = PanelController(base_url=BASE, opener=lambda url: None)
    controller.refresh(ActivationResult({"requirement": LoadResult("requirement", [_req()])}))
    initial = controller.list_region()
    assert controller.on_toggle_section("requirement") is True
    expanded = controller.list_region().section("requirement")
    assert len(expanded.visible_rows) == 1
    assert controller.on_toggle_section("requirement") is False
    assert controller.list_region() == initial


def test_toggle_is_independent_per_section():
    controller = PanelController(base_url=BASE)
    controller.refresh(
        ActivationResult(
            {
                "requirement": LoadResult("requirement", [_req()]),
                "task": LoadResult("task", [_task()]),
            }
        )
    )
    controller.on_toggle_section("task")
    region = controller.list_region()
    assert region.section("task").expanded is True
    assert region.section("requirement").expanded is False


def test_toggle_unknown_kind_raises():
    with pytest.raises(KeyError):
        PanelController(base_url=BASE).on_toggle_section("epic")


def test_refresh_resets_expand_state_and_selection():
    controller = PanelController(base_url=BASE)
    activation = ActivationResult({"requirement": LoadResult("requirement", [_req()])})
    controller.refresh(activation)
    controller.on_toggle_section("requirement")
    controller.on_select(controller.artifacts["requirement"][0])
    controller.refresh(activation)
    assert controller.list_region().section("requirement").expanded is False
    assert controller.selected is None
    assert controller.detail_region() is None


def test_detail_full_row_order():
    task = _task(priority="High", type="Development", status="Not Started", description="<p>rich</p>")
    detail = render_detail(task, BASE)
    assert detail.fields() == ["title", "type", "project", "priority", "status", "description"]
    assert detail.title.value == "TK:88 - Write login tests"
    assert detail.url == f"{BASE}/12/Task/88.aspx"
    assert detail.rows[-1].markup is True
    assert detail.rows[-1].value == "<p>rich</p>"


def test_detail_omits_absent_fields_only():
    detail = render_detail(_task(status="Open"), BASE)
    assert detail.fields() == ["title", "project", "status"]
    assert all(row.value != "None" for row in detail.rows)


def test_detail_without_description_has_four_or_five_rows():
    req_detail = render_detail(_req(), BASE)
    assert "description" not in req_detail.fields()
    assert len(req_detail.rows) == 4
    task_detail = render_detail(_task(priority="High", type="Dev", status="Open"), BASE)
    assert "description" not in task_detail.fields()
    assert len(task_detail.rows) == 5


def test_detail_url_failure_propagates():
    with pytest.raises(URLResolutionError):
        render_detail(_req(), "")


def test_detail_uses_injected_resolver():
    detail = render_detail(_req(), BASE, resolve=lambda a, base: f"{base}/x/{a.artifact_id}")
    assert detail.url == f"{BASE}/x/503"


def test_select_replaces_previous_detail():
    controller = PanelController(base_url=BASE)
    first = controller.on_select(_req())
    second = controller.on_select(_incident())
    assert controller.detail_region() is second
    assert second is not first
    assert controller.selected.key == "IN:1204"


def test_open_selected_uses_opener():
    opened = []
    controller = PanelController(base_url=BASE, opener=opened.append)
    assert controller.open_selected() is None
    controller.on_select(_incident())
    assert controller.open_selected() == f"{BASE}/7/Incident/1204.aspx"
    assert opened == [f"{BASE}/7/Incident/1204.aspx"]


def test_failed_kind_shows_banner_while_others_render():
    activation = ActivationResult(
        {
            "requirement": LoadResult("requirement", [_req()]),
            "task": LoadResult("task", error=LoadFailure("task", "Spira request failed 500")),
            "incident": LoadResult("incident", []),
        }
    )
    controller = PanelController(base_url=BASE)
    region = controller.refresh(activation)
    assert [s.kind for s in region.sections] == ["requirement"]
    assert [(e.kind, e.title) for e in region.errors] == [("task", "Tasks")]
    assert "500" in region.errors[0].message


def test_failed_select_leaves_nothing_selected():
    controller = PanelController(base_url=BASE)
    controller.on_select(_req())
    controller.base_url = ""
    with pytest.raises(URLResolutionError):
        controller.on_select(_incident())
    assert controller.selected is None
    assert controller.detail_region() is None
    assert controller.open_selected() is None
