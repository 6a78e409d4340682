"""My Assignments page: requirements, tasks and incidents assigned to the user.

The page is the host for ``PanelController``: the left column renders the
list region, the right column the detail region of the selected artifact.
"""

from __future__ import annotations

import streamlit as st

from spira_app.app import register_page
from spira_app.core.config import KIND_ORDER
from spira_app.core.panel import PanelController
from spira_app.core.service import ArtifactService
from spira_app.core.settings import load_settings
from spira_app.visual.panel_view import SELECT_ERROR_KEY, render_detail_region, render_list_region
from spira_app.visual.progress import ProgressReporter
from spira_app.visual.tables import render_artifact_table

CONTROLLER_KEY = "panel_controller"


def _activate(service: ArtifactService) -> PanelController:
    settings = load_settings()
    controller = PanelController(base_url=service.base_url, titles=dict(settings.section_titles))
    reporter = ProgressReporter("Fetching your assigned artifacts")
    activation = service.activate(progress=reporter.callback)
    controller.refresh(activation)
    loaded = sum(len(activation.artifacts(kind)) for kind in KIND_ORDER)
    if activation.ok:
        reporter.complete(f"Loaded {loaded} assigned artifact(s).")
    else:
        failed = ", ".join(f.kind for f in activation.failures)
        reporter.warn(f"Loaded {loaded} artifact(s); failed to load: {failed}.")
    return controller


@register_page("My Assignments")
def my_assignments_page():
    st.title("My Assignments")
    service: ArtifactService | None = st.session_state.get("artifact_service")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return

    refresh = st.button("Refresh", type="primary")
    controller: PanelController | None = st.session_state.get(CONTROLLER_KEY)
    if refresh or controller is None:
        st.session_state.pop(SELECT_ERROR_KEY, None)
        controller = _activate(service)
        st.session_state[CONTROLLER_KEY] = controller

    list_col, detail_col = st.columns([2, 3])
    with list_col:
        render_list_region(controller, controller.list_region())
    with detail_col:
        render_detail_region(controller.detail_region())

    with st.expander("Export"):
        artifacts = [a for kind in KIND_ORDER for a in controller.artifacts[kind]]
        render_artifact_table(artifacts, controller.base_url, encoding=load_settings().download_encoding)
