"""Connection setup page: collect Spira credentials and initialize ArtifactService."""

from __future__ import annotations

import streamlit as st

from spira_app.app import SETUP_PAGE, register_page
from spira_app.core.config import SPIRA_DEFAULT_SERVER
from spira_app.core.service import build_service


@register_page(SETUP_PAGE)
def setup_page():
    st.title("Spira Connection Setup")
    st.caption("Enter credentials (use secrets manager in production).")

    # Pre-fill from secrets if available (user can override)
    spira_secrets = st.secrets.get("spira", {})
    secret_server = spira_secrets.get("SPIRA_SERVER") or st.secrets.get("SPIRA_SERVER")
    secret_username = spira_secrets.get("SPIRA_USERNAME") or st.secrets.get("SPIRA_USERNAME")
    secret_key = spira_secrets.get("SPIRA_API_KEY") or st.secrets.get("SPIRA_API_KEY")

    server = st.text_input(
        "Spira Server URL",
        value=st.session_state.get("spira_server") or secret_server or "",
        placeholder=SPIRA_DEFAULT_SERVER,
    )
    username = st.text_input(
        "Username",
        value=st.session_state.get("spira_username") or secret_username or "",
    )
    api_key = st.text_input(
        "API Key (RSS token)",
        type="password",
        value=secret_key or "",
    )
    init_btn = st.button("Initialize Connection", type="primary")

    if init_btn:
        if not (server and username and api_key):
            st.error("All fields required.")
            return
        st.session_state["spira_server"] = server
        st.session_state["spira_username"] = username
        st.session_state["artifact_service"] = build_service(server, username, api_key)
        st.session_state.pop("panel_controller", None)
        st.success("Connection initialized.")

    if "artifact_service" in st.session_state:
        st.info("ArtifactService ready.")
