"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``spira_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from spira_app.app import main

st.set_page_config(layout="wide")
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("spira_app")


def _auto_init_artifact_service():
    """Initialize the Spira service from Streamlit secrets if available."""
    if "artifact_service" in st.session_state:
        return

    # Try to get secrets from a [spira] section, fall back to top-level
    spira_secrets = st.secrets.get("spira", {})
    server = spira_secrets.get("SPIRA_SERVER") or st.secrets.get("SPIRA_SERVER")
    username = spira_secrets.get("SPIRA_USERNAME") or st.secrets.get("SPIRA_USERNAME")
    api_key = spira_secrets.get("SPIRA_API_KEY") or st.secrets.get("SPIRA_API_KEY")

    if server and username and api_key:
        from spira_app.core.service import build_service

        st.session_state["spira_server"] = server
        st.session_state["spira_username"] = username
        st.session_state["artifact_service"] = build_service(server, username, api_key)
        st.sidebar.success("Spira connection configured from secrets.")
    else:
        st.sidebar.warning("Spira secrets not found. Please use the Setup page.")


_auto_init_artifact_service()

PAGES_DIR = Path(__file__).parent / "spira_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"spira_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:  # pragma: no cover
        logger.error("Failed importing page %s: %s", mod_name, e)

if __name__ == "__main__":
    main()
