"""Tabular export of the loaded artifacts for Streamlit rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd
import streamlit as st

from spira_app.core.errors import URLResolutionError
from spira_app.core.links import resolve_url
from spira_app.core.loader import artifacts_to_dataframe
from spira_app.core.models import Artifact

logger = logging.getLogger(__name__)


def artifact_table(artifacts: Iterable[Artifact], base_url: str) -> tuple[pd.DataFrame, dict[str, object]]:
    artifacts = list(artifacts)
    df = artifacts_to_dataframe(artifacts)
    if df.empty:
        return df, {}
    links = []
    for a in artifacts:
        try:
            links.append(resolve_url(a, base_url))
        except URLResolutionError as exc:
            logger.warning("No link for %s in export: %s", a.key, exc)
            links.append("")
    df.insert(0, "Artifact", links)
    cfg = {
        "Artifact": st.column_config.LinkColumn(
            "Artifact",
            display_text=r"/(\d+)\.aspx$",
            help="Open in Spira",
            width="small",
        )
    }
    return df, cfg


def render_artifact_table(artifacts: Iterable[Artifact], base_url: str, *, encoding: str = "utf-8") -> None:
    df, cfg = artifact_table(artifacts, base_url)
    if df.empty:
        st.info("Nothing assigned.")
        return
    st.dataframe(df.drop(columns=["description"]), hide_index=True, column_config=cfg)
    csv = df.to_csv(index=False).encode(encoding)
    st.download_button(
        "Download CSV",
        data=csv,
        file_name="spira_assignments.csv",
        mime="text/csv",
    )
