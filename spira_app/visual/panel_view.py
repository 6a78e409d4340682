"""Streamlit rendering of the panel's list and detail region models."""

from __future__ import annotations

import logging
import re

import streamlit as st

from spira_app.core.errors import URLResolutionError
from spira_app.core.models import Artifact
from spira_app.core.panel import DetailRegionModel, ListRegionModel, PanelController

logger = logging.getLogger(__name__)

SELECT_ERROR_KEY = "assignments_select_error"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def _link_target(url: str) -> str:
    return url.replace("(", "%28").replace(")", "%29").replace(" ", "%20")


def _select(controller: PanelController, artifact: Artifact) -> None:
    st.session_state.pop(SELECT_ERROR_KEY, None)
    try:
        controller.on_select(artifact)
    except URLResolutionError as exc:
        logger.error("Cannot link %s: %s", artifact.key, exc)
        st.session_state[SELECT_ERROR_KEY] = f"Cannot open {artifact.key}: {exc}"


def render_list_region(controller: PanelController, region: ListRegionModel) -> None:
    for banner in region.errors:
        st.error(f"Could not load {banner.title}: {banner.message}")
    if not region.sections and not region.errors:
        st.info("Nothing is assigned to you.")
        return
    for section in region.sections:
        marker = "▾" if section.expanded else "▸"
        st.button(
            f"{marker} {section.title} ({len(section.rows)})",
            key=f"section_{section.kind}",
            on_click=controller.on_toggle_section,
            args=(section.kind,),
            type="tertiary",
        )
        for idx, row in enumerate(section.visible_rows):
            st.button(
                row.label,
                key=f"row_{section.kind}_{idx}_{row.artifact.artifact_id}",
                on_click=_select,
                args=(controller, row.artifact),
                type="tertiary",
            )


def render_detail_region(detail: DetailRegionModel | None) -> None:
    error = st.session_state.get(SELECT_ERROR_KEY)
    if error:
        st.error(error)
        return
    if detail is None:
        st.caption("Select an artifact to see its details.")
        return
    title = detail.title
    st.markdown(f"## [{escape_markdown(title.value)}]({_link_target(title.url)})")
    for row in detail.rows[1:]:
        if row.markup:
            # Spira descriptions are rich text (HTML)
            st.markdown(f"**{row.label}:** {row.value}", unsafe_allow_html=True)
        else:
            st.markdown(f"**{row.label}:** {escape_markdown(row.value)}")
    st.link_button("Open in browser", title.url)
