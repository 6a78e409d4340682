"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

PAGES = {}
SETUP_PAGE = "Setup / Connection"


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def main():
    st.sidebar.title("Spira Assignments")
    if not PAGES:
        st.write("No pages registered yet.")
        return
    pages = list(PAGES)
    # Without a connection there is nothing to show but the setup form
    if SETUP_PAGE in PAGES and "artifact_service" not in st.session_state:
        default = pages.index(SETUP_PAGE)
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    PAGES[page]()


if __name__ == "__main__":
    main()
