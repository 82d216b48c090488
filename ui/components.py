"""Streamlit helpers shared by the vacancy, candidate and interview pages."""

import streamlit as st

from ui.page_adapter import INDEX_VIEW, field_errors


def init_page_state(page):
    """Initialize the per-page session state keys."""
    defaults = {
        f"{page}_view": INDEX_VIEW,
        f"{page}_errors": {},
        f"{page}_old": {},
        f"{page}_flash": None,
        f"{page}_selected": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def go(page, view, selected=None):
    """Navigate to another view of the page, dropping errors and old input."""
    st.session_state[f"{page}_view"] = view
    st.session_state[f"{page}_errors"] = {}
    st.session_state[f"{page}_old"] = {}
    st.session_state[f"{page}_selected"] = selected
    st.rerun()


def show_flash(page):
    """Display the pending flash message once."""
    flash = st.session_state.get(f"{page}_flash")
    if not flash:
        return
    level, message = flash
    if level == "success":
        st.success(message)
    else:
        st.error(message)
    st.session_state[f"{page}_flash"] = None


def show_field_errors(page, name):
    for message in field_errors(st.session_state, page, name):
        st.caption(f":red[{message}]")


def back_button(page, label="← Back to list"):
    if st.button(label, key=f"{page}_back"):
        go(page, INDEX_VIEW)
