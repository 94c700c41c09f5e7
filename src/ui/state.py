import streamlit as st
from utils.constants import Pages
from ui.map_state import default_view


def ensure_state():
    """Ensure default session state values exist."""
    defaults = {
        "page": Pages.MAP.value["key"],
        "markers": None,
        "map_view": default_view(),
        "draft_location": None,
        "placing_marker": False,
        "last_map_click": None,
        "last_marker_click": None,
        "selected_marker_id": None,
        "identity": None,
        "profile": None,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(key, value)
