import streamlit as st

from clients.persistence_client import PersistenceClient
from ui import map_state
from ui.map_view import render_map
from ui.marker_detail import MarkerDetail
from ui.marker_form import MarkerForm
from ui.net_action import net_action
from ui.Page import Page
from ui.search_bar import SearchBar
from utils.constants import APP_TITLE, Label


class MapPage(Page):
    """Search, browse and add markers on the map."""

    def __init__(
        self,
        persistence_client: PersistenceClient,
        search_bar: SearchBar,
        marker_form: MarkerForm,
        marker_detail: MarkerDetail,
    ):
        self.persistence_client = persistence_client
        self.search_bar = search_bar
        self.marker_form = marker_form
        self.marker_detail = marker_detail

    def _ensure_markers(self):
        if st.session_state.markers is None:
            with net_action("Loading markers..."):
                st.session_state.markers = self.persistence_client.fetch_markers()

    def _render_controls(self):
        place_col, reset_col, _ = st.columns([1, 1, 3])
        place_col.button(
            (
                Label.PLACING_MARKER.value
                if st.session_state.placing_marker
                else Label.PLACE_MARKER.value
            ),
            type="primary",
            on_click=map_state.toggle_placing,
            args=(st.session_state,),
            use_container_width=True,
        )
        reset_col.button(
            Label.RESET_VIEW.value,
            on_click=map_state.reset_view,
            args=(st.session_state,),
            use_container_width=True,
        )

    def _render_side_panel(self):
        state = st.session_state
        if state.draft_location is not None:
            saved = self.marker_form.render(
                state.draft_location, on_cancel=lambda: map_state.cancel_draft(state)
            )
            if saved is not None:
                map_state.upsert_marker(state, saved)
                map_state.cancel_draft(state)
                state.placing_marker = False
                state.selected_marker_id = saved.id
                st.toast("Marker saved.")
                st.rerun()
            return

        marker = map_state.selected_marker(state)
        if marker is None:
            st.caption("Select a marker to see photos and reviews.")
            return
        updated = self.marker_detail.render(marker)
        if updated is not None:
            map_state.upsert_marker(state, updated)
            st.toast("Review posted.")
            st.rerun()

    def render(self):
        st.title(APP_TITLE)
        try:
            self._ensure_markers()
            self.search_bar.render(
                on_place_selected=lambda place: map_state.select_place(
                    st.session_state, place
                )
            )
            self._render_controls()

            map_col, side_col = st.columns([3, 2])
            with map_col:
                output = render_map(
                    st.session_state.markers,
                    st.session_state.map_view,
                    st.session_state.placing_marker,
                )
            if map_state.handle_map_click(st.session_state, output.get("last_clicked")):
                st.rerun()
            if map_state.select_marker_at(
                st.session_state,
                output.get("last_object_clicked"),
                output.get("last_object_clicked_tooltip"),
            ):
                st.rerun()

            with side_col:
                self._render_side_panel()
        except Exception as e:
            st.error(str(e))
