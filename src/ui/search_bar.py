import logging
from typing import Callable, List, Tuple

import streamlit as st
from streamlit_searchbox import st_searchbox

from clients.geocoding_client import GeocodingClient
from models.models import Place
from ui.net_action import net_action
from utils.constants import Keys, Label, SEARCH_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class SearchBar:
    """Place search: debounced autocomplete plus an explicit submit."""

    def __init__(self, geocoding_client: GeocodingClient):
        self.geocoding_client = geocoding_client

    def _suggestions(self, query: str) -> List[Tuple[str, Place]]:
        return [
            (place.display_name, place)
            for place in self.geocoding_client.suggest(query)
        ]

    def render_autocomplete(self) -> Place | None:
        return st_searchbox(
            self._suggestions,
            placeholder=Label.SEARCH_PLACEHOLDER.value,
            key=Keys.SEARCH_BOX.value,
            debounce=SEARCH_DEBOUNCE_MS,
            clear_on_submit=False,
        )

    def render_submit(self) -> Place | None:
        with st.form("place_search_form", clear_on_submit=False, border=False):
            query = st.text_input(
                Label.SEARCH_BUTTON.value,
                key=Keys.SEARCH_QUERY.value,
                placeholder=Label.SEARCH_PLACEHOLDER.value,
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button(Label.SEARCH_BUTTON.value)
        if not submitted or not query.strip():
            return None
        with net_action("Searching..."):
            place = self.geocoding_client.search_first(query)
        if place is None:
            st.info("No matches found.")
        return place

    def render(self, on_place_selected: Callable[[Place], None]) -> None:
        picked = self.render_autocomplete()
        # The component keeps returning its last pick on every rerun.
        if picked is not None and picked != st.session_state.get("last_search_pick"):
            st.session_state["last_search_pick"] = picked
            on_place_selected(picked)
        try:
            submitted = self.render_submit()
        except Exception as e:
            logger.warning(f"Place search failed: {e}")
            st.error(str(e))
            return
        if submitted is not None:
            on_place_selected(submitted)
