from typing import Callable, Optional

import streamlit as st

from models.models import DraftLocation, Marker
from ui.net_action import net_action
from utils.constants import Keys, Label, PHOTO_TYPES
from utils.map_utils import draft_label
from workflows.marker_creation_workflow import MarkerCreationWorkflow

FIELD_KEYS = (
    Keys.MARKER_TITLE.value,
    Keys.MARKER_DESCRIPTION.value,
    Keys.MARKER_REVIEWER.value,
    Keys.MARKER_REVIEW.value,
    Keys.MARKER_PHOTOS.value,
)


class MarkerForm:
    """Collects a new marker for the current draft location."""

    def __init__(self, marker_creation_workflow: MarkerCreationWorkflow):
        self.marker_creation_workflow = marker_creation_workflow

    @staticmethod
    def _clear_fields():
        # Only after a save or cancel; a failed save keeps the input.
        for key in FIELD_KEYS:
            st.session_state.pop(key, None)

    def render(
        self, draft: Optional[DraftLocation], on_cancel: Callable[[], None]
    ) -> Optional[Marker]:
        if draft is None:
            return None

        with st.container(border=True):
            st.subheader("Add a marker")
            st.caption(draft_label(draft))
            with st.form("marker_form", clear_on_submit=False):
                title = st.text_input(
                    Label.LOCATION_NAME.value + Label.MANDATORY_FIELD_MARKER.value,
                    key=Keys.MARKER_TITLE.value,
                )
                description = st.text_area(
                    Label.NOTES.value, key=Keys.MARKER_DESCRIPTION.value, height=80
                )
                reviewer = st.text_input(
                    Label.REVIEWER_NAME.value, key=Keys.MARKER_REVIEWER.value
                )
                review_text = st.text_area(
                    Label.INITIAL_REVIEW.value, key=Keys.MARKER_REVIEW.value, height=80
                )
                photos = st.file_uploader(
                    Label.PHOTOS.value,
                    type=PHOTO_TYPES,
                    accept_multiple_files=True,
                    key=Keys.MARKER_PHOTOS.value,
                )
                save_col, cancel_col = st.columns(2)
                submitted = save_col.form_submit_button(
                    Label.SAVE_MARKER.value, type="primary", use_container_width=True
                )
                cancelled = cancel_col.form_submit_button(
                    Label.CANCEL.value, use_container_width=True
                )

            if cancelled:
                self._clear_fields()
                on_cancel()
                st.rerun()
            if not submitted:
                return None
            if not title.strip():
                st.error(f"{Label.LOCATION_NAME.value} is required.")
                return None

            try:
                tracker = st.progress(0)
                with net_action("Saving marker..."):
                    marker = self.marker_creation_workflow.run(
                        {
                            "draft_location": draft,
                            "title": title,
                            "description": description,
                            "reviewer_name": reviewer,
                            "review_text": review_text,
                            "photos": photos or [],
                            "progress_tracker": tracker,
                        }
                    )
                self._clear_fields()
                return marker
            except Exception as e:
                st.error(str(e))
                return None
