from typing import Optional

import streamlit as st

from models.models import Marker
from ui.net_action import net_action
from utils.constants import Keys, Label
from utils.map_utils import format_review_date, marker_title
from workflows.review_workflow import ReviewWorkflow


class MarkerDetail:
    """Photos and reviews of one marker, with a review form."""

    def __init__(self, review_workflow: ReviewWorkflow):
        self.review_workflow = review_workflow

    def _render_photos(self, marker: Marker):
        if not marker.photo_urls:
            return
        columns = st.columns(2)
        for index, url in enumerate(marker.photo_urls):
            columns[index % 2].image(
                url, caption=f"{marker_title(marker)} photo {index + 1}"
            )

    def _render_reviews(self, marker: Marker):
        st.markdown("**Reviews**")
        if not marker.reviews:
            st.caption("No reviews yet.")
            return
        for review in marker.reviews:
            with st.container(border=True):
                st.markdown(f"**{review.name}**")
                st.write(review.text)
                if review.created_at:
                    st.caption(format_review_date(review.created_at))

    def render(self, marker: Marker) -> Optional[Marker]:
        """Render the marker; return the updated marker after a new review."""
        st.subheader(marker_title(marker))
        if marker.description:
            st.write(marker.description)
        self._render_photos(marker)
        self._render_reviews(marker)

        with st.form(f"review_form_{marker.id}", clear_on_submit=True):
            name = st.text_input(Label.REVIEWER_NAME.value, key=Keys.REVIEW_NAME.value)
            text = st.text_area(Label.REVIEW.value, key=Keys.REVIEW_TEXT.value, height=80)
            submitted = st.form_submit_button(Label.POST_REVIEW.value)

        if not submitted:
            return None
        if not text.strip():
            st.warning("Write something before posting a review.")
            return None
        try:
            with net_action("Saving review..."):
                return self.review_workflow.run(
                    {"marker": marker, "text": text, "name": name}
                )
        except Exception as e:
            st.error(str(e))
            return None
