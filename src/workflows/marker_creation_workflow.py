import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from streamlit.runtime.uploaded_file_manager import UploadedFile

from clients.persistence_client import PersistenceClient
from clients.s3_client import S3Client
from models.models import DraftLocation, Marker, NewMarker, Review
from utils.constants import Label
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)

MARKER_CREATION_STEP_COUNT = 3


class MarkerCreationWorkflow(Workflow):
    """Persist a marker, upload its photos, then attach the photo URLs.

    The document is written first so the upload path can be keyed by its id.
    A failed upload leaves the document in place without photos.
    """

    def __init__(self, persistence_client: PersistenceClient, s3_client: S3Client):
        self.persistence_client = persistence_client
        self.s3_client = s3_client

    def _update_progress_tracker(self, tracker: Any, step: int, label: str):
        if tracker is not None:
            tracker.progress(step / MARKER_CREATION_STEP_COUNT, text=label)

    def _coerce_input(self, payload: Dict) -> Tuple[NewMarker, List[UploadedFile], Any]:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        draft = payload.get("draft_location")
        if not isinstance(draft, DraftLocation):
            raise ValueError("A draft location is required")
        title = (payload.get("title") or "").strip()
        if not title:
            raise ValueError(f"{Label.LOCATION_NAME.value} is required")
        review_text = (payload.get("review_text") or "").strip()
        initial_review = (
            Review(text=review_text, name=payload.get("reviewer_name"))
            if review_text
            else None
        )
        new_marker = NewMarker(
            title=title,
            description=(payload.get("description") or "").strip(),
            lat=draft.lat,
            lng=draft.lng,
            initial_review=initial_review,
        )
        return new_marker, list(payload.get("photos") or []), payload.get(
            "progress_tracker"
        )

    def _local_copy(
        self, marker_id: str, new_marker: NewMarker, photo_urls: List[str]
    ) -> Marker:
        now = datetime.now(timezone.utc)
        reviews = []
        if new_marker.initial_review:
            reviews.append(new_marker.initial_review.model_copy(update={"created_at": now}))
        return Marker(
            id=marker_id,
            title=new_marker.title,
            description=new_marker.description,
            lat=new_marker.lat,
            lng=new_marker.lng,
            created_at=now,
            photo_urls=photo_urls,
            reviews=reviews,
        )

    def run(self, input: Dict) -> Marker:
        new_marker, photos, tracker = self._coerce_input(input)

        self._update_progress_tracker(tracker, 0, "saving marker...")
        marker_id = self.persistence_client.create_marker(new_marker)

        self._update_progress_tracker(tracker, 1, "uploading photos...")
        photo_urls = self.s3_client.upload_photos(marker_id, photos)

        self._update_progress_tracker(tracker, 2, "attaching photos...")
        if photo_urls:
            self.persistence_client.set_photo_urls(marker_id, photo_urls)

        saved = self.persistence_client.get_marker(marker_id)
        if saved is None:
            logger.warning(f"Marker {marker_id} not readable after save")
            saved = self._local_copy(marker_id, new_marker, photo_urls)
        self._update_progress_tracker(tracker, 3, "completed")
        return saved
