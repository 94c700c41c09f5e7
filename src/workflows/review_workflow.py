import logging
from datetime import datetime, timezone
from typing import Dict, List, Tuple

from clients.persistence_client import PersistenceClient
from models.models import Marker, Review
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class ReviewWorkflow(Workflow):
    def __init__(self, persistence_client: PersistenceClient):
        self.persistence_client = persistence_client

    def _coerce_input(self, payload: Dict) -> Tuple[Marker, Review]:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        marker = payload.get("marker")
        if not isinstance(marker, Marker):
            raise ValueError("marker is required")
        text = (payload.get("text") or "").strip()
        if not text:
            raise ValueError("Review text is required")
        return marker, Review(text=text, name=payload.get("name"))

    def run(self, input: Dict) -> Marker:
        marker, review = self._coerce_input(input)
        self.persistence_client.append_review(marker.id, review)
        refreshed = self.persistence_client.get_marker(marker.id)
        if refreshed is not None:
            return refreshed
        logger.warning(f"Marker {marker.id} not readable after review")
        reviews: List[Review] = [
            *marker.reviews,
            review.model_copy(update={"created_at": datetime.now(timezone.utc)}),
        ]
        return marker.model_copy(update={"reviews": reviews})
