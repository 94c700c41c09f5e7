import logging
from typing import Any, Dict, List, Optional

import httpx
import streamlit as st

from config.config import SETTINGS
from models.models import Place
from utils.constants import NL_VIEWBOX, REGION_QUERY_SUFFIX, SUGGESTION_LIMIT

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _get_http_client(base_url: str, user_agent: str, timeout: float) -> httpx.Client:
    return httpx.Client(
        base_url=base_url, headers={"User-Agent": user_agent}, timeout=timeout
    )


class GeocodingClient:
    """Place search over the Nominatim API, bounded to Newfoundland and Labrador."""

    def __init__(self, http_client: httpx.Client | None = None):
        self.http = http_client or _get_http_client(
            SETTINGS.geocoder_base_url,
            SETTINGS.geocoder_user_agent,
            SETTINGS.http_timeout_seconds,
        )

    def search(self, query: str, limit: int) -> List[Place]:
        response = self.http.get(
            "/search",
            params={
                "format": "json",
                "limit": limit,
                "bounded": 1,
                "viewbox": NL_VIEWBOX,
                "q": f"{query}{REGION_QUERY_SUFFIX}",
            },
        )
        response.raise_for_status()
        body = response.json()
        if not isinstance(body, list):
            raise ValueError(f"Unexpected geocoder response: {body!r}")
        return [self._to_place(r) for r in body]

    def suggest(self, query: str) -> List[Place]:
        """Autocomplete suggestions; any failure yields an empty list."""
        if not query or not query.strip():
            return []
        try:
            return self.search(query, limit=SUGGESTION_LIMIT)
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.warning(f"Suggestion lookup failed for {query!r}: {e}")
            return []

    def search_first(self, query: str) -> Optional[Place]:
        if not query or not query.strip():
            return None
        results = self.search(query, limit=1)
        return results[0] if results else None

    @staticmethod
    def _to_place(record: Dict[str, Any]) -> Place:
        if not isinstance(record, dict):
            raise ValueError(f"Malformed place record: {record!r}")
        try:
            lat, lng = float(record["lat"]), float(record["lon"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed place record: {record!r}") from e
        return Place(
            place_id=str(record.get("place_id") or ""),
            display_name=record.get("display_name") or "",
            lat=lat,
            lng=lng,
        )
