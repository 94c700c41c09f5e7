import re
from datetime import datetime
from html import escape
from typing import Optional

from models.models import DraftLocation, Marker
from utils.constants import UNTITLED_MARKER


def draft_label(draft: DraftLocation) -> str:
    return draft.label or f"Lat {draft.lat:.4f}, Lng {draft.lng:.4f}"


def format_review_date(value: Optional[datetime]) -> str:
    if not value:
        return ""
    return value.strftime("%Y-%m-%d")


def marker_title(marker: Marker) -> str:
    return marker.title or UNTITLED_MARKER


def popup_html(marker: Marker, max_reviews: int = 3) -> str:
    parts = [f"<h4>{escape(marker_title(marker))}</h4>"]
    if marker.description:
        parts.append(f"<p>{escape(marker.description)}</p>")
    for index, url in enumerate(marker.photo_urls):
        parts.append(
            f'<img src="{escape(url)}" alt="{escape(marker_title(marker))} photo '
            f'{index + 1}" width="110" loading="lazy"/>'
        )
    if marker.reviews:
        for review in marker.reviews[-max_reviews:]:
            parts.append(
                f"<p><b>{escape(review.name)}</b>: {escape(review.text)}</p>"
            )
    else:
        parts.append("<p><i>No reviews yet.</i></p>")
    return "".join(parts)


MARKER_ID_PATTERN = re.compile(r'data-marker-id="([^"]+)"')


def marker_tooltip(marker: Marker) -> str:
    return (
        f'<span data-marker-id="{escape(marker.id)}">'
        f"{escape(marker_title(marker))}</span>"
    )


def marker_id_from_tooltip(tooltip: Optional[str]) -> Optional[str]:
    match = MARKER_ID_PATTERN.search(tooltip or "")
    return match.group(1) if match else None
