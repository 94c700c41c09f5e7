import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from bson import ObjectId


TWILLINGATE_RESULT = {
    "place_id": 298471234,
    "display_name": "Twillingate, Newfoundland and Labrador, Canada",
    "lat": "49.6488",
    "lon": "-54.7596",
}


@pytest.fixture
def twillingate_payload():
    return [dict(TWILLINGATE_RESULT)]


@pytest.fixture
def marker_doc():
    return {
        "_id": ObjectId("65f0c0ffee00000000000001"),
        "title": "Cape Spear Lighthouse",
        "description": "Most easterly point in North America.",
        "lat": 47.5237,
        "lng": -52.6193,
        "created_at": datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc),
        "photo_urls": ["https://bucket.s3.amazonaws.com/publicPosts/x/1.jpg"],
        "reviews": [
            {
                "text": "Windy but worth it.",
                "name": "Jill",
                "created_at": datetime(2026, 6, 2, 8, 30, tzinfo=timezone.utc),
            }
        ],
    }


@pytest.fixture
def make_upload():
    def _make(name: str, data: bytes = b"\xff\xd8jpeg", mime: str = "image/jpeg"):
        upload = MagicMock()
        upload.name = name
        upload.type = mime
        upload.getvalue.return_value = data
        upload.seek.return_value = None
        return upload

    return _make
