import logging
from typing import Any, Dict, List, Optional

import streamlit as st
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.database import Database

from config.config import SETTINGS
from models.models import Marker, NewMarker, Review, UserProfile

logger = logging.getLogger(__name__)

# Pipeline updates evaluate "$..." strings, so user text is wrapped in $literal.
SERVER_NOW = "$$NOW"


@st.cache_resource(show_spinner=False)
def _get_database(uri: str, database: str) -> Database:
    return MongoClient(uri, tz_aware=True)[database]


def _literal(value: Any) -> Dict[str, Any]:
    return {"$literal": value}


def _review_expression(review: Review) -> Dict[str, Any]:
    return {
        "text": _literal(review.text),
        "name": _literal(review.name),
        "created_at": SERVER_NOW,
    }


def _object_id(marker_id: str) -> ObjectId:
    try:
        return ObjectId(marker_id)
    except InvalidId as e:
        raise ValueError(f"Invalid marker id: {marker_id}") from e


class PersistenceClient:
    """Marker and user profile documents in MongoDB."""

    def __init__(self, db: Database | None = None):
        self.db = (
            db
            if db is not None
            else _get_database(SETTINGS.mongodb_uri, SETTINGS.mongodb_database)
        )
        self.markers = self.db[SETTINGS.markers_collection]
        self.users = self.db[SETTINGS.users_collection]

    def fetch_markers(self) -> List[Marker]:
        return [Marker.from_document(doc) for doc in self.markers.find()]

    def get_marker(self, marker_id: str) -> Optional[Marker]:
        doc = self.markers.find_one({"_id": _object_id(marker_id)})
        return Marker.from_document(doc) if doc else None

    def create_marker(self, marker: NewMarker) -> str:
        """Insert a marker with a server-side timestamp and return its id."""
        marker_id = ObjectId()
        reviews = (
            [_review_expression(marker.initial_review)]
            if marker.initial_review
            else []
        )
        self.markers.update_one(
            {"_id": marker_id},
            [
                {
                    "$set": {
                        "title": _literal(marker.title),
                        "description": _literal(marker.description),
                        "lat": _literal(marker.lat),
                        "lng": _literal(marker.lng),
                        "created_at": SERVER_NOW,
                        "photo_urls": _literal([]),
                        "reviews": reviews,
                    }
                }
            ],
            upsert=True,
        )
        logger.info(f"Created marker {marker_id} ({marker.title!r})")
        return str(marker_id)

    def set_photo_urls(self, marker_id: str, photo_urls: List[str]) -> None:
        self.markers.update_one(
            {"_id": _object_id(marker_id)}, {"$set": {"photo_urls": photo_urls}}
        )

    def append_review(self, marker_id: str, review: Review) -> None:
        self.markers.update_one(
            {"_id": _object_id(marker_id)},
            [
                {
                    "$set": {
                        "reviews": {
                            "$concatArrays": [
                                {"$ifNull": ["$reviews", []]},
                                [_review_expression(review)],
                            ]
                        }
                    }
                }
            ],
        )
        logger.info(f"Appended review to marker {marker_id}")

    def get_profile(self, uid: str) -> Optional[UserProfile]:
        doc = self.users.find_one({"_id": uid})
        return UserProfile.from_document(doc) if doc else None

    def create_profile(self, uid: str, username: str, email: str) -> UserProfile:
        self.users.update_one(
            {"_id": uid},
            [
                {
                    "$set": {
                        "username": _literal(username),
                        "email": _literal(email),
                        "created_at": SERVER_NOW,
                    }
                }
            ],
            upsert=True,
        )
        logger.info(f"Created profile for {uid} ({username!r})")
        profile = self.get_profile(uid)
        return profile or UserProfile(uid=uid, username=username, email=email)
