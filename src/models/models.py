from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from utils.constants import ANONYMOUS_NAME


class Place(BaseModel):
    place_id: str = ""
    display_name: str
    lat: float
    lng: float


class DraftLocation(BaseModel):
    lat: float
    lng: float
    label: Optional[str] = None


class MapView(BaseModel):
    lat: float
    lng: float
    zoom: int


class Review(BaseModel):
    text: str
    name: str = ANONYMOUS_NAME
    created_at: Optional[datetime] = None

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> str:
        return (value or "").strip() or ANONYMOUS_NAME


class Marker(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    lat: float
    lng: float
    created_at: Optional[datetime] = None
    photo_urls: List[str] = Field(default_factory=list)
    reviews: List[Review] = Field(default_factory=list)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_to_empty_text(cls, value: Any) -> str:
        return value or ""

    @field_validator("photo_urls", "reviews", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> List:
        return value or []

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Marker":
        data = {k: v for k, v in doc.items() if k != "_id"}
        return cls(id=str(doc["_id"]), **data)


class NewMarker(BaseModel):
    title: str
    description: str = ""
    lat: float
    lng: float
    initial_review: Optional[Review] = None


class UserProfile(BaseModel):
    uid: str
    username: str
    email: str = ""
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "UserProfile":
        data = {k: v for k, v in doc.items() if k != "_id"}
        return cls(uid=str(doc["_id"]), **data)


class Identity(BaseModel):
    uid: str
    email: str = ""
    provider: str = "password"
    id_token: Optional[str] = None
