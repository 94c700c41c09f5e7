import os
from dataclasses import dataclass

from utils.load_secrets import load_env_vars


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str
    mongodb_database: str
    markers_collection: str
    users_collection: str
    aws_region: str
    s3_bucket: str
    identity_api_key: str
    identity_base_url: str
    geocoder_base_url: str
    geocoder_user_agent: str
    http_timeout_seconds: float
    federated_provider: str

    def __init__(self):
        load_env_vars()
        object.__setattr__(
            self,
            "mongodb_uri",
            os.getenv("MONGODB_URI", "mongodb://localhost:27017").strip(),
        )
        object.__setattr__(
            self, "mongodb_database", os.getenv("MONGODB_DATABASE", "nl_travel").strip()
        )
        object.__setattr__(
            self,
            "markers_collection",
            os.getenv("MARKERS_COLLECTION", "publicPosts").strip(),
        )
        object.__setattr__(
            self, "users_collection", os.getenv("USERS_COLLECTION", "users").strip()
        )
        object.__setattr__(
            self, "aws_region", os.getenv("AWS_REGION", "ca-central-1").strip()
        )
        object.__setattr__(
            self,
            "s3_bucket",
            os.getenv("S3_BUCKET_NAME", "nl-travel-map-photos").strip(),
        )
        object.__setattr__(
            self, "identity_api_key", os.getenv("IDENTITY_API_KEY", "").strip()
        )
        object.__setattr__(
            self,
            "identity_base_url",
            os.getenv(
                "IDENTITY_BASE_URL", "https://identitytoolkit.googleapis.com/v1"
            ).strip(),
        )
        object.__setattr__(
            self,
            "geocoder_base_url",
            os.getenv(
                "GEOCODER_BASE_URL", "https://nominatim.openstreetmap.org"
            ).strip(),
        )
        object.__setattr__(
            self,
            "geocoder_user_agent",
            os.getenv("GEOCODER_USER_AGENT", "nl-travel-map/0.1").strip(),
        )
        object.__setattr__(
            self,
            "http_timeout_seconds",
            float(os.getenv("HTTP_TIMEOUT_SECONDS", "10").strip()),
        )
        object.__setattr__(
            self, "federated_provider", os.getenv("FEDERATED_PROVIDER", "google").strip()
        )


SETTINGS = Settings()
