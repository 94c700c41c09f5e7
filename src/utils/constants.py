from enum import Enum

APP_TITLE = "NL Travel Map"

SEARCH_DEBOUNCE_MS = 300
SUGGESTION_LIMIT = 5
REGION_QUERY_SUFFIX = ", Newfoundland and Labrador"

DEFAULT_ZOOM = 11
PLACE_ZOOM = 16
ANONYMOUS_NAME = "Anonymous"
UNTITLED_MARKER = "Untitled Spot"
PHOTO_PREFIX = "publicPosts"
PHOTO_TYPES = ["jpg", "jpeg", "png", "gif", "webp"]
MAX_UPLOAD_WORKERS = 4


class NLBounds(Enum):
    NORTH = 51.2
    SOUTH = 46.5
    WEST = -59.5
    EAST = -52.2


class StJohns(Enum):
    LAT = 47.5615
    LNG = -52.7126


# Nominatim expects left,top,right,bottom
NL_VIEWBOX = (
    f"{NLBounds.WEST.value},{NLBounds.NORTH.value},"
    f"{NLBounds.EAST.value},{NLBounds.SOUTH.value}"
)


class Label(Enum):
    SEARCH_PLACEHOLDER = "Search Newfoundland..."
    SEARCH_BUTTON = "Search"
    PLACE_MARKER = "Place a marker"
    PLACING_MARKER = "Click map to drop marker"
    RESET_VIEW = "Back to St. John's"
    LOCATION_NAME = "Location name"
    NOTES = "Notes about this place"
    REVIEWER_NAME = "Your name (optional)"
    INITIAL_REVIEW = "Add a review (optional)"
    REVIEW = "Add a review"
    PHOTOS = "Photos"
    SAVE_MARKER = "Save Marker"
    CANCEL = "Cancel"
    POST_REVIEW = "Post Review"
    USERNAME = "Username"
    EMAIL = "Email"
    PASSWORD = "Password"
    SIGN_IN = "Log In"
    SIGN_UP = "Sign Up"
    SIGN_OUT = "Sign out"
    SUBMIT_BUTTON = "Submit"
    MANDATORY_FIELD_MARKER = "*"


class Keys(Enum):
    SEARCH_BOX = "place_searchbox"
    SEARCH_QUERY = "search_query"
    MAP = "nl_map"
    MARKER_TITLE = "draft_title"
    MARKER_DESCRIPTION = "draft_description"
    MARKER_REVIEWER = "draft_reviewer"
    MARKER_REVIEW = "draft_review_text"
    MARKER_PHOTOS = "draft_photos"
    REVIEW_NAME = "review_name"
    REVIEW_TEXT = "review_text"
    AUTH_MODE = "auth_mode"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    FEDERATED_USERNAME = "federated_username"


class AuthMode(Enum):
    SIGN_IN = "Sign in"
    REGISTER = "Register"


class Pages(Enum):
    MAP = {
        "key": "map",
        "title": ":material/map: Map",
    }
    LOGIN = {
        "key": "login",
        "title": ":material/login: Sign in",
    }
