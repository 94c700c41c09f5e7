import httpx
import pytest

from clients.geocoding_client import GeocodingClient
from models.models import DraftLocation, Marker, Place
from ui import map_state
from utils.map_utils import marker_tooltip


@pytest.fixture
def state():
    return {
        "markers": [],
        "map_view": map_state.default_view(),
        "draft_location": None,
        "placing_marker": False,
        "last_map_click": None,
        "last_marker_click": None,
        "selected_marker_id": None,
    }


def test_search_result_recenters_map_at_zoom_16(state, twillingate_payload):
    http = httpx.Client(
        base_url="https://nominatim.test",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json=twillingate_payload)
        ),
    )
    place = GeocodingClient(http_client=http).search_first("Twillingate")

    map_state.select_place(state, place)

    view = state["map_view"]
    assert (view.lat, view.lng, view.zoom) == (place.lat, place.lng, 16)
    assert state["draft_location"] is None


def test_search_result_while_placing_seeds_draft(state):
    state["placing_marker"] = True
    place = Place(display_name="Bonavista", lat=48.65, lng=-53.11)

    map_state.select_place(state, place)

    assert state["draft_location"] == DraftLocation(
        lat=48.65, lng=-53.11, label="Bonavista"
    )
    assert state["placing_marker"] is False


def test_placing_mode_click_creates_unlabelled_draft(state):
    map_state.toggle_placing(state)

    created = map_state.handle_map_click(state, {"lat": 49.0, "lng": -54.0})

    assert created is True
    assert state["draft_location"] == DraftLocation(lat=49.0, lng=-54.0)
    assert state["draft_location"].label is None
    assert state["placing_marker"] is False


def test_click_outside_placing_mode_is_ignored(state):
    assert map_state.handle_map_click(state, {"lat": 49.0, "lng": -54.0}) is False
    assert state["draft_location"] is None


def test_stale_click_is_not_reused_after_toggling(state):
    map_state.handle_map_click(state, {"lat": 49.0, "lng": -54.0})
    map_state.toggle_placing(state)

    assert map_state.handle_map_click(state, {"lat": 49.0, "lng": -54.0}) is False
    assert state["draft_location"] is None
    assert state["placing_marker"] is True


def test_reset_view_returns_to_st_johns(state):
    state["map_view"] = map_state.default_view().model_copy(update={"zoom": 4})
    map_state.reset_view(state)
    view = state["map_view"]
    assert (view.lat, view.lng, view.zoom) == (47.5615, -52.7126, 11)


def test_cancel_draft(state):
    state["draft_location"] = DraftLocation(lat=49.0, lng=-54.0)
    map_state.cancel_draft(state)
    assert state["draft_location"] is None


def test_upsert_marker_replaces_existing(state):
    first = Marker(id="m1", title="Old", lat=47.0, lng=-53.0)
    state["markers"] = [first]

    map_state.upsert_marker(state, first.model_copy(update={"title": "New"}))
    map_state.upsert_marker(state, Marker(id="m2", title="Other", lat=48.0, lng=-54.0))

    assert [(m.id, m.title) for m in state["markers"]] == [("m1", "New"), ("m2", "Other")]


def test_marker_click_selects_marker_once(state):
    state["markers"] = [Marker(id="m1", title="Fogo", lat=49.7, lng=-54.2)]

    picked = map_state.select_marker_at(state, {"lat": 49.7, "lng": -54.2})
    assert picked.id == "m1"
    assert map_state.selected_marker(state).id == "m1"

    state["selected_marker_id"] = None
    assert map_state.select_marker_at(state, {"lat": 49.7, "lng": -54.2}) is None
    assert map_state.selected_marker(state) is None


def test_markers_sharing_a_coordinate_resolve_by_tooltip_id(state):
    first = Marker(id="m1", title="Fogo Island Inn", lat=49.7, lng=-54.2)
    second = Marker(id="m2", title="Brimstone Head", lat=49.7, lng=-54.2)
    state["markers"] = [first, second]
    position = {"lat": 49.7, "lng": -54.2}

    picked = map_state.select_marker_at(state, position, marker_tooltip(second))
    assert picked.id == "m2"

    picked = map_state.select_marker_at(state, position, marker_tooltip(first))
    assert picked.id == "m1"
    assert map_state.selected_marker(state).id == "m1"
