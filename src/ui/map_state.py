"""Map interaction rules over a session-state mapping.

Every function takes the state mapping explicitly so the rules run the same
against `st.session_state` and a plain dict.
"""

from typing import List, MutableMapping, Optional

from models.models import DraftLocation, MapView, Marker, Place
from utils.constants import DEFAULT_ZOOM, PLACE_ZOOM, StJohns
from utils.map_utils import marker_id_from_tooltip

State = MutableMapping


def default_view() -> MapView:
    return MapView(lat=StJohns.LAT.value, lng=StJohns.LNG.value, zoom=DEFAULT_ZOOM)


def toggle_placing(state: State) -> None:
    state["placing_marker"] = not state.get("placing_marker", False)


def reset_view(state: State) -> None:
    state["map_view"] = default_view()


def select_place(state: State, place: Place) -> None:
    state["map_view"] = MapView(lat=place.lat, lng=place.lng, zoom=PLACE_ZOOM)
    if state.get("placing_marker"):
        state["draft_location"] = DraftLocation(
            lat=place.lat, lng=place.lng, label=place.display_name
        )
        state["placing_marker"] = False


def handle_map_click(state: State, click: Optional[dict]) -> bool:
    """Turn a new map click into a draft location while placing.

    Returns True when a draft was created. A click already seen in an
    earlier run is ignored.
    """
    if not click or click == state.get("last_map_click"):
        return False
    state["last_map_click"] = click
    if not state.get("placing_marker"):
        return False
    state["draft_location"] = DraftLocation(lat=click["lat"], lng=click["lng"])
    state["placing_marker"] = False
    return True


def cancel_draft(state: State) -> None:
    state["draft_location"] = None


def upsert_marker(state: State, marker: Marker) -> None:
    markers: List[Marker] = list(state.get("markers") or [])
    for i, existing in enumerate(markers):
        if existing.id == marker.id:
            markers[i] = marker
            break
    else:
        markers.append(marker)
    state["markers"] = markers


def select_marker_at(
    state: State, position: Optional[dict], tooltip: Optional[str] = None
) -> Optional[Marker]:
    """Select the clicked marker.

    Markers sharing a coordinate are told apart by the id carried in their
    tooltip; without one the first marker at the position wins.
    """
    if not position:
        return None
    click = {"position": position, "tooltip": tooltip}
    if click == state.get("last_marker_click"):
        return None
    state["last_marker_click"] = click

    candidates = [
        m
        for m in state.get("markers") or []
        if m.lat == position.get("lat") and m.lng == position.get("lng")
    ]
    marker_id = marker_id_from_tooltip(tooltip)
    marker = next((m for m in candidates if m.id == marker_id), None)
    if marker is None and candidates:
        marker = candidates[0]
    if marker is not None:
        state["selected_marker_id"] = marker.id
    return marker


def selected_marker(state: State) -> Optional[Marker]:
    marker_id = state.get("selected_marker_id")
    return next(
        (m for m in state.get("markers") or [] if m.id == marker_id), None
    )
