from typing import Any, Dict, List

import folium
from folium.plugins import MarkerCluster
from streamlit_folium import st_folium

from models.models import MapView, Marker
from utils.constants import Keys, NLBounds
from utils.map_utils import marker_tooltip, popup_html

PLACING_CURSOR_CSS = (
    "<style>.leaflet-container, .leaflet-interactive "
    "{cursor: crosshair !important;}</style>"
)


def build_map(markers: List[Marker], view: MapView, placing: bool) -> folium.Map:
    """A tile map locked to Newfoundland and Labrador with clustered markers."""
    fmap = folium.Map(
        location=[view.lat, view.lng],
        zoom_start=view.zoom,
        tiles="OpenStreetMap",
        max_bounds=True,
        min_lat=NLBounds.SOUTH.value,
        max_lat=NLBounds.NORTH.value,
        min_lon=NLBounds.WEST.value,
        max_lon=NLBounds.EAST.value,
        max_bounds_viscosity=1.0,
        zoom_control=True,
        scroll_wheel_zoom=True,
    )
    cluster = MarkerCluster(name="markers").add_to(fmap)
    for marker in markers:
        folium.Marker(
            location=[marker.lat, marker.lng],
            tooltip=marker_tooltip(marker),
            popup=folium.Popup(popup_html(marker), max_width=260),
        ).add_to(cluster)
    if placing:
        fmap.get_root().header.add_child(folium.Element(PLACING_CURSOR_CSS))
    return fmap


def render_map(markers: List[Marker], view: MapView, placing: bool) -> Dict[str, Any]:
    """Render the map and return the latest map and marker clicks."""
    output = st_folium(
        build_map(markers, view, placing),
        center=[view.lat, view.lng],
        zoom=view.zoom,
        key=Keys.MAP.value,
        height=620,
        use_container_width=True,
        returned_objects=[
            "last_clicked",
            "last_object_clicked",
            "last_object_clicked_tooltip",
        ],
    )
    return output or {}
