import streamlit as st
import folium
from folium.features import GeoJson, GeoJsonTooltip
import branca.colormap as cm
from streamlit_folium import st_folium
from typing import Optional, Dict, Any

from config import (
    COLOR_SCALE,
    COLOR_THRESHOLDS,
    DEFAULT_MAP_LOCATION,
    DEFAULT_ZOOM,
    MAP_TILES,
    NO_DATA_COLOR,
)
from formatting import one_decimal, parse_percent
from national_stats import Selection, state_value_for_year
from state_merger import extract_state_name

# --- Constants ---
LEGEND_MAX = 20
MAP_HEIGHT = 550
STATE_BORDER_WEIGHT = 1.5
COUNTY_BORDER_WEIGHT = 0.4

# --- Helper Functions ---

def get_color(value: float) -> str:
    """Returns the fill color for a prevalence percentage."""
    for threshold, color in zip(reversed(COLOR_THRESHOLDS[1:]), reversed(COLOR_SCALE[1:])):
        if value > threshold:
            return color
    return COLOR_SCALE[0]


def get_colormap() -> cm.StepColormap:
    """Creates and returns a branca colormap for the map legend."""
    return cm.StepColormap(
        colors=COLOR_SCALE,
        index=COLOR_THRESHOLDS + [LEGEND_MAX],
        vmin=COLOR_THRESHOLDS[0],
        vmax=LEGEND_MAX,
        caption="Diabetes Prevalence (%)",
    )


def feature_value(feature: Dict[str, Any], selection: Selection) -> Optional[float]:
    """The value a feature is colored by under the current selection."""
    properties = feature.get("properties") or {}
    if selection.view == "state":
        return state_value_for_year(properties, selection.year)
    return parse_percent(properties.get("diabetesPercent"))


def style_function(feature: Dict[str, Any], selection: Selection) -> Dict[str, Any]:
    """
    Applies styling to a GeoJSON feature based on its value for the selection.
    Handles missing data by applying a default color.
    """
    value = feature_value(feature, selection)
    return {
        'fillColor': get_color(value) if value is not None else NO_DATA_COLOR,
        'color': 'black',
        'weight': STATE_BORDER_WEIGHT if selection.view == "state" else COUNTY_BORDER_WEIGHT,
        'opacity': 1,
        'fillOpacity': 0.8 if selection.view == "state" else 0.85,
    }


def display_name(properties: Dict[str, Any], view: str) -> str:
    if view == "county":
        if properties.get("county"):
            return f"{properties['county']}, {properties.get('state', '')}"
        return str(properties.get("NAME", "Unknown county"))
    return extract_state_name(properties) or "Unknown state"


def prepare_display_collection(collection: Dict[str, Any], selection: Selection) -> Dict[str, Any]:
    """
    Copies the merged collection with `displayName`/`displayValue` properties
    for the tooltip. The merged data itself is never modified.
    """
    features = []
    for index, feature in enumerate(collection.get("features", [])):
        properties = feature.get("properties") or {}
        value = feature_value(feature, selection)
        if value is None:
            label = "N/A"
        elif selection.view == "state":
            label = f"{one_decimal(value)}% of adults in {selection.year}"
        else:
            label = f"{one_decimal(value)}% of adults"
        # folium needs a unique id per feature to apply per-feature styles
        features.append({
            **feature,
            "id": str(index),
            "properties": {
                **properties,
                "displayName": display_name(properties, selection.view),
                "displayValue": label,
            },
        })
    return {**collection, "features": features}

# --- Main Map Creation Function ---

def create_choropleth_map(collection: Dict[str, Any], selection: Selection) -> folium.Map:
    """
    Builds the folium choropleth for the selected view and year.

    Args:
        collection: A merged state or county FeatureCollection.
        selection: The view/year the map should show.

    Returns:
        The folium Map with the styled layer and legend attached.
    """
    display_collection = prepare_display_collection(collection, selection)

    m = folium.Map(location=DEFAULT_MAP_LOCATION, zoom_start=DEFAULT_ZOOM, tiles=MAP_TILES)
    m.add_child(get_colormap())

    tooltip = GeoJsonTooltip(
        fields=["displayName", "displayValue"],
        aliases=["", ""],
        labels=False,
        sticky=False,
        style="""
            background-color: #F0EFEF;
            border: 2px solid black;
            border-radius: 3px;
            box-shadow: 3px;
        """
    )

    GeoJson(
        display_collection,
        style_function=lambda feature: style_function(feature, selection),
        highlight_function=lambda feature: {'weight': 3, 'color': '#333', 'fillOpacity': 0.9},
        tooltip=tooltip,
        name=f"{selection.view}s",
    ).add_to(m)
    return m


def clicked_feature_index(map_output: Optional[Dict[str, Any]]) -> Optional[int]:
    """Index of the feature last clicked on the map, from the st_folium output."""
    if not map_output or not map_output.get("last_active_drawing"):
        return None
    feature_id = map_output["last_active_drawing"].get("id")
    try:
        return int(feature_id)
    except (TypeError, ValueError):
        return None


def display_map(collection: Optional[Dict[str, Any]], selection: Selection) -> Optional[int]:
    """
    Renders the map into the Streamlit page, or a static error when data is missing.

    Returns:
        The index of the last clicked feature in `collection`, or None.
    """
    if collection is None:
        st.error(
            "Error Loading Data: Could not load the diabetes data. "
            "Please check your connection and try again."
        )
        return None
    m = create_choropleth_map(collection, selection)
    map_output = st_folium(
        m,
        width="100%",
        height=MAP_HEIGHT,
        returned_objects=["last_active_drawing"],
        key=f"{selection.view}_map",
    )
    return clicked_feature_index(map_output)
