"""Streamlit rendering of a map widget and decoding of its events.

The browser side is a Streamlit custom component (toro_map). Each rerun
render_map() hands it the first-render payload of the MapWidget plus every
live message queued for that widget since the previous run, and returns the
component's latest event dict decoded into a MapEvents.

Classes:
- MapEvents: Decoded inbound events

Functions:
- render_map: Render a MapWidget and return its events
- parse_events: Decode a raw component value (testable without Streamlit)
"""

import functools
import json
import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

import geopandas as gpd
import streamlit as st
import streamlit.components.v1 as components

from toro.constants import ComponentConfig, MapConfig
from toro.core.geojson import get_clicked_feature, get_drawn_shape
from toro.core.target import MapWidget
from toro.core.transport import drain_outbox

logger = logging.getLogger(__name__)

BOUNDS_KEYS = ("xmin", "ymin", "xmax", "ymax")


@functools.lru_cache(maxsize=1)
def _get_component():
    """Declare the component on first use (dev server if configured, else the packaged build)."""
    if ComponentConfig.DEV_URL:
        return components.declare_component(ComponentConfig.NAME, url=ComponentConfig.DEV_URL)
    return components.declare_component(ComponentConfig.NAME, path=str(ComponentConfig.BUILD_DIR))


@dataclass
class MapEvents:
    """Events reported by a rendered map during the last interaction.

    Attributes:
        loaded: True once the map finished its first load
        zoom: Current zoom level
        bounds: Current view as {xmin, ymin, xmax, ymax}
        clicked_feature: Newly clicked feature (one-row GeoDataFrame with layer_id), None if no new click
        shape_created: Last drawn shape (one-row GeoDataFrame with id)
        shape_deleted: Id of the last deleted drawn shape
    """

    loaded: bool = False
    zoom: float | None = None
    bounds: dict[str, float] | None = None
    clicked_feature: gpd.GeoDataFrame | None = None
    shape_created: gpd.GeoDataFrame | None = None
    shape_deleted: str | None = None

    @property
    def has_click(self) -> bool:
        return self.clicked_feature is not None

    @staticmethod
    def empty() -> "MapEvents":
        """Return events of a map that has reported nothing yet."""
        return MapEvents()


def _parse_bounds(raw: Any) -> dict[str, float] | None:
    if not isinstance(raw, Mapping) or not all(k in raw for k in BOUNDS_KEYS):
        return None
    try:
        return {k: float(raw[k]) for k in BOUNDS_KEYS}
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed bounds: {raw}")
        return None


def _parse_zoom(raw: Any) -> float | None:
    if raw is None:
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed zoom: {raw!r}")
        return None


def _get_click_id(feature: Mapping[str, Any]) -> str:
    """Generate unique ID for click deduplication."""
    time = feature.get("time")
    if time is not None:
        return f"time_{time}"
    geometry = json.dumps(feature.get("geometry"), sort_keys=True)
    return f"{feature.get('layerId', '')}_{geometry}"


def parse_events(event: Mapping[str, Any] | None, key: str, state: MutableMapping[str, Any]) -> MapEvents:
    """Decode the component value into MapEvents.

    A feature click is reported once: the component keeps returning its last
    value on every rerun, so the click id is remembered in state under a
    per-widget key and a repeated id yields clicked_feature=None.

    Args:
        event: Raw component value, None before the first event
        key: Element id of the widget
        state: Session store for click deduplication
    """
    if not event:
        return MapEvents.empty()

    events = MapEvents(
        loaded=bool(event.get("loaded", False)),
        zoom=_parse_zoom(event.get("zoom")),
        bounds=_parse_bounds(event.get("bounds")),
        shape_created=get_drawn_shape(event.get("shape_created")),
        shape_deleted=event.get("shape_deleted"),
    )

    raw_click = event.get("feature_click")
    if isinstance(raw_click, Mapping) and raw_click:
        last_click_key = f"{ComponentConfig.LAST_CLICK_STATE_KEY}{key}"
        click_id = _get_click_id(raw_click)
        if click_id != state.get(last_click_key):
            state[last_click_key] = click_id
            events.clicked_feature = get_clicked_feature(raw_click)
            logger.debug(f"Feature click on {key}: layer={raw_click.get('layerId')}")

    return events


def render_map(widget: MapWidget, key: str | None = None) -> MapEvents:
    """Render a map and return its latest events.

    Call once per rerun. Builders applied to map_proxy(<same id>) since the
    previous run are delivered to the browser by this call.

    Args:
        widget: The map to render
        key: Element id, defaults to the widget's element_id

    Returns:
        MapEvents for this rerun
    """
    element_id = key or widget.id
    messages = drain_outbox(element_id, st.session_state)

    event = _get_component()(
        x=widget.to_payload(),
        id=element_id,
        width=widget.width,
        height=widget.height or MapConfig.DEFAULT_HEIGHT_PX,
        messages=messages,
        key=element_id,
        default=None,
    )
    return parse_events(event, element_id, st.session_state)
