"""GeoJSON encoding of layer data and decoding of features sent back by the map.

Encoding accepts GeoJSON text, GeoJSON-like dicts, GeoDataFrame/GeoSeries and
any object exposing __geo_interface__ (shapely geometries). Frames in another
CRS are reprojected to WGS84 first, since the browser map works in lon/lat.

Decoding turns the feature payloads of map events into one-row
GeoDataFrames. Malformed payloads are logged and decode to None.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

import geopandas as gpd
from pyproj import CRS
from shapely.errors import ShapelyError

from toro.core.serialize import to_json_value

logger = logging.getLogger(__name__)

WGS84 = CRS.from_epsg(4326)


def to_wgs84(frame: gpd.GeoDataFrame | gpd.GeoSeries) -> gpd.GeoDataFrame | gpd.GeoSeries:
    """Reproject to EPSG:4326 if the frame carries another CRS."""
    if frame.crs is not None and not CRS.from_user_input(frame.crs).equals(WGS84):
        logger.debug(f"Reprojecting {frame.crs} to EPSG:4326")
        return frame.to_crs(WGS84)
    return frame


def with_feature_ids(frame: gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    """Give a geometry-only frame a 1-based `id` column so features can be styled by id."""
    if list(frame.columns) != [frame.geometry.name]:
        return frame
    frame = frame.copy()
    frame.insert(0, "id", range(1, len(frame) + 1))
    return frame


def to_geojson(data: Any) -> str:
    """Encode layer/source data as GeoJSON text.

    Raises:
        TypeError: If data has no GeoJSON representation
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (gpd.GeoDataFrame, gpd.GeoSeries)):
        return to_wgs84(data).to_json()
    if isinstance(data, Mapping):
        return json.dumps(to_json_value(dict(data)))
    if hasattr(data, "__geo_interface__"):
        return json.dumps(to_json_value(data.__geo_interface__))
    raise TypeError(f"Cannot encode {type(data).__name__} as GeoJSON")


def _frame_from_feature(feature: Mapping[str, Any]) -> gpd.GeoDataFrame:
    normalized = {
        "type": "Feature",
        "properties": feature.get("properties") or {},
        "geometry": feature["geometry"],
    }
    return gpd.GeoDataFrame.from_features([normalized], crs=WGS84)


def get_clicked_feature(clicked_feature: Mapping[str, Any] | None) -> gpd.GeoDataFrame | None:
    """Decode a feature-click event into a one-row GeoDataFrame.

    The event carries layerId, properties, geometry and a time stamp; the time
    stamp only forces change detection on repeated clicks and is dropped.

    Returns:
        GeoDataFrame with the feature properties, geometry and a layer_id
        column, or None for an empty or malformed event
    """
    if not clicked_feature or not isinstance(clicked_feature, Mapping):
        return None
    if not clicked_feature.get("geometry"):
        logger.warning(f"Clicked feature without geometry on layer {clicked_feature.get('layerId')!r}")
        return None

    try:
        frame = _frame_from_feature(clicked_feature)
    except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as e:
        logger.warning(f"Could not decode clicked feature: {e}")
        return None

    frame["layer_id"] = clicked_feature.get("layerId")
    return frame


def get_drawn_shape(shape_json: str | bytes | None) -> gpd.GeoDataFrame | None:
    """Decode a drawn-shape event (GeoJSON Feature text) into a one-row GeoDataFrame.

    The feature's top-level id (assigned by the draw tool) is copied into an
    `id` column; it is needed to delete the shape again with delete_drawn_shape().
    """
    if not shape_json:
        return None
    if not isinstance(shape_json, (str, bytes, bytearray)):
        logger.warning(f"Drawn shape must be GeoJSON text, got {type(shape_json).__name__}")
        return None

    try:
        feature = json.loads(shape_json)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Drawn shape is not valid JSON: {e}")
        return None
    if not isinstance(feature, dict) or not feature.get("geometry"):
        logger.warning("Drawn shape is not a GeoJSON Feature with a geometry")
        return None

    try:
        frame = _frame_from_feature(feature)
    except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as e:
        logger.warning(f"Could not decode drawn shape: {e}")
        return None

    frame["id"] = feature.get("id")
    return frame


# Short names
parse_clicked_feature = get_clicked_feature
parse_drawn_shape = get_drawn_shape
