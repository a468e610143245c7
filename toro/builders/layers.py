"""Layer builders and live layer/basemap manipulation.

Functions:
    add_layer (+ add_fill_layer, add_circle_layer, add_line_layer, add_symbol_layer)
    add_lat_lng_grid, toggle_lat_lng_grid
    show_layer, hide_layer
    set_tile_layer, get_tile_options
    toggle_clustering
    set_paint_property, set_layout_property
"""

from typing import Any

import geopandas as gpd

from toro.constants import ControlConfig, MessageName, TileConfig
from toro.core.expressions import get_layout_options, get_paint_options
from toro.core.filters import get_layer_filter
from toro.core.geojson import to_geojson, with_feature_ids
from toro.core.target import MapTarget, MapWidget, dispatch


def _layer_source(source: Any) -> Any:
    """A source id (str), an inline source spec (dict), or a frame inlined as GeoJSON."""
    if isinstance(source, gpd.GeoDataFrame):
        return {"type": "geojson", "data": to_geojson(with_feature_ids(source)), "generateId": True}
    return source


def add_layer(
    target: MapTarget,
    id: str,
    source: str | dict[str, Any] | gpd.GeoDataFrame,
    type: str = "fill",
    paint: dict[str, Any] | None = None,
    layout: dict[str, Any] | None = None,
    popup_column: str | None = None,
    hover_column: str | None = None,
    can_cluster: bool = False,
    under_id: str | None = None,
    filter: list | str | None = None,
) -> MapTarget:
    """Add a layer rendering a source.

    Layers render in the order they are added. under_id places the layer
    directly below an existing layer; it is not checked here.

    Args:
        target: Map handle
        id: Unique layer id
        source: Source id, inline source spec, or GeoDataFrame
        type: Layer type ("fill", "circle", "line", "symbol", ...)
        paint: Paint properties, defaults to get_paint_options(type)
        layout: Layout properties, defaults to get_layout_options(type)
        popup_column: Feature property shown in a popup on click
        hover_column: Feature property shown on hover
        can_cluster: Layer may be clustered (see toggle_clustering)
        under_id: Id of the layer to insert this layer before
        filter: Filter expression, or a filter string for get_layer_filter()
    """
    if isinstance(filter, str):
        filter = get_layer_filter(filter)

    layer = {
        "id": id,
        "type": type,
        "source": _layer_source(source),
        "paint": paint if paint is not None else get_paint_options(type),
        "layout": layout if layout is not None else get_layout_options(type),
        "popupColumn": popup_column,
        "hoverColumn": hover_column,
        "canCluster": can_cluster,
        "filter": filter,
        "beforeId": under_id,
    }

    def pending(widget: MapWidget) -> None:
        widget.config.upsert_layer(layer)

    return dispatch(target, MessageName.ADD_LAYER, {"layer": layer}, pending)


def add_fill_layer(target: MapTarget, id: str, source: Any, **kwargs: Any) -> MapTarget:
    return add_layer(target, id, source, type="fill", **kwargs)


def add_circle_layer(target: MapTarget, id: str, source: Any, **kwargs: Any) -> MapTarget:
    return add_layer(target, id, source, type="circle", **kwargs)


def add_line_layer(target: MapTarget, id: str, source: Any, **kwargs: Any) -> MapTarget:
    return add_layer(target, id, source, type="line", **kwargs)


def add_symbol_layer(target: MapTarget, id: str, source: Any, **kwargs: Any) -> MapTarget:
    return add_layer(target, id, source, type="symbol", **kwargs)


def add_lat_lng_grid(target: MapTarget, grid_colour: str = ControlConfig.GRID_COLOUR) -> MapTarget:
    """Overlay a latitude/longitude grid. A pending map keeps the first grid only."""
    grid = {"gridColour": grid_colour}

    def pending(widget: MapWidget) -> None:
        widget.config.set_once("latLngGrid", grid)

    return dispatch(target, MessageName.ADD_LAT_LNG_GRID, grid, pending)


def toggle_lat_lng_grid(target: MapTarget, show: bool = True) -> MapTarget:
    return dispatch(target, MessageName.TOGGLE_LAT_LNG_GRID, {"show": show})


def show_layer(target: MapTarget, layer_id: str) -> MapTarget:
    return dispatch(target, MessageName.SHOW_LAYER, {"layerId": layer_id})


def hide_layer(target: MapTarget, layer_id: str) -> MapTarget:
    return dispatch(target, MessageName.HIDE_LAYER, {"layerId": layer_id})


def set_tile_layer(target: MapTarget, tiles: str | list[str]) -> MapTarget:
    """Select the basemap tiles (one of get_tile_options())."""

    def pending(widget: MapWidget) -> None:
        widget.config.overwrite("initialTileLayer", tiles)

    return dispatch(target, MessageName.SET_SELECTED_TILES, {"tiles": tiles}, pending)


def get_tile_options() -> list[str]:
    """Basemap tile ids understood by the map runtime."""
    return list(TileConfig.OPTIONS)


def toggle_clustering(target: MapTarget, layer_id: str, cluster: bool = False) -> MapTarget:
    return dispatch(target, MessageName.TOGGLE_CLUSTERING, {"layerId": layer_id, "cluster": cluster})


def set_paint_property(target: MapTarget, layer_id: str, property_name: str, value: Any) -> MapTarget:
    """Set one paint property (e.g. "fill-color") on a live layer."""
    return dispatch(
        target,
        MessageName.SET_PAINT_PROP,
        {"layerId": layer_id, "property": property_name, "value": value},
    )


def set_layout_property(target: MapTarget, layer_id: str, property_name: str, value: Any) -> MapTarget:
    """Set one layout property (e.g. "visibility") on a live layer."""
    return dispatch(
        target,
        MessageName.SET_LAYOUT_PROP,
        {"layerId": layer_id, "property": property_name, "value": value},
    )
