"""Source builders: named data feeds that layers render from.

Functions:
    add_source: GeoJSON (or other typed) source
    add_feature_server_source: ArcGIS FeatureServer queried as GeoJSON
    add_image: Image usable as a symbol icon
    set_source_data: Replace the data of a live GeoJSON source
    add_tiles_from_map_server: ArcGIS MapServer raster tiles (before first render)
    add_tiles_from_wms: WMS raster tiles (before first render)
"""

from typing import Any

from toro.constants import MessageName
from toro.core.geojson import to_geojson
from toro.core.serialize import to_camel_case
from toro.core.target import MapTarget, MapWidget, dispatch

FEATURE_SERVER_QUERY = "/0/query?where=1=1&outFields=*&f=geojson"


def _source_data(data: Any, type: str) -> Any:
    return to_geojson(data) if type == "geojson" else data


def add_source(
    target: MapTarget,
    source_id: str,
    data: Any,
    type: str = "geojson",
    cluster: bool = False,
) -> MapTarget:
    """Add a data source.

    Args:
        target: Map handle
        source_id: Unique source id, referenced by layers
        data: For "geojson", GeoJSON text, a GeoDataFrame, a GeoJSON dict or
            a geometry. Other types are passed through (e.g. a tile URL).
        type: Map library source type
        cluster: Cluster point features of this source
    """
    source_options = {"type": type, "data": _source_data(data, type), "cluster": cluster}
    source = {"sourceId": source_id, "sourceOptions": source_options}

    def pending(widget: MapWidget) -> None:
        widget.config.upsert_source(source)

    return dispatch(target, MessageName.ADD_MAP_SOURCE, source, pending)


def add_feature_server_source(target: MapTarget, source_url: str, source_id: str) -> MapTarget:
    """Add an ArcGIS FeatureServer as a GeoJSON source.

    A live map resolves the FeatureServer itself. A pending map stores the
    equivalent GeoJSON query URL as a plain source.
    """

    def pending(widget: MapWidget) -> None:
        widget.config.upsert_source(
            {
                "sourceId": source_id,
                "sourceOptions": {"type": "geojson", "data": f"{source_url.rstrip('/')}{FEATURE_SERVER_QUERY}"},
            }
        )

    return dispatch(
        target,
        MessageName.ADD_FEATURE_SERVER_SOURCE,
        {"sourceUrl": source_url, "sourceId": source_id},
        pending,
    )


def add_image(target: MapTarget, image_id: str, image_url: str) -> MapTarget:
    """Load an image under image_id for use as a symbol layer icon-image."""
    image = {"imageId": image_id, "imageUrl": image_url}

    def pending(widget: MapWidget) -> None:
        widget.config.upsert_image_source(image)

    return dispatch(target, MessageName.ADD_IMAGE_SOURCE, image, pending)


def set_source_data(target: MapTarget, source_id: str, data: Any, type: str = "geojson") -> MapTarget:
    """Replace the data of an existing source on a live map."""
    return dispatch(
        target,
        MessageName.UPDATE_SOURCE_DATA,
        {"sourceId": source_id, "data": _source_data(data, type)},
    )


def _add_tiles(
    target: MapTarget,
    message: str,
    url: str,
    tile_id: str,
    as_image_layer: bool,
    options: dict[str, Any],
) -> MapTarget:
    tiles = {
        "tileId": tile_id,
        "mapServiceUrl": url,
        "options": {to_camel_case(name): value for name, value in options.items()},
    }

    def pending(widget: MapWidget) -> None:
        widget.config.append_tiles(tiles, as_image_layer=as_image_layer)

    return dispatch(target, message, None, pending)


def add_tiles_from_map_server(
    target: MapTarget,
    url: str,
    tile_id: str,
    as_image_layer: bool = False,
    **options: Any,
) -> MapTarget:
    """Add raster tiles from an ArcGIS MapServer before the map is rendered.

    Args:
        url: MapServer root URL (tiles are read from <url>/tile/{z}/{y}/{x})
        tile_id: Unique id of the tile layer
        as_image_layer: Store as an image layer instead of a basemap tile set
        **options: Extra tile options, forwarded with camelCase names
    """
    return _add_tiles(target, MessageName.ADD_TILES_FROM_MAP_SERVER, url, tile_id, as_image_layer, options)


def add_tiles_from_wms(
    target: MapTarget,
    url: str,
    tile_id: str,
    as_image_layer: bool = False,
    **options: Any,
) -> MapTarget:
    """Add raster tiles from a WMS endpoint before the map is rendered."""
    return _add_tiles(target, MessageName.ADD_TILES_FROM_WMS, url, tile_id, as_image_layer, options)
