"""Tests for source builders.

Tests: add_source, add_feature_server_source, add_image, set_source_data,
add_tiles_from_map_server, add_tiles_from_wms
Focus: Live payloads, pending slots, pending-only and live-only operations
"""

import json
import logging
from typing import TYPE_CHECKING

import geopandas as gpd
import pytest

from toro.builders.sources import (
    add_feature_server_source,
    add_image,
    add_source,
    add_tiles_from_map_server,
    add_tiles_from_wms,
    set_source_data,
)
from toro.core.target import MapProxy, MapWidget

if TYPE_CHECKING:
    from conftest import RecordingSession


class TestAddSource:
    """GeoJSON and typed sources."""

    def test_live_payload(self, proxy: MapProxy, session: "RecordingSession", towns_gdf: gpd.GeoDataFrame) -> None:
        assert add_source(proxy, "towns", towns_gdf, cluster=True) is proxy
        name, message = session.last
        assert name == "addMapSource"
        assert message["id"] == "map1"
        assert message["sourceId"] == "towns"
        options = message["sourceOptions"]
        assert options["type"] == "geojson"
        assert options["cluster"] is True
        assert len(json.loads(options["data"])["features"]) == 3

    def test_non_geojson_data_passes_through(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_source(proxy, "dem", "https://example.com/dem.json", type="raster-dem")
        assert session.last[1]["sourceOptions"]["data"] == "https://example.com/dem.json"

    def test_pending_upserts(self, widget: MapWidget, towns_gdf: gpd.GeoDataFrame) -> None:
        add_source(widget, "towns", towns_gdf)
        add_source(widget, "other", towns_gdf.head(1))
        add_source(widget, "towns", towns_gdf.head(2))
        assert widget.config.source_ids == ["towns", "other"]
        data = json.loads(widget.config.sources[0]["sourceOptions"]["data"])
        assert len(data["features"]) == 2


class TestFeatureServer:
    """ArcGIS FeatureServer sources."""

    def test_live(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_feature_server_source(proxy, "https://host/FeatureServer", "fs")
        assert session.last == (
            "addFeatureServerSource",
            {"id": "map1", "sourceUrl": "https://host/FeatureServer", "sourceId": "fs"},
        )

    def test_pending_stores_query_url(self, widget: MapWidget) -> None:
        add_feature_server_source(widget, "https://host/FeatureServer/", "fs")
        assert widget.config.sources == [
            {
                "sourceId": "fs",
                "sourceOptions": {
                    "type": "geojson",
                    "data": "https://host/FeatureServer/0/query?where=1=1&outFields=*&f=geojson",
                },
            }
        ]


class TestImagesAndData:
    """Images and live data replacement."""

    def test_add_image_both_modes(self, widget: MapWidget, proxy: MapProxy, session: "RecordingSession") -> None:
        add_image(widget, "pin", "https://example.com/pin.png")
        add_image(widget, "pin", "https://example.com/pin2.png")
        assert widget.config.image_sources == [{"imageId": "pin", "imageUrl": "https://example.com/pin2.png"}]

        add_image(proxy, "pin", "https://example.com/pin.png")
        assert session.last == (
            "addImageSource",
            {"id": "map1", "imageId": "pin", "imageUrl": "https://example.com/pin.png"},
        )

    def test_set_source_data_live(
        self, proxy: MapProxy, session: "RecordingSession", towns_gdf: gpd.GeoDataFrame
    ) -> None:
        set_source_data(proxy, "towns", towns_gdf)
        name, message = session.last
        assert name == "updateSourceData"
        assert message["sourceId"] == "towns"
        assert json.loads(message["data"])["type"] == "FeatureCollection"

    def test_set_source_data_pending_is_noop(
        self, widget: MapWidget, towns_gdf: gpd.GeoDataFrame, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert set_source_data(widget, "towns", towns_gdf) is widget
        assert widget.config.sources == []
        assert "updateSourceData" in caplog.text


class TestTiles:
    """Raster tiles, pending only."""

    def test_map_server_tiles(self, widget: MapWidget) -> None:
        add_tiles_from_map_server(widget, "https://host/MapServer", "hillshade", min_zoom=3)
        assert widget.config.map_server_tiles == [
            {"tileId": "hillshade", "mapServiceUrl": "https://host/MapServer", "options": {"minZoom": 3}}
        ]

    def test_wms_as_image_layer(self, widget: MapWidget) -> None:
        add_tiles_from_wms(widget, "https://host/wms", "rain", as_image_layer=True)
        assert widget.config.image_layer_tiles[0]["tileId"] == "rain"
        assert widget.config.map_server_tiles == []

    def test_live_is_noop(self, proxy: MapProxy, session: "RecordingSession", caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert add_tiles_from_wms(proxy, "https://host/wms", "rain") is proxy
        assert session.messages == []
        assert "addTilesFromWms" in caplog.text
