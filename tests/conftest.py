"""Shared pytest fixtures for toro tests.

Provides RecordingSession (a transport test double) and map handles for both
modes. Streamlit is never started: live handles get a RecordingSession and
StreamlitSession is exercised against a plain dict.

All handles use the element id "map1", so synthesized control ids end in
"-map1".
"""

from typing import Any

import geopandas as gpd
import pytest
from shapely.geometry import Point, Polygon

from toro.core.target import MapProxy, MapWidget, create_map

MAP_ID = "map1"


# =============================================================================
# TRANSPORT DOUBLE
# =============================================================================


class RecordingSession:
    """Session that records every custom message instead of delivering it."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, dict[str, Any]]] = []

    def send_custom_message(self, type: str, message: dict[str, Any]) -> None:
        self.messages.append((type, message))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.messages]

    @property
    def last(self) -> tuple[str, dict[str, Any]]:
        return self.messages[-1]


# =============================================================================
# HANDLES
# =============================================================================


@pytest.fixture
def widget() -> MapWidget:
    """Pending map with element id map1."""
    return create_map(element_id=MAP_ID)


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()


@pytest.fixture
def proxy(session: RecordingSession) -> MapProxy:
    """Live map map1 recording its messages in `session`."""
    return MapProxy(id=MAP_ID, session=session)


@pytest.fixture
def sessionless_proxy() -> MapProxy:
    """Live handle created outside any session; every call is a logged no-op."""
    return MapProxy(id=MAP_ID)


# =============================================================================
# GEODATA
# =============================================================================


@pytest.fixture
def towns_gdf() -> gpd.GeoDataFrame:
    """Three points with a name and population, in WGS84."""
    return gpd.GeoDataFrame(
        {"name": ["Auckland", "Wellington", "Dunedin"], "population": [1_700_000, 215_000, 135_000]},
        geometry=[Point(174.76, -36.85), Point(174.78, -41.29), Point(170.50, -45.87)],
        crs="EPSG:4326",
    )


@pytest.fixture
def geometry_only_gdf() -> gpd.GeoDataFrame:
    """Two polygons without attribute columns."""
    return gpd.GeoDataFrame(
        geometry=[
            Polygon([(0, 0), (1, 0), (1, 1), (0, 1)]),
            Polygon([(2, 2), (3, 2), (3, 3), (2, 3)]),
        ],
        crs="EPSG:4326",
    )


@pytest.fixture
def clicked_feature_event() -> dict[str, Any]:
    """Feature-click payload as sent by the browser runtime."""
    return {
        "layerId": "towns-circle",
        "properties": {"name": "Wellington", "population": 215000},
        "geometry": {"type": "Point", "coordinates": [174.78, -41.29]},
        "time": 1718000000000,
    }
