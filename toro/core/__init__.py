"""Core machinery shared by every builder.

- target: MapWidget / MapProxy handles and the pending/live dispatcher
- transport: Session protocol and the Streamlit session outbox
- serialize: JSON normalization and snake_case -> camelCase names
- expressions: Style expression builders, paint/layout option helpers
- filters: Filter string parsing
- geojson: GeoJSON encoding and event feature decoding
"""

from toro.core.target import (
    MapProxy,
    MapTarget,
    MapWidget,
    create_map,
    dispatch,
    is_live,
    map_id,
    map_proxy,
)
from toro.core.transport import Session, StreamlitSession, drain_outbox

__all__ = [
    # Handles
    "MapWidget",
    "MapProxy",
    "MapTarget",
    "create_map",
    "map_proxy",
    "map_id",
    "dispatch",
    "is_live",
    # Transport
    "Session",
    "StreamlitSession",
    "drain_outbox",
]
