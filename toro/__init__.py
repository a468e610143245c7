"""toro - Interactive map widgets for Streamlit, built the same way before and after render.

Every builder works on either handle:
- MapWidget (create_map): a map that has not been rendered yet. Builders
  accumulate its first-render configuration.
- MapProxy (map_proxy): a map that is already on screen. Builders send
  one-way messages that the browser applies in place.

Modules:
    core: Handles, dispatcher, transport, style/filter expressions, GeoJSON
    model: Pending configuration, control panels, control kind registry
    builders: Sources, layers, views, controls, panels, routes, export
    ui: Streamlit custom component and inbound events

Example:
    import toro

    widget = toro.create_map(element_id="demo", zoom=5)
    toro.add_source(widget, "parks", parks_gdf)
    toro.add_fill_layer(widget, "parks-fill", "parks")
    toro.add_zoom_control(widget)
    events = toro.render_map(widget)

    if st.button("Hide parks"):
        toro.hide_layer(toro.map_proxy("demo"), "parks-fill")
"""

from toro.builders import *  # noqa: F403
from toro.builders import __all__ as _builders_all
from toro.core import MapProxy, MapTarget, MapWidget, create_map, map_proxy
from toro.core.expressions import (
    boolean_switch,
    column,
    get_column,
    get_column_boolean,
    get_column_group,
    get_column_group_colours,
    get_column_step_colours,
    get_layout_options,
    get_paint_options,
    group_lookup,
    step_colours,
)
from toro.core.filters import get_layer_filter, parse_filter
from toro.core.geojson import (
    get_clicked_feature,
    get_drawn_shape,
    parse_clicked_feature,
    parse_drawn_shape,
    to_geojson,
)
from toro.errors import ArityMismatchError, ToroError
from toro.ui import MapEvents, render_map

__all__ = [
    # Handles
    "MapWidget",
    "MapProxy",
    "MapTarget",
    "create_map",
    "map_proxy",
    # Rendering
    "render_map",
    "MapEvents",
    # Expressions
    "get_column",
    "get_column_boolean",
    "get_column_group",
    "get_column_group_colours",
    "get_column_step_colours",
    "column",
    "boolean_switch",
    "group_lookup",
    "step_colours",
    "get_paint_options",
    "get_layout_options",
    # Filters
    "get_layer_filter",
    "parse_filter",
    # GeoJSON
    "to_geojson",
    "get_clicked_feature",
    "get_drawn_shape",
    "parse_clicked_feature",
    "parse_drawn_shape",
    # Errors
    "ToroError",
    "ArityMismatchError",
    *_builders_all,
]
