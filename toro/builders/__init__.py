"""Builders: every public operation on a map handle.

Each builder takes a MapWidget (pending) or MapProxy (live), applies itself
through toro.core.target.dispatch and returns the same handle:

    widget = create_map(element_id="demo")
    add_source(widget, "parks", parks_gdf)
    add_fill_layer(widget, "parks-fill", "parks", paint=get_paint_options("fill", {"colour": "green"}))

Modules:
- sources: Data sources and raster tiles
- layers: Layers, basemap, grid, live paint/layout changes
- views: Zoom and bounds
- controls: Generic add_control/remove_control_kind, zoom, cursor, custom
- draw: Draw toolbar and drawn shapes
- control_panel: Panels and groups
- layer_controls: Tile/layer selectors, cluster and visibility toggles
- animation_controls: Timeline and speed controls
- animation: Animated routes
- export: Map image download
"""

from toro.builders.animation import add_route, animate_route, pause_route, remove_route
from toro.builders.animation_controls import (
    add_speed_control,
    add_timeline_control,
    remove_speed_control,
    remove_timeline_control,
)
from toro.builders.control_panel import (
    add_control_group,
    add_control_panel,
    add_control_to_panel,
    remove_control_from_panel,
    remove_control_group,
)
from toro.builders.controls import (
    add_control,
    add_cursor_coords_control,
    add_custom_control,
    add_zoom_control,
    remove_control,
    remove_control_kind,
    remove_cursor_coords_control,
    remove_zoom_control,
    toggle_control,
)
from toro.builders.draw import (
    add_draw_control,
    delete_drawn_shape,
    hide_draw_controls,
    remove_draw_control,
    show_draw_controls,
)
from toro.builders.export import download_map_image
from toro.builders.layer_controls import (
    add_cluster_toggle,
    add_layer_selector_control,
    add_tile_selector_control,
    add_visibility_toggle,
    remove_cluster_toggle,
    remove_layer_selector_control,
    remove_tile_selector_control,
    remove_visibility_toggle,
)
from toro.builders.layers import (
    add_circle_layer,
    add_fill_layer,
    add_lat_lng_grid,
    add_layer,
    add_line_layer,
    add_symbol_layer,
    get_tile_options,
    hide_layer,
    set_layout_property,
    set_paint_property,
    set_tile_layer,
    show_layer,
    toggle_clustering,
    toggle_lat_lng_grid,
)
from toro.builders.sources import (
    add_feature_server_source,
    add_image,
    add_source,
    add_tiles_from_map_server,
    add_tiles_from_wms,
    set_source_data,
)
from toro.builders.views import set_bounds, set_zoom

__all__ = [
    # Sources
    "add_source",
    "add_feature_server_source",
    "add_image",
    "set_source_data",
    "add_tiles_from_map_server",
    "add_tiles_from_wms",
    # Layers
    "add_layer",
    "add_fill_layer",
    "add_circle_layer",
    "add_line_layer",
    "add_symbol_layer",
    "add_lat_lng_grid",
    "toggle_lat_lng_grid",
    "show_layer",
    "hide_layer",
    "set_tile_layer",
    "get_tile_options",
    "toggle_clustering",
    "set_paint_property",
    "set_layout_property",
    # Views
    "set_zoom",
    "set_bounds",
    # Controls
    "add_control",
    "remove_control_kind",
    "toggle_control",
    "remove_control",
    "add_zoom_control",
    "remove_zoom_control",
    "add_cursor_coords_control",
    "remove_cursor_coords_control",
    "add_custom_control",
    # Draw
    "add_draw_control",
    "remove_draw_control",
    "delete_drawn_shape",
    "hide_draw_controls",
    "show_draw_controls",
    # Control panels
    "add_control_panel",
    "add_control_group",
    "remove_control_group",
    "add_control_to_panel",
    "remove_control_from_panel",
    # Layer controls
    "add_tile_selector_control",
    "remove_tile_selector_control",
    "add_layer_selector_control",
    "remove_layer_selector_control",
    "add_cluster_toggle",
    "remove_cluster_toggle",
    "add_visibility_toggle",
    "remove_visibility_toggle",
    # Animation controls
    "add_timeline_control",
    "remove_timeline_control",
    "add_speed_control",
    "remove_speed_control",
    # Animation
    "add_route",
    "animate_route",
    "pause_route",
    "remove_route",
    # Export
    "download_map_image",
]
