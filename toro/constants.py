"""Configuration constants for toro.

All defaults and wire names are centralized here. The browser runtime reads
the camelCase names verbatim, so changing a value in MessageName,
ControlIdTemplate or a payload key breaks compatibility with it.

Classes:
    MapConfig: Default map style, view and widget options
    TileConfig: Basemap tile identifiers and display labels
    PositionConfig: Valid control positions
    PanelConfig: Control panel defaults (explicit and implicit creation)
    ControlConfig: Default labels/positions for standalone controls
    DrawConfig: Draw control defaults
    AnimationConfig: Timeline and speed control defaults
    PaintConfig: Default paint options per layer type
    LayoutConfig: Default layout options per layer type
    FilterConfig: Filter string operators
    ExportConfig: Map image export defaults
    ComponentConfig: Streamlit component declaration
    MessageName: Custom message names understood by the browser runtime
    ControlIdTemplate: Control ids synthesized by the browser runtime
"""

from pathlib import Path

# Package root directory (where toro/ lives)
PACKAGE_DIR = Path(__file__).parent


class MapConfig:
    """Default map style, view and widget options."""

    DEFAULT_STYLE = "light-grey"
    DEFAULT_CENTER = (174, -41)  # (lon, lat) - New Zealand
    DEFAULT_ZOOM = 2
    DEFAULT_WIDTH = "100%"
    DEFAULT_HEIGHT_PX = 600

    # Merged under user options by create_map(); keys are camelCase on the wire
    DEFAULT_OPTIONS = {
        "minZoom": 2,
        "maxZoom": 18,
        "clusterColour": "#808080",
        "loadedTiles": ["light-grey", "satellite"],
        "initialTileLayer": None,
        "backgroundColour": "#D0CFD4",
        "enable3D": False,
        "initialLoadedLayers": None,
        "spinnerWhileBusy": False,
        "busyLoaderBgColour": "rgba(0, 0, 0, 0.2)",
        "busyLoaderColour": "white",
        "initialLoaderBgColour": "white",
        "initialLoaderColour": "black",
    }


class TileConfig:
    """Basemap tile identifiers and their display labels."""

    LABELS = {
        "natgeo": "National Geographic",
        "satellite": "Satellite",
        "topo": "Topographic",
        "terrain": "Terrain",
        "streets": "Streets",
        "shaded": "Shaded",
        "light-grey": "Light Grey",
    }
    OPTIONS = list(LABELS.keys())


class PositionConfig:
    """Corner positions accepted by the map library's addControl."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    VALID = (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)


class PanelConfig:
    """Control panel defaults.

    Explicit add_control_panel() calls default to a non-collapsible panel.
    Panels created implicitly by adding a group or control to an unknown
    panel id use IMPLICIT_OPTIONS instead.
    """

    DEFAULT_POSITION = PositionConfig.BOTTOM_LEFT
    DEFAULT_DIRECTION = "column"
    DIRECTIONS = ("column", "row")

    IMPLICIT_OPTIONS = {
        "title": None,
        "position": PositionConfig.BOTTOM_LEFT,
        "collapsible": True,
        "collapsed": False,
        "direction": "column",
        "customControls": [],
    }


class ControlConfig:
    """Defaults for standalone controls."""

    DEFAULT_POSITION = PositionConfig.TOP_RIGHT
    CURSOR_POSITION = PositionConfig.BOTTOM_LEFT
    CURSOR_LONG_LABEL = "Lng"
    CURSOR_LAT_LABEL = "Lat"

    CLUSTER_TOGGLE_LABEL = "Toggle Clustering"
    VISIBILITY_TOGGLE_LABEL = "Toggle Layer"
    LAYER_SELECTOR_NONE_ID = "none"
    LAYER_SELECTOR_NONE_LABEL = "None"

    GRID_COLOUR = "#000000"


class DrawConfig:
    """Draw control defaults."""

    CONTROL_ID = "draw_control"
    MODES = ("polygon", "trash")
    VALID_MODES = ("polygon", "trash", "line", "point")  # Others are dropped by the runtime
    ACTIVE_COLOUR = "#0FB3CE"
    INACTIVE_COLOUR = "#0FB3CE"


class AnimationConfig:
    """Timeline and speed control defaults."""

    TIMELINE_POSITION = PositionConfig.BOTTOM_LEFT
    TIMELINE_MAX_TICKS = 3  # Labeled ticks beyond this overlap

    SPEED_VALUES = (0.5, 1, 2)
    SPEED_LABELS = ("Slow", "Normal", "Fast")
    SPEED_DEFAULT_INDEX = 1  # 0-based, "Normal"


class PaintConfig:
    """Default paint options merged under user options by get_paint_options()."""

    DEFAULTS = {
        "colour": "grey",
        "opacity": 1,
        "outline_colour": "grey",
        "outline_opacity": 1,
        "line_width": 1,
        "circle_radius": 5,
        "line_dash": [0, 1],  # No dash
    }
    COLOURED_TYPES = ("fill", "circle", "line")


class LayoutConfig:
    """Default layout options merged under user options by get_layout_options()."""

    DEFAULTS = {
        "line_cap": "round",
        "line_join": "round",
        "icon_image": "",
        "icon_size": 1,
        "icon_anchor": "bottom",
        "icon_offset": [0, 0],
        "icon_allow_overlap": True,
        "icon_rotate": 0,
        "icon_flip_horizontal": False,
        "text_font": "Open Sans Regular",
        "text_field": None,
        "text_size": 12,
    }


class FilterConfig:
    """Filter string parsing.

    Operators are tried in this order so that two-character operators are
    never split by a one-character prefix (">=" before ">").
    """

    OPERATORS = ("==", "!=", ">=", "<=", ">", "<")
    COMBINATOR = "all"


class ExportConfig:
    """Map image export defaults."""

    FORMAT = "png"
    WIDTH_PX = 800
    HEIGHT_PX = 600


class ComponentConfig:
    """Streamlit component declaration for the browser runtime."""

    NAME = "toro_map"
    DEFAULT_ELEMENT_ID = "map"  # Used when neither create_map() nor render_map() names the widget
    BUILD_DIR = PACKAGE_DIR / "frontend" / "build"
    DEV_URL: str | None = None  # e.g. "http://localhost:3001" while developing the bundle

    # st.session_state key holding {element_id: [queued messages]}
    OUTBOX_STATE_KEY = "_toro_outbox"
    # st.session_state key prefix for the last delivered click per element
    LAST_CLICK_STATE_KEY = "_toro_last_click_"


class MessageName:
    """Custom message names dispatched to a live map."""

    # Sources
    ADD_MAP_SOURCE = "addMapSource"
    ADD_FEATURE_SERVER_SOURCE = "addFeatureServerSource"
    ADD_IMAGE_SOURCE = "addImageSource"
    UPDATE_SOURCE_DATA = "updateSourceData"
    # Pending-only, never sent; named for log messages
    ADD_TILES_FROM_MAP_SERVER = "addTilesFromMapServer"
    ADD_TILES_FROM_WMS = "addTilesFromWms"

    # Layers
    ADD_LAYER = "addLayer"
    HIDE_LAYER = "hideLayer"
    SHOW_LAYER = "showLayer"
    SET_SELECTED_TILES = "setSelectedTiles"
    TOGGLE_CLUSTERING = "toggleClustering"
    SET_PAINT_PROP = "setPaintProp"
    SET_LAYOUT_PROP = "setLayoutProp"
    ADD_LAT_LNG_GRID = "addLatLngGrid"
    TOGGLE_LAT_LNG_GRID = "toggleLatLngGrid"

    # View
    SET_MAP_ZOOM = "setMapZoom"
    SET_MAP_BOUNDS = "setMapBounds"

    # Controls
    ADD_CURSOR_COORDS_CONTROL = "addCursorCoordsControl"
    ADD_ZOOM_CONTROL = "addZoomControl"
    ADD_CUSTOM_CONTROL = "addCustomControl"
    ADD_DRAW = "addDraw"
    DELETE_DRAWN_SHAPE = "deleteDrawnShape"
    HIDE_DRAW_CONTROLS = "hideDrawControls"
    SHOW_DRAW_CONTROLS = "showDrawControls"
    TOGGLE_CONTROL = "toggleControl"
    REMOVE_CONTROL = "removeControl"
    ADD_TIMELINE_CONTROL = "addTimelineControlStandalone"
    ADD_SPEED_CONTROL = "addSpeedControlStandalone"
    ADD_TILE_SELECTOR_CONTROL = "addTileSelectorControlStandalone"
    ADD_LAYER_SELECTOR_CONTROL = "addLayerSelectorControlStandalone"
    ADD_CLUSTER_TOGGLE_CONTROL = "addClusterToggleControl"
    ADD_VISIBILITY_TOGGLE_CONTROL = "addVisibilityToggleControl"

    # Control panels
    ADD_CONTROL_PANEL = "addControlPanel"
    ADD_CONTROL_GROUP = "addControlGroup"
    REMOVE_CONTROL_GROUP = "removeControlGroup"
    ADD_CONTROL_TO_PANEL = "addControlToPanel"
    REMOVE_CONTROL_FROM_PANEL = "removeControlFromPanel"

    # Animation
    ADD_ROUTE = "addRoute"
    ANIMATE_ROUTE = "animateRoute"
    PAUSE_ROUTE = "pauseRoute"
    REMOVE_ROUTE = "removeRoute"

    # Export
    DOWNLOAD_MAP_IMAGE = "downloadMapImage"


class ControlIdTemplate:
    """Ids the browser runtime assigns to controls it creates.

    Formatted with map_id (the widget element id) and, for per-layer
    toggles, layer_id.
    """

    ZOOM = "zoom-control-{map_id}"
    CURSOR = "cursor-coords-{map_id}"
    DRAW = "draw-control-{map_id}"
    TIMELINE = "timeline-control-container-{map_id}"
    SPEED = "speed-control-{map_id}"
    TILE_SELECTOR = "tile-selector-{map_id}"
    LAYER_SELECTOR = "layer-selector-{map_id}"
    CLUSTER_TOGGLE = "cluster-toggle-{layer_id}-{map_id}"
    VISIBILITY_TOGGLE = "visibility-toggle-{layer_id}-{map_id}"
    CUSTOM = "{control_id}"

    # Default control_id for toggles when the caller gives none
    CLUSTER_TOGGLE_DEFAULT = "cluster-toggle-{layer_id}"
    VISIBILITY_TOGGLE_DEFAULT = "visibility-toggle-{layer_id}"
