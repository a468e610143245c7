"""Style expression builders and default paint/layout options.

Expressions are nested lists in the map library's expression grammar and are
passed through to the renderer untouched. All functions here are pure.

Examples:
    get_column("name")                               -> ["get", "name"]
    get_column_boolean("open", "green", "red")       -> ["case", ["boolean", ["get", "open"], False], "green", "red"]
    get_column_group("kind", {"a": "#f00"})          -> ["match", ["get", "kind"], "a", "#f00", "#cccccc"]
    get_column_step_colours("v", [10], ["r", "g"])   -> ["step", ["get", "v"], "r", 10, "g"]
"""

from collections.abc import Mapping, Sequence
from typing import Any

from toro.constants import LayoutConfig, PaintConfig
from toro.core.serialize import to_json_value
from toro.errors import ArityMismatchError

DEFAULT_GROUP_VALUE = "#cccccc"


def get_column(column_name: str) -> list[Any]:
    """Read a feature property."""
    return ["get", column_name]


def get_column_boolean(column_name: str, true_value: Any, false_value: Any) -> list[Any]:
    """Pick true_value or false_value by a boolean property (missing counts as False)."""
    return ["case", ["boolean", get_column(column_name), False], true_value, false_value]


def get_column_group(
    column_name: str,
    group_values: Mapping[Any, Any],
    default_value: Any = DEFAULT_GROUP_VALUE,
) -> list[Any]:
    """Map property values to outputs with a lookup table.

    Pairs keep the mapping's insertion order. Keys are stringified because the
    renderer compares them against string property values.
    """
    expr: list[Any] = ["match", get_column(column_name)]
    for key, value in group_values.items():
        expr.extend([str(key), value])
    expr.append(default_value)
    return expr


def get_column_group_colours(
    column_name: str,
    group_colours: Mapping[Any, str],
    default_colour: str = DEFAULT_GROUP_VALUE,
) -> list[Any]:
    return get_column_group(column_name, group_colours, default_colour)


def get_column_step_colours(column_name: str, breaks: Sequence[Any], colours: Sequence[Any]) -> list[Any]:
    """Colour a numeric property by thresholds.

    colours[0] applies below breaks[0], colours[i + 1] from breaks[i] upwards.

    Raises:
        ArityMismatchError: If len(colours) != len(breaks) + 1
    """
    breaks = list(to_json_value(breaks))
    colours = list(to_json_value(colours))
    if len(colours) != len(breaks) + 1:
        raise ArityMismatchError(breaks=len(breaks), colours=len(colours))

    expr: list[Any] = ["step", get_column(column_name), colours[0]]
    for threshold, colour in zip(breaks, colours[1:]):
        expr.extend([threshold, colour])
    return expr


# Short names
column = get_column
boolean_switch = get_column_boolean
group_lookup = get_column_group
step_colours = get_column_step_colours


def get_paint_options(layer_type: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a paint dict for a layer type from friendly option names.

    Recognized options (merged over PaintConfig.DEFAULTS): colour, opacity,
    outline_colour, outline_opacity, line_width, circle_radius, line_dash.
    Values may themselves be style expressions.

    Example:
        get_paint_options("circle", {"colour": "red", "circle_radius": 8})
    """
    opts = {**PaintConfig.DEFAULTS, **(options or {})}
    paint: dict[str, Any] = {}

    if layer_type in PaintConfig.COLOURED_TYPES:
        paint[f"{layer_type}-color"] = opts["colour"]
        paint[f"{layer_type}-opacity"] = opts["opacity"]

    if layer_type == "circle":
        paint["circle-radius"] = opts["circle_radius"]
        paint["circle-stroke-color"] = opts["outline_colour"]
        paint["circle-stroke-opacity"] = opts["outline_opacity"]
        paint["circle-stroke-width"] = opts["line_width"]
    elif layer_type == "line":
        paint["line-width"] = opts["line_width"]
        paint["line-dasharray"] = opts["line_dash"]
    elif layer_type == "fill":
        paint["fill-outline-color"] = opts["outline_colour"]
    elif layer_type == "symbol":
        paint["icon-opacity"] = opts["opacity"]
        paint["text-color"] = opts["colour"]

    return to_json_value(paint)


def get_layout_options(layer_type: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a layout dict for a layer type from friendly option names.

    Only line and symbol layers have layout options; other types get {}.
    text-field is included only when text_field is given.
    """
    opts = {**LayoutConfig.DEFAULTS, **(options or {})}
    layout: dict[str, Any] = {}

    if layer_type == "line":
        layout["line-cap"] = opts["line_cap"]
        layout["line-join"] = opts["line_join"]
    elif layer_type == "symbol":
        layout["icon-allow-overlap"] = opts["icon_allow_overlap"]
        layout["icon-image"] = opts["icon_image"]
        layout["icon-size"] = opts["icon_size"]
        layout["icon-anchor"] = opts["icon_anchor"]
        layout["icon-offset"] = opts["icon_offset"]
        layout["icon-rotate"] = opts["icon_rotate"]
        layout["icon-flip-horizontal"] = opts["icon_flip_horizontal"]
        layout["text-font"] = [opts["text_font"]]
        layout["text-size"] = opts["text_size"]
        if opts["text_field"] is not None:
            layout["text-field"] = opts["text_field"]

    return to_json_value(layout)
