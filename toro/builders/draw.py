"""Draw control: let users sketch polygons, lines and points on the map.

Drawn shapes come back through render_map() events (shape_created /
shape_deleted) and can be decoded with get_drawn_shape().
"""

import logging
from collections.abc import Sequence

from toro.builders.controls import add_control, remove_control_kind
from toro.constants import DrawConfig, MessageName, PositionConfig
from toro.core.target import MapTarget, dispatch
from toro.model.controls import ControlDescriptor, ControlKind, Placement

logger = logging.getLogger(__name__)


def add_draw_control(
    target: MapTarget,
    control_id: str = DrawConfig.CONTROL_ID,
    position: str = PositionConfig.TOP_RIGHT,
    modes: Sequence[str] = DrawConfig.MODES,
    active_colour: str = DrawConfig.ACTIVE_COLOUR,
    inactive_colour: str = DrawConfig.INACTIVE_COLOUR,
    mode_labels: dict[str, str] | None = None,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add the draw toolbar.

    Args:
        target: Map handle
        control_id: Id of the draw control
        position: Map corner
        modes: Toolbar buttons, any of "polygon", "line", "point", "trash"
        active_colour: Colour of the selected shape
        inactive_colour: Colour of other shapes
        mode_labels: Button tooltips per mode
        panel_id, section_title, group_id: Place the toolbar in a control panel
    """
    modes = list(modes)
    unknown = [m for m in modes if m not in DrawConfig.VALID_MODES]
    if unknown:
        logger.warning(f"Draw modes {unknown} are not supported and will not be shown")

    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.DRAW,
            options={
                "controlId": control_id,
                "modes": modes,
                "activeColour": active_colour,
                "inactiveColour": inactive_colour,
                "modeLabels": dict(mode_labels or {}),
            },
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_draw_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.DRAW, panel_id=panel_id)


def delete_drawn_shape(target: MapTarget, shape_id: str) -> MapTarget:
    """Delete one drawn shape (its id is in the shape_created event)."""
    return dispatch(target, MessageName.DELETE_DRAWN_SHAPE, {"shapeId": shape_id})


def hide_draw_controls(target: MapTarget) -> MapTarget:
    return dispatch(target, MessageName.HIDE_DRAW_CONTROLS, {})


def show_draw_controls(target: MapTarget) -> MapTarget:
    return dispatch(target, MessageName.SHOW_DRAW_CONTROLS, {})
