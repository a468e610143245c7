"""Generic control entry points and the basic map controls.

add_control() is the single path every control builder goes through:
- a descriptor placed in a panel is redirected to add_control_to_panel()
  with its kind tag and full options (pending and live alike)
- otherwise the kind's registry entry decides the live message and envelope,
  and the pending slot policy

remove_control_kind() resolves the id the browser runtime gave a control
(see ControlIdTemplate) and removes it, from its panel if panel_id is given.

Functions:
    add_control, remove_control_kind
    toggle_control, remove_control
    add_zoom_control, remove_zoom_control
    add_cursor_coords_control, remove_cursor_coords_control
    add_custom_control
"""

import logging
from typing import Any

from toro.builders.control_panel import add_control_to_panel, remove_control_from_panel
from toro.constants import ControlConfig, MessageName, PositionConfig
from toro.core.target import MapTarget, MapWidget, dispatch, map_id
from toro.model.controls import CONTROL_KINDS, ControlDescriptor, ControlKind, Placement

logger = logging.getLogger(__name__)


def add_control(target: MapTarget, descriptor: ControlDescriptor) -> MapTarget:
    """Add a control described by descriptor to a map or one of its panels."""
    spec = descriptor.spec
    placement = descriptor.placement
    options = {**descriptor.options, "position": placement.position, **placement.panel_fields()}

    if placement.in_panel:
        logger.debug(f"Adding {spec.tag} control to panel {placement.panel_id}")
        return add_control_to_panel(
            target,
            panel_id=placement.panel_id,
            control_type=spec.tag,
            control_options=options,
            section_title=placement.section_title,
            group_id=placement.group_id,
        )

    def pending(widget: MapWidget) -> None:
        widget.config.add_standalone_control(spec, options)

    return dispatch(target, spec.add_message, spec.envelope_payload(options), pending)


def remove_control_kind(
    target: MapTarget,
    kind: ControlKind | str,
    layer_id: str | None = None,
    panel_id: str | None = None,
) -> MapTarget:
    """Remove the control of a kind from a live map.

    Args:
        target: Map handle
        kind: ControlKind or its tag ("zoom", "cluster-toggle", ...)
        layer_id: Layer of a per-layer toggle
        panel_id: Panel holding the control, None for a standalone control
    """
    spec = CONTROL_KINDS[ControlKind(kind)]
    control_id = spec.control_id(map_id(target), layer_id=layer_id)
    if panel_id:
        return remove_control_from_panel(target, panel_id, control_id)
    return remove_control(target, control_id)


def toggle_control(target: MapTarget, control_id: str, show: bool = True) -> MapTarget:
    """Show or hide a control on a live map."""
    return dispatch(target, MessageName.TOGGLE_CONTROL, {"controlId": control_id, "show": show})


def remove_control(target: MapTarget, control_id: str) -> MapTarget:
    return dispatch(target, MessageName.REMOVE_CONTROL, {"controlId": control_id})


# =============================================================================
# Basic controls
# =============================================================================


def add_zoom_control(
    target: MapTarget,
    position: str = ControlConfig.DEFAULT_POSITION,
    control_options: dict[str, Any] | None = None,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add zoom in/out buttons. control_options go to the map library's navigation control."""
    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.ZOOM,
            options={"controlOptions": dict(control_options or {})},
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_zoom_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.ZOOM, panel_id=panel_id)


def add_cursor_coords_control(
    target: MapTarget,
    position: str = ControlConfig.CURSOR_POSITION,
    long_label: str = ControlConfig.CURSOR_LONG_LABEL,
    lat_label: str = ControlConfig.CURSOR_LAT_LABEL,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Show the coordinates under the mouse cursor."""
    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.CURSOR,
            options={"longLabel": long_label, "latLabel": lat_label},
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_cursor_coords_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.CURSOR, panel_id=panel_id)


def add_custom_control(
    target: MapTarget,
    control_id: str,
    html: str,
    position: str = PositionConfig.TOP_RIGHT,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a control rendering arbitrary HTML. Remove it with remove_control(target, control_id)."""
    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.CUSTOM,
            options={"controlId": control_id, "html": html},
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )
