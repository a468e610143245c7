"""Control panel builders.

A control panel is a container anchored to a map corner that holds controls,
optionally organized in collapsible groups.

Functions:
    add_control_panel: Declare a panel
    add_control_group: Add a group to a panel
    remove_control_group: Remove a group from a live panel
    add_control_to_panel: Add any control kind to a panel
    remove_control_from_panel: Remove a control from a live panel

On a pending map, adding a group or control to an unknown panel creates the
panel with PanelConfig.IMPLICIT_OPTIONS, and re-declaring an existing panel
keeps it (metadata and entries) unchanged.
"""

from typing import Any

from toro.constants import MessageName, PanelConfig, PositionConfig
from toro.core.target import MapTarget, MapWidget, dispatch
from toro.model.panel import ControlPanel


def add_control_panel(
    target: MapTarget,
    panel_id: str,
    title: str | None = None,
    position: str = PanelConfig.DEFAULT_POSITION,
    collapsible: bool = False,
    collapsed: bool = False,
    direction: str = PanelConfig.DEFAULT_DIRECTION,
    custom_controls: list[dict[str, Any]] | None = None,
) -> MapTarget:
    """Declare a control panel.

    Args:
        target: Map handle
        panel_id: Unique panel id, referenced by controls via panel_id=
        title: Panel title, None for no title
        position: Map corner ("top-left", "top-right", "bottom-left", "bottom-right")
        collapsible: Whether the panel can be collapsed
        collapsed: Initial collapsed state
        direction: "column" or "row"
        custom_controls: Raw controls ({html, id?, title?}) rendered in the panel

    Raises:
        ValueError: If position or direction is not recognized
    """
    if position not in PositionConfig.VALID:
        raise ValueError(f"Invalid panel position {position!r}, expected one of {PositionConfig.VALID}")
    if direction not in PanelConfig.DIRECTIONS:
        raise ValueError(f"Invalid panel direction {direction!r}, expected one of {PanelConfig.DIRECTIONS}")

    panel = ControlPanel(
        panel_id=panel_id,
        title=title,
        position=position,
        collapsible=collapsible,
        collapsed=collapsed,
        direction=direction,
        custom_controls=custom_controls,
    )
    options = panel.options()
    del options["panelControls"]

    def pending(widget: MapWidget) -> None:
        widget.config.upsert_panel(panel)

    return dispatch(target, MessageName.ADD_CONTROL_PANEL, {"panelId": panel_id, "options": options}, pending)


def add_control_group(
    target: MapTarget,
    panel_id: str,
    group_id: str,
    group_title: str | None = None,
    collapsible: bool = False,
    collapsed: bool = False,
) -> MapTarget:
    """Add a (collapsible) group to a panel; controls join it via group_id=."""
    group_config = {
        "type": "group",
        "groupId": group_id,
        "groupTitle": group_title,
        "collapsible": collapsible,
        "collapsed": collapsed,
    }

    def pending(widget: MapWidget) -> None:
        widget.config.panel(panel_id).add_entry(group_config)

    return dispatch(
        target,
        MessageName.ADD_CONTROL_GROUP,
        {"panelId": panel_id, "groupConfig": group_config},
        pending,
    )


def remove_control_group(target: MapTarget, panel_id: str, group_id: str) -> MapTarget:
    return dispatch(target, MessageName.REMOVE_CONTROL_GROUP, {"panelId": panel_id, "groupId": group_id})


def add_control_to_panel(
    target: MapTarget,
    panel_id: str,
    control_type: str,
    control_options: dict[str, Any] | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a control of any kind to a panel.

    Control builders called with panel_id= redirect here with their kind tag
    and full options payload.

    Args:
        target: Map handle
        panel_id: Target panel id
        control_type: Kind tag ("zoom", "timeline", "cluster-toggle", ...)
        control_options: Kind-specific options
        section_title: Title shown above the control inside the panel
        group_id: Group to place the control in (not checked)
    """
    control_config = {
        "type": control_type,
        "options": dict(control_options or {}),
        "title": section_title,
        "groupId": group_id,
    }

    def pending(widget: MapWidget) -> None:
        widget.config.panel(panel_id).add_entry(control_config)

    return dispatch(
        target,
        MessageName.ADD_CONTROL_TO_PANEL,
        {"panelId": panel_id, "controlConfig": control_config},
        pending,
    )


def remove_control_from_panel(target: MapTarget, panel_id: str, control_id: str) -> MapTarget:
    return dispatch(
        target,
        MessageName.REMOVE_CONTROL_FROM_PANEL,
        {"panelId": panel_id, "controlId": control_id},
    )
