"""ControlPanel - A container of controls and control groups on a pending map.

A panel holds an ordered list of entries. Each entry is either a group
descriptor ({"type": "group", "groupId", ...}) or a control descriptor
({"type": <kind>, "options", "title", "groupId"}). Groups and ungrouped
controls interleave in declaration order; a control's groupId is a rendering
hint and is not checked against existing groups.
"""

from dataclasses import dataclass, field
from typing import Any

from toro.constants import PanelConfig


@dataclass
class ControlPanel:
    """Pending-mode state of one control panel.

    Attributes:
        panel_id: Unique panel identifier
        title: Panel title, None for no title
        position: Map corner the panel is anchored to
        collapsible: Whether the panel can be collapsed
        collapsed: Initial collapsed state
        direction: Layout direction of entries ("column" or "row")
        custom_controls: Raw custom controls rendered inside the panel
        panel_controls: Ordered group and control entries
    """

    panel_id: str
    title: str | None = None
    position: str = PanelConfig.DEFAULT_POSITION
    collapsible: bool = False
    collapsed: bool = False
    direction: str = PanelConfig.DEFAULT_DIRECTION
    custom_controls: list[dict[str, Any]] | None = None
    panel_controls: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def implicit(cls, panel_id: str) -> "ControlPanel":
        """Panel auto-created when a group or control targets an unknown panel id."""
        defaults = PanelConfig.IMPLICIT_OPTIONS
        return cls(
            panel_id=panel_id,
            title=defaults["title"],
            position=defaults["position"],
            collapsible=defaults["collapsible"],
            collapsed=defaults["collapsed"],
            direction=defaults["direction"],
            custom_controls=list(defaults["customControls"]),
        )

    def add_entry(self, entry: dict[str, Any]) -> None:
        """Append a group or control entry."""
        self.panel_controls.append(entry)

    @property
    def group_ids(self) -> list[str]:
        return [e["groupId"] for e in self.panel_controls if e.get("type") == "group"]

    def options(self) -> dict[str, Any]:
        """Panel chrome plus entries, as sent on the wire."""
        return {
            "title": self.title,
            "position": self.position,
            "collapsible": self.collapsible,
            "collapsed": self.collapsed,
            "direction": self.direction,
            "customControls": self.custom_controls,
            "panelControls": list(self.panel_controls),
        }

    def to_dict(self) -> dict[str, Any]:
        return {"panelId": self.panel_id, "options": self.options()}
