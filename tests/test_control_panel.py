"""Tests for control panel builders.

Tests: add_control_panel, add_control_group, remove_control_group,
add_control_to_panel, remove_control_from_panel
Focus: Upsert without reset, implicit creation, live payloads
"""

import logging
from typing import TYPE_CHECKING

import pytest

from toro.builders.control_panel import (
    add_control_group,
    add_control_panel,
    add_control_to_panel,
    remove_control_from_panel,
    remove_control_group,
)
from toro.builders.layer_controls import add_visibility_toggle
from toro.core.target import MapProxy, MapWidget

if TYPE_CHECKING:
    from conftest import RecordingSession


class TestPendingPanels:
    """Panels on a map before first render."""

    def test_readd_does_not_reset_entries(self, widget: MapWidget) -> None:
        """Entries added between two add_control_panel calls survive."""
        add_control_panel(widget, "p1", title="Layers")
        add_control_group(widget, "p1", "g1", group_title="Base")
        add_control_to_panel(widget, "p1", "custom", {"controlId": "c"}, group_id="g1")
        add_control_panel(widget, "p1", title="Renamed", collapsible=True)

        panel = widget.config.control_panels["p1"]
        assert panel.title == "Layers"
        assert panel.collapsible is False
        assert [entry["type"] for entry in panel.panel_controls] == ["group", "custom"]

    def test_group_on_unknown_panel_creates_it(self, widget: MapWidget) -> None:
        add_control_group(widget, "p2", "g1")
        payload = widget.to_payload()["controlPanels"]["p2"]
        assert payload["options"]["collapsible"] is True
        assert payload["options"]["position"] == "bottom-left"
        assert payload["options"]["panelControls"] == [
            {"type": "group", "groupId": "g1", "groupTitle": None, "collapsible": False, "collapsed": False}
        ]

    def test_explicit_after_implicit_warns(self, widget: MapWidget, caplog: pytest.LogCaptureFixture) -> None:
        """Settings of a panel declared after implicit creation are dropped with a warning."""
        add_control_group(widget, "p3", "g1")
        with caplog.at_level(logging.WARNING):
            add_control_panel(widget, "p3", title="Layers", collapsible=False)
        panel = widget.config.control_panels["p3"]
        assert panel.title != "Layers"
        assert panel.collapsible is True
        assert "p3" in caplog.text

    def test_group_reference_not_validated(self, widget: MapWidget) -> None:
        """A control may name a group that was never declared."""
        add_visibility_toggle(widget, "lyr", panel_id="p1", group_id="missing")
        entry = widget.config.control_panels["p1"].panel_controls[0]
        assert entry["groupId"] == "missing"
        assert entry["options"]["layerId"] == "lyr"

    def test_explicit_panel_defaults(self, widget: MapWidget) -> None:
        add_control_panel(widget, "p1")
        panel = widget.config.control_panels["p1"]
        assert panel.collapsible is False
        assert panel.direction == "column"

    @pytest.mark.parametrize("kwargs", [{"position": "centre"}, {"direction": "diagonal"}])
    def test_invalid_arguments(self, widget: MapWidget, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            add_control_panel(widget, "p1", **kwargs)


class TestLivePanels:
    """Panel messages on a rendered map."""

    def test_add_panel_payload(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_control_panel(proxy, "p1", title="Layers", position="top-left", direction="row")
        assert session.last == (
            "addControlPanel",
            {
                "id": "map1",
                "panelId": "p1",
                "options": {
                    "title": "Layers",
                    "position": "top-left",
                    "collapsible": False,
                    "collapsed": False,
                    "direction": "row",
                    "customControls": None,
                },
            },
        )

    def test_group_and_control_messages(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_control_group(proxy, "p1", "g1", group_title="Base", collapsible=True)
        add_control_to_panel(proxy, "p1", "timeline", {"maxTicks": 3}, section_title="Time")
        remove_control_from_panel(proxy, "p1", "timeline-control-container-map1")
        remove_control_group(proxy, "p1", "g1")
        assert session.names == [
            "addControlGroup",
            "addControlToPanel",
            "removeControlFromPanel",
            "removeControlGroup",
        ]
        assert session.messages[0][1]["groupConfig"] == {
            "type": "group",
            "groupId": "g1",
            "groupTitle": "Base",
            "collapsible": True,
            "collapsed": False,
        }
        assert session.messages[1][1]["controlConfig"] == {
            "type": "timeline",
            "options": {"maxTicks": 3},
            "title": "Time",
            "groupId": None,
        }
        assert session.messages[3][1] == {"id": "map1", "panelId": "p1", "groupId": "g1"}
