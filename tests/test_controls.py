"""Tests for the generic control entry points and basic controls.

Tests: add_control, remove_control_kind, zoom/cursor/custom/draw controls,
CONTROL_KINDS registry, Placement
Focus: Control id synthesis, panel redirection in both modes, envelopes
"""

import logging
from typing import TYPE_CHECKING

import pytest

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
from toro.core.target import MapProxy, MapWidget
from toro.model.controls import CONTROL_KINDS, ControlDescriptor, ControlKind, Placement

if TYPE_CHECKING:
    from conftest import RecordingSession


class TestRegistry:
    """Declarative control kind registry."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ControlKind.ZOOM, "zoom-control-map1"),
            (ControlKind.CURSOR, "cursor-coords-map1"),
            (ControlKind.DRAW, "draw-control-map1"),
            (ControlKind.TIMELINE, "timeline-control-container-map1"),
            (ControlKind.SPEED, "speed-control-map1"),
            (ControlKind.TILE_SELECTOR, "tile-selector-map1"),
            (ControlKind.LAYER_SELECTOR, "layer-selector-map1"),
        ],
    )
    def test_map_level_ids(self, kind: ControlKind, expected: str) -> None:
        assert CONTROL_KINDS[kind].control_id("map1") == expected

    def test_per_layer_ids(self) -> None:
        assert CONTROL_KINDS[ControlKind.CLUSTER_TOGGLE].control_id("map1", layer_id="pts") == "cluster-toggle-pts-map1"
        assert (
            CONTROL_KINDS[ControlKind.VISIBILITY_TOGGLE].control_id("map1", layer_id="pts")
            == "visibility-toggle-pts-map1"
        )

    def test_per_layer_id_requires_layer(self) -> None:
        with pytest.raises(ValueError):
            CONTROL_KINDS[ControlKind.CLUSTER_TOGGLE].control_id("map1")

    def test_every_kind_registered(self) -> None:
        assert set(CONTROL_KINDS) == set(ControlKind)
        assert {spec.tag for spec in CONTROL_KINDS.values()} == {kind.value for kind in ControlKind}


class TestPlacement:
    def test_invalid_position_raises(self) -> None:
        with pytest.raises(ValueError):
            Placement(position="middle")

    def test_panel_fields(self) -> None:
        placement = Placement("top-left", panel_id="p", section_title="Zoom", group_id="g")
        assert placement.in_panel
        assert placement.panel_fields() == {"panelId": "p", "panelTitle": "Zoom", "groupId": "g"}
        assert not Placement().in_panel


class TestStandaloneControls:
    """Standalone add messages and pending slots."""

    def test_zoom_live_is_flat(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_zoom_control(proxy, position="top-left", control_options={"showCompass": False})
        assert session.last == (
            "addZoomControl",
            {"id": "map1", "position": "top-left", "controlOptions": {"showCompass": False}},
        )

    def test_cursor_live_is_flat(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_cursor_coords_control(proxy, long_label="Lon")
        assert session.last == (
            "addCursorCoordsControl",
            {"id": "map1", "position": "bottom-left", "longLabel": "Lon", "latLabel": "Lat"},
        )

    def test_custom_live_is_nested(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_custom_control(proxy, "legend", "<b>Legend</b>")
        name, message = session.last
        assert name == "addCustomControl"
        assert message["options"]["controlId"] == "legend"
        assert message["options"]["html"] == "<b>Legend</b>"
        assert message["options"]["panelId"] is None

    def test_zoom_pending_set_once(self, widget: MapWidget) -> None:
        add_zoom_control(widget, position="top-left")
        add_zoom_control(widget, position="bottom-right")
        assert widget.config.zoom_control["position"] == "top-left"
        assert [c["type"] for c in widget.config.controls] == ["zoom"]

    def test_custom_pending_appends(self, widget: MapWidget) -> None:
        add_custom_control(widget, "a", "<i>a</i>")
        add_custom_control(widget, "b", "<i>b</i>")
        assert [c["controlId"] for c in widget.config.custom_controls] == ["a", "b"]

    def test_draw_control(self, widget: MapWidget, proxy: MapProxy, session: "RecordingSession") -> None:
        add_draw_control(widget, modes=("polygon", "line", "trash"))
        assert widget.config.draw_control["modes"] == ["polygon", "line", "trash"]
        assert widget.config.draw_control["controlId"] == "draw_control"

        add_draw_control(proxy)
        name, message = session.last
        assert name == "addDraw"
        assert message["options"]["activeColour"] == "#0FB3CE"

    def test_draw_unknown_mode_warns(self, widget: MapWidget, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            add_draw_control(widget, modes=["polygon", "circle"])
        assert "circle" in caplog.text

    def test_invalid_position_raises(self, widget: MapWidget) -> None:
        with pytest.raises(ValueError):
            add_zoom_control(widget, position="center")


class TestPanelRedirect:
    """Controls with a panel_id go to add_control_to_panel in both modes."""

    def test_live_redirect(self, proxy: MapProxy, session: "RecordingSession") -> None:
        add_zoom_control(proxy, panel_id="p1", section_title="Zoom", group_id="g1")
        name, message = session.last
        assert name == "addControlToPanel"
        assert message["panelId"] == "p1"
        config = message["controlConfig"]
        assert config["type"] == "zoom"
        assert config["title"] == "Zoom"
        assert config["groupId"] == "g1"
        assert config["options"]["panelId"] == "p1"
        assert config["options"]["position"] == "top-right"

    def test_pending_redirect_creates_panel(self, widget: MapWidget) -> None:
        add_cursor_coords_control(widget, panel_id="p1")
        assert widget.config.cursor_controls is None
        assert widget.config.controls == []
        panel = widget.config.control_panels["p1"]
        assert panel.collapsible is True
        assert panel.panel_controls[0]["type"] == "cursor"

    def test_generic_add_control(self, widget: MapWidget) -> None:
        descriptor = ControlDescriptor(
            kind=ControlKind.CUSTOM,
            options={"controlId": "x", "html": "<p/>"},
            placement=Placement("bottom-right"),
        )
        assert add_control(widget, descriptor) is widget
        assert widget.config.custom_controls[0]["position"] == "bottom-right"


class TestRemoval:
    """Removal resolves synthesized ids and is live-only."""

    def test_remove_zoom_control(self, proxy: MapProxy, session: "RecordingSession") -> None:
        remove_zoom_control(proxy)
        assert session.last == ("removeControl", {"id": "map1", "controlId": "zoom-control-map1"})

    def test_remove_from_panel(self, proxy: MapProxy, session: "RecordingSession") -> None:
        remove_cursor_coords_control(proxy, panel_id="p1")
        assert session.last == (
            "removeControlFromPanel",
            {"id": "map1", "panelId": "p1", "controlId": "cursor-coords-map1"},
        )

    def test_remove_by_tag(self, proxy: MapProxy, session: "RecordingSession") -> None:
        remove_control_kind(proxy, "visibility-toggle", layer_id="pts")
        assert session.last[1]["controlId"] == "visibility-toggle-pts-map1"

    def test_remove_draw(self, proxy: MapProxy, session: "RecordingSession") -> None:
        remove_draw_control(proxy)
        assert session.last[1]["controlId"] == "draw-control-map1"

    def test_remove_on_pending_is_noop(self, widget: MapWidget, caplog: pytest.LogCaptureFixture) -> None:
        add_zoom_control(widget)
        with caplog.at_level(logging.WARNING):
            assert remove_zoom_control(widget) is widget
        assert widget.config.zoom_control is not None
        assert "removeControl" in caplog.text


class TestLiveControlOps:
    def test_toggle_and_remove(self, proxy: MapProxy, session: "RecordingSession") -> None:
        toggle_control(proxy, "legend", show=False)
        remove_control(proxy, "legend")
        assert session.messages == [
            ("toggleControl", {"id": "map1", "controlId": "legend", "show": False}),
            ("removeControl", {"id": "map1", "controlId": "legend"}),
        ]

    def test_draw_live_ops(self, proxy: MapProxy, session: "RecordingSession") -> None:
        delete_drawn_shape(proxy, "abc")
        hide_draw_controls(proxy)
        show_draw_controls(proxy)
        assert session.messages == [
            ("deleteDrawnShape", {"id": "map1", "shapeId": "abc"}),
            ("hideDrawControls", {"id": "map1"}),
            ("showDrawControls", {"id": "map1"}),
        ]
