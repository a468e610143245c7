"""Tests for map handles, the dispatcher and payload normalization.

Tests: create_map, MapWidget.to_payload, map_proxy, dispatch, map_id,
to_json_value, to_camel_case
Focus: Mode branching, identity of returned handles, unsupported contexts
"""

import datetime
import logging
from typing import TYPE_CHECKING

import numpy as np
import pytest

from toro.constants import ComponentConfig, MapConfig
from toro.core.serialize import to_camel_case, to_json_value
from toro.core.target import MapProxy, MapWidget, create_map, dispatch, is_live, map_id, map_proxy

if TYPE_CHECKING:
    from conftest import RecordingSession


class TestCreateMap:
    """Pending map creation."""

    def test_defaults(self) -> None:
        widget = create_map()
        assert widget.style == "light-grey"
        assert widget.center == (174, -41)
        assert widget.zoom == 2
        assert widget.options == MapConfig.DEFAULT_OPTIONS
        assert widget.id == ComponentConfig.DEFAULT_ELEMENT_ID

    def test_snake_case_options_become_camel_case(self) -> None:
        """min_zoom and maxZoom are both accepted and merged over defaults."""
        widget = create_map(min_zoom=4, maxZoom=10, spinner_while_busy=True)
        assert widget.options["minZoom"] == 4
        assert widget.options["maxZoom"] == 10
        assert widget.options["spinnerWhileBusy"] is True
        assert widget.options["clusterColour"] == "#808080"

    def test_default_options_not_shared(self) -> None:
        """Each widget owns its options dict."""
        a = create_map()
        a.options["minZoom"] = 9
        assert create_map().options["minZoom"] == 2

    def test_default_tile_list_not_shared(self) -> None:
        """Mutating one widget's loadedTiles leaves later maps and the defaults untouched."""
        create_map().options["loadedTiles"].append("dark")
        MapWidget().options["loadedTiles"].append("streets")
        assert create_map().options["loadedTiles"] == ["light-grey", "satellite"]
        assert MapConfig.DEFAULT_OPTIONS["loadedTiles"] == ["light-grey", "satellite"]

    def test_payload_omits_empty_config(self) -> None:
        """A fresh widget serializes only its view and options."""
        payload = create_map(center=(1.5, 2.5), zoom=3).to_payload()
        assert set(payload) == {"style", "center", "zoom", "options"}
        assert payload["center"] == [1.5, 2.5]


class TestDispatch:
    """The single pending/live branch."""

    def test_live_sends_id_first_and_returns_same_proxy(self, proxy: MapProxy, session: "RecordingSession") -> None:
        result = dispatch(proxy, "showLayer", {"layerId": "a"}, lambda w: None)
        assert result is proxy
        assert session.messages == [("showLayer", {"id": "map1", "layerId": "a"})]
        assert list(session.last[1])[0] == "id"

    def test_pending_applies_mutation_and_returns_same_widget(self, widget: MapWidget) -> None:
        calls: list[MapWidget] = []
        result = dispatch(widget, "setMapZoom", {"zoom": 3}, calls.append)
        assert result is widget
        assert calls == [widget]

    def test_live_only_on_pending_warns(self, widget: MapWidget, caplog: pytest.LogCaptureFixture) -> None:
        """No pending mutation: warning and no-op."""
        with caplog.at_level(logging.WARNING):
            assert dispatch(widget, "hideLayer", {"layerId": "a"}) is widget
        assert "hideLayer" in caplog.text
        assert widget.config.to_dict() == {}

    def test_pending_only_on_live_warns(
        self, proxy: MapProxy, session: "RecordingSession", caplog: pytest.LogCaptureFixture
    ) -> None:
        """payload=None: warning and nothing sent."""
        with caplog.at_level(logging.WARNING):
            assert dispatch(proxy, "addTilesFromWms", None, lambda w: None) is proxy
        assert session.messages == []
        assert "addTilesFromWms" in caplog.text

    def test_sessionless_proxy_warns(self, sessionless_proxy: MapProxy, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert dispatch(sessionless_proxy, "showLayer", {"layerId": "a"}) is sessionless_proxy
        assert "no session" in caplog.text

    def test_unknown_target_raises(self) -> None:
        with pytest.raises(TypeError):
            dispatch("map1", "showLayer", {"layerId": "a"})  # type: ignore[arg-type]

    def test_payload_is_json_normalized(self, proxy: MapProxy, session: "RecordingSession") -> None:
        dispatch(proxy, "setMapBounds", {"options": {"bounds": np.array([[1, 2], [3, 4]]), "padding": np.int64(5)}})
        _, message = session.last
        assert message["options"] == {"bounds": [[1, 2], [3, 4]], "padding": 5}
        assert type(message["options"]["padding"]) is int


class TestHandles:
    """Handle helpers."""

    def test_is_live(self, widget: MapWidget, proxy: MapProxy) -> None:
        assert is_live(proxy)
        assert not is_live(widget)

    def test_map_id(self, widget: MapWidget, proxy: MapProxy) -> None:
        assert map_id(widget) == "map1"
        assert map_id(proxy) == "map1"
        with pytest.raises(TypeError):
            map_id(object())  # type: ignore[arg-type]

    def test_map_proxy_with_explicit_session(self, session: "RecordingSession") -> None:
        proxy = map_proxy("other", session=session)
        assert proxy.id == "other"
        assert proxy.session is session

    def test_map_proxy_outside_streamlit_has_no_session(self) -> None:
        """Outside a running script the proxy is created but cannot send."""
        assert map_proxy("other").session is None

    def test_proxy_is_immutable(self, proxy: MapProxy) -> None:
        with pytest.raises(AttributeError):
            proxy.id = "changed"  # type: ignore[misc]


class TestSerialize:
    """JSON normalization and option name translation."""

    def test_nested_values(self) -> None:
        value = {"a": (1, np.float64(2.5)), "b": [np.bool_(True)], "d": datetime.date(2025, 1, 31)}
        assert to_json_value(value) == {"a": [1, 2.5], "b": [True], "d": "2025-01-31"}

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(TypeError):
            to_json_value({"x": object()})

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("min_zoom", "minZoom"),
            ("busy_loader_bg_colour", "busyLoaderBgColour"),
            ("maxZoom", "maxZoom"),
            ("enable3D", "enable3D"),
        ],
    )
    def test_camel_case(self, name: str, expected: str) -> None:
        assert to_camel_case(name) == expected
