"""Tests for map image export."""

import logging
from typing import TYPE_CHECKING

import pytest

from toro.builders.export import download_map_image
from toro.core.target import MapProxy, MapWidget

if TYPE_CHECKING:
    from conftest import RecordingSession


class TestDownloadMapImage:
    def test_live_message(self, proxy: MapProxy, session: "RecordingSession") -> None:
        assert download_map_image(proxy, "snapshot") is proxy
        assert session.last == (
            "downloadMapImage",
            {"id": "map1", "filename": "snapshot", "format": "png", "width": 800, "height": 600},
        )

    def test_logs_experimental(self, proxy: MapProxy, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            download_map_image(proxy, "snapshot")
        assert "experimental" in caplog.text

    def test_pending_warns(self, widget: MapWidget, caplog: pytest.LogCaptureFixture) -> None:
        """Outside a live session the export is a warned no-op."""
        with caplog.at_level(logging.WARNING):
            assert download_map_image(widget, "snapshot") is widget
        assert "downloadMapImage" in caplog.text

    def test_sessionless_proxy_warns(self, sessionless_proxy: MapProxy, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            download_map_image(sessionless_proxy, "snapshot", format="jpeg", width=400, height=300)
        assert "no session" in caplog.text
