"""Camera builders: zoom level and bounds."""

from collections.abc import Sequence

from toro.constants import MessageName
from toro.core.target import MapTarget, MapWidget, dispatch

DEFAULT_BOUNDS_PADDING_PX = 50


def set_zoom(target: MapTarget, zoom: float) -> MapTarget:
    """Zoom the map. On a pending map only the first set_zoom() counts."""

    def pending(widget: MapWidget) -> None:
        widget.config.set_once("setZoom", zoom)

    return dispatch(target, MessageName.SET_MAP_ZOOM, {"zoom": zoom}, pending)


def set_bounds(
    target: MapTarget,
    bounds: Sequence[Sequence[float]],
    padding: int = DEFAULT_BOUNDS_PADDING_PX,
    max_zoom: float | None = None,
) -> MapTarget:
    """Fit the view to bounds.

    Args:
        target: Map handle
        bounds: [[west, south], [east, north]]
        padding: Padding around the bounds in pixels
        max_zoom: Zoom cap while fitting. A pending map defaults to its maxZoom option.
    """
    bounds = [[float(c) for c in corner] for corner in bounds]
    if len(bounds) != 2 or any(len(corner) != 2 for corner in bounds):
        raise ValueError(f"Bounds must be [[west, south], [east, north]], got {bounds}")

    def pending(widget: MapWidget) -> None:
        cap = max_zoom if max_zoom is not None else widget.options.get("maxZoom")
        widget.config.overwrite("setBounds", {"bounds": bounds, "padding": padding, "maxZoom": cap})

    options = {"bounds": bounds, "padding": padding, "maxZoom": max_zoom}
    return dispatch(target, MessageName.SET_MAP_BOUNDS, {"options": options}, pending)
