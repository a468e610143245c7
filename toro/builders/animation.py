"""Animated routes: a marker moving along a sequence of points.

Routes are driven by the timeline and speed controls (see animation_controls).
"""

from typing import Any

from toro.constants import MessageName
from toro.core.geojson import to_geojson
from toro.core.target import MapTarget, MapWidget, dispatch


def add_route(
    target: MapTarget,
    route_id: str,
    points: Any,
    settings: dict[str, Any] | None = None,
) -> MapTarget:
    """Add a route to animate.

    Args:
        target: Map handle
        route_id: Unique route id
        points: Route points as a GeoDataFrame (or any GeoJSON input), in travel order
        settings: Route options passed to the runtime (e.g. marker colour, duration)
    """
    route = {"routeId": route_id, "points": to_geojson(points), "options": dict(settings or {})}

    def pending(widget: MapWidget) -> None:
        widget.config.upsert_route(route)

    return dispatch(target, MessageName.ADD_ROUTE, {"options": route}, pending)


def animate_route(target: MapTarget, route_id: str) -> MapTarget:
    return dispatch(target, MessageName.ANIMATE_ROUTE, {"options": {"routeId": route_id}})


def pause_route(target: MapTarget, route_id: str) -> MapTarget:
    return dispatch(target, MessageName.PAUSE_ROUTE, {"options": {"routeId": route_id}})


def remove_route(target: MapTarget, route_id: str) -> MapTarget:
    return dispatch(target, MessageName.REMOVE_ROUTE, {"options": {"routeId": route_id}})
