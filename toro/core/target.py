"""Map handles and the single pending/live dispatcher.

Every builder takes a MapTarget, which is one of:
- MapWidget: a map that has not been rendered yet. Builders mutate its
  PendingConfig, which is serialized once on first render.
- MapProxy: a handle on an already-rendered map. Builders send one-way custom
  messages through its session; the browser runtime applies them.

Builders never branch on the handle themselves. They describe both paths and
call dispatch(), which picks one and returns the same handle for chaining.
"""

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union

from toro.constants import ComponentConfig, MapConfig
from toro.core.serialize import to_camel_case, to_json_value
from toro.core.transport import Session, StreamlitSession
from toro.model.config import PendingConfig

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class MapWidget:
    """A map that has not been rendered yet.

    Attributes:
        style: Basemap style name
        center: Initial (lon, lat)
        zoom: Initial zoom level
        options: Widget options (camelCase keys)
        config: Accumulated first-render state
        width: CSS width
        height: CSS height, or None for the default
        element_id: Element id of the rendered widget (also the live proxy id)
    """

    style: str = MapConfig.DEFAULT_STYLE
    center: tuple[float, float] = MapConfig.DEFAULT_CENTER
    zoom: float = MapConfig.DEFAULT_ZOOM
    options: dict[str, Any] = field(default_factory=lambda: copy.deepcopy(MapConfig.DEFAULT_OPTIONS))
    config: PendingConfig = field(default_factory=PendingConfig)
    width: str | int = MapConfig.DEFAULT_WIDTH
    height: str | int | None = None
    element_id: str | None = None

    @property
    def id(self) -> str:
        return self.element_id or ComponentConfig.DEFAULT_ELEMENT_ID

    def to_payload(self) -> dict[str, Any]:
        """First-render payload: view, widget options and the accumulated config."""
        payload = {
            "style": self.style,
            "center": self.center,
            "zoom": self.zoom,
            "options": self.options,
            **self.config.to_dict(),
        }
        return to_json_value(payload)


@dataclass(frozen=True)
class MapProxy:
    """Handle on a rendered map. Carries no map state.

    Attributes:
        id: Element id of the rendered widget
        session: Outbound transport, None if no session was available
    """

    id: str
    session: Session | None = None

    def send(self, message: str, payload: dict[str, Any]) -> None:
        """Send {id, **payload} as custom message `message`."""
        if self.session is None:
            raise RuntimeError(f"Map proxy {self.id} has no session")
        envelope = to_json_value({"id": self.id, **payload})
        logger.debug(f"Sending {message} to {self.id}")
        self.session.send_custom_message(message, envelope)


MapTarget = Union[MapWidget, MapProxy]
PendingMutation = Callable[[MapWidget], None]


def create_map(
    style: str = MapConfig.DEFAULT_STYLE,
    center: tuple[float, float] = MapConfig.DEFAULT_CENTER,
    zoom: float = MapConfig.DEFAULT_ZOOM,
    width: str | int = MapConfig.DEFAULT_WIDTH,
    height: str | int | None = None,
    element_id: str | None = None,
    **options: Any,
) -> MapWidget:
    """Create a pending map.

    Extra keyword options are merged over MapConfig.DEFAULT_OPTIONS. Both
    snake_case and camelCase names are accepted (min_zoom=4 == minZoom=4).

    Example:
        widget = create_map(center=(2.35, 48.85), zoom=5, max_zoom=12, element_id="paris")
    """
    merged = copy.deepcopy(MapConfig.DEFAULT_OPTIONS)
    merged.update({to_camel_case(name): value for name, value in options.items()})
    return MapWidget(
        style=style,
        center=(center[0], center[1]),
        zoom=zoom,
        options=merged,
        width=width,
        height=height,
        element_id=element_id,
    )


def map_proxy(output_id: str, session: Session | None = None) -> MapProxy:
    """Create a handle on the rendered map with element id output_id.

    Without an explicit session, the current Streamlit session is used when
    called from a running Streamlit script. Otherwise the proxy has no session
    and every live call on it is a logged no-op.
    """
    if session is None:
        from streamlit.runtime.scriptrunner import get_script_run_ctx

        if get_script_run_ctx(suppress_warning=True) is not None:
            session = StreamlitSession()
        else:
            logger.warning(f"map_proxy({output_id!r}) created outside a Streamlit session")
    return MapProxy(id=output_id, session=session)


def is_live(target: MapTarget) -> bool:
    """True if target is a handle on a rendered map."""
    return isinstance(target, MapProxy)


def dispatch(
    target: MapTarget,
    message: str,
    payload: dict[str, Any] | None,
    pending: PendingMutation | None = None,
) -> MapTarget:
    """Apply one builder call to a live or pending map and return the same handle.

    Args:
        target: MapWidget or MapProxy
        message: Custom message name for the live path
        payload: Live message fields (without the id). None marks a
            pending-only operation.
        pending: Mutation of the pending widget. None marks a live-only
            operation.

    Raises:
        TypeError: If target is not a map handle
    """
    if isinstance(target, MapProxy):
        if payload is None:
            logger.warning(f"{message} can only be used before the map is rendered; ignored for {target.id}")
        elif target.session is None:
            logger.warning(f"{message} dropped: map proxy {target.id} has no session")
        else:
            target.send(message, payload)
        return target

    if isinstance(target, MapWidget):
        if pending is None:
            logger.warning(f"{message} can only be used on a rendered map (use map_proxy); ignored for {target.id}")
        else:
            pending(target)
        return target

    raise TypeError(f"Expected a MapWidget or MapProxy, got {type(target).__name__}")


def map_id(target: MapTarget) -> str:
    """Element id of the map behind a handle.

    Raises:
        TypeError: If target is not a map handle
    """
    if isinstance(target, (MapWidget, MapProxy)):
        return target.id
    raise TypeError(f"Expected a MapWidget or MapProxy, got {type(target).__name__}")
