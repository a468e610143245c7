"""PendingConfig - Declarative description of a map before its first render.

Every pending-mode builder call mutates one PendingConfig. The config is
serialized once, by MapWidget.to_payload(), when the map is rendered.

Slot policies are explicit so that repeated builder calls are predictable:
- set-once: first write wins, later writes are ignored (latLngGrid, setZoom,
  zoomControl, cursorControls, drawControl)
- overwrite: last write wins (initialTileLayer, setBounds)
- upsert by id: last write wins, first position kept (sources, layers,
  imageSources, routes)
- append: every write kept in order (customControls, mapServerTiles,
  imageLayerTiles)
- keyed: mapping, last write per key wins (timeline/speed/selector/toggle
  control maps)

The flat `controls` list mirrors every accepted standalone control write as
{"type": <kind>, **options}.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from toro.model.controls import ControlKindSpec, SlotPolicy
from toro.model.panel import ControlPanel

logger = logging.getLogger(__name__)


def _upsert(items: list[dict[str, Any]], key: str, item: dict[str, Any]) -> bool:
    """Replace the entry with the same key in place, or append. Returns True if replaced."""
    for i, existing in enumerate(items):
        if existing.get(key) == item.get(key):
            items[i] = item
            return True
    items.append(item)
    return False


@dataclass
class PendingConfig:
    """Accumulated first-render state of a map.

    Attributes mirror the serialized keys (snake_case here, camelCase on the
    wire). See the module docstring for the slot policy of each.
    """

    sources: list[dict[str, Any]] = field(default_factory=list)
    image_sources: list[dict[str, Any]] = field(default_factory=list)
    map_server_tiles: list[dict[str, Any]] = field(default_factory=list)
    image_layer_tiles: list[dict[str, Any]] = field(default_factory=list)
    layers: list[dict[str, Any]] = field(default_factory=list)
    routes: list[dict[str, Any]] = field(default_factory=list)

    lat_lng_grid: dict[str, Any] | None = None
    initial_tile_layer: str | list[str] | None = None
    set_zoom: float | None = None
    set_bounds: dict[str, Any] | None = None

    zoom_control: dict[str, Any] | None = None
    cursor_controls: dict[str, Any] | None = None
    draw_control: dict[str, Any] | None = None
    custom_controls: list[dict[str, Any]] = field(default_factory=list)
    timeline_controls: dict[str, dict[str, Any]] = field(default_factory=dict)
    speed_controls: dict[str, dict[str, Any]] = field(default_factory=dict)
    tile_selector_controls: dict[str, dict[str, Any]] = field(default_factory=dict)
    layer_selector_controls: dict[str, dict[str, Any]] = field(default_factory=dict)
    cluster_toggle_controls: dict[str, dict[str, Any]] = field(default_factory=dict)
    visibility_toggle_controls: dict[str, dict[str, Any]] = field(default_factory=dict)
    controls: list[dict[str, Any]] = field(default_factory=list)

    control_panels: dict[str, ControlPanel] = field(default_factory=dict)

    # (config_key, slot key) -> index of the mirrored entry in `controls`
    _mirror_index: dict[tuple[str, str], int] = field(default_factory=dict, repr=False)

    # Serialized key -> attribute name, in first-render order
    WIRE_KEYS = {
        "sources": "sources",
        "imageSources": "image_sources",
        "mapServerTiles": "map_server_tiles",
        "imageLayerTiles": "image_layer_tiles",
        "layers": "layers",
        "latLngGrid": "lat_lng_grid",
        "initialTileLayer": "initial_tile_layer",
        "setZoom": "set_zoom",
        "setBounds": "set_bounds",
        "controls": "controls",
        "zoomControl": "zoom_control",
        "cursorControls": "cursor_controls",
        "drawControl": "draw_control",
        "customControls": "custom_controls",
        "controlPanels": "control_panels",
        "timelineControls": "timeline_controls",
        "speedControls": "speed_controls",
        "tileSelectorControls": "tile_selector_controls",
        "layerSelectorControls": "layer_selector_controls",
        "clusterToggleControls": "cluster_toggle_controls",
        "visibilityToggleControls": "visibility_toggle_controls",
        "routes": "routes",
    }

    # =========================================================================
    # Single slots
    # =========================================================================

    def set_once(self, key: str, value: Any) -> bool:
        """Fill a set-once slot. Returns False (and keeps the old value) if already set."""
        attr = self.WIRE_KEYS[key]
        if getattr(self, attr) is not None:
            logger.debug(f"Ignoring {key}: already set on this map")
            return False
        setattr(self, attr, value)
        return True

    def overwrite(self, key: str, value: Any) -> None:
        """Set an overwrite slot, replacing any previous value."""
        setattr(self, self.WIRE_KEYS[key], value)

    # =========================================================================
    # Ordered collections
    # =========================================================================

    def upsert_source(self, source: dict[str, Any]) -> None:
        if _upsert(self.sources, "sourceId", source):
            logger.debug(f"Replaced source {source['sourceId']}")

    def upsert_image_source(self, image: dict[str, Any]) -> None:
        _upsert(self.image_sources, "imageId", image)

    def upsert_layer(self, layer: dict[str, Any]) -> None:
        if _upsert(self.layers, "id", layer):
            logger.debug(f"Replaced layer {layer['id']}")

    def upsert_route(self, route: dict[str, Any]) -> None:
        _upsert(self.routes, "routeId", route)

    def append_tiles(self, tiles: dict[str, Any], as_image_layer: bool = False) -> None:
        (self.image_layer_tiles if as_image_layer else self.map_server_tiles).append(tiles)

    @property
    def layer_ids(self) -> list[str]:
        return [layer["id"] for layer in self.layers]

    @property
    def source_ids(self) -> list[str]:
        return [source["sourceId"] for source in self.sources]

    # =========================================================================
    # Standalone controls
    # =========================================================================

    def add_standalone_control(self, spec: ControlKindSpec, options: dict[str, Any]) -> bool:
        """Store a standalone control according to its kind's slot policy.

        Returns True if the write was accepted (always, except for a set-once
        slot that is already filled).
        """
        mirrored = {"type": spec.tag, **options}

        if spec.slot is SlotPolicy.SET_ONCE:
            if not self.set_once(spec.config_key, options):
                return False
            self.controls.append(mirrored)
            return True

        if spec.slot is SlotPolicy.APPEND:
            getattr(self, self.WIRE_KEYS[spec.config_key]).append(options)
            self.controls.append(mirrored)
            return True

        slot_key = spec.key_for(options)
        getattr(self, self.WIRE_KEYS[spec.config_key])[slot_key] = options
        index = self._mirror_index.get((spec.config_key, slot_key))
        if index is None:
            self._mirror_index[(spec.config_key, slot_key)] = len(self.controls)
            self.controls.append(mirrored)
        else:
            self.controls[index] = mirrored
        return True

    # =========================================================================
    # Control panels
    # =========================================================================

    def upsert_panel(self, panel: ControlPanel) -> ControlPanel:
        """Register a panel unless one with the same id exists. Returns the stored panel."""
        existing = self.control_panels.get(panel.panel_id)
        if existing is not None:
            logger.warning(f"Control panel {panel.panel_id} already declared, keeping its existing settings")
            return existing
        self.control_panels[panel.panel_id] = panel
        return panel

    def panel(self, panel_id: str) -> ControlPanel:
        """Get a panel, creating it with implicit defaults if unknown."""
        panel = self.control_panels.get(panel_id)
        if panel is None:
            logger.debug(f"Creating control panel {panel_id} implicitly")
            panel = self.control_panels[panel_id] = ControlPanel.implicit(panel_id)
        return panel

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Serialize to wire keys. Empty collections and unset slots are omitted."""
        result: dict[str, Any] = {}
        for key, attr in self.WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is None or (isinstance(value, (list, dict)) and not value):
                continue
            if key == "controlPanels":
                value = {panel_id: panel.to_dict() for panel_id, panel in value.items()}
            elif isinstance(value, list):
                value = list(value)
            elif isinstance(value, dict):
                value = dict(value)
            result[key] = value
        return result
