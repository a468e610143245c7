"""Control descriptors and the control kind registry.

Every map control (zoom buttons, draw tools, toggles, selectors...) is
described by a ControlDescriptor: a kind tag, the kind-specific options
payload sent to the browser runtime, and a Placement.

A Placement is either standalone (a corner position) or panel-attached
(panel_id + optional section title and group id). Panel-attached controls
keep their position in the payload but the runtime ignores it.

Per-kind behaviour lives in one declarative registry, CONTROL_KINDS:
- which custom message adds the control standalone
- how the live message envelope is shaped
- where a pending map stores it and which slot policy applies
- which id the runtime gives the control (needed for removal)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from toro.constants import ControlIdTemplate, MessageName, PositionConfig


class ControlKind(Enum):
    """Control kinds. Values are the type tags used on the wire."""

    ZOOM = "zoom"
    CURSOR = "cursor"
    DRAW = "draw"
    CUSTOM = "custom"
    TIMELINE = "timeline"
    SPEED = "speed"
    TILE_SELECTOR = "tile-selector"
    LAYER_SELECTOR = "layer-selector"
    CLUSTER_TOGGLE = "cluster-toggle"
    VISIBILITY_TOGGLE = "visibility-toggle"


class SlotPolicy(Enum):
    """How a pending map stores a standalone control."""

    SET_ONCE = "set_once"  # First write wins, later writes ignored
    APPEND = "append"  # Ordered list, every write kept
    KEYED = "keyed"  # Mapping, last write per key wins


class EnvelopeStyle(Enum):
    """Shape of the live add message."""

    NESTED = "nested"  # {id, options: {...}}
    FLAT = "flat"  # {id, **fields}


@dataclass(frozen=True)
class ControlKindSpec:
    """Registry entry for one control kind.

    Attributes:
        kind: Control kind
        add_message: Custom message adding the control standalone
        id_template: ControlIdTemplate pattern of the runtime-assigned id
        slot: Pending-mode slot policy
        config_key: PendingConfig serialization key holding the slot
        envelope: Live add message shape
        flat_fields: For FLAT envelopes, the option fields to send (None = all)
        pending_key: For KEYED slots, fixed key of the standalone control
            (None = use the control's own controlId)
    """

    kind: ControlKind
    add_message: str
    id_template: str
    slot: SlotPolicy
    config_key: str
    envelope: EnvelopeStyle = EnvelopeStyle.NESTED
    flat_fields: tuple[str, ...] | None = None
    pending_key: str | None = None

    @property
    def tag(self) -> str:
        return self.kind.value

    def control_id(self, map_id: str, layer_id: str | None = None, control_id: str | None = None) -> str:
        """Id the browser runtime assigns to this control on map map_id.

        Custom controls keep the caller's control_id; per-layer toggles need layer_id.
        """
        if "{layer_id}" in self.id_template and layer_id is None:
            raise ValueError(f"{self.tag} control id requires a layer_id")
        if "{control_id}" in self.id_template and control_id is None:
            raise ValueError(f"{self.tag} control id requires a control_id")
        return self.id_template.format(map_id=map_id, layer_id=layer_id, control_id=control_id)

    def envelope_payload(self, options: dict[str, Any]) -> dict[str, Any]:
        """Build the live add message payload (without the target id)."""
        if self.envelope is EnvelopeStyle.NESTED:
            return {"options": options}
        if self.flat_fields is None:
            return dict(options)
        return {name: options.get(name) for name in self.flat_fields}

    def key_for(self, options: dict[str, Any]) -> str:
        """Key of a standalone control in a KEYED slot."""
        if self.pending_key is not None:
            return self.pending_key
        return str(options["controlId"])


CONTROL_KINDS: dict[ControlKind, ControlKindSpec] = {
    spec.kind: spec
    for spec in (
        ControlKindSpec(
            kind=ControlKind.ZOOM,
            add_message=MessageName.ADD_ZOOM_CONTROL,
            id_template=ControlIdTemplate.ZOOM,
            slot=SlotPolicy.SET_ONCE,
            config_key="zoomControl",
            envelope=EnvelopeStyle.FLAT,
            flat_fields=("position", "controlOptions"),
        ),
        ControlKindSpec(
            kind=ControlKind.CURSOR,
            add_message=MessageName.ADD_CURSOR_COORDS_CONTROL,
            id_template=ControlIdTemplate.CURSOR,
            slot=SlotPolicy.SET_ONCE,
            config_key="cursorControls",
            envelope=EnvelopeStyle.FLAT,
            flat_fields=("position", "longLabel", "latLabel"),
        ),
        ControlKindSpec(
            kind=ControlKind.DRAW,
            add_message=MessageName.ADD_DRAW,
            id_template=ControlIdTemplate.DRAW,
            slot=SlotPolicy.SET_ONCE,
            config_key="drawControl",
        ),
        ControlKindSpec(
            kind=ControlKind.CUSTOM,
            add_message=MessageName.ADD_CUSTOM_CONTROL,
            id_template=ControlIdTemplate.CUSTOM,
            slot=SlotPolicy.APPEND,
            config_key="customControls",
        ),
        ControlKindSpec(
            kind=ControlKind.TIMELINE,
            add_message=MessageName.ADD_TIMELINE_CONTROL,
            id_template=ControlIdTemplate.TIMELINE,
            slot=SlotPolicy.KEYED,
            config_key="timelineControls",
            pending_key="standalone_timeline",
        ),
        ControlKindSpec(
            kind=ControlKind.SPEED,
            add_message=MessageName.ADD_SPEED_CONTROL,
            id_template=ControlIdTemplate.SPEED,
            slot=SlotPolicy.KEYED,
            config_key="speedControls",
            pending_key="standalone_speed",
        ),
        ControlKindSpec(
            kind=ControlKind.TILE_SELECTOR,
            add_message=MessageName.ADD_TILE_SELECTOR_CONTROL,
            id_template=ControlIdTemplate.TILE_SELECTOR,
            slot=SlotPolicy.KEYED,
            config_key="tileSelectorControls",
            pending_key="standalone_tile_selector",
        ),
        ControlKindSpec(
            kind=ControlKind.LAYER_SELECTOR,
            add_message=MessageName.ADD_LAYER_SELECTOR_CONTROL,
            id_template=ControlIdTemplate.LAYER_SELECTOR,
            slot=SlotPolicy.KEYED,
            config_key="layerSelectorControls",
            pending_key="standalone_layer_selector",
        ),
        ControlKindSpec(
            kind=ControlKind.CLUSTER_TOGGLE,
            add_message=MessageName.ADD_CLUSTER_TOGGLE_CONTROL,
            id_template=ControlIdTemplate.CLUSTER_TOGGLE,
            slot=SlotPolicy.KEYED,
            config_key="clusterToggleControls",
        ),
        ControlKindSpec(
            kind=ControlKind.VISIBILITY_TOGGLE,
            add_message=MessageName.ADD_VISIBILITY_TOGGLE_CONTROL,
            id_template=ControlIdTemplate.VISIBILITY_TOGGLE,
            slot=SlotPolicy.KEYED,
            config_key="visibilityToggleControls",
        ),
    )
}
assert set(CONTROL_KINDS) == set(ControlKind)


@dataclass(frozen=True)
class Placement:
    """Where a control goes: a map corner, or a section of a control panel.

    STRICT: position must be one of PositionConfig.VALID even for
    panel-attached controls, because it is still sent on the wire.
    """

    position: str = PositionConfig.TOP_RIGHT
    panel_id: str | None = None
    section_title: str | None = None
    group_id: str | None = None

    def __post_init__(self) -> None:
        if self.position not in PositionConfig.VALID:
            raise ValueError(f"Invalid control position {self.position!r}, expected one of {PositionConfig.VALID}")

    @property
    def in_panel(self) -> bool:
        """True if the control is attached to a control panel."""
        return bool(self.panel_id)

    def panel_fields(self) -> dict[str, Any]:
        """Placement fields carried in every control options payload."""
        return {
            "panelId": self.panel_id,
            "panelTitle": self.section_title,
            "groupId": self.group_id,
        }


@dataclass(frozen=True)
class ControlDescriptor:
    """A control ready to be added to a map.

    Attributes:
        kind: Control kind
        options: Kind-specific payload (camelCase keys, JSON-native values)
        placement: Standalone corner or panel attachment
    """

    kind: ControlKind
    options: dict[str, Any] = field(default_factory=dict)
    placement: Placement = field(default_factory=Placement)

    @property
    def spec(self) -> ControlKindSpec:
        return CONTROL_KINDS[self.kind]
