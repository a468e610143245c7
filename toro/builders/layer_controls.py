"""Controls that switch basemaps and layers.

Functions:
    add_tile_selector_control, remove_tile_selector_control
    add_layer_selector_control, remove_layer_selector_control
    add_cluster_toggle, remove_cluster_toggle
    add_visibility_toggle, remove_visibility_toggle
"""

import logging
from collections.abc import Mapping, Sequence

from toro.builders.controls import add_control, remove_control_kind
from toro.constants import ControlConfig, ControlIdTemplate, TileConfig
from toro.core.target import MapTarget
from toro.model.controls import ControlDescriptor, ControlKind, Placement

logger = logging.getLogger(__name__)


def _labels_for(ids: Sequence[str], labels: Mapping[str, str] | Sequence[str] | None) -> dict[str, str]:
    """{id: label}. Defaults to the ids; a label list pairs with ids in order."""
    if labels is None:
        return {i: i for i in ids}
    if isinstance(labels, Mapping):
        return dict(labels)
    return dict(zip(ids, labels))


# =============================================================================
# Tile selector
# =============================================================================


def add_tile_selector_control(
    target: MapTarget,
    available_tiles: Sequence[str] | None = None,
    labels: Mapping[str, str] | Sequence[str] | None = None,
    default_tile: str | None = None,
    position: str = ControlConfig.DEFAULT_POSITION,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a basemap selector.

    Args:
        available_tiles: Tile ids to offer (see get_tile_options()). None lets
            the map offer its loaded tiles.
        labels: Display labels; by default the TileConfig labels, dropping
            tiles that have none
        default_tile: Initially selected tile
    """
    tiles = list(available_tiles) if available_tiles is not None else None

    if labels is None:
        resolved = {t: TileConfig.LABELS[t] for t in tiles or [] if t in TileConfig.LABELS}
        dropped = [t for t in tiles or [] if t not in TileConfig.LABELS]
        if dropped:
            logger.warning(f"No label for tiles {dropped}, they are left out of the selector labels")
    else:
        resolved = _labels_for(tiles or [], labels)

    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.TILE_SELECTOR,
            options={
                "availableTiles": tiles,
                "labels": resolved,
                "defaultTile": default_tile,
                "useControlPanel": bool(panel_id),
            },
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_tile_selector_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.TILE_SELECTOR, panel_id=panel_id)


# =============================================================================
# Layer selector
# =============================================================================


def add_layer_selector_control(
    target: MapTarget,
    layer_ids: Sequence[str],
    labels: Mapping[str, str] | Sequence[str] | None = None,
    default_layer: str | None = None,
    none_option: bool = False,
    none_label: str = ControlConfig.LAYER_SELECTOR_NONE_LABEL,
    position: str = ControlConfig.DEFAULT_POSITION,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a selector showing exactly one of layer_ids at a time.

    Args:
        layer_ids: Layers to switch between
        labels: Display labels ({id: label} or a list paired with layer_ids);
            defaults to the ids
        default_layer: Initially visible layer, defaults to the first id
        none_option: Offer a "none" entry that hides every layer
        none_label: Label of the "none" entry
    """
    layer_ids = list(layer_ids)
    resolved = _labels_for(layer_ids, labels)
    if default_layer is None and layer_ids:
        default_layer = layer_ids[0]

    if none_option:
        none_id = ControlConfig.LAYER_SELECTOR_NONE_ID
        layer_ids = [none_id, *layer_ids]
        resolved = {none_id: none_label, **resolved}

    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.LAYER_SELECTOR,
            options={
                "layerIds": layer_ids,
                "labels": resolved,
                "defaultLayer": default_layer,
                "noneOption": none_option,
                "useControlPanel": bool(panel_id),
            },
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_layer_selector_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.LAYER_SELECTOR, panel_id=panel_id)


# =============================================================================
# Per-layer toggles
# =============================================================================


def _layer_toggle(
    target: MapTarget,
    kind: ControlKind,
    layer_id: str,
    control_id: str,
    left_label: str,
    right_label: str | None,
    initial_state: bool,
    placement: Placement,
) -> MapTarget:
    return add_control(
        target,
        ControlDescriptor(
            kind=kind,
            options={
                "controlId": control_id,
                "layerId": layer_id,
                "leftLabel": left_label,
                "rightLabel": right_label,
                "initialState": initial_state,
            },
            placement=placement,
        ),
    )


def add_cluster_toggle(
    target: MapTarget,
    layer_id: str,
    control_id: str | None = None,
    left_label: str = ControlConfig.CLUSTER_TOGGLE_LABEL,
    right_label: str | None = None,
    initial_state: bool = False,
    position: str = ControlConfig.DEFAULT_POSITION,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a switch turning clustering of layer_id on and off."""
    return _layer_toggle(
        target,
        ControlKind.CLUSTER_TOGGLE,
        layer_id=layer_id,
        control_id=control_id or ControlIdTemplate.CLUSTER_TOGGLE_DEFAULT.format(layer_id=layer_id),
        left_label=left_label,
        right_label=right_label,
        initial_state=initial_state,
        placement=Placement(position, panel_id, section_title, group_id),
    )


def remove_cluster_toggle(target: MapTarget, layer_id: str, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.CLUSTER_TOGGLE, layer_id=layer_id, panel_id=panel_id)


def add_visibility_toggle(
    target: MapTarget,
    layer_id: str,
    control_id: str | None = None,
    left_label: str = ControlConfig.VISIBILITY_TOGGLE_LABEL,
    right_label: str | None = None,
    initial_state: bool = True,
    position: str = ControlConfig.DEFAULT_POSITION,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a switch showing and hiding layer_id."""
    return _layer_toggle(
        target,
        ControlKind.VISIBILITY_TOGGLE,
        layer_id=layer_id,
        control_id=control_id or ControlIdTemplate.VISIBILITY_TOGGLE_DEFAULT.format(layer_id=layer_id),
        left_label=left_label,
        right_label=right_label,
        initial_state=initial_state,
        placement=Placement(position, panel_id, section_title, group_id),
    )


def remove_visibility_toggle(target: MapTarget, layer_id: str, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.VISIBILITY_TOGGLE, layer_id=layer_id, panel_id=panel_id)
