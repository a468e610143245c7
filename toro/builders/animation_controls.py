"""Timeline and playback speed controls for animated maps."""

import datetime
from collections.abc import Sequence

from toro.builders.controls import add_control, remove_control_kind
from toro.constants import AnimationConfig, ControlConfig
from toro.core.target import MapTarget
from toro.model.controls import ControlDescriptor, ControlKind, Placement


def _iso(value: datetime.date | str | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


def add_timeline_control(
    target: MapTarget,
    start_date: datetime.date | str | None = None,
    end_date: datetime.date | str | None = None,
    position: str = AnimationConfig.TIMELINE_POSITION,
    max_ticks: int = AnimationConfig.TIMELINE_MAX_TICKS,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a timeline slider between start_date and end_date (sent as ISO dates)."""
    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.TIMELINE,
            options={
                "startDate": _iso(start_date),
                "endDate": _iso(end_date),
                "maxTicks": max_ticks,
                "useControlPanel": bool(panel_id),
            },
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_timeline_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.TIMELINE, panel_id=panel_id)


def add_speed_control(
    target: MapTarget,
    values: Sequence[float] = AnimationConfig.SPEED_VALUES,
    labels: Sequence[str] = AnimationConfig.SPEED_LABELS,
    default_index: int = AnimationConfig.SPEED_DEFAULT_INDEX,
    position: str = ControlConfig.DEFAULT_POSITION,
    panel_id: str | None = None,
    section_title: str | None = None,
    group_id: str | None = None,
) -> MapTarget:
    """Add a playback speed selector.

    Args:
        values: Speed multipliers
        labels: One label per value
        default_index: 0-based index of the initially selected value

    Raises:
        ValueError: If labels and values differ in length or default_index is out of range
    """
    values = list(values)
    labels = list(labels)
    if len(labels) != len(values):
        raise ValueError(f"Got {len(labels)} speed labels for {len(values)} values")
    if not 0 <= default_index < len(values):
        raise ValueError(f"default_index {default_index} out of range for {len(values)} speed values")

    return add_control(
        target,
        ControlDescriptor(
            kind=ControlKind.SPEED,
            options={
                "values": values,
                "labels": labels,
                "defaultIndex": default_index,
                "useControlPanel": bool(panel_id),
            },
            placement=Placement(position, panel_id, section_title, group_id),
        ),
    )


def remove_speed_control(target: MapTarget, panel_id: str | None = None) -> MapTarget:
    return remove_control_kind(target, ControlKind.SPEED, panel_id=panel_id)
