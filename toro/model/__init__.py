"""Data model for pending (not yet rendered) maps.

- PendingConfig: Accumulated first-render state with explicit slot policies
- ControlPanel: Panel chrome plus ordered group/control entries
- ControlDescriptor / Placement: A control and where it goes
- CONTROL_KINDS: Declarative registry of per-kind control behaviour
"""

from toro.model.config import PendingConfig
from toro.model.controls import (
    CONTROL_KINDS,
    ControlDescriptor,
    ControlKind,
    ControlKindSpec,
    EnvelopeStyle,
    Placement,
    SlotPolicy,
)
from toro.model.panel import ControlPanel

__all__ = [
    "PendingConfig",
    "ControlPanel",
    "ControlDescriptor",
    "ControlKind",
    "ControlKindSpec",
    "CONTROL_KINDS",
    "EnvelopeStyle",
    "Placement",
    "SlotPolicy",
]
