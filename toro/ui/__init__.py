"""Streamlit rendering layer: the custom component and its inbound events."""

from toro.ui.widget import MapEvents, parse_events, render_map

__all__ = ["MapEvents", "parse_events", "render_map"]
