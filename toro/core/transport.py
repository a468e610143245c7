"""Outbound message transport for live maps.

A live map is mutated by one-way custom messages. The transport is anything
with a send_custom_message(type, message) method; builders never look past it.

StreamlitSession is the shipped transport. Streamlit has no push channel from
Python to a rendered component, so messages are queued per widget in
st.session_state and delivered by the next render_map() call for that widget
(see toro.ui.widget). Send order is preserved per widget.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Protocol, runtime_checkable

from toro.constants import ComponentConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Session(Protocol):
    """Anything that can deliver a named custom message to the browser."""

    def send_custom_message(self, type: str, message: dict[str, Any]) -> None: ...


class StreamlitSession:
    """Queue custom messages in Streamlit session state until the next render.

    Each message is stored as {"type": name, "message": payload} under the
    widget id carried in payload["id"].

    Args:
        state: Mapping used as the store. Defaults to st.session_state; tests
            pass a plain dict.
    """

    def __init__(self, state: MutableMapping[str, Any] | None = None) -> None:
        if state is None:
            import streamlit as st

            state = st.session_state
        self._state = state

    @property
    def state(self) -> MutableMapping[str, Any]:
        return self._state

    def send_custom_message(self, type: str, message: dict[str, Any]) -> None:
        element_id = message.get("id")
        if not element_id:
            raise ValueError(f"Custom message {type!r} carries no target id")

        outbox = self._state.setdefault(ComponentConfig.OUTBOX_STATE_KEY, {})
        queue = outbox.setdefault(element_id, [])
        queue.append({"type": type, "message": message})
        logger.debug(f"Queued {type} for {element_id} ({len(queue)} pending)")

    def pending(self, element_id: str) -> list[dict[str, Any]]:
        """Messages queued for element_id, oldest first (not drained)."""
        outbox = self._state.get(ComponentConfig.OUTBOX_STATE_KEY, {})
        return list(outbox.get(element_id, []))


def drain_outbox(element_id: str, state: MutableMapping[str, Any]) -> list[dict[str, Any]]:
    """Remove and return every message queued for element_id, in send order."""
    outbox = state.get(ComponentConfig.OUTBOX_STATE_KEY)
    if not outbox:
        return []
    messages = outbox.pop(element_id, [])
    if messages:
        logger.debug(f"Delivering {len(messages)} queued message(s) to {element_id}")
    return messages
