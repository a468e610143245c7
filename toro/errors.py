"""Exceptions raised by toro builders.

Only hard precondition failures raise. Unsupported contexts (a live-only
operation on a pending map, a proxy without a session) and malformed
payloads coming back from the browser are logged and resolved to a no-op
or None instead.
"""


class ToroError(Exception):
    """Base class for toro errors."""


class ArityMismatchError(ToroError, ValueError):
    """Paired expression arguments have incompatible lengths.

    Raised by get_column_step_colours() when len(colours) != len(breaks) + 1.
    """

    def __init__(self, breaks: int, colours: int) -> None:
        self.breaks = breaks
        self.colours = colours
        super().__init__(f"Expected {breaks + 1} colours for {breaks} breaks, got {colours}")
