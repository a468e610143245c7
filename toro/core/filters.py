"""Parse human-readable filter strings into layer filter expressions.

    get_layer_filter("status == Confirmed")     -> ["status", "==", "Confirmed"]
    get_layer_filter(["a==b", "c>=d"])          -> ["all", ["a", "==", "b"]]

Only the first valid condition is kept when several strings are given.
Strings without a recognized operator are logged and skipped; if none is
valid the result is None.
"""

import logging
import re
from collections.abc import Sequence

from toro.constants import FilterConfig

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
# Lazy field so the operator alternation (ordered longest first) decides the split
_CONDITION = re.compile(r"(.+?)(" + "|".join(re.escape(op) for op in FilterConfig.OPERATORS) + r")(.+)")


def parse_condition(filter_str: str) -> list[str] | None:
    """Parse one "<field><op><value>" string. Whitespace is ignored anywhere."""
    compact = _WHITESPACE.sub("", str(filter_str))
    match = _CONDITION.fullmatch(compact)
    if match is None:
        logger.warning(f"Invalid filter string: {filter_str!r}")
        return None
    field, op, value = match.groups()
    return [field, op, value]


def get_layer_filter(filter_str: str | Sequence[str]) -> list | None:
    """Build a layer filter from one filter string or a list of them."""
    if isinstance(filter_str, str):
        return parse_condition(filter_str)

    strings = list(filter_str)
    conditions = [c for c in (parse_condition(s) for s in strings) if c is not None]
    if not conditions:
        return None
    if len(strings) > 1:
        return [FilterConfig.COMBINATOR, conditions[0]]
    return conditions[0]


parse_filter = get_layer_filter
