"""Replacer gate: the per-node transform applied before dispatch."""

from typing import Any, Callable, Optional, Tuple

from json_normalize.kernel.undefined import UNDEFINED, is_container, is_function

Replacer = Callable[[Optional[str], Any], Any]


def apply_replacer(
    key: Optional[str],
    value: Any,
    replacer: Optional[Replacer],
) -> Tuple[Any, Optional[Replacer]]:
    """Apply the replacer to one node.

    Returns the (possibly replaced) value and the replacer to hand to the
    node's children. The replacer only keeps propagating while the value is
    still a container.
    """
    if not callable(replacer):
        if is_function(value):
            return UNDEFINED, None
        return value, None

    value = replacer(key, value)
    return value, (replacer if is_container(value) else None)
