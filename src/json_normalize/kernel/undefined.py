"""The "no value" sentinel and container predicates.

Python has no ``undefined``; ``UNDEFINED`` stands in for it. ``None`` is the
JSON ``null`` and is never treated as a missing value.
"""

from collections.abc import Mapping
from typing import Any


class _Undefined:
    """Singleton marking a value that has no JSON representation."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_array(value: Any) -> bool:
    """Lists and tuples serialize as JSON arrays."""
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Any Mapping serializes as a JSON object."""
    return isinstance(value, Mapping)


def is_container(value: Any) -> bool:
    return is_array(value) or is_object(value)


def is_function(value: Any) -> bool:
    """Callables that are not containers play the role of JSON-dropped functions."""
    return callable(value) and not is_container(value)
