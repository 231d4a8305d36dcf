"""Recursive canonical serializer.

Each node is walked by a generator. A container node yields the list of its
child walks (fan-out) and is resumed with their fragments in the same
positional order (fan-in); a literal node returns without yielding. How the
child walks are resolved is left to the drivers in ``drivers.py``, so the
sync and async forms share every rule below.

Rules:
- Arrays keep index order; children with no value become null
- Objects drop children with no value
- Object members are sorted on the rendered ``"key":value`` text, by UTF-16
  code unit, not on the bare key
"""

from typing import Any, FrozenSet, Generator, List, Optional, Sequence

from json_normalize.codes import ErrorCode
from json_normalize.errors import EncodingError
from json_normalize.kernel.literal import encode_key, encode_literal, encode_string
from json_normalize.kernel.replacer import Replacer, apply_replacer
from json_normalize.kernel.undefined import is_array, is_container

Fragment = Optional[str]
Walk = Generator[List["Walk"], List[Fragment], Fragment]


def _member_sort_key(member: str) -> bytes:
    # Big-endian UTF-16 bytes compare in code unit order.
    return member.encode("utf-16-be")


def assemble_array(fragments: Sequence[Fragment]) -> str:
    return "[" + ",".join("null" if f is None else f for f in fragments) + "]"


def assemble_object(keys: Sequence[str], fragments: Sequence[Fragment]) -> str:
    members = [
        f"{encode_string(key)}:{fragment}"
        for key, fragment in zip(keys, fragments)
        if fragment is not None
    ]
    members.sort(key=_member_sort_key)
    return "{" + ",".join(members) + "}"


def serialize_node(
    key: Optional[str],
    value: Any,
    replacer: Optional[Replacer] = None,
    path: str = "",
    ancestors: FrozenSet[int] = frozenset(),
) -> Walk:
    """Walk one node of the value tree.

    Args:
        key: Member name or stringified index; None for the root
        value: The node value
        replacer: Optional transform applied before dispatch
        path: Location of the node, used in error messages
        ancestors: ids of the containers enclosing this node

    Returns:
        Generator producing the node's fragment (None for no value)
    """
    value, replacer = apply_replacer(key, value, replacer)
    if not is_container(value):
        return encode_literal(value, path)

    marker = id(value)
    if marker in ancestors:
        raise EncodingError(
            f"Circular reference detected at {path or '<root>'}",
            ErrorCode.CIRCULAR_REFERENCE,
            path,
        )
    ancestors = ancestors | {marker}

    if is_array(value):
        children = [
            serialize_node(str(index), item, replacer, f"{path}[{index}]", ancestors)
            for index, item in enumerate(value)
        ]
        fragments = yield children
        return assemble_array(fragments)

    keys = []
    children = []
    for raw_key, item in value.items():
        member = encode_key(raw_key, path)
        keys.append(member)
        children.append(
            serialize_node(member, item, replacer, f"{path}.{member}" if path else member, ancestors)
        )
    fragments = yield children
    return assemble_object(keys, fragments)
