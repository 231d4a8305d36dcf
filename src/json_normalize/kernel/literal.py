"""Literal encoding for non-container values.

Rules follow standard JSON stringification:
- str: quoted, non-ASCII kept verbatim, lone surrogates escaped as \\uXXXX
- int: decimal text
- float: shortest repr; nan/inf/-inf become null
- bool / None: true, false, null
- UNDEFINED and callables: no value (None), which is not the same as "null"
"""

import json
import math
import re
from typing import Any, Optional

from json_normalize.codes import ErrorCode
from json_normalize.errors import EncodingError
from json_normalize.kernel.undefined import UNDEFINED, is_container, is_function

_SURROGATE = re.compile("[\ud800-\udfff]")


def _escape_surrogate(match: "re.Match[str]") -> str:
    return "\\u{0:04x}".format(ord(match.group(0)))


def encode_string(value: str) -> str:
    """Quote and escape a string the way JSON.stringify does."""
    encoded = json.dumps(value, ensure_ascii=False)
    return _SURROGATE.sub(_escape_surrogate, encoded)


def encode_literal(value: Any, path: str = "") -> Optional[str]:
    """Encode a non-container value.

    Args:
        value: The value to encode
        path: Location of the value, used in error messages

    Returns:
        The JSON literal text, or None when the value has no representation

    Raises:
        EncodingError: If value is a container or a non-JSON type
    """
    if value is UNDEFINED:
        return None
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return "null"
        return float.__repr__(value)
    if is_container(value):
        raise EncodingError(
            f"Container reached the literal encoder at {path or '<root>'}",
            ErrorCode.UNEXPECTED_CONTAINER,
            path,
        )
    if is_function(value):
        return None
    raise EncodingError(
        f"Non-JSON type at {path or '<root>'}: {type(value).__name__}",
        ErrorCode.UNSUPPORTED_TYPE,
        path,
    )


def encode_key(key: Any, path: str = "") -> str:
    """Turn a mapping key into the string used for the member name.

    str keys are used as-is; int, float, bool and None keys become their
    literal text, like the standard library encoder does (non-finite float
    keys become NaN, Infinity and -Infinity).
    """
    if isinstance(key, str):
        return key
    if isinstance(key, float) and not math.isfinite(key):
        if math.isnan(key):
            return "NaN"
        return "Infinity" if key > 0 else "-Infinity"
    if key is None or isinstance(key, (bool, int, float)):
        return encode_literal(key, path)
    raise EncodingError(
        f"Mapping keys must be strings at {path or '<root>'}, got {type(key).__name__}",
        ErrorCode.INVALID_KEY,
        path,
    )
