"""Error code constants for json_normalize errors.

These constants prevent stringly-typed error codes and let callers branch on
the reason a value could not be canonicalized or hashed.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by NormalizeError and its subclasses."""

    # Encoding errors
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    INVALID_KEY = "INVALID_KEY"
    CIRCULAR_REFERENCE = "CIRCULAR_REFERENCE"
    UNEXPECTED_CONTAINER = "UNEXPECTED_CONTAINER"
    NO_REPRESENTATION = "NO_REPRESENTATION"

    # Digest errors
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"
