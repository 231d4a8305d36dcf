"""Exception types for canonical serialization and hashing."""

from typing import Optional

from json_normalize.codes import ErrorCode


class NormalizeError(ValueError):
    """Base class for all json_normalize errors."""

    def __init__(self, message: str, code: ErrorCode, path: Optional[str] = None):
        self.message = message
        self.code = code
        self.path = path
        super().__init__(message)


class EncodingError(NormalizeError):
    """Raised when a value has no canonical JSON representation.

    Examples:
    - Unsupported Python types (sets, datetimes, arbitrary objects)
    - Circular references
    - Mapping keys that cannot be turned into strings
    """
    pass


class UnsupportedAlgorithmError(NormalizeError):
    """Raised when a digest algorithm is unknown or has no fixed-length digest."""

    def __init__(self, algorithm: str):
        super().__init__(
            f"Unsupported hash algorithm: {algorithm!r}",
            ErrorCode.UNSUPPORTED_ALGORITHM,
        )
        self.algorithm = algorithm
