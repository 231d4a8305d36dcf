"""Hash utilities for canonical strings.

Key rules:
- Canonical strings are hashed as UTF-8 bytes
- Digests are lowercase hex, no algorithm prefix
- Only hashlib algorithms with a fixed-length digest are accepted
  (shake_128 / shake_256 need a length and are rejected)
"""

import hashlib

from json_normalize.errors import UnsupportedAlgorithmError


def resolve_algorithm(algorithm: str) -> str:
    """Normalize an algorithm name and check hashlib can digest with it.

    Args:
        algorithm: Algorithm name, e.g. "md5", "SHA256", "sha512"

    Returns:
        The lower-cased algorithm name

    Raises:
        UnsupportedAlgorithmError: If hashlib does not know the algorithm or it
            has no fixed digest size
    """
    if not isinstance(algorithm, str) or not algorithm:
        raise UnsupportedAlgorithmError(str(algorithm))
    name = algorithm.lower()
    try:
        hasher = hashlib.new(name)
    except (ValueError, TypeError):
        raise UnsupportedAlgorithmError(algorithm) from None
    if name.startswith("shake_") or not hasher.digest_size:
        raise UnsupportedAlgorithmError(algorithm)
    return name


def hash_string(text: str, algorithm: str = "md5") -> str:
    """Compute the hex digest of a string.

    Args:
        text: The string to hash (encoded as UTF-8)
        algorithm: hashlib algorithm name

    Returns:
        Lowercase hex digest
    """
    return hexdigest(text, resolve_algorithm(algorithm))


def hexdigest(text: str, name: str) -> str:
    """Hex digest of a string under an algorithm name already passed through
    ``resolve_algorithm``."""
    return hashlib.new(name, text.encode("utf-8")).hexdigest()
