"""json_normalize: canonical, key-order independent JSON serialization and hashing."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("json-normalize")
except PackageNotFoundError:
    __version__ = "dev"

from json_normalize.api import (
    canonicalize,
    canonicalize_async,
    digest,
    digest_async,
    fingerprint,
    md5,
    normalize,
    sha256,
    sha512,
    stringify,
)
from json_normalize.codes import ErrorCode
from json_normalize.contracts import Fingerprint
from json_normalize.errors import EncodingError, NormalizeError, UnsupportedAlgorithmError
from json_normalize.kernel.hash_utils import hash_string
from json_normalize.kernel.undefined import UNDEFINED

__all__ = [
    "__version__",
    "UNDEFINED",
    "canonicalize",
    "canonicalize_async",
    "digest",
    "digest_async",
    "fingerprint",
    "hash_string",
    "md5",
    "normalize",
    "sha256",
    "sha512",
    "stringify",
    "Fingerprint",
    "ErrorCode",
    "NormalizeError",
    "EncodingError",
    "UnsupportedAlgorithmError",
]
