"""Public API for json_normalize.

Three forms of the same operation:
- ``canonicalize`` / ``digest``: synchronous, raise on failure
- ``canonicalize_async`` / ``digest_async``: coroutines on an asyncio loop
- ``normalize`` / ``stringify`` / ``md5`` / ``sha256`` / ``sha512``:
  callback forms calling ``done(error, result)`` exactly once

All of them share one node walk (``kernel.serializer``) and differ only in
the driver resolving child walks, so their output is byte-identical.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from json_normalize.codes import ErrorCode
from json_normalize.contracts import Fingerprint
from json_normalize.errors import EncodingError
from json_normalize.kernel.drivers import run_async, run_sync
from json_normalize.kernel.hash_utils import hexdigest, resolve_algorithm
from json_normalize.kernel.replacer import Replacer
from json_normalize.kernel.serializer import serialize_node
from json_normalize.settings import get_settings

logger = logging.getLogger(__name__)

Done = Callable[[Optional[BaseException], Any], Any]


def canonicalize(value: Any, replacer: Optional[Replacer] = None) -> Optional[str]:
    """Serialize a value to its canonical JSON text.

    Args:
        value: The value to serialize
        replacer: Optional ``(key, value) -> value`` transform, called once per
            node like the replacer of ``JSON.stringify``; the root key is None

    Returns:
        Canonical JSON string, or None when the value has no representation
        (UNDEFINED, a callable, or a replacer returning one at the root)

    Raises:
        EncodingError: If the value (or a replacer result) cannot be encoded
    """
    return run_sync(serialize_node(None, value, replacer))


async def canonicalize_async(value: Any, replacer: Optional[Replacer] = None) -> Optional[str]:
    """Asynchronous twin of ``canonicalize``; yields to the loop once per node."""
    return await run_async(serialize_node(None, value, replacer))


def _resolve_or_default(algorithm: Optional[str]) -> str:
    if algorithm is None:
        return get_settings().default_algorithm
    return resolve_algorithm(algorithm)


def _hash_canonical(canonical: Optional[str], algorithm: str) -> str:
    if canonical is None:
        raise EncodingError(
            "Value has no JSON representation and cannot be digested",
            ErrorCode.NO_REPRESENTATION,
        )
    logger.debug("Digesting canonical form (%s, %d chars)", algorithm, len(canonical))
    return hexdigest(canonical, algorithm)


def digest(
    value: Any,
    algorithm: Optional[str] = None,
    replacer: Optional[Replacer] = None,
) -> str:
    """Hash the canonical form of a value.

    Args:
        value: The value to digest
        algorithm: hashlib algorithm name; defaults to the configured
            ``default_algorithm`` (md5 unless overridden)
        replacer: Optional transform, as for ``canonicalize``

    Returns:
        Lowercase hex digest

    Raises:
        UnsupportedAlgorithmError: If the algorithm is unknown
        EncodingError: If the value cannot be encoded or has no representation
    """
    name = _resolve_or_default(algorithm)
    return _hash_canonical(canonicalize(value, replacer), name)


async def digest_async(
    value: Any,
    algorithm: Optional[str] = None,
    replacer: Optional[Replacer] = None,
) -> str:
    """Asynchronous twin of ``digest``."""
    name = _resolve_or_default(algorithm)
    return _hash_canonical(await canonicalize_async(value, replacer), name)


def fingerprint(
    value: Any,
    algorithm: Optional[str] = None,
    replacer: Optional[Replacer] = None,
) -> Fingerprint:
    """Return the canonical form and its digest together."""
    name = _resolve_or_default(algorithm)
    canonical = canonicalize(value, replacer)
    hex_digest = _hash_canonical(canonical, name)
    return Fingerprint(algorithm=name, canonical=canonical, digest=hex_digest)


async def _deliver(coro, done: Done) -> None:
    try:
        result = await coro
    except Exception as e:
        logger.debug("Delivering failure to completion callback: %s", e)
        done(e, None)
        return
    done(None, result)


def _schedule(start: Callable[[], Any], done: Done) -> "asyncio.Task[None]":
    # Resolve the loop before the coroutine exists.
    loop = asyncio.get_running_loop()
    return loop.create_task(_deliver(start(), done))


def normalize(
    value: Any,
    replacer: Any = None,
    done: Optional[Done] = None,
) -> Optional["asyncio.Task[None]"]:
    """Canonicalize on the running event loop and report through a callback.

    ``done(error, result)`` is called exactly once: ``(None, text)`` on
    success, ``(exc, None)`` on failure. When only one callable follows the
    value it is the completion callback, not a replacer.

    Without a callable completion callback nothing is scheduled and None is
    returned.

    Returns:
        The scheduled task, or None for the no-op case

    Raises:
        RuntimeError: If called outside a running event loop
    """
    if done is None and callable(replacer):
        done, replacer = replacer, None
    if not callable(done):
        logger.debug("normalize() called without a completion callback; ignoring")
        return None
    if not callable(replacer):
        replacer = None
    return _schedule(lambda: canonicalize_async(value, replacer), done)


def stringify(
    value: Any,
    replacer: Any = None,
    done: Optional[Done] = None,
) -> Optional["asyncio.Task[None]"]:
    """Alias for ``normalize``."""
    return normalize(value, replacer, done)


def _callback_digest(value: Any, algorithm: str, done: Any) -> Optional["asyncio.Task[None]"]:
    if not callable(done):
        logger.debug("%s() called without a completion callback; ignoring", algorithm)
        return None
    return _schedule(lambda: digest_async(value, algorithm), done)


def md5(value: Any, done: Optional[Done] = None) -> Optional["asyncio.Task[None]"]:
    """Callback form of ``digest(value, "md5")``."""
    return _callback_digest(value, "md5", done)


def sha256(value: Any, done: Optional[Done] = None) -> Optional["asyncio.Task[None]"]:
    """Callback form of ``digest(value, "sha256")``."""
    return _callback_digest(value, "sha256", done)


def sha512(value: Any, done: Optional[Done] = None) -> Optional["asyncio.Task[None]"]:
    """Callback form of ``digest(value, "sha512")``."""
    return _callback_digest(value, "sha512", done)
