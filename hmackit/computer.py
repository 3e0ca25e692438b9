# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
RFC 2104 HMAC computation with up-front input validation.

HmacComputer is the single entry point for producing MACs. It rejects empty
keys and unknown algorithms before any hashing happens, delegates the keyed
hash to a HashEngine, and encodes the result as raw bytes or lowercase hex.

The last algorithm string confirmed as supported is memoized, so repeated
calls with the same algorithm skip the engine's enumeration. The memo is an
exact string match: "SHA256" and "sha256" are both supported, but each one
only hits the memo when it was the string that filled it.

Example Usage:
    >>> from hmackit import HmacComputer, OutputEncoding
    >>> computer = HmacComputer()
    >>> computer.compute(b"Jefe", "sha256", b"what do ya want for nothing?")[:16]
    '5bdcc146bf60754e'
    >>> computer.get_output_size("sha256", OutputEncoding.RAW_BINARY)
    32
"""

import logging
import threading
from typing import List, Optional

from .cache import SupportedAlgorithmCache
from .config import settings
from .engine import HashEngine, create_engine
from .errors import (
    InvalidArgumentError,
    key_empty_error,
    unsupported_algorithm_error,
)
from .types import BytesLike, MacOutcome, MacResult, OutputEncoding

logger = logging.getLogger(__name__)

# Fixed inputs used to measure output size; the size depends only on
# algorithm and encoding
OUTPUT_SIZE_KEY = "key"
OUTPUT_SIZE_DATA = "data"


def _to_bytes(value: BytesLike, field: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgumentError(
        f"{field} must be bytes or str, got {type(value).__name__}"
    )


class HmacComputer:
    """
    Validates inputs and computes HMACs through a HashEngine.

    Instances are safe to share between threads; the only mutable state is
    the supported-algorithm cache, which guards itself.
    """

    def __init__(
        self,
        engine: Optional[HashEngine] = None,
        cache: Optional[SupportedAlgorithmCache] = None,
    ):
        """
        Initialize computer.

        Args:
            engine: Hash engine to delegate to (default: settings.engine)
            cache: Supported-algorithm cache (default: a new empty cache)
        """
        self.engine = engine if engine is not None else create_engine(settings.engine)
        self.cache = cache if cache is not None else SupportedAlgorithmCache()

    def compute(
        self,
        key: BytesLike,
        algorithm: str,
        data: BytesLike,
        encoding: OutputEncoding = OutputEncoding.HEX_STRING,
    ) -> MacResult:
        """
        Compute the HMAC of ``data`` under ``key``.

        Validation runs in order and stops at the first failure: key, then
        algorithm name, then data and encoding, then algorithm support.

        Args:
            key: Secret key, must be non-empty (str is encoded as UTF-8)
            algorithm: Hash algorithm name, case-insensitive (e.g. "sha256")
            data: Message to authenticate (str is encoded as UTF-8)
            encoding: HEX_STRING (default) or RAW_BINARY

        Returns:
            Lowercase hex string, or raw bytes for RAW_BINARY

        Raises:
            InvalidArgumentError: Empty key, empty or unsupported algorithm,
                or an unknown encoding
            EngineError: Propagated unchanged from the engine

        Example:
            >>> len(computer.compute("key", "md5", "data"))
            32
        """
        if not key:
            logger.debug("Rejected HMAC request: empty key")
            raise key_empty_error()
        key_bytes = _to_bytes(key, "key")

        if not algorithm or not isinstance(algorithm, str):
            logger.debug(f"Rejected HMAC request: invalid algorithm {algorithm!r}")
            raise unsupported_algorithm_error(algorithm)

        data_bytes = _to_bytes(data, "data")
        if not isinstance(encoding, OutputEncoding):
            raise InvalidArgumentError(f"unknown output encoding {encoding!r}")

        # is_supported answers exact cache hits without touching the engine
        if not self.is_supported(algorithm):
            logger.debug(f"Rejected HMAC request: unsupported algorithm {algorithm!r}")
            raise unsupported_algorithm_error(algorithm)

        raw = self.engine.keyed_hash(algorithm, data_bytes, key_bytes)

        if encoding is OutputEncoding.HEX_STRING:
            return raw.hex()
        return raw

    def try_compute(
        self,
        key: BytesLike,
        algorithm: str,
        data: BytesLike,
        encoding: OutputEncoding = OutputEncoding.HEX_STRING,
    ) -> MacOutcome:
        """
        Compute an HMAC, returning validation failures instead of raising.

        Engine failures are not validation failures and still propagate.

        Returns:
            MacOutcome holding either the MAC or the InvalidArgumentError
        """
        try:
            return MacOutcome(value=self.compute(key, algorithm, data, encoding))
        except InvalidArgumentError as e:
            return MacOutcome(error=e)

    def is_supported(self, algorithm: str) -> bool:
        """
        Check whether the engine can compute HMAC with ``algorithm``.

        Matching is case-insensitive. A confirmed algorithm is cached under
        the exact string given, not its lowercase form.

        Args:
            algorithm: Hash algorithm name

        Returns:
            True if supported, False otherwise
        """
        if self.cache.matches(algorithm):
            return True

        if not algorithm or not isinstance(algorithm, str):
            return False

        if algorithm.lower() in self.engine.enumerate_supported_algorithms():
            self.cache.set(algorithm)
            logger.debug(f"Algorithm {algorithm!r} confirmed supported, cached")
            return True

        return False

    def get_output_size(
        self,
        algorithm: str,
        encoding: OutputEncoding = OutputEncoding.HEX_STRING,
    ) -> int:
        """
        Get the MAC length in bytes for an algorithm and encoding.

        Measured by computing a MAC over fixed inputs.

        Args:
            algorithm: Hash algorithm name
            encoding: HEX_STRING (default) or RAW_BINARY

        Returns:
            Output length in bytes (hex output counts one byte per digit)

        Raises:
            InvalidArgumentError: If the algorithm is unsupported

        Example:
            >>> computer.get_output_size("sha256")
            64
        """
        result = self.compute(OUTPUT_SIZE_KEY, algorithm, OUTPUT_SIZE_DATA, encoding)
        if isinstance(result, str):
            result = result.encode("ascii")
        return len(result)

    def get_supported_algorithms(self) -> List[str]:
        """Return the engine's supported algorithms, in engine order."""
        return list(self.engine.enumerate_supported_algorithms())

    def clear_supported_algorithm_cache(self) -> None:
        """Forget the last confirmed algorithm."""
        self.cache.clear()


# Process-wide computer behind the module-level shortcuts
_default_computer: Optional[HmacComputer] = None
_default_lock = threading.Lock()


def get_default_computer() -> HmacComputer:
    """Return the shared computer, creating it from settings on first use."""
    global _default_computer
    with _default_lock:
        if _default_computer is None:
            _default_computer = HmacComputer()
            logger.debug(f"Default HmacComputer created with '{settings.engine}' engine")
        return _default_computer


def reset_default_computer() -> None:
    """Discard the shared computer; the next shortcut call builds a new one."""
    global _default_computer
    with _default_lock:
        _default_computer = None


def compute(
    key: BytesLike,
    algorithm: str,
    data: BytesLike,
    encoding: Optional[OutputEncoding] = None,
) -> MacResult:
    """HmacComputer.compute on the shared computer (encoding defaults to settings)."""
    if encoding is None:
        encoding = settings.output_encoding
    return get_default_computer().compute(key, algorithm, data, encoding)


def try_compute(
    key: BytesLike,
    algorithm: str,
    data: BytesLike,
    encoding: Optional[OutputEncoding] = None,
) -> MacOutcome:
    """HmacComputer.try_compute on the shared computer."""
    if encoding is None:
        encoding = settings.output_encoding
    return get_default_computer().try_compute(key, algorithm, data, encoding)


def get_output_size(algorithm: str, encoding: Optional[OutputEncoding] = None) -> int:
    """HmacComputer.get_output_size on the shared computer."""
    if encoding is None:
        encoding = settings.output_encoding
    return get_default_computer().get_output_size(algorithm, encoding)


def get_supported_algorithms() -> List[str]:
    """HmacComputer.get_supported_algorithms on the shared computer."""
    return get_default_computer().get_supported_algorithms()


def is_supported(algorithm: str) -> bool:
    """HmacComputer.is_supported on the shared computer."""
    return get_default_computer().is_supported(algorithm)


def clear_supported_algorithm_cache() -> None:
    """HmacComputer.clear_supported_algorithm_cache on the shared computer."""
    get_default_computer().clear_supported_algorithm_cache()
