# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Hash engines: the keyed-hash primitives hmackit delegates to.

HmacComputer never hashes anything itself. It asks an engine which algorithms
exist and has the engine produce the raw MAC bytes. Two engines ship here:

- CryptographyEngine: HMAC from the ``cryptography`` package (default)
- HashlibEngine: HMAC from the standard library ``hmac``/``hashlib`` modules,
  covering whatever digests the linked OpenSSL provides

Each engine works out the algorithms it can actually serve once, at
construction, and answers every later enumeration from that list.
"""

import hashlib
import hmac
import logging
from typing import Callable, Dict, List, Protocol, runtime_checkable

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from .errors import EngineError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Key and message of the trial MAC that checks an algorithm works for HMAC
_TRIAL_KEY = b"hmackit-trial"
_TRIAL_DATA = b""


def _is_xof(name: str) -> bool:
    # SHAKE digests have no fixed size and cannot back an HMAC
    return name.lower().startswith("shake")


@runtime_checkable
class HashEngine(Protocol):
    """Capability consumed by HmacComputer."""

    def keyed_hash(self, algorithm: str, data: bytes, key: bytes) -> bytes:
        """Compute raw HMAC bytes, raising EngineError if ``algorithm`` is unknown."""
        ...

    def enumerate_supported_algorithms(self) -> List[str]:
        """Return every lowercase algorithm name the engine can compute."""
        ...


# Lowercase names follow hashlib naming so both engines agree on identifiers
CRYPTOGRAPHY_HASHES: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512_224": hashes.SHA512_224,
    "sha512_256": hashes.SHA512_256,
    "sha3_224": hashes.SHA3_224,
    "sha3_256": hashes.SHA3_256,
    "sha3_384": hashes.SHA3_384,
    "sha3_512": hashes.SHA3_512,
    "blake2b": lambda: hashes.BLAKE2b(64),
    "blake2s": lambda: hashes.BLAKE2s(32),
    "sm3": hashes.SM3,
}


class CryptographyEngine:
    """
    HMAC engine backed by ``cryptography.hazmat.primitives.hmac``.

    Algorithms whose HMAC context cannot be created on this OpenSSL build
    (for example MD5 under FIPS restrictions) are left out of the
    supported list.
    """

    name = "cryptography"

    def __init__(self) -> None:
        self._factories: Dict[str, Callable[[], hashes.HashAlgorithm]] = {}

        for algorithm, factory in CRYPTOGRAPHY_HASHES.items():
            try:
                crypto_hmac.HMAC(_TRIAL_KEY, factory())
            except (UnsupportedAlgorithm, InternalError):
                logger.debug(f"cryptography backend lacks HMAC-{algorithm}")
                continue
            self._factories[algorithm] = factory

        logger.debug(
            f"CryptographyEngine initialized with {len(self._factories)} algorithms"
        )

    def enumerate_supported_algorithms(self) -> List[str]:
        return list(self._factories)

    def keyed_hash(self, algorithm: str, data: bytes, key: bytes) -> bytes:
        """
        Compute HMAC with the ``cryptography`` package.

        Args:
            algorithm: Hash algorithm name (any case)
            data: Message bytes
            key: Secret key bytes

        Returns:
            Raw MAC bytes (digest size of the hash)

        Raises:
            EngineError: If the algorithm is not available on this backend
        """
        factory = self._factories.get(algorithm.lower())
        if factory is None:
            raise EngineError(f"cryptography engine cannot compute HMAC-{algorithm}")

        h = crypto_hmac.HMAC(key, factory())
        h.update(data)
        return h.finalize()


class HashlibEngine:
    """
    HMAC engine backed by the standard library.

    Enumeration strategy, chosen once at construction:
    - "available": try every name in ``hashlib.algorithms_available``
      and keep those that produce an HMAC
    - "guaranteed": ``hashlib.algorithms_guaranteed`` without the
      variable-length SHAKE functions, used when no available name works
    """

    name = "hashlib"

    def __init__(self) -> None:
        self.strategy = "available"
        algorithms = {
            name.lower() for name in hashlib.algorithms_available if self._usable(name)
        }

        if not algorithms:
            self.strategy = "guaranteed"
            algorithms = {
                name.lower()
                for name in hashlib.algorithms_guaranteed
                if not _is_xof(name)
            }

        self._algorithms: List[str] = sorted(algorithms)

        logger.debug(
            f"HashlibEngine using '{self.strategy}' strategy, "
            f"{len(self._algorithms)} algorithms"
        )

    def _usable(self, name: str) -> bool:
        if _is_xof(name):
            return False
        try:
            hmac.new(_TRIAL_KEY, _TRIAL_DATA, name).digest()
        except (ValueError, TypeError):
            logger.debug(f"hashlib lists {name} but cannot build an HMAC with it")
            return False
        return True

    def enumerate_supported_algorithms(self) -> List[str]:
        return list(self._algorithms)

    def keyed_hash(self, algorithm: str, data: bytes, key: bytes) -> bytes:
        """
        Compute HMAC with ``hmac.new``.

        Raises:
            EngineError: If the algorithm is unknown or rejected by hashlib
        """
        name = algorithm.lower()
        if name not in self._algorithms:
            raise EngineError(f"hashlib engine cannot compute HMAC-{algorithm}")

        try:
            return hmac.new(key, data, name).digest()
        except (ValueError, TypeError) as e:
            raise EngineError(f"hashlib failed to compute HMAC-{algorithm}: {e}") from e


ENGINES: Dict[str, Callable[[], HashEngine]] = {
    CryptographyEngine.name: CryptographyEngine,
    HashlibEngine.name: HashlibEngine,
}


def create_engine(name: str = CryptographyEngine.name) -> HashEngine:
    """
    Build a hash engine by name.

    Args:
        name: "cryptography" or "hashlib"

    Returns:
        A freshly constructed engine

    Raises:
        InvalidArgumentError: If no engine has that name

    Example:
        >>> engine = create_engine("hashlib")
        >>> "sha256" in engine.enumerate_supported_algorithms()
        True
    """
    try:
        factory = ENGINES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown hash engine '{name}', expected one of {sorted(ENGINES)}"
        ) from None
    return factory()
