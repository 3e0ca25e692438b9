# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
hmackit - HMAC computation with algorithm validation

This package provides a single, auditable entry point for RFC 2104 HMACs:
- Validation of keys and hash algorithm names before any hashing
- Delegation to a pluggable hash engine (cryptography or hashlib)
- Raw-binary or lowercase-hex output, with output size lookup

All HMAC computation goes through HmacComputer to ensure:
- Unsupported algorithms are rejected with a clear message
- Empty keys never reach the hash engine
- Output encoding is consistent across callers

Modules:
    computer: HmacComputer and module-level shortcuts
    engine: HashEngine protocol and bundled engines
    cache: Single-slot supported-algorithm cache
    errors: Error taxonomy
    vectors: RFC 4231 / RFC 2202 known-answer vectors

Example Usage:
    >>> from hmackit import compute, get_output_size, OutputEncoding
    >>>
    >>> # Hex MAC with SHA-256
    >>> tag = compute(b"secret", "sha256", b"message")
    >>> len(tag)
    64
    >>>
    >>> # Raw MAC size for SHA-512
    >>> get_output_size("sha512", OutputEncoding.RAW_BINARY)
    64
"""

__version__ = "0.1.0"
__author__ = "The Birthmark Standard Foundation"

# Import value types and errors
from .types import MacOutcome, OutputEncoding
from .errors import EngineError, HmacError, InvalidArgumentError

# Import engines and cache
from .cache import SupportedAlgorithmCache
from .engine import CryptographyEngine, HashEngine, HashlibEngine, create_engine

# Import computer and shortcuts
from .computer import (
    HmacComputer,
    clear_supported_algorithm_cache,
    compute,
    get_default_computer,
    get_output_size,
    get_supported_algorithms,
    is_supported,
    reset_default_computer,
    try_compute,
)

# Define public API
__all__ = [
    # Types
    "MacOutcome",
    "OutputEncoding",
    # Errors
    "HmacError",
    "InvalidArgumentError",
    "EngineError",
    # Engines
    "HashEngine",
    "CryptographyEngine",
    "HashlibEngine",
    "create_engine",
    "SupportedAlgorithmCache",
    # Computation
    "HmacComputer",
    "compute",
    "try_compute",
    "get_output_size",
    "get_supported_algorithms",
    "is_supported",
    "clear_supported_algorithm_cache",
    "get_default_computer",
    "reset_default_computer",
]
