# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Single-slot memo for the last hash algorithm confirmed as supported.

Repeated MAC computations with the same algorithm string skip the engine's
enumeration entirely. The slot only ever holds a value the engine has
confirmed, so a stale read can at worst skip a redundant re-check.
"""

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class SupportedAlgorithmCache:
    """
    Holds at most one algorithm identifier.

    Features:
    - Exact match: lookups compare the caller's string as-is, no case folding
    - Thread-safe: every access holds a lock, last writer wins
    - Statistics: hit/miss counters for lookups
    """

    def __init__(self) -> None:
        self._algorithm: Optional[str] = None
        self._lock = threading.Lock()

        # Statistics
        self.hits = 0
        self.misses = 0

    def get(self) -> Optional[str]:
        """Return the cached algorithm, or None when empty."""
        with self._lock:
            return self._algorithm

    def set(self, algorithm: str) -> None:
        """Replace the cached algorithm."""
        with self._lock:
            self._algorithm = algorithm

    def clear(self) -> None:
        """Empty the slot. Safe to call when already empty."""
        with self._lock:
            self._algorithm = None
        logger.debug("Supported algorithm cache cleared")

    def matches(self, algorithm: Optional[str]) -> bool:
        """
        Check whether ``algorithm`` is exactly the cached value.

        Args:
            algorithm: Algorithm string as passed by the caller

        Returns:
            True on an exact hit, False when empty or different
        """
        with self._lock:
            hit = algorithm is not None and algorithm == self._algorithm
            if hit:
                self.hits += 1
            else:
                self.misses += 1
        return hit

    def get_statistics(self) -> Dict[str, object]:
        """Return cache statistics."""
        with self._lock:
            total = self.hits + self.misses
            return {
                "algorithm": self._algorithm,
                "hits": self.hits,
                "misses": self.misses,
                "hit_rate": self.hits / total if total > 0 else 0.0,
            }

    def __repr__(self) -> str:
        return f"SupportedAlgorithmCache(algorithm={self.get()!r})"
