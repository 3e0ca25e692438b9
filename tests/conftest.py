# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Pytest configuration and fixtures."""

import hashlib
import hmac

import pytest

from hmackit import HmacComputer, reset_default_computer
from hmackit.errors import EngineError


class CountingEngine:
    """Hash engine over hashlib that records every call it receives."""

    def __init__(self, algorithms=("md5", "sha1", "sha256", "sha512")):
        self.algorithms = list(algorithms)
        self.enumerate_calls = 0
        self.hash_calls = []

    def enumerate_supported_algorithms(self):
        self.enumerate_calls += 1
        return list(self.algorithms)

    def keyed_hash(self, algorithm, data, key):
        self.hash_calls.append((algorithm, data, key))
        name = algorithm.lower()
        if name not in self.algorithms:
            raise EngineError(f"counting engine cannot compute HMAC-{algorithm}")
        return hmac.new(key, data, getattr(hashlib, name)).digest()


@pytest.fixture
def counting_engine():
    """Fresh counting engine."""
    return CountingEngine()


@pytest.fixture
def computer(counting_engine):
    """HmacComputer over the counting engine with an empty cache."""
    return HmacComputer(engine=counting_engine)


@pytest.fixture(autouse=True)
def isolated_default_computer():
    """Keep the process-wide computer from leaking between tests."""
    reset_default_computer()
    yield
    reset_default_computer()
