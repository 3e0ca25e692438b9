# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for the RFC 4231 / RFC 2202 known-answer vectors.

Every engine must reproduce the published MACs byte-for-byte.
"""

import pytest

from hmackit import HmacComputer, MacOutcome, create_engine
from hmackit.vectors import (
    TEST_VECTORS,
    generate_test_vectors,
    validate_implementation,
)
from tests.conftest import CountingEngine


class TestKnownAnswers:
    """Test published HMAC vectors."""

    @pytest.mark.parametrize("engine_name", ["cryptography", "hashlib"])
    def test_validate_implementation(self, engine_name):
        """Bundled engines reproduce every vector they support."""
        computer = HmacComputer(engine=create_engine(engine_name))

        assert validate_implementation(computer)

    @pytest.mark.parametrize(
        "vector", TEST_VECTORS, ids=[v["description"] for v in TEST_VECTORS]
    )
    def test_vector(self, computer, vector):
        """Each vector matches through the counting engine."""
        if not computer.is_supported(vector["algorithm"]):
            pytest.skip(f"{vector['algorithm']} not offered by the counting engine")

        assert computer.compute(vector["key"], vector["algorithm"], vector["data"]) == (
            vector["expected"]
        )

    def test_generate_skips_unsupported(self, computer):
        """Vectors for algorithms the engine lacks are left out."""
        vectors = generate_test_vectors(computer)

        algorithms = {v["algorithm"] for v in vectors}
        assert algorithms == {"md5", "sha1", "sha256", "sha512"}
        assert len(vectors) == 8
        for vector in vectors:
            assert "mac" in vector

    def test_detects_wrong_engine(self):
        """A misbehaving engine fails validation."""

        class WrongEngine(CountingEngine):
            def keyed_hash(self, algorithm, data, key):
                return bytes(len(super().keyed_hash(algorithm, data, key)))

        assert not validate_implementation(HmacComputer(engine=WrongEngine()))

    def test_no_applicable_vectors(self):
        """An engine covering none of the vector algorithms does not pass."""
        computer = HmacComputer(engine=CountingEngine(algorithms=("sha3_256",)))

        assert generate_test_vectors(computer) == []
        assert validate_implementation(computer) is False


class TestMacOutcome:
    """Test the outcome value type."""

    def test_requires_exactly_one(self):
        """An outcome must be either a value or an error."""
        with pytest.raises(ValueError):
            MacOutcome()
