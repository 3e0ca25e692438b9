# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Tests for settings and the module-level shortcuts."""

import logging

import pytest
from pydantic import ValidationError

import hmackit
from hmackit import (
    CryptographyEngine,
    HashlibEngine,
    InvalidArgumentError,
    OutputEncoding,
)
from hmackit.config import Settings, configure_logging, settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Defaults select the cryptography engine and hex output."""
        for name in ("HMACKIT_ENGINE", "HMACKIT_DEFAULT_ENCODING", "HMACKIT_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.engine == "cryptography"
        assert config.output_encoding is OutputEncoding.HEX_STRING
        assert config.log_level == "WARNING"

    def test_from_environment(self, monkeypatch):
        """HMACKIT_* variables override defaults."""
        monkeypatch.setenv("HMACKIT_ENGINE", "hashlib")
        monkeypatch.setenv("HMACKIT_DEFAULT_ENCODING", "raw")

        config = Settings(_env_file=None)

        assert config.engine == "hashlib"
        assert config.output_encoding is OutputEncoding.RAW_BINARY

    def test_invalid_engine(self, monkeypatch):
        """Unknown engine names fail validation."""
        monkeypatch.setenv("HMACKIT_ENGINE", "openssl-cli")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_configure_logging(self):
        """configure_logging sets the package logger level."""
        logger = logging.getLogger("hmackit")
        previous = logger.level
        try:
            configure_logging(Settings(_env_file=None, log_level="debug"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)


class TestModuleShortcuts:
    """Test the process-wide computer behind the module functions."""

    def test_compute(self):
        """Module compute matches an explicit computer."""
        assert hmackit.compute(b"key", "sha256", b"data") == hmackit.HmacComputer().compute(
            b"key", "sha256", b"data"
        )

    def test_output_size(self):
        """Module get_output_size matches digest sizes."""
        assert hmackit.get_output_size("sha256") == 64
        assert hmackit.get_output_size("sha256", OutputEncoding.RAW_BINARY) == 32

    def test_default_encoding_from_settings(self, monkeypatch):
        """Shortcuts fall back to the configured encoding."""
        monkeypatch.setattr(settings, "default_encoding", "raw")

        assert isinstance(hmackit.compute(b"key", "sha256", b"data"), bytes)
        assert hmackit.get_output_size("sha256") == 32

    def test_engine_from_settings(self, monkeypatch):
        """The shared computer is built with the configured engine."""
        monkeypatch.setattr(settings, "engine", "hashlib")
        hmackit.reset_default_computer()

        assert isinstance(hmackit.get_default_computer().engine, HashlibEngine)

        hmackit.reset_default_computer()
        monkeypatch.setattr(settings, "engine", "cryptography")

        assert isinstance(hmackit.get_default_computer().engine, CryptographyEngine)

    def test_shared_cache(self):
        """Shortcuts share one cache until cleared."""
        assert hmackit.is_supported("sha384")
        assert hmackit.get_default_computer().cache.get() == "sha384"

        hmackit.clear_supported_algorithm_cache()

        assert hmackit.get_default_computer().cache.get() is None

    def test_reset(self):
        """reset_default_computer discards the shared instance."""
        first = hmackit.get_default_computer()
        hmackit.reset_default_computer()

        assert hmackit.get_default_computer() is not first

    def test_supported_algorithms(self):
        """Module enumeration includes SHA-256."""
        assert "sha256" in hmackit.get_supported_algorithms()

    def test_try_compute(self):
        """Module try_compute returns failures as outcomes."""
        assert hmackit.try_compute(b"key", "sha256", b"data").ok

        outcome = hmackit.try_compute(b"", "sha256", b"data")
        assert isinstance(outcome.error, InvalidArgumentError)
