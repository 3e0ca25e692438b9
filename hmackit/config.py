# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Configuration management for hmackit."""

import logging
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import OutputEncoding


class Settings(BaseSettings):
    """Settings loaded from HMACKIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HMACKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Engine backing the default computer
    engine: Literal["cryptography", "hashlib"] = "cryptography"

    # Encoding used by the module-level shortcuts when none is given
    default_encoding: Literal["hex", "raw"] = "hex"

    # Logging
    log_level: str = "WARNING"

    @property
    def output_encoding(self) -> OutputEncoding:
        """Map default_encoding onto OutputEncoding."""
        return OutputEncoding(self.default_encoding)


def configure_logging(config: Optional[Settings] = None) -> None:
    """
    Apply ``log_level`` to the hmackit logger hierarchy.

    hmackit never installs handlers; the host application owns those.

    Args:
        config: Settings to read (default: module-level settings)
    """
    config = config or settings
    logging.getLogger("hmackit").setLevel(config.log_level.upper())


# Global settings instance
settings = Settings()
