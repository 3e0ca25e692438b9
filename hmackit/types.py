# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Value types shared across hmackit.

OutputEncoding selects how a MAC is handed back to the caller, and
MacOutcome carries either a MAC or the validation error that prevented it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import HmacError


# A MAC is raw bytes for RAW_BINARY and a lowercase hex string for HEX_STRING
MacResult = Union[bytes, str]

# Keys and data may be passed as text; text is hashed as UTF-8
BytesLike = Union[bytes, bytearray, memoryview, str]


class OutputEncoding(Enum):
    """Encoding of a computed MAC."""

    RAW_BINARY = "raw"
    HEX_STRING = "hex"


@dataclass(frozen=True)
class MacOutcome:
    """
    Result of HmacComputer.try_compute.

    Exactly one of ``value`` and ``error`` is set.

    Attributes:
        value: The MAC, encoded as requested
        error: The validation error that stopped the computation
    """

    value: Optional[MacResult] = None
    error: Optional[HmacError] = None

    def __post_init__(self) -> None:
        """Validate that the outcome is either a value or an error."""
        if (self.value is None) == (self.error is None):
            raise ValueError("MacOutcome requires exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> MacResult:
        """
        Return the MAC or raise the stored error.

        Raises:
            HmacError: The error captured by try_compute
        """
        if self.error is not None:
            raise self.error
        return self.value
