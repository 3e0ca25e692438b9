# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Known-answer vectors for HMAC.

Vectors come from RFC 4231 (HMAC-SHA-224/256/384/512) and RFC 2202
(HMAC-MD5, HMAC-SHA-1), test cases 1 and 2. Any engine plugged into
HmacComputer must reproduce them byte-for-byte.
"""

import logging
from typing import Optional

from .computer import HmacComputer
from .types import OutputEncoding

logger = logging.getLogger(__name__)


_CASE_1_KEY_20 = bytes.fromhex("0b" * 20)
_CASE_1_KEY_16 = bytes.fromhex("0b" * 16)
_CASE_1_DATA = b"Hi There"
_CASE_2_KEY = b"Jefe"
_CASE_2_DATA = b"what do ya want for nothing?"


TEST_VECTORS = [
    {
        "description": "RFC 4231 test case 1, HMAC-SHA-224",
        "algorithm": "sha224",
        "key": _CASE_1_KEY_20,
        "data": _CASE_1_DATA,
        "expected": "896fb1128abbdf196832107cd49df33f47b4b1169912ba4f53684b22",
    },
    {
        "description": "RFC 4231 test case 1, HMAC-SHA-256",
        "algorithm": "sha256",
        "key": _CASE_1_KEY_20,
        "data": _CASE_1_DATA,
        "expected": (
            "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7"
        ),
    },
    {
        "description": "RFC 4231 test case 1, HMAC-SHA-384",
        "algorithm": "sha384",
        "key": _CASE_1_KEY_20,
        "data": _CASE_1_DATA,
        "expected": (
            "afd03944d84895626b0825f4ab46907f15f9dadbe4101ec682aa034c7cebc59c"
            "faea9ea9076ede7f4af152e8b2fa9cb6"
        ),
    },
    {
        "description": "RFC 4231 test case 1, HMAC-SHA-512",
        "algorithm": "sha512",
        "key": _CASE_1_KEY_20,
        "data": _CASE_1_DATA,
        "expected": (
            "87aa7cdea5ef619d4ff0b4241a1d6cb02379f4e2ce4ec2787ad0b30545e17cde"
            "daa833b7d6b8a702038b274eaea3f4e4be9d914eeb61f1702e696c203a126854"
        ),
    },
    {
        "description": "RFC 4231 test case 2, HMAC-SHA-224",
        "algorithm": "sha224",
        "key": _CASE_2_KEY,
        "data": _CASE_2_DATA,
        "expected": "a30e01098bc6dbbf45690f3a7e9e6d0f8bbea2a39e6148008fd05e44",
    },
    {
        "description": "RFC 4231 test case 2, HMAC-SHA-256",
        "algorithm": "sha256",
        "key": _CASE_2_KEY,
        "data": _CASE_2_DATA,
        "expected": (
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        ),
    },
    {
        "description": "RFC 4231 test case 2, HMAC-SHA-384",
        "algorithm": "sha384",
        "key": _CASE_2_KEY,
        "data": _CASE_2_DATA,
        "expected": (
            "af45d2e376484031617f78d2b58a6b1b9c7ef464f5a01b47e42ec3736322445e"
            "8e2240ca5e69e2c78b3239ecfab21649"
        ),
    },
    {
        "description": "RFC 4231 test case 2, HMAC-SHA-512",
        "algorithm": "sha512",
        "key": _CASE_2_KEY,
        "data": _CASE_2_DATA,
        "expected": (
            "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
            "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"
        ),
    },
    {
        "description": "RFC 2202 test case 1, HMAC-MD5",
        "algorithm": "md5",
        "key": _CASE_1_KEY_16,
        "data": _CASE_1_DATA,
        "expected": "9294727a3638bb1c13f48ef8158bfc9d",
    },
    {
        "description": "RFC 2202 test case 2, HMAC-MD5",
        "algorithm": "md5",
        "key": _CASE_2_KEY,
        "data": _CASE_2_DATA,
        "expected": "750c783e6ab0b503eaa86e310a5db738",
    },
    {
        "description": "RFC 2202 test case 1, HMAC-SHA-1",
        "algorithm": "sha1",
        "key": _CASE_1_KEY_20,
        "data": _CASE_1_DATA,
        "expected": "b617318655057264e28bc0b6fb378c8ef146be00",
    },
    {
        "description": "RFC 2202 test case 2, HMAC-SHA-1",
        "algorithm": "sha1",
        "key": _CASE_2_KEY,
        "data": _CASE_2_DATA,
        "expected": "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79",
    },
]


def generate_test_vectors(computer: Optional[HmacComputer] = None) -> list[dict]:
    """
    Compute every known-answer vector the engine supports.

    Args:
        computer: Computer to exercise (default: a new HmacComputer)

    Returns:
        Vector dictionaries extended with the computed ``mac`` hex string.
        Vectors for unsupported algorithms are omitted.

    Example:
        >>> vectors = generate_test_vectors()
        >>> all('mac' in v for v in vectors)
        True
    """
    computer = computer or HmacComputer()

    vectors = []
    for vector in TEST_VECTORS:
        if not computer.is_supported(vector["algorithm"]):
            logger.debug(f"Skipping vector, engine lacks {vector['algorithm']}")
            continue
        mac = computer.compute(
            vector["key"],
            vector["algorithm"],
            vector["data"],
            OutputEncoding.HEX_STRING,
        )
        vectors.append({**vector, "mac": mac})
    return vectors


def validate_implementation(computer: Optional[HmacComputer] = None) -> bool:
    """
    Check the engine against the known-answer vectors.

    Returns:
        True if every supported vector matches its published MAC, False on
        a mismatch or when the engine supports none of the vectors

    Example:
        >>> validate_implementation()
        True
    """
    vectors = generate_test_vectors(computer)

    if not vectors:
        logger.warning("Engine supports none of the HMAC test vector algorithms")
        return False

    for vector in vectors:
        if vector["mac"] != vector["expected"]:
            logger.error(
                f"Vector failed: {vector['description']} "
                f"(expected {vector['expected']}, got {vector['mac']})"
            )
            return False

    logger.info(f"All {len(vectors)} HMAC test vectors passed")
    return True
