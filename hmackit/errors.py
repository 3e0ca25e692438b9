# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Error taxonomy for hmackit."""


class HmacError(Exception):
    """Base class for every error raised by hmackit."""


class InvalidArgumentError(HmacError, ValueError):
    """A key, algorithm or encoding failed validation before any hashing."""


class EngineError(HmacError, RuntimeError):
    """The hash engine could not compute a MAC for the requested algorithm."""


def key_empty_error() -> InvalidArgumentError:
    return InvalidArgumentError("key is null or empty")


def unsupported_algorithm_error(algorithm: object) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"hash algorithm not supported, provided '{algorithm}'"
    )
