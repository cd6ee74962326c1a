# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Typed errors raised by passcrypt."""

from typing import Any


class CryptError(Exception):
    """Base class for all passcrypt errors."""


class InvalidParameter(CryptError, ValueError):
    """A setter received an out-of-domain value.

    Parameters
    ----------
    message : str
        The error message.
    value : Any
        The rejected value.
    bound : Any
        The violated bound (a single value or a ``(low, high)`` tuple).
    """

    def __init__(self, message: str, value: Any = None, bound: Any = None):
        super().__init__(message)
        self.value = value
        self.bound = bound


class PasswordTooLong(CryptError, ValueError):
    """The password exceeds the algorithm's input limit.

    Parameters
    ----------
    limit : int
        The maximum accepted length in characters.
    length : int
        The actual length of the password in characters.
    """

    def __init__(self, limit: int, length: int):
        super().__init__(
            f"Password too long for bcrypt ({limit} max): {length} chars"
        )
        self.limit = limit
        self.length = length


class HashFailure(CryptError):
    """The backend could not hash the password."""


class RandomSourceUnavailable(CryptError):
    """The secure random source failed."""


__all__ = [
    "CryptError",
    "InvalidParameter",
    "PasswordTooLong",
    "HashFailure",
    "RandomSourceUnavailable",
]
