# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Crypto backend protocol."""

from typing import Protocol, Union, runtime_checkable

from ..algorithms import Algorithm
from ..parameters import Argon2Parameters, BcryptParameters

ParameterRecord = Union[Argon2Parameters, BcryptParameters]


@runtime_checkable
class CryptoBackend(Protocol):  # pragma: no cover
    """Protocol for the primitives the facade delegates to."""

    def hash(
        self, plain: str, algorithm: Algorithm, params: ParameterRecord
    ) -> str:
        """Hash a plain text password.

        Parameters
        ----------
        plain : str
            The plain text password
        algorithm : Algorithm
            The algorithm to use
        params : ParameterRecord
            The parameters matching the algorithm family
        """
        ...

    def verify(self, plain: str, stored: str) -> bool:
        """Verify a plain text password against a stored hash.

        Must never raise.

        Parameters
        ----------
        plain : str
            The plain text password
        stored : str
            The stored hash
        """
        ...

    def needs_rehash(
        self, stored: str, algorithm: Algorithm, params: ParameterRecord
    ) -> bool:
        """Check if the stored hash differs from the algorithm and params.

        Parameters
        ----------
        stored : str
            The stored hash
        algorithm : Algorithm
            The wanted algorithm
        params : ParameterRecord
            The wanted parameters
        """
        ...

    def secure_random_int(self, minimum: int, maximum: int) -> int:
        """Get a cryptographically secure integer in [minimum, maximum].

        Parameters
        ----------
        minimum : int
            The lower bound (inclusive)
        maximum : int
            The upper bound (inclusive)
        """
        ...

    def is_algorithm_supported(self, algorithm: Algorithm) -> bool:
        """Check if the algorithm can be used.

        Parameters
        ----------
        algorithm : Algorithm
            The algorithm to check
        """
        ...


__all__ = ["CryptoBackend", "ParameterRecord"]
