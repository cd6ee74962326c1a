# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=too-many-try-statements,broad-exception-caught,invalid-name
# pylint: disable=too-complex,no-self-use,redefined-variable-type,line-too-long
# flake8: noqa: E501,C901
"""Default crypto backend, dispatching on algorithm and hash format."""

import secrets

from ..algorithms import Algorithm
from ..errors import RandomSourceUnavailable
from ..parameters import Argon2Parameters, BcryptParameters
from ._argon_backend import ARGON2_PREFIX, HAS_ARGON, Argon2Hasher
from ._bcrypt_backend import BCRYPT_PREFIXES, BcryptHasher
from .protocol import CryptoBackend, ParameterRecord


class DefaultBackend(CryptoBackend):
    """Backend using argon2-cffi and bcrypt, verifying all known formats."""

    def __init__(self, has_argon: bool = HAS_ARGON) -> None:
        """Initialize the backend.

        Parameters
        ----------
        has_argon : bool, optional
            Whether argon2 can be used, by default whether argon2-cffi
            is importable.
        """
        self._has_argon = has_argon and Argon2Hasher is not None

    def is_algorithm_supported(self, algorithm: Algorithm) -> bool:
        """Check if the algorithm can be used.

        Parameters
        ----------
        algorithm : Algorithm
            The algorithm to check.

        Returns
        -------
        bool
            True if the algorithm is available.
        """
        if algorithm.is_argon2:
            return self._has_argon
        return algorithm is Algorithm.BCRYPT

    def _hasher(
        self, algorithm: Algorithm, params: ParameterRecord
    ) -> "Argon2Hasher | BcryptHasher":
        if algorithm.is_argon2:
            if not self._has_argon:
                raise RuntimeError(f"{algorithm.value} is not available")
            if not isinstance(params, Argon2Parameters):
                raise TypeError(f"Expected argon2 parameters, got {params!r}")
            return Argon2Hasher(algorithm=algorithm, params=params)
        if not isinstance(params, BcryptParameters):
            raise TypeError(f"Expected bcrypt parameters, got {params!r}")
        return BcryptHasher(params=params)

    def hash(
        self, plain: str, algorithm: Algorithm, params: ParameterRecord
    ) -> str:
        """Hash with the given algorithm and parameters.

        Parameters
        ----------
        plain : str
            The plain secret to hash.
        algorithm : Algorithm
            The algorithm to use.
        params : ParameterRecord
            The parameters of the algorithm family.

        Returns
        -------
        str
            The hashed secret.
        """
        return self._hasher(algorithm, params).hash(plain)

    def verify(self, plain: str, stored: str) -> bool:
        """Verify against any known format.

        Parameters
        ----------
        plain : str
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if not isinstance(plain, str) or not isinstance(stored, str):
            return False
        if stored.startswith(ARGON2_PREFIX):
            if self._has_argon:
                return Argon2Hasher().verify(plain, stored)
            return False  # pragma: no cover
        if stored.startswith(BCRYPT_PREFIXES):
            return BcryptHasher.verify(plain, stored)
        # Unknown format
        return False

    def needs_rehash(
        self, stored: str, algorithm: Algorithm, params: ParameterRecord
    ) -> bool:
        """Check if hash was made with another algorithm or parameters.

        Parameters
        ----------
        stored : str
            The stored hash
        algorithm : Algorithm
            The wanted algorithm
        params : ParameterRecord
            The wanted parameters

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        try:
            hasher = self._hasher(algorithm, params)
        except Exception:  # pragma: no cover
            return True
        return hasher.needs_rehash(stored)

    def secure_random_int(self, minimum: int, maximum: int) -> int:
        """Get a cryptographically secure integer in [minimum, maximum].

        Parameters
        ----------
        minimum : int
            The lower bound (inclusive)
        maximum : int
            The upper bound (inclusive)

        Returns
        -------
        int
            The random integer.

        Raises
        ------
        ValueError
            If maximum is lower than minimum.
        RandomSourceUnavailable
            If the OS entropy source cannot be used.
        """
        if maximum < minimum:
            raise ValueError(f"Invalid range: [{minimum}, {maximum}]")
        try:
            return minimum + secrets.randbelow(maximum - minimum + 1)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceUnavailable(str(exc)) from exc


__all__ = ["DefaultBackend"]
