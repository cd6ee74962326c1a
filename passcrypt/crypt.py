# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=broad-exception-caught,too-many-public-methods
"""Password hashing facade."""

import logging
from typing import TYPE_CHECKING, Optional

from .algorithms import Algorithm, AlgorithmSelector
from .backend import CryptoBackend, DefaultBackend, ParameterRecord
from .errors import CryptError, HashFailure, PasswordTooLong
from .parameters import Argon2Parameters, BcryptParameters, ParameterStore
from .random_string import DEFAULT_LENGTH, RandomStringGenerator

if TYPE_CHECKING:
    from .config import CryptSettings

LOG = logging.getLogger(__name__)

MAX_LENGTH_BCRYPT = 72


class Crypt:
    """Hash, verify and rehash-check passwords, generate random strings.

    Each instance owns its configuration: the selected algorithm, the
    argon2 and bcrypt parameters and the random string character pool.

    Parameters
    ----------
    backend : Optional[CryptoBackend], optional
        The crypto primitives, by default argon2-cffi and bcrypt.
    """

    def __init__(self, backend: Optional[CryptoBackend] = None) -> None:
        self._backend: CryptoBackend = backend or DefaultBackend()
        self._selector = AlgorithmSelector(
            probe=self._backend.is_algorithm_supported
        )
        self._parameters = ParameterStore()
        self._random = RandomStringGenerator(
            random_int=self._backend.secure_random_int
        )

    @classmethod
    def from_settings(
        cls,
        settings: "CryptSettings",
        backend: Optional[CryptoBackend] = None,
    ) -> "Crypt":
        """Create an instance configured from settings.

        Parameters
        ----------
        settings : CryptSettings
            The settings to apply.
        backend : Optional[CryptoBackend], optional
            The crypto primitives, by default argon2-cffi and bcrypt.

        Returns
        -------
        Crypt
            The configured instance.
        """
        instance = cls(backend=backend)
        # memory first: threads may only raise it afterwards
        instance.set_argon2_memory_cost(settings.argon2_memory_cost)
        instance.set_argon2_threads(settings.argon2_threads)
        instance.set_argon2_time_cost(settings.argon2_time_cost)
        instance.set_bcrypt_cost(settings.bcrypt_cost)
        instance.set_characters_for_random_string(settings.random_characters)
        if settings.algorithm:
            instance.use(settings.algorithm)
        return instance

    @property
    def backend(self) -> CryptoBackend:
        """The crypto backend."""
        return self._backend

    def _params_for(self, algorithm: Algorithm) -> ParameterRecord:
        if algorithm.is_argon2:
            return self._parameters.argon2
        return self._parameters.bcrypt

    def hash(self, password: str) -> str:
        """Hash a password with the selected algorithm and parameters.

        Parameters
        ----------
        password : str
            The plain password.

        Returns
        -------
        str
            The encoded hash (algorithm, parameters, salt and digest).

        Raises
        ------
        PasswordTooLong
            If bcrypt is selected and the password exceeds 72 characters.
        HashFailure
            If the backend fails to hash the password.
        """
        algorithm = self._selector.resolve()
        if algorithm is Algorithm.BCRYPT and len(password) > MAX_LENGTH_BCRYPT:
            raise PasswordTooLong(limit=MAX_LENGTH_BCRYPT, length=len(password))
        params = self._params_for(algorithm)
        try:
            return self._backend.hash(password, algorithm, params)
        except CryptError:
            raise
        except Exception as exc:
            LOG.warning(
                "Could not hash with %s (%s): %s", algorithm.value, params, exc
            )
            raise HashFailure(f"Hash Failure: {exc}") from exc

    def verify(self, password: str, hashed: str) -> bool:
        """Check if a password matches a hash.

        Parameters
        ----------
        password : str
            The plain password.
        hashed : str
            The stored hash, in any supported format.

        Returns
        -------
        bool
            True if they match, False otherwise (malformed hashes included).
        """
        try:
            return self._backend.verify(password, hashed)
        except Exception:
            return False

    def needs_rehash(self, hashed: str) -> bool:
        """Check if a hash was made with other algorithm or parameters.

        Parameters
        ----------
        hashed : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash should be replaced.
        """
        algorithm = self._selector.resolve()
        return self._backend.needs_rehash(
            hashed, algorithm, self._params_for(algorithm)
        )

    # region algorithm

    def use(self, algorithm: Algorithm | str) -> None:
        """Pin the algorithm.

        Parameters
        ----------
        algorithm : Algorithm | str
            The algorithm or its name.
        """
        self._selector.use(algorithm)

    def use_argon2id(self) -> None:
        """Use argon2id from now on."""
        self._selector.use_argon2id()

    def use_argon2i(self) -> None:
        """Use argon2i from now on."""
        self._selector.use_argon2i()

    def use_bcrypt(self) -> None:
        """Use bcrypt from now on."""
        self._selector.use_bcrypt()

    def get_current_algorithm(self) -> Algorithm:
        """Get the current algorithm.

        Returns
        -------
        Algorithm
            The current algorithm (not resolved).
        """
        return self._selector.get_current_algorithm()

    # endregion

    # region options

    def set_argon2_memory_cost(self, kib: int) -> None:
        """Set the argon2 memory cost in KiB (min 8).

        Parameters
        ----------
        kib : int
            The memory cost.
        """
        self._parameters.set_argon2_memory_cost(kib)

    def set_argon2_time_cost(self, iterations: int) -> None:
        """Set the argon2 time cost (min 1).

        Parameters
        ----------
        iterations : int
            The time cost.
        """
        self._parameters.set_argon2_time_cost(iterations)

    def set_argon2_threads(self, threads: int) -> None:
        """Set the argon2 number of threads (min 1).

        Parameters
        ----------
        threads : int
            The number of threads.
        """
        self._parameters.set_argon2_threads(threads)

    def get_argon2_options(self) -> Argon2Parameters:
        """Get the argon2 parameters.

        Returns
        -------
        Argon2Parameters
            The current argon2 parameters.
        """
        return self._parameters.get_argon2_options()

    def set_bcrypt_cost(self, rounds: int) -> None:
        """Set the bcrypt cost (between 4 and 31).

        Parameters
        ----------
        rounds : int
            The cost.
        """
        self._parameters.set_bcrypt_cost(rounds)

    def get_bcrypt_options(self) -> BcryptParameters:
        """Get the bcrypt parameters.

        Returns
        -------
        BcryptParameters
            The current bcrypt parameters.
        """
        return self._parameters.get_bcrypt_options()

    # endregion

    # region random string

    def get_random_string(
        self, length: int = DEFAULT_LENGTH, characters: Optional[str] = None
    ) -> str:
        """Get a random string.

        Parameters
        ----------
        length : int, optional
            The number of characters, by default 64.
        characters : Optional[str], optional
            A character pool for this call only.

        Returns
        -------
        str
            The random string.
        """
        return self._random.generate(length, characters)

    def set_characters_for_random_string(self, characters: str) -> None:
        """Set the character pool.

        Parameters
        ----------
        characters : str
            The new, non-empty, pool.
        """
        self._random.set_character_pool(characters)

    def get_characters_for_random_string(self) -> str:
        """Get the character pool.

        Returns
        -------
        str
            The current pool.
        """
        return self._random.get_character_pool()

    # endregion


__all__ = ["Crypt", "MAX_LENGTH_BCRYPT"]
