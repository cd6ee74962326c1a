# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Validated tuning parameters for argon2 and bcrypt.

The argon2 fields are coupled: memory (in KiB) must stay at least
eight times the number of threads. Instead of rejecting a violating
value, the store raises the *other* field:

- setting threads raises memory to ``threads * 8`` if it is lower.
- setting memory raises threads to ``memory // 8`` if it is lower.

Neither setter ever lowers the other field.
"""

import logging
import threading
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

from .errors import InvalidParameter

LOG = logging.getLogger(__name__)

MIN_MEMORY_COST = 8
MIN_TIME_COST = 1
MIN_THREADS = 1
MIN_ROUNDS = 4
MAX_ROUNDS = 31
MEMORY_PER_THREAD = 8

DEFAULT_MEMORY_COST = 65536  # 64 MiB
DEFAULT_TIME_COST = 4
DEFAULT_THREADS = 1
DEFAULT_BCRYPT_COST = 12


@dataclass(frozen=True)
class Argon2Parameters:
    """Argon2 (id and i) parameters."""

    memory_cost: int = DEFAULT_MEMORY_COST
    time_cost: int = DEFAULT_TIME_COST
    threads: int = DEFAULT_THREADS

    def to_dict(self) -> Dict[str, Any]:
        """Get the parameters as a dictionary.

        Returns
        -------
        Dict[str, Any]
            The parameters.
        """
        return asdict(self)


@dataclass(frozen=True)
class BcryptParameters:
    """Bcrypt parameters."""

    cost: int = DEFAULT_BCRYPT_COST

    def to_dict(self) -> Dict[str, Any]:
        """Get the parameters as a dictionary.

        Returns
        -------
        Dict[str, Any]
            The parameters.
        """
        return asdict(self)


def _check_int(name: str, value: Any) -> int:
    # bool is an int subclass, but never a valid cost
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(
            f"{name} must be an integer: {value!r}", value=value
        )
    return value


class ParameterStore:
    """Holds the current argon2 and bcrypt parameters."""

    def __init__(
        self,
        argon2: Argon2Parameters | None = None,
        bcrypt: BcryptParameters | None = None,
    ) -> None:
        self._argon2 = argon2 or Argon2Parameters()
        self._bcrypt = bcrypt or BcryptParameters()
        self._lock = threading.Lock()

    @property
    def argon2(self) -> Argon2Parameters:
        """The current argon2 parameters."""
        return self._argon2

    @property
    def bcrypt(self) -> BcryptParameters:
        """The current bcrypt parameters."""
        return self._bcrypt

    def get_argon2_options(self) -> Argon2Parameters:
        """Get the argon2 parameters.

        Returns
        -------
        Argon2Parameters
            An immutable snapshot of the argon2 parameters.
        """
        return self._argon2

    def get_bcrypt_options(self) -> BcryptParameters:
        """Get the bcrypt parameters.

        Returns
        -------
        BcryptParameters
            An immutable snapshot of the bcrypt parameters.
        """
        return self._bcrypt

    def set_argon2_memory_cost(self, kib: int) -> None:
        """Set the argon2 memory cost.

        Parameters
        ----------
        kib : int
            The memory cost in KiB, at least 8.

        Raises
        ------
        InvalidParameter
            If the value is below the minimum.
        """
        kib = _check_int("Memory cost", kib)
        if kib < MIN_MEMORY_COST:
            raise InvalidParameter(
                f"Memory cost is too small (min {MIN_MEMORY_COST}): {kib}",
                value=kib,
                bound=MIN_MEMORY_COST,
            )
        with self._lock:
            params = replace(self._argon2, memory_cost=kib)
            min_threads = kib // MEMORY_PER_THREAD
            if params.threads < min_threads:
                LOG.debug(
                    "Raising argon2 threads from %d to %d",
                    params.threads,
                    min_threads,
                )
                params = replace(params, threads=min_threads)
            self._argon2 = params

    def set_argon2_time_cost(self, iterations: int) -> None:
        """Set the argon2 time cost.

        Parameters
        ----------
        iterations : int
            The number of iterations, at least 1.

        Raises
        ------
        InvalidParameter
            If the value is below the minimum.
        """
        iterations = _check_int("Time cost", iterations)
        if iterations < MIN_TIME_COST:
            raise InvalidParameter(
                f"Time cost is too small (min {MIN_TIME_COST}): {iterations}",
                value=iterations,
                bound=MIN_TIME_COST,
            )
        with self._lock:
            self._argon2 = replace(self._argon2, time_cost=iterations)

    def set_argon2_threads(self, threads: int) -> None:
        """Set the argon2 number of threads.

        Parameters
        ----------
        threads : int
            The number of threads, at least 1.

        Raises
        ------
        InvalidParameter
            If the value is below the minimum.
        """
        threads = _check_int("Number of threads", threads)
        if threads < MIN_THREADS:
            raise InvalidParameter(
                "Number of threads is too small "
                f"(min {MIN_THREADS}): {threads}",
                value=threads,
                bound=MIN_THREADS,
            )
        with self._lock:
            params = replace(self._argon2, threads=threads)
            min_memory = threads * MEMORY_PER_THREAD
            if params.memory_cost < min_memory:
                LOG.debug(
                    "Raising argon2 memory cost from %d to %d",
                    params.memory_cost,
                    min_memory,
                )
                params = replace(params, memory_cost=min_memory)
            self._argon2 = params

    def set_bcrypt_cost(self, rounds: int) -> None:
        """Set the bcrypt cost.

        Parameters
        ----------
        rounds : int
            The log2 number of rounds, between 4 and 31.

        Raises
        ------
        InvalidParameter
            If the value is out of bounds.
        """
        rounds = _check_int("Number of rounds", rounds)
        if rounds < MIN_ROUNDS or rounds > MAX_ROUNDS:
            raise InvalidParameter(
                "Invalid number of rounds "
                f"(between {MIN_ROUNDS} and {MAX_ROUNDS}): {rounds}",
                value=rounds,
                bound=(MIN_ROUNDS, MAX_ROUNDS),
            )
        with self._lock:
            self._bcrypt = replace(self._bcrypt, cost=rounds)


__all__ = [
    "Argon2Parameters",
    "BcryptParameters",
    "ParameterStore",
    "DEFAULT_MEMORY_COST",
    "DEFAULT_TIME_COST",
    "DEFAULT_THREADS",
    "DEFAULT_BCRYPT_COST",
    "MIN_MEMORY_COST",
    "MIN_TIME_COST",
    "MIN_THREADS",
    "MIN_ROUNDS",
    "MAX_ROUNDS",
]
