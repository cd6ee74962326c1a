# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing algorithm selection."""

import logging
import threading
from enum import Enum
from typing import Callable, Tuple

from .errors import InvalidParameter

LOG = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """The supported password hashing algorithms.

    The declaration order is the priority order used when probing.
    """

    ARGON2ID = "argon2id"
    ARGON2I = "argon2i"
    BCRYPT = "bcrypt"

    @property
    def is_argon2(self) -> bool:
        """Whether the algorithm belongs to the argon2 family.

        Returns
        -------
        bool
            True for argon2id and argon2i.
        """
        return self in (Algorithm.ARGON2ID, Algorithm.ARGON2I)


PRIORITY: Tuple[Algorithm, ...] = tuple(Algorithm)

AlgorithmProbe = Callable[[Algorithm], bool]


def resolve_algorithm(
    current: Algorithm, pinned: bool, probe: AlgorithmProbe
) -> Algorithm:
    """Resolve the algorithm to use.

    Parameters
    ----------
    current : Algorithm
        The currently selected algorithm.
    pinned : bool
        Whether the caller explicitly chose ``current``.
    probe : AlgorithmProbe
        Callable telling if an algorithm is available.

    Returns
    -------
    Algorithm
        ``current`` if pinned, else the first available algorithm in
        priority order. Bcrypt is the last resort and is not probed.
    """
    if pinned:
        return current
    for algorithm in PRIORITY[:-1]:
        if probe(algorithm):
            return algorithm
    return Algorithm.BCRYPT


class AlgorithmSelector:
    """Holds the active algorithm and whether it was pinned by the caller."""

    def __init__(
        self,
        probe: AlgorithmProbe,
        current: Algorithm = Algorithm.ARGON2ID,
    ) -> None:
        self._probe = probe
        self._current = current
        self._pinned = False
        self._probed = False
        self._lock = threading.Lock()

    @property
    def current_algorithm(self) -> Algorithm:
        """The current algorithm, without resolving."""
        return self._current

    @property
    def pinned(self) -> bool:
        """Whether the algorithm was explicitly chosen."""
        return self._pinned

    def get_current_algorithm(self) -> Algorithm:
        """Get the current algorithm.

        Returns
        -------
        Algorithm
            The current algorithm. Call ``resolve`` first to get an
            up-to-date value when nothing is pinned.
        """
        return self._current

    def resolve(self) -> Algorithm:
        """Resolve the algorithm, probing the backend once if not pinned.

        Returns
        -------
        Algorithm
            The algorithm to use.
        """
        with self._lock:
            if self._pinned or self._probed:
                return self._current
            self._current = resolve_algorithm(
                self._current, self._pinned, self._probe
            )
            self._probed = True
            LOG.debug("Resolved hashing algorithm: %s", self._current.value)
            return self._current

    def use(self, algorithm: Algorithm | str) -> None:
        """Pin an algorithm.

        Parameters
        ----------
        algorithm : Algorithm | str
            The algorithm (or its name) to use from now on.

        Raises
        ------
        InvalidParameter
            If a name is given that is not a known algorithm.
        """
        try:
            algorithm = Algorithm(algorithm)
        except ValueError as exc:
            raise InvalidParameter(
                f"Unknown algorithm: {algorithm}", value=algorithm
            ) from exc
        with self._lock:
            self._current = algorithm
            self._pinned = True

    def use_argon2id(self) -> None:
        """Pin argon2id."""
        self.use(Algorithm.ARGON2ID)

    def use_argon2i(self) -> None:
        """Pin argon2i."""
        self.use(Algorithm.ARGON2I)

    def use_bcrypt(self) -> None:
        """Pin bcrypt."""
        self.use(Algorithm.BCRYPT)


__all__ = [
    "Algorithm",
    "AlgorithmProbe",
    "AlgorithmSelector",
    "PRIORITY",
    "resolve_algorithm",
]
