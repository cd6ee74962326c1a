# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Hashing specific configuration.

Environment variables (with prefix PASSCRYPT_)
----------------------------------------------
ALGORITHM (str) # default: "" (probe: argon2id, argon2i, bcrypt)
ARGON2_MEMORY_COST (int) # default: 65536
ARGON2_TIME_COST (int) # default: 4
ARGON2_THREADS (int) # default: 1
BCRYPT_COST (int) # default: 12

Command line arguments (no prefix)
----------------------------------
--algorithm (str)
--argon2-memory-cost (int)  # default: 65536
--argon2-time-cost (int)  # default: 4
--argon2-threads (int)  # default: 1
--bcrypt-cost (int)  # default: 12
"""

from typing import Optional

from ..algorithms import Algorithm
from ..parameters import (
    DEFAULT_BCRYPT_COST,
    DEFAULT_MEMORY_COST,
    DEFAULT_THREADS,
    DEFAULT_TIME_COST,
)
from ._common import get_value


def get_algorithm() -> Optional[Algorithm]:
    """Get the algorithm to pin, if any.

    Returns
    -------
    Optional[Algorithm]
        The algorithm, or None to pick the best available one.
    """
    return get_value("--algorithm", "ALGORITHM", Algorithm, None)


def get_argon2_memory_cost() -> int:
    """Get the argon2 memory cost in KiB.

    Returns
    -------
    int
        The memory cost.
    """
    return get_value(
        "--argon2-memory-cost",
        "ARGON2_MEMORY_COST",
        int,
        DEFAULT_MEMORY_COST,
    )


def get_argon2_time_cost() -> int:
    """Get the argon2 time cost.

    Returns
    -------
    int
        The time cost.
    """
    return get_value(
        "--argon2-time-cost", "ARGON2_TIME_COST", int, DEFAULT_TIME_COST
    )


def get_argon2_threads() -> int:
    """Get the argon2 number of threads.

    Returns
    -------
    int
        The number of threads.
    """
    return get_value(
        "--argon2-threads", "ARGON2_THREADS", int, DEFAULT_THREADS
    )


def get_bcrypt_cost() -> int:
    """Get the bcrypt cost.

    Returns
    -------
    int
        The bcrypt cost.
    """
    return get_value("--bcrypt-cost", "BCRYPT_COST", int, DEFAULT_BCRYPT_COST)
