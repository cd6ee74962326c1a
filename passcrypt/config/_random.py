# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Random string configuration.

Environment variables (with prefix PASSCRYPT_)
----------------------------------------------
RANDOM_CHARACTERS (str) # default: printable ASCII, no space
RANDOM_LENGTH (int) # default: 64

Command line arguments (no prefix)
----------------------------------
--random-characters (str)
--random-length (int)  # default: 64
"""

from ..random_string import DEFAULT_CHARACTERS, DEFAULT_LENGTH
from ._common import get_value


def get_random_characters() -> str:
    """Get the random string character pool.

    Returns
    -------
    str
        The character pool.
    """
    return get_value(
        "--random-characters", "RANDOM_CHARACTERS", str, DEFAULT_CHARACTERS
    )


def get_random_length() -> int:
    """Get the default random string length.

    Returns
    -------
    int
        The length.
    """
    return get_value("--random-length", "RANDOM_LENGTH", int, DEFAULT_LENGTH)
