# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing facade: argon2id, argon2i and bcrypt."""

from ._version import __version__
from .algorithms import Algorithm, AlgorithmSelector, resolve_algorithm
from .backend import CryptoBackend, DefaultBackend
from .crypt import Crypt
from .errors import (
    CryptError,
    HashFailure,
    InvalidParameter,
    PasswordTooLong,
    RandomSourceUnavailable,
)
from .parameters import Argon2Parameters, BcryptParameters, ParameterStore
from .random_string import RandomStringGenerator

default_crypt: Crypt = Crypt()

__all__ = [
    "__version__",
    "default_crypt",
    "Crypt",
    "Algorithm",
    "AlgorithmSelector",
    "resolve_algorithm",
    "CryptoBackend",
    "DefaultBackend",
    "Argon2Parameters",
    "BcryptParameters",
    "ParameterStore",
    "RandomStringGenerator",
    "CryptError",
    "HashFailure",
    "InvalidParameter",
    "PasswordTooLong",
    "RandomSourceUnavailable",
]
