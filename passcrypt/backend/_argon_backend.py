# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=line-too-long,too-complex,invalid-name
# flake8: noqa: E501,C901
# pyright: reportConstantRedefinition=false,reportRedeclaration=false,reportAssignmentType=false
"""Argon2id / argon2i primitives (preferred algorithms)."""

from dataclasses import dataclass, field

from ..algorithms import Algorithm
from ..parameters import Argon2Parameters

ARGON2_PREFIX = "$argon2"

HAS_ARGON = False
try:
    from argon2 import (  # type: ignore[unused-ignore, import-not-found, import-untyped]
        PasswordHasher,
        Type,
    )

    HAS_ARGON = True

    _TYPES = {
        Algorithm.ARGON2ID: Type.ID,
        Algorithm.ARGON2I: Type.I,
    }

    @dataclass(frozen=True)
    class Argon2Hasher:
        """Argon2 hasher bound to one variant and one parameter set."""

        _ph: PasswordHasher = field(init=False, repr=False)

        algorithm: Algorithm = Algorithm.ARGON2ID
        params: Argon2Parameters = field(default_factory=Argon2Parameters)
        hash_len: int = 32
        salt_len: int = 16

        def __post_init__(self) -> None:
            object.__setattr__(
                self,
                "_ph",
                PasswordHasher(
                    time_cost=self.params.time_cost,
                    memory_cost=self.params.memory_cost,
                    parallelism=self.params.threads,
                    hash_len=self.hash_len,
                    salt_len=self.salt_len,
                    type=_TYPES[self.algorithm],
                ),
            )

        def hash(self, plain: str) -> str:
            """Hash password using argon2.

            Parameters
            ----------
            plain : str
                The plain secret to hash.

            Returns
            -------
            str
                The hashed secret.
            """
            return self._ph.hash(plain)

        def verify(self, plain: str, stored: str) -> bool:
            """Verify password against an argon2 hash of any variant.

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
            if not stored.startswith(ARGON2_PREFIX):
                return False
            try:
                # the variant is read from the hash itself
                return self._ph.verify(stored, plain)
            except Exception:  # pylint: disable=broad-exception-caught
                return False

        def needs_rehash(self, stored: str) -> bool:
            """Check if the stored hash was made with another variant or params.

            Parameters
            ----------
            stored : str
                The stored hash

            Returns
            -------
            bool
                True if secret needs rehash, False otherwise
            """
            if not stored.startswith(ARGON2_PREFIX):
                return True
            try:
                return self._ph.check_needs_rehash(stored)
            except Exception:  # pylint: disable=broad-exception-caught
                return True

except ImportError:  # pragma: no cover
    # pylint: disable=invalid-name
    Argon2Hasher = None  # type: ignore


__all__ = ["Argon2Hasher", "HAS_ARGON", "ARGON2_PREFIX"]
