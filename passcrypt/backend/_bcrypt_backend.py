# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt primitives."""

import re
from dataclasses import dataclass, field

import bcrypt

from ..parameters import BcryptParameters

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
MAX_BCRYPT_BYTES = 72

_COST_RE = re.compile(r"^\$2[aby]\$(\d{2})\$")


def _truncate(plain: str) -> bytes:
    # Explicitly truncate to 72 bytes for compatibility
    # ref (src):
    #  bcrypt originally suffered from a wraparound bug:
    #  http://www.openwall.com/lists/oss-security/2012/01/02/4
    # This bug was corrected in the OpenBSD source by truncating
    # inputs to 72 bytes on the updated prefix $2b$,
    # but leaving $2a$ unchanged for compatibility.
    # Newer pyca/bcrypt releases refuse longer inputs instead.
    return plain.encode("utf-8")[:MAX_BCRYPT_BYTES]


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt hasher bound to one cost."""

    params: BcryptParameters = field(default_factory=BcryptParameters)

    def hash(self, plain: str) -> str:
        """Hash password using bcrypt.

        Parameters
        ----------
        plain : str
            The plain secret to hash.

        Returns
        -------
        str
            The hashed secret.
        """
        salt = bcrypt.gensalt(rounds=self.params.cost)
        return bcrypt.hashpw(_truncate(plain), salt).decode("ascii")

    @staticmethod
    def verify(plain: str, stored: str) -> bool:
        """Verify password against bcrypt hash.

        Parameters
        ----------
        plain : str
            The plain secret to verify.
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if verified, False if not.
        """
        if not stored.startswith(BCRYPT_PREFIXES):
            return False
        try:
            return bcrypt.checkpw(_truncate(plain), stored.encode("utf-8"))
        except Exception:  # pylint: disable=broad-exception-caught
            return False

    def needs_rehash(self, stored: str) -> bool:
        """Check if the stored hash is not bcrypt or has another cost.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        m = _COST_RE.match(stored)
        if not m:
            return True
        return int(m.group(1)) != self.params.cost


__all__ = ["BcryptHasher", "BCRYPT_PREFIXES", "MAX_BCRYPT_BYTES"]
