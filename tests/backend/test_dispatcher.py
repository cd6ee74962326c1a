# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the default backend."""

import pytest
from pytest_mock import MockerFixture

from passcrypt.algorithms import Algorithm
from passcrypt.backend import CryptoBackend, DefaultBackend
from passcrypt.backend._argon_backend import HAS_ARGON
from passcrypt.errors import RandomSourceUnavailable
from passcrypt.parameters import Argon2Parameters, BcryptParameters

ARGON2 = Argon2Parameters(memory_cost=1024, time_cost=1, threads=1)
BCRYPT = BcryptParameters(cost=4)


class TestDefaultBackend:
    """Test the default backend."""

    def test_implements_protocol(self) -> None:
        """Test the backend matches the protocol."""
        assert isinstance(DefaultBackend(), CryptoBackend)

    def test_capabilities(self) -> None:
        """Test the capability probe."""
        backend = DefaultBackend()
        assert backend.is_algorithm_supported(Algorithm.BCRYPT)
        assert backend.is_algorithm_supported(Algorithm.ARGON2ID) is HAS_ARGON
        assert backend.is_algorithm_supported(Algorithm.ARGON2I) is HAS_ARGON

    def test_capabilities_without_argon(self) -> None:
        """Test that argon2 can be switched off."""
        backend = DefaultBackend(has_argon=False)
        assert not backend.is_algorithm_supported(Algorithm.ARGON2ID)
        assert not backend.is_algorithm_supported(Algorithm.ARGON2I)
        assert backend.is_algorithm_supported(Algorithm.BCRYPT)

    def test_hash_argon2_without_argon(self) -> None:
        """Test hashing with argon2 when unavailable."""
        backend = DefaultBackend(has_argon=False)
        with pytest.raises(RuntimeError, match="not available"):
            backend.hash("toto", Algorithm.ARGON2ID, ARGON2)

    def test_hash_wrong_parameters(self) -> None:
        """Test hashing with parameters of the other family."""
        backend = DefaultBackend()
        with pytest.raises(TypeError):
            backend.hash("toto", Algorithm.BCRYPT, ARGON2)

    def test_bcrypt_round_trip(self) -> None:
        """Test bcrypt hash, verify and rehash check."""
        backend = DefaultBackend()
        hashed = backend.hash("toto", Algorithm.BCRYPT, BCRYPT)
        assert backend.verify("toto", hashed)
        assert not backend.verify("okok", hashed)
        assert not backend.needs_rehash(hashed, Algorithm.BCRYPT, BCRYPT)
        assert backend.needs_rehash(
            hashed, Algorithm.BCRYPT, BcryptParameters(cost=5)
        )

    @pytest.mark.skipif(not HAS_ARGON, reason="argon2-cffi not installed")
    def test_argon2_round_trip(self) -> None:
        """Test argon2 hash, verify and rehash check."""
        backend = DefaultBackend()
        hashed = backend.hash("toto", Algorithm.ARGON2ID, ARGON2)
        assert backend.verify("toto", hashed)
        assert not backend.verify("okok", hashed)
        assert not backend.needs_rehash(hashed, Algorithm.ARGON2ID, ARGON2)
        assert backend.needs_rehash(hashed, Algorithm.ARGON2I, ARGON2)
        assert backend.needs_rehash(hashed, Algorithm.BCRYPT, BCRYPT)

    @pytest.mark.parametrize(
        "plain,stored",
        [
            ("toto", "unknown$format"),
            ("toto", ""),
            (None, "$2b$04$abc"),
            ("toto", None),
        ],
    )
    def test_verify_never_raises(self, plain: str, stored: str) -> None:
        """Test verify with unknown or invalid input."""
        assert DefaultBackend().verify(plain, stored) is False

    def test_secure_random_int_bounds(self) -> None:
        """Test the inclusive bounds."""
        backend = DefaultBackend()
        values = {backend.secure_random_int(3, 5) for _ in range(200)}
        assert values <= {3, 4, 5}
        assert backend.secure_random_int(7, 7) == 7

    def test_secure_random_int_invalid_range(self) -> None:
        """Test an empty range."""
        with pytest.raises(ValueError):
            DefaultBackend().secure_random_int(5, 4)

    def test_secure_random_int_no_entropy(
        self, mocker: MockerFixture
    ) -> None:
        """Test entropy failures are typed."""
        mocker.patch(
            "passcrypt.backend.dispatcher.secrets.randbelow",
            side_effect=OSError("no entropy"),
        )
        with pytest.raises(RandomSourceUnavailable, match="no entropy"):
            DefaultBackend().secure_random_int(0, 10)
