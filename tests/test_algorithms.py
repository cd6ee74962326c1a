# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for algorithm selection."""

import pytest

from passcrypt.algorithms import (
    PRIORITY,
    Algorithm,
    AlgorithmSelector,
    resolve_algorithm,
)
from passcrypt.errors import InvalidParameter
from tests.fakes import FakeBackend


class TestResolveAlgorithm:
    """Test the pure resolve function."""

    def test_priority_order(self) -> None:
        """Test argon2id > argon2i > bcrypt."""
        assert PRIORITY == (
            Algorithm.ARGON2ID,
            Algorithm.ARGON2I,
            Algorithm.BCRYPT,
        )

    def test_pinned_returns_current(self) -> None:
        """Test that a pinned algorithm is never probed."""
        probed = []

        def probe(algorithm: Algorithm) -> bool:
            probed.append(algorithm)
            return True

        assert (
            resolve_algorithm(Algorithm.BCRYPT, True, probe)
            is Algorithm.BCRYPT
        )
        assert not probed

    @pytest.mark.parametrize(
        "supported,expected",
        [
            ({Algorithm.ARGON2ID, Algorithm.ARGON2I}, Algorithm.ARGON2ID),
            ({Algorithm.ARGON2I}, Algorithm.ARGON2I),
            (set(), Algorithm.BCRYPT),
        ],
    )
    def test_unpinned_probes(
        self, supported: set[Algorithm], expected: Algorithm
    ) -> None:
        """Test the fallback order when nothing is pinned."""
        result = resolve_algorithm(
            Algorithm.ARGON2ID, False, lambda a: a in supported
        )
        assert result is expected


class TestAlgorithmSelector:
    """Test the stateful selector."""

    def test_defaults(self) -> None:
        """Test the default selection."""
        selector = AlgorithmSelector(probe=lambda _: True)
        assert selector.get_current_algorithm() is Algorithm.ARGON2ID
        assert selector.current_algorithm is Algorithm.ARGON2ID
        assert selector.pinned is False

    def test_resolve_falls_back(self) -> None:
        """Test that resolve picks the first supported algorithm."""
        backend = FakeBackend(supported={Algorithm.ARGON2I})
        selector = AlgorithmSelector(probe=backend.is_algorithm_supported)
        assert selector.resolve() is Algorithm.ARGON2I
        assert selector.get_current_algorithm() is Algorithm.ARGON2I
        assert selector.pinned is False

    def test_resolve_without_argon2(self) -> None:
        """Test bcrypt is used when argon2 is not available."""
        backend = FakeBackend(supported={Algorithm.BCRYPT})
        selector = AlgorithmSelector(probe=backend.is_algorithm_supported)
        assert selector.resolve() is Algorithm.BCRYPT
        assert backend.probed == [Algorithm.ARGON2ID, Algorithm.ARGON2I]

    def test_probe_is_lazy_and_cached(self) -> None:
        """Test the probe runs on the first resolve only."""
        backend = FakeBackend()
        selector = AlgorithmSelector(probe=backend.is_algorithm_supported)
        assert not backend.probed
        selector.resolve()
        selector.resolve()
        assert backend.probed == [Algorithm.ARGON2ID]

    @pytest.mark.parametrize(
        "method,expected",
        [
            ("use_argon2id", Algorithm.ARGON2ID),
            ("use_argon2i", Algorithm.ARGON2I),
            ("use_bcrypt", Algorithm.BCRYPT),
        ],
    )
    def test_use_pins(self, method: str, expected: Algorithm) -> None:
        """Test that use_* pins the algorithm, even if unsupported."""
        backend = FakeBackend(supported=set())
        selector = AlgorithmSelector(probe=backend.is_algorithm_supported)
        getattr(selector, method)()
        assert selector.pinned is True
        assert selector.get_current_algorithm() is expected
        assert selector.resolve() is expected
        assert not backend.probed

    def test_use_by_name(self) -> None:
        """Test pinning by name."""
        selector = AlgorithmSelector(probe=lambda _: True)
        selector.use("argon2i")
        assert selector.resolve() is Algorithm.ARGON2I

    def test_use_unknown_name(self) -> None:
        """Test pinning an unknown name."""
        selector = AlgorithmSelector(probe=lambda _: True)
        with pytest.raises(InvalidParameter, match="Unknown algorithm"):
            selector.use("md5")
        assert selector.pinned is False

    def test_pin_after_resolve(self) -> None:
        """Test that pinning wins over a previous probe."""
        selector = AlgorithmSelector(probe=lambda _: True)
        assert selector.resolve() is Algorithm.ARGON2ID
        selector.use_bcrypt()
        assert selector.resolve() is Algorithm.BCRYPT

    def test_is_argon2(self) -> None:
        """Test the argon2 family flag."""
        assert Algorithm.ARGON2ID.is_argon2
        assert Algorithm.ARGON2I.is_argon2
        assert not Algorithm.BCRYPT.is_argon2
