# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator

import pytest

from passcrypt import Crypt
from tests.fakes import FakeBackend

ENV_KEY_PREFIX = "PASSCRYPT_"


@pytest.fixture(name="fake_backend")
def fake_backend_fixture() -> FakeBackend:
    """A fake backend supporting every algorithm."""
    return FakeBackend()


@pytest.fixture(name="fast_crypt")
def fast_crypt_fixture() -> Crypt:
    """A crypt instance with cheap parameters."""
    instance = Crypt()
    # memory first, it raises threads to memory // 8
    instance.set_argon2_memory_cost(1024)
    instance.set_argon2_threads(1)
    instance.set_argon2_time_cost(1)
    instance.set_bcrypt_cost(4)
    return instance


@pytest.fixture(name="clean_env")
def clean_env_fixture() -> Generator[None, None, None]:
    """Clear prefixed environment variables and command-line arguments."""
    original_env = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_KEY_PREFIX)
    }
    for key in original_env:
        os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = ["pytest"]
    yield
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(original_env)
    sys.argv = original_argv
