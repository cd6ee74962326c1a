# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Test passcrypt.config.settings."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc

import os

import pytest
from pydantic import ValidationError
from pytest_mock import MockerFixture

from passcrypt.algorithms import Algorithm
from passcrypt.config import ENV_PREFIX, CryptSettings
from passcrypt.random_string import DEFAULT_CHARACTERS

pytestmark = pytest.mark.usefixtures("clean_env")


def test_defaults() -> None:
    """Test the default settings."""
    settings = CryptSettings.load()
    assert settings.algorithm is None
    assert settings.argon2_memory_cost == 65536
    assert settings.argon2_time_cost == 4
    assert settings.argon2_threads == 1
    assert settings.bcrypt_cost == 12
    assert settings.random_characters == DEFAULT_CHARACTERS
    assert settings.random_length == 64
    assert settings.log_level == "INFO"


def test_from_env() -> None:
    """Test values read from the environment at load time."""
    os.environ[f"{ENV_PREFIX}ALGORITHM"] = "argon2i"
    os.environ[f"{ENV_PREFIX}ARGON2_MEMORY_COST"] = "2048"
    os.environ[f"{ENV_PREFIX}BCRYPT_COST"] = "10"
    settings = CryptSettings.load()
    assert settings.algorithm is Algorithm.ARGON2I
    assert settings.argon2_memory_cost == 2048
    assert settings.bcrypt_cost == 10


def test_overrides() -> None:
    """Test explicit values win and None is ignored."""
    os.environ[f"{ENV_PREFIX}BCRYPT_COST"] = "10"
    settings = CryptSettings.load(
        bcrypt_cost=6, argon2_threads=None, log_level="DEBUG"
    )
    assert settings.bcrypt_cost == 6
    assert settings.log_level == "DEBUG"
    assert settings.argon2_threads == 1


def test_algorithm_names() -> None:
    """Test algorithm names are normalized."""
    assert CryptSettings.load(algorithm=" BCRYPT ").algorithm is (
        Algorithm.BCRYPT
    )
    assert CryptSettings.load(algorithm="").algorithm is None
    with pytest.raises(ValidationError):
        CryptSettings.load(algorithm="md5")


@pytest.mark.parametrize(
    "field,value",
    [
        ("argon2_memory_cost", 7),
        ("argon2_time_cost", 0),
        ("argon2_threads", 0),
        ("bcrypt_cost", 3),
        ("bcrypt_cost", 32),
        ("random_characters", ""),
        ("random_length", -1),
        ("log_level", "LOUD"),
    ],
)
def test_bounds(field: str, value: object) -> None:
    """Test out of bounds values are rejected."""
    with pytest.raises(ValidationError):
        CryptSettings.load(**{field: value})


def test_memory_lower_than_threads_warns(mocker: MockerFixture) -> None:
    """Test the warning about memory being raised."""
    log = mocker.patch("passcrypt.config.settings.LOG")
    settings = CryptSettings.load(argon2_memory_cost=8, argon2_threads=4)
    assert settings.argon2_memory_cost == 8
    log.warning.assert_called_once()
    assert "it will be raised" in log.warning.call_args[0][0]


def test_memory_fits_threads_no_warning(mocker: MockerFixture) -> None:
    """Test no warning when the memory fits the threads."""
    log = mocker.patch("passcrypt.config.settings.LOG")
    CryptSettings.load(argon2_memory_cost=32, argon2_threads=4)
    log.warning.assert_not_called()


def test_invalid_env_value() -> None:
    """Test out of bounds environment values are rejected on load."""
    os.environ[f"{ENV_PREFIX}BCRYPT_COST"] = "3"
    with pytest.raises(ValidationError):
        CryptSettings.load()
