# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Passcrypt settings module."""

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated, Self

from .._logging import LogLevelType, get_log_level
from ..algorithms import Algorithm
from ..parameters import MAX_ROUNDS, MEMORY_PER_THREAD, MIN_ROUNDS
from ._common import DOT_ENV_PATH, ENV_PREFIX, to_kebab
from ._hashing import (
    get_algorithm,
    get_argon2_memory_cost,
    get_argon2_threads,
    get_argon2_time_cost,
    get_bcrypt_cost,
)
from ._random import get_random_characters, get_random_length

LOG = logging.getLogger(__name__)


class CryptSettings(BaseSettings):
    """Settings class."""

    algorithm: Optional[Algorithm] = Field(default_factory=get_algorithm)
    argon2_memory_cost: Annotated[int, Field(ge=8)] = Field(
        default_factory=get_argon2_memory_cost
    )
    argon2_time_cost: Annotated[int, Field(ge=1)] = Field(
        default_factory=get_argon2_time_cost
    )
    argon2_threads: Annotated[int, Field(ge=1)] = Field(
        default_factory=get_argon2_threads
    )
    bcrypt_cost: Annotated[int, Field(ge=MIN_ROUNDS, le=MAX_ROUNDS)] = Field(
        default_factory=get_bcrypt_cost
    )
    random_characters: Annotated[str, Field(min_length=1)] = Field(
        default_factory=get_random_characters
    )
    random_length: Annotated[int, Field(ge=0)] = Field(
        default_factory=get_random_length
    )
    log_level: LogLevelType = Field(default_factory=get_log_level)

    model_config = SettingsConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls, **overrides: Any) -> "CryptSettings":
        """Load the settings.

        Parameters
        ----------
        **overrides : Any
            Values taking precedence over the environment.

        Returns
        -------
        CryptSettings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        values = {
            key: value for key, value in overrides.items() if value is not None
        }
        return cls(**values)

    @field_validator("algorithm", mode="before")
    @classmethod
    def validate_algorithm(cls, value: Any) -> Any:
        """Treat an empty algorithm as not set.

        Parameters
        ----------
        value : Any
            The value to validate

        Returns
        -------
        Any
            The value, or None if empty
        """
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @model_validator(mode="after")
    def check_argon2_memory(self) -> Self:
        """Warn if the argon2 memory will be raised to fit the threads.

        Returns
        -------
        CryptSettings
            The validated settings
        """
        min_memory = self.argon2_threads * MEMORY_PER_THREAD
        if self.argon2_memory_cost < min_memory:
            LOG.warning(
                "argon2 memory cost %d is lower than %d for %d threads, "
                "it will be raised",
                self.argon2_memory_cost,
                min_memory,
                self.argon2_threads,
            )
        return self
