# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for passcrypt."""

from ._common import ENV_PREFIX, ROOT_DIR
from .settings import CryptSettings

__all__ = [
    "CryptSettings",
    "ENV_PREFIX",
    "ROOT_DIR",
]
