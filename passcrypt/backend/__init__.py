# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Crypto backends: the primitives behind the facade."""

from ._argon_backend import HAS_ARGON
from .dispatcher import DefaultBackend
from .protocol import CryptoBackend, ParameterRecord

__all__ = ["CryptoBackend", "DefaultBackend", "ParameterRecord", "HAS_ARGON"]
