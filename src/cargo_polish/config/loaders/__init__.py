# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration sources."""

from __future__ import annotations

from .sources import (
    DEFAULT_INCLUDE_KEY,
    CargoManifestConfigSource,
    ConfigSource,
    DefaultConfigSource,
    TomlConfigSource,
)

__all__ = [
    "DEFAULT_INCLUDE_KEY",
    "CargoManifestConfigSource",
    "ConfigSource",
    "DefaultConfigSource",
    "TomlConfigSource",
]
