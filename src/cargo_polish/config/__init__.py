# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for cargo-polish."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import ConfigLoader, ConfigLoadResult, ConfigOverrides, load_config
from .models import CargoConfig, FixConfig, FormatConfig, LintConfig, PolishConfig

__all__ = [
    "CargoConfig",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigOverrides",
    "FixConfig",
    "FormatConfig",
    "LintConfig",
    "PolishConfig",
    "load_config",
]
