# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across cargo-polish modules."""

from __future__ import annotations


class PolishError(RuntimeError):
    """Base class for errors raised before any external tool runs."""


class ConfigError(PolishError):
    """Raised when configuration files cannot be parsed or validated."""


class WorkspaceNotFoundError(PolishError):
    """Raised when no ``Cargo.toml`` can be located for the requested root."""


__all__ = ["ConfigError", "PolishError", "WorkspaceNotFoundError"]
