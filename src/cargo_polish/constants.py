# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for the cargo-polish package."""

from __future__ import annotations

from typing import Final

TOOL_NAME: Final[str] = "cargo-polish"
CARGO_MANIFEST: Final[str] = "Cargo.toml"
CONFIG_FILENAME: Final[str] = ".cargo-polish.toml"
METADATA_SECTION: Final[str] = TOOL_NAME
CARGO_ENV_VAR: Final[str] = "CARGO"
DEFAULT_CARGO_EXECUTABLE: Final[str] = "cargo"

EXIT_OK: Final[int] = 0
EXIT_CONFIG_ERROR: Final[int] = 1
EXIT_TIMEOUT: Final[int] = 124
EXIT_CANNOT_EXECUTE: Final[int] = 126
EXIT_COMMAND_NOT_FOUND: Final[int] = 127
EXIT_INTERRUPTED: Final[int] = 130
SIGNAL_EXIT_BASE: Final[int] = 128

__all__ = [
    "CARGO_ENV_VAR",
    "CARGO_MANIFEST",
    "CONFIG_FILENAME",
    "DEFAULT_CARGO_EXECUTABLE",
    "EXIT_CANNOT_EXECUTE",
    "EXIT_COMMAND_NOT_FOUND",
    "EXIT_CONFIG_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_OK",
    "EXIT_TIMEOUT",
    "METADATA_SECTION",
    "SIGNAL_EXIT_BASE",
    "TOOL_NAME",
]
