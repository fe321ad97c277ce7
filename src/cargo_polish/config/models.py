# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing cargo-polish configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_CARGO_EXECUTABLE


class _Section(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class CargoConfig(_Section):
    """How the ``cargo`` front end is invoked for every step."""

    executable: str = DEFAULT_CARGO_EXECUTABLE
    toolchain: str | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("executable")
    @classmethod
    def _require_executable(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("cargo executable must not be empty")
        return stripped

    @field_validator("toolchain")
    @classmethod
    def _strip_toolchain(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip().lstrip("+")
        return stripped or None


class LintConfig(_Section):
    """Flags passed to ``cargo clippy --fix``."""

    allow_dirty: bool = True
    all_targets: bool = True
    all_features: bool = True
    deny_warnings: bool = True
    nursery: bool = True
    pedantic: bool = False
    warn: list[str] = Field(default_factory=list)
    deny: list[str] = Field(default_factory=list)

    @field_validator("warn", "deny")
    @classmethod
    def _strip_lints(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value if item.strip()]


class FixConfig(_Section):
    """Flags passed to ``cargo fix``."""

    allow_dirty: bool = True


class FormatConfig(_Section):
    """``cargo fmt`` runs without extra flags; the table is accepted but empty."""


class PolishConfig(_Section):
    """Primary configuration container used by the ``fmt`` task."""

    cargo: CargoConfig = Field(default_factory=CargoConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    fix: FixConfig = Field(default_factory=FixConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for merging with TOML fragments."""

        return self.model_dump(mode="python")


__all__ = [
    "CargoConfig",
    "FixConfig",
    "FormatConfig",
    "LintConfig",
    "PolishConfig",
]
