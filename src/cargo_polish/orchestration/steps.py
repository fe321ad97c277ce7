# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command construction for the three ``fmt`` steps."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from ..config.models import CargoConfig, FixConfig, LintConfig, PolishConfig

CLIPPY_SUBCOMMAND: Final[str] = "clippy"
FIX_SUBCOMMAND: Final[str] = "fix"
FMT_SUBCOMMAND: Final[str] = "fmt"
ARGS_SEPARATOR: Final[str] = "--"
NURSERY_GROUP: Final[str] = "clippy::nursery"
PEDANTIC_GROUP: Final[str] = "clippy::pedantic"


class StepKind(StrEnum):
    """Identify each stage of the ``fmt`` sequence."""

    LINT_FIX = "lint-fix"
    COMPILER_FIX = "compiler-fix"
    FORMAT = "format"


@dataclass(frozen=True, slots=True)
class FormatStep:
    """One external invocation in the ``fmt`` sequence."""

    kind: StepKind
    name: str
    args: tuple[str, ...]

    def display(self) -> str:
        """Return the argv rendered as a copy-pasteable shell command."""

        return shlex.join(self.args)


def _cargo_prefix(cargo: CargoConfig) -> list[str]:
    prefix = [cargo.executable]
    if cargo.toolchain:
        prefix.append(f"+{cargo.toolchain}")
    return prefix


def lint_fix_args(cargo: CargoConfig, lint: LintConfig) -> tuple[str, ...]:
    """Return argv for ``cargo clippy --fix`` honouring the lint tier toggles.

    Args:
        cargo: Front-end executable settings.
        lint: Lint flags and extra lint levels.

    Returns:
        tuple[str, ...]: Complete argv, executable first.
    """

    args = [*_cargo_prefix(cargo), CLIPPY_SUBCOMMAND, "--fix"]
    if lint.allow_dirty:
        args.append("--allow-dirty")
    if lint.all_targets:
        args.append("--all-targets")
    if lint.all_features:
        args.append("--all-features")

    # Lint levels belong to clippy-driver, not cargo, so they follow the separator.
    levels: list[str] = []
    if lint.deny_warnings:
        levels.extend(["-D", "warnings"])
    if lint.nursery:
        levels.extend(["-W", NURSERY_GROUP])
    if lint.pedantic:
        levels.extend(["-W", PEDANTIC_GROUP])
    for name in lint.warn:
        levels.extend(["-W", name])
    for name in lint.deny:
        levels.extend(["-D", name])
    if levels:
        args.extend([ARGS_SEPARATOR, *levels])
    return tuple(args)


def compiler_fix_args(cargo: CargoConfig, fix: FixConfig) -> tuple[str, ...]:
    """Return argv for ``cargo fix``."""

    args = [*_cargo_prefix(cargo), FIX_SUBCOMMAND]
    if fix.allow_dirty:
        args.append("--allow-dirty")
    return tuple(args)


def format_args(cargo: CargoConfig) -> tuple[str, ...]:
    return (*_cargo_prefix(cargo), FMT_SUBCOMMAND)


def build_fmt_steps(config: PolishConfig) -> tuple[FormatStep, ...]:
    """Return the lint-fix, compiler-fix and format steps in execution order.

    Formatting runs last so rustfmt sees the tree after both fix passes have
    rewritten it.

    Args:
        config: Resolved configuration.

    Returns:
        tuple[FormatStep, ...]: The three steps; the order never varies.
    """

    return (
        FormatStep(
            kind=StepKind.LINT_FIX,
            name="clippy --fix",
            args=lint_fix_args(config.cargo, config.lint),
        ),
        FormatStep(
            kind=StepKind.COMPILER_FIX,
            name="cargo fix",
            args=compiler_fix_args(config.cargo, config.fix),
        ),
        FormatStep(
            kind=StepKind.FORMAT,
            name="cargo fmt",
            args=format_args(config.cargo),
        ),
    )


__all__ = [
    "FormatStep",
    "StepKind",
    "build_fmt_steps",
    "compiler_fix_args",
    "format_args",
    "lint_fix_args",
]
