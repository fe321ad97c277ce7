# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Data structures for the fmt CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ....config import ConfigOverrides

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Cargo workspace root. Defaults to the workspace enclosing the current directory.",
        file_okay=False,
    ),
]
PEDANTIC_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--pedantic/--no-pedantic",
        help="Also enable the clippy::pedantic lint group (overrides configuration).",
    ),
]
TOOLCHAIN_OPTION = Annotated[
    str | None,
    typer.Option("--toolchain", help="Rustup toolchain passed to cargo as +TOOLCHAIN."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Print the commands without running them."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle ANSI colour in CLI output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit debug logging (resolved root, config sources, argv)."),
]


@dataclass(slots=True, frozen=True)
class FmtCLIOptions:
    """Normalised CLI inputs for the fmt command."""

    root: Path | None
    overrides: ConfigOverrides
    dry_run: bool
    emoji: bool
    color: bool
    debug: bool


def build_fmt_options(
    *,
    root: Path | None,
    pedantic: bool | None,
    toolchain: str | None,
    dry_run: bool,
    emoji: bool,
    color: bool,
    debug: bool,
) -> FmtCLIOptions:
    """Construct ``FmtCLIOptions`` from Typer parameters.

    Args:
        root: Explicit workspace root, or ``None`` to search upward.
        pedantic: Pedantic tier override; ``None`` keeps the configured value.
        toolchain: Toolchain override; ``None`` keeps the configured value.
        dry_run: Whether to skip execution.
        emoji: Flag controlling emoji usage in logging output.
        color: Flag controlling colour usage in logging output.
        debug: Flag enabling debug logging.

    Returns:
        FmtCLIOptions: Normalised fmt command options.
    """

    return FmtCLIOptions(
        root=root.resolve() if root is not None else None,
        overrides=ConfigOverrides(pedantic=pedantic, toolchain=toolchain),
        dry_run=dry_run,
        emoji=emoji,
        color=color,
        debug=debug,
    )


__all__ = [
    "COLOR_OPTION",
    "DEBUG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "FmtCLIOptions",
    "PEDANTIC_OPTION",
    "ROOT_OPTION",
    "TOOLCHAIN_OPTION",
    "build_fmt_options",
]
