# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands
from .core.typer_ext import TyperAppConfig, create_typer

app = create_typer(
    config=TyperAppConfig(
        name="cargo-polish",
        help_text="Run clippy --fix, cargo fix and cargo fmt over a Rust workspace.",
        no_args_is_help=True,
    ),
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"cargo-polish {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_show_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Run clippy --fix, cargo fix and cargo fmt over a Rust workspace."""


register_commands(app)

__all__ = ["app"]
