# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Fmt CLI command package."""

from __future__ import annotations

import typer

from .command import FMT_HELP, fmt_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the fmt command on the provided Typer application.

    Args:
        app: Typer application receiving the command.
    """

    app.command("fmt", help=FMT_HELP)(fmt_command)
