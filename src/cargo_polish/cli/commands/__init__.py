# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import fmt

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register built-in CLI commands on ``app``."""

    fmt.register(app)
