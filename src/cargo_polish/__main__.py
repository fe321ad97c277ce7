# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m cargo_polish`` to launch the CLI."""

from __future__ import annotations

from .cli.app import app


def main() -> None:
    """Invoke the Typer application."""

    app(prog_name="cargo-polish")


if __name__ == "__main__":  # pragma: no cover - module execution
    main()
