# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command running clippy --fix, cargo fix and cargo fmt in sequence."""

from __future__ import annotations

import typer

from ....orchestration import build_fmt_steps, run_fmt
from ...core.shared import CLIError, build_cli_logger
from .models import (
    COLOR_OPTION,
    DEBUG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    PEDANTIC_OPTION,
    ROOT_OPTION,
    TOOLCHAIN_OPTION,
    build_fmt_options,
)
from .services import build_progress_hooks, load_fmt_config, resolve_root

FMT_HELP = "Apply clippy fixes, compiler fixes and rustfmt to the workspace, stopping at the first failure."


def fmt_command(
    root: ROOT_OPTION = None,
    pedantic: PEDANTIC_OPTION = None,
    toolchain: TOOLCHAIN_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Run the fmt sequence against the Cargo workspace.

    Raises:
        typer.Exit: Always raised; the code is that of the first failing step
            or ``0`` on success.
    """

    options = build_fmt_options(
        root=root,
        pedantic=pedantic,
        toolchain=toolchain,
        dry_run=dry_run,
        emoji=emoji,
        color=color,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug, no_color=not options.color)
    try:
        workspace_root = resolve_root(options)
        logger.debug(f"root={workspace_root}")
        loaded = load_fmt_config(workspace_root, options, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    config = loaded.config
    result = run_fmt(
        build_fmt_steps(config),
        root=workspace_root,
        env=config.cargo.env,
        dry_run=options.dry_run,
        hooks=build_progress_hooks(logger=logger),
    )
    raise typer.Exit(code=result.exit_code)


__all__ = ["FMT_HELP", "fmt_command"]
