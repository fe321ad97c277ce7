# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the fmt CLI."""

from __future__ import annotations

from pathlib import Path

from ....config import ConfigLoadResult, load_config
from ....constants import EXIT_CONFIG_ERROR
from ....errors import PolishError
from ....orchestration import FmtHooks, FmtResult, FormatStep, StepOutcome
from ....workspace import find_workspace_root, require_manifest
from ...core.shared import CLIError, CLILogger
from .models import FmtCLIOptions


def resolve_root(options: FmtCLIOptions, *, cwd: Path | None = None) -> Path:
    """Return the workspace root the fmt task should operate on.

    Args:
        options: Normalised CLI options.
        cwd: Starting directory for the upward search; defaults to ``Path.cwd()``.

    Returns:
        Path: Resolved workspace root.

    Raises:
        CLIError: If no ``Cargo.toml`` can be found and this is not a dry run.
    """

    start = cwd or Path.cwd()
    try:
        if options.root is not None:
            return options.root if options.dry_run else require_manifest(options.root)
        return find_workspace_root(start)
    except PolishError as exc:
        if options.dry_run:
            return (options.root or start).resolve()
        raise CLIError(str(exc), exit_code=EXIT_CONFIG_ERROR) from exc


def load_fmt_config(root: Path, options: FmtCLIOptions, *, logger: CLILogger) -> ConfigLoadResult:
    """Load configuration for ``root`` applying CLI overrides.

    Raises:
        CLIError: When configuration is invalid.
    """

    try:
        result = load_config(root, overrides=options.overrides)
    except PolishError as exc:
        raise CLIError(str(exc), exit_code=EXIT_CONFIG_ERROR) from exc
    for source in result.sources:
        logger.debug(f"config source={source!r}")
    return result


def build_progress_hooks(*, logger: CLILogger) -> FmtHooks:
    """Return hooks printing each step's header and status, then the plan or summary."""

    def _before(step: FormatStep) -> None:
        logger.section(step.name)
        logger.debug(f"step={step.kind.value} command={step.display()!r}")
        logger.echo(f"$ {step.display()}")

    def _after(outcome: StepOutcome) -> None:
        if outcome.ok:
            logger.ok(f"{outcome.step.name} finished in {outcome.duration:.1f}s")
            return
        if outcome.error:
            logger.fail(f"{outcome.step.name} could not run: {outcome.error}")
        else:
            logger.fail(f"{outcome.step.name} failed with exit code {outcome.returncode}")

    def _finished(result: FmtResult) -> None:
        if result.dry_run:
            emit_dry_run_plan(result.steps, logger=logger)
        else:
            emit_summary(result, logger=logger)

    return FmtHooks(before_step=_before, after_step=_after, after_execution=_finished)


def emit_dry_run_plan(steps: tuple[FormatStep, ...], *, logger: CLILogger) -> None:
    """List the commands a real run would execute, in order."""

    logger.info("Dry run: no commands will be executed.")
    for index, step in enumerate(steps, start=1):
        logger.echo(f"DRY RUN [{index}/{len(steps)}] {step.display()}")


def emit_summary(result: FmtResult, *, logger: CLILogger) -> None:
    """Report overall success, or which step stopped the sequence."""

    failed = result.failed_step
    if failed is None:
        logger.ok("fmt completed: lint-fix, compiler-fix and format all succeeded")
        return
    skipped = ", ".join(step.name for step in result.skipped_steps)
    message = f"fmt stopped at {failed.step.name} (exit code {failed.returncode})"
    if skipped:
        message = f"{message}; skipped: {skipped}"
    logger.fail(message)


__all__ = [
    "build_progress_hooks",
    "emit_dry_run_plan",
    "emit_summary",
    "load_fmt_config",
    "resolve_root",
]
