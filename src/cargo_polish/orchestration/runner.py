# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Sequential, stop-on-first-failure execution of the ``fmt`` steps."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess  # nosec B404
from typing import Protocol

from ..constants import (
    EXIT_CANNOT_EXECUTE,
    EXIT_COMMAND_NOT_FOUND,
    EXIT_INTERRUPTED,
    EXIT_OK,
    SIGNAL_EXIT_BASE,
)
from ..core.runtime.process import run_command
from .steps import FormatStep


class RunnerCallable(Protocol):
    """Launch a command and wait for it, matching :func:`run_command`."""

    def __call__(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        check: bool = True,
    ) -> CompletedProcess[str]: ...


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Exit status recorded for a step that was launched."""

    step: FormatStep
    returncode: int
    duration: float = 0.0
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the step exited successfully."""

        return self.returncode == EXIT_OK


@dataclass(slots=True)
class FmtResult:
    """Aggregate state for one ``fmt`` invocation.

    ``outcomes`` always holds a prefix of ``steps``; only its final entry can
    be a failure.
    """

    steps: tuple[FormatStep, ...]
    outcomes: list[StepOutcome] = field(default_factory=list)
    dry_run: bool = False

    @property
    def failed_step(self) -> StepOutcome | None:
        """Return the outcome that stopped the sequence, if any."""

        if self.outcomes and not self.outcomes[-1].ok:
            return self.outcomes[-1]
        return None

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def exit_code(self) -> int:
        """Return the exit code of the first failing step, or ``0``."""

        failed = self.failed_step
        return EXIT_OK if failed is None else failed.returncode

    @property
    def skipped_steps(self) -> tuple[FormatStep, ...]:
        """Return planned steps that never ran."""

        return self.steps[len(self.outcomes) :]


@dataclass(slots=True)
class FmtHooks:
    """Provide lifecycle callbacks invoked around each step."""

    before_step: Callable[[FormatStep], None] | None = None
    after_step: Callable[[StepOutcome], None] | None = None
    after_execution: Callable[[FmtResult], None] | None = None


def _launch(
    step: FormatStep,
    *,
    root: Path,
    env: Mapping[str, str] | None,
    runner: RunnerCallable,
) -> StepOutcome:
    started = time.perf_counter()
    try:
        completed = runner(step.args, cwd=root, env=env, check=False)
    except FileNotFoundError as exc:
        return StepOutcome(
            step=step,
            returncode=EXIT_COMMAND_NOT_FOUND,
            duration=time.perf_counter() - started,
            error=str(exc),
        )
    except KeyboardInterrupt:
        return StepOutcome(
            step=step,
            returncode=EXIT_INTERRUPTED,
            duration=time.perf_counter() - started,
            error="interrupted",
        )
    except OSError as exc:
        return StepOutcome(
            step=step,
            returncode=EXIT_CANNOT_EXECUTE,
            duration=time.perf_counter() - started,
            error=str(exc),
        )
    returncode = completed.returncode
    if returncode < 0:
        # Killed by a signal; report it the way a POSIX shell would.
        returncode = SIGNAL_EXIT_BASE - returncode
    return StepOutcome(
        step=step,
        returncode=returncode,
        duration=time.perf_counter() - started,
    )


def run_fmt(
    steps: Sequence[FormatStep],
    *,
    root: Path,
    env: Mapping[str, str] | None = None,
    dry_run: bool = False,
    hooks: FmtHooks | None = None,
    runner: RunnerCallable | None = None,
) -> FmtResult:
    """Run ``steps`` in order against ``root``, stopping at the first failure.

    Each step inherits stdout/stderr so tool diagnostics reach the user
    unchanged. Files already rewritten by completed steps are left as-is when
    a later step fails.

    Args:
        steps: Planned steps, normally from :func:`build_fmt_steps`.
        root: Workspace root used as the working directory.
        env: Extra environment variables layered over the process environment.
        dry_run: Plan only; no process is launched.
        hooks: Optional lifecycle callbacks.
        runner: Process launcher; defaults to :func:`run_command`.

    Returns:
        FmtResult: Outcomes for the steps that ran.
    """

    active_hooks = hooks or FmtHooks()
    launch = runner or run_command
    result = FmtResult(steps=tuple(steps), dry_run=dry_run)
    if not dry_run:
        for step in result.steps:
            if active_hooks.before_step:
                active_hooks.before_step(step)
            outcome = _launch(step, root=root, env=env or None, runner=launch)
            result.outcomes.append(outcome)
            if active_hooks.after_step:
                active_hooks.after_step(outcome)
            if not outcome.ok:
                break
    if active_hooks.after_execution:
        active_hooks.after_execution(result)
    return result


__all__ = ["FmtHooks", "FmtResult", "RunnerCallable", "StepOutcome", "run_fmt"]
