# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for sequential fmt execution."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_polish.config import PolishConfig
from cargo_polish.orchestration import FmtHooks, StepKind, build_fmt_steps, run_fmt

STEPS = build_fmt_steps(PolishConfig())


def test_success_runs_each_step_once_in_order(tmp_path: Path, fake_runner) -> None:
    result = run_fmt(STEPS, root=tmp_path, runner=fake_runner)

    assert result.ok
    assert result.exit_code == 0
    assert fake_runner.subcommands == ["clippy", "fix", "fmt"]
    assert all(call.cwd == tmp_path for call in fake_runner.calls)
    assert result.skipped_steps == ()


def test_lint_fix_failure_stops_before_later_steps(tmp_path: Path, fake_runner) -> None:
    fake_runner.returncodes = [101]

    result = run_fmt(STEPS, root=tmp_path, runner=fake_runner)

    assert not result.ok
    assert result.exit_code == 101
    assert fake_runner.subcommands == ["clippy"]
    assert result.failed_step is not None
    assert result.failed_step.step.kind is StepKind.LINT_FIX
    assert [step.kind for step in result.skipped_steps] == [StepKind.COMPILER_FIX, StepKind.FORMAT]


def test_compiler_fix_failure_skips_format(tmp_path: Path, fake_runner) -> None:
    fake_runner.returncodes = [0, 2]

    result = run_fmt(STEPS, root=tmp_path, runner=fake_runner)

    assert result.exit_code == 2
    assert fake_runner.subcommands == ["clippy", "fix"]
    assert [step.kind for step in result.skipped_steps] == [StepKind.FORMAT]


def test_format_failure_is_reported(tmp_path: Path, fake_runner) -> None:
    fake_runner.returncodes = [0, 0, 1]

    result = run_fmt(STEPS, root=tmp_path, runner=fake_runner)

    assert result.exit_code == 1
    assert result.failed_step is not None
    assert result.failed_step.step.kind is StepKind.FORMAT


def test_repeated_runs_on_a_clean_tree_succeed_each_time(tmp_path: Path, fake_runner) -> None:
    first = run_fmt(STEPS, root=tmp_path, runner=fake_runner)
    second = run_fmt(STEPS, root=tmp_path, runner=fake_runner)

    assert first.ok and second.ok
    assert fake_runner.subcommands == ["clippy", "fix", "fmt", "clippy", "fix", "fmt"]


def test_missing_executable_maps_to_127(tmp_path: Path) -> None:
    def missing(args, *, cwd=None, env=None, check=True):  # noqa: ANN001
        raise FileNotFoundError(f"Executable '{args[0]}' was not found on PATH")

    result = run_fmt(STEPS, root=tmp_path, runner=missing)

    assert result.exit_code == 127
    assert result.failed_step is not None
    assert "was not found" in (result.failed_step.error or "")
    assert len(result.outcomes) == 1


def test_permission_error_maps_to_126(tmp_path: Path) -> None:
    def denied(args, *, cwd=None, env=None, check=True):  # noqa: ANN001
        raise PermissionError("permission denied")

    result = run_fmt(STEPS, root=tmp_path, runner=denied)

    assert result.exit_code == 126


def test_interrupt_stops_the_sequence(tmp_path: Path) -> None:
    calls: list[tuple[str, ...]] = []

    def interrupted(args, *, cwd=None, env=None, check=True):  # noqa: ANN001
        calls.append(tuple(args))
        raise KeyboardInterrupt

    result = run_fmt(STEPS, root=tmp_path, runner=interrupted)

    assert result.exit_code == 130
    assert len(calls) == 1


def test_dry_run_never_launches(tmp_path: Path, fake_runner) -> None:
    result = run_fmt(STEPS, root=tmp_path, runner=fake_runner, dry_run=True)

    assert result.ok
    assert result.dry_run
    assert fake_runner.calls == []


def test_hooks_observe_each_step(tmp_path: Path, fake_runner) -> None:
    fake_runner.returncodes = [0, 3]
    events: list[str] = []
    hooks = FmtHooks(
        before_step=lambda step: events.append(f"start:{step.kind.value}"),
        after_step=lambda outcome: events.append(f"end:{outcome.step.kind.value}:{outcome.returncode}"),
        after_execution=lambda result: events.append(f"done:{result.exit_code}"),
    )

    run_fmt(STEPS, root=tmp_path, runner=fake_runner, hooks=hooks)

    assert events == [
        "start:lint-fix",
        "end:lint-fix:0",
        "start:compiler-fix",
        "end:compiler-fix:3",
        "done:3",
    ]


@pytest.mark.parametrize(("env", "expected"), [({}, None), ({"RUSTFLAGS": "-Dwarnings"}, {"RUSTFLAGS": "-Dwarnings"})])
def test_extra_environment_is_forwarded(tmp_path: Path, fake_runner, env, expected) -> None:
    run_fmt(STEPS, root=tmp_path, runner=fake_runner, env=env)

    assert all(call.env == expected for call in fake_runner.calls)


def test_signal_death_is_reported_as_128_plus_signal(tmp_path: Path, fake_runner) -> None:
    fake_runner.returncodes = [0, -9]

    result = run_fmt(STEPS, root=tmp_path, runner=fake_runner)

    assert result.exit_code == 137
    assert result.failed_step is not None
    assert result.failed_step.step.kind is StepKind.COMPILER_FIX
    assert fake_runner.subcommands == ["clippy", "fix"]
