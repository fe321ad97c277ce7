# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from cargo_polish.runtime.console import reset_consoles


@dataclass
class RecordedCall:
    args: tuple[str, ...]
    cwd: Path | None
    env: Mapping[str, str] | None


@dataclass
class FakeRunner:
    """Stand-in for ``run_command`` returning scripted exit codes in call order."""

    returncodes: list[int] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)

    def __call__(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append(RecordedCall(args=tuple(args), cwd=cwd, env=env))
        index = len(self.calls) - 1
        code = self.returncodes[index] if index < len(self.returncodes) else 0
        return subprocess.CompletedProcess(args=list(args), returncode=code, stdout=None, stderr=None)

    @property
    def subcommands(self) -> list[str]:
        return [next(arg for arg in call.args[1:] if not arg.startswith("+")) for call in self.calls]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CARGO", raising=False)
    reset_consoles()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def cargo_workspace(tmp_path: Path) -> Path:
    """Return a directory holding a minimal single-crate ``Cargo.toml``."""

    root = tmp_path / "crate"
    root.mkdir()
    (root / "Cargo.toml").write_text(
        '[package]\nname = "demo"\nversion = "0.1.0"\nedition = "2021"\n',
        encoding="utf-8",
    )
    return root
