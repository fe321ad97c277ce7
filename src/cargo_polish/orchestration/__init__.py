# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Planning and sequential execution of the ``fmt`` task."""

from __future__ import annotations

from .runner import FmtHooks, FmtResult, RunnerCallable, StepOutcome, run_fmt
from .steps import FormatStep, StepKind, build_fmt_steps

__all__ = [
    "FmtHooks",
    "FmtResult",
    "FormatStep",
    "RunnerCallable",
    "StepKind",
    "StepOutcome",
    "build_fmt_steps",
    "run_fmt",
]
