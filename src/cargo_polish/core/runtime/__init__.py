# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution helpers."""

from __future__ import annotations

from .process import SubprocessExecutionError, resolve_executable, run_command

__all__ = ["SubprocessExecutionError", "resolve_executable", "run_command"]
