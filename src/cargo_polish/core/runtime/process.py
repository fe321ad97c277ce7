# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; cargo invocations are built from
# fixed argument lists and never pass through a shell.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ...constants import EXIT_TIMEOUT

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def resolve_executable(name: str, *, env: Mapping[str, str] | None = None) -> str:
    """Return the absolute path of ``name`` as found on ``PATH``.

    Args:
        name: Executable name or path.
        env: Optional environment whose ``PATH`` is searched instead of the
            current process environment.

    Returns:
        str: Absolute executable path.

    Raises:
        FileNotFoundError: If ``name`` cannot be resolved.
    """

    head_path = Path(name)
    if head_path.is_absolute():
        return str(head_path)
    search_path = env.get("PATH") if env is not None else None
    resolved = shutil.which(name, path=search_path)
    if resolved is None:
        msg = f"Executable '{name}' was not found on PATH"
        raise FileNotFoundError(msg)
    return resolved


def _normalize_args(args: Sequence[str], env: Mapping[str, str] | None) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    return [resolve_executable(head, env=env), *rest]


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    capture_output: bool = False,
    text: bool = True,
    timeout: float | None = None,
    discard_stdin: bool = False,
) -> _CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    Args:
        args: Command argv with the executable first.
        cwd: Working directory for the child process.
        env: Extra environment variables layered over ``os.environ``.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        capture_output: Capture stdout/stderr instead of inheriting them.
        text: Decode captured output as text.
        timeout: Optional timeout in seconds.
        discard_stdin: Connect stdin to ``/dev/null``.

    Returns:
        CompletedProcess[str]: Completed process metadata.
    """

    merged_env = {**os.environ, **env} if env is not None else None
    normalized = _normalize_args(args, merged_env)

    try:
        # Bandit: argv lists come from validated configuration models.
        completed: _CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=merged_env,
            check=False,
            capture_output=capture_output,
            text=text,
            timeout=timeout,
            stdin=subprocess.DEVNULL if discard_stdin else None,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = _ensure_text(exc.stdout) or ""
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        combined_stderr = f"{stderr}\n{timeout_msg}" if stderr else timeout_msg
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=EXIT_TIMEOUT,
            stdout=stdout,
            stderr=combined_stderr,
        )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


__all__ = ["SubprocessExecutionError", "resolve_executable", "run_command"]
