# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Utilities for reasoning about the active Cargo workspace."""

from __future__ import annotations

import tomllib
from pathlib import Path

from .constants import CARGO_MANIFEST
from .errors import WorkspaceNotFoundError


def declares_workspace(manifest: Path) -> bool:
    """Return ``True`` when *manifest* contains a ``[workspace]`` table."""

    try:
        data = tomllib.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("workspace"), dict)


def find_workspace_root(start: Path) -> Path:
    """Return the directory whose ``Cargo.toml`` governs *start*.

    The nearest ancestor declaring ``[workspace]`` wins; otherwise the nearest
    ancestor holding any ``Cargo.toml`` is used.

    Args:
        start: Directory (or file) to begin the upward search from.

    Returns:
        Path: Resolved workspace root.

    Raises:
        WorkspaceNotFoundError: If no ancestor contains a ``Cargo.toml``.
    """

    resolved = start.resolve()
    origin = resolved if resolved.is_dir() else resolved.parent
    nearest: Path | None = None
    for candidate in (origin, *origin.parents):
        manifest = candidate / CARGO_MANIFEST
        if not manifest.is_file():
            continue
        if declares_workspace(manifest):
            return candidate
        if nearest is None:
            nearest = candidate
    if nearest is None:
        raise WorkspaceNotFoundError(f"could not find `{CARGO_MANIFEST}` in {origin} or any parent directory")
    return nearest


def require_manifest(root: Path) -> Path:
    """Return *root* resolved, ensuring it holds a ``Cargo.toml``.

    Raises:
        WorkspaceNotFoundError: If the manifest is missing.
    """

    resolved = root.resolve()
    if not (resolved / CARGO_MANIFEST).is_file():
        raise WorkspaceNotFoundError(f"no `{CARGO_MANIFEST}` found in {resolved}")
    return resolved


__all__ = ["declares_workspace", "find_workspace_root", "require_manifest"]
