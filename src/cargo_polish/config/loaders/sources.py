# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, Cargo manifest metadata)."""

from __future__ import annotations

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from ...constants import METADATA_SECTION
from ...errors import ConfigError
from ..models import PolishConfig
from ..utils import _deep_merge, _expand_env

DEFAULT_INCLUDE_KEY: Final[str] = "include"
_MANIFEST_TABLES: Final[tuple[str, ...]] = ("workspace", "package")
_METADATA_KEY: Final[str] = "metadata"


class ConfigSource(ABC):
    """Produce one configuration fragment in the layered load order."""

    name: str

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Return the raw configuration fragment provided by this source."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human readable description used in debug output."""


class DefaultConfigSource(ConfigSource):
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return PolishConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


class TomlConfigSource(ConfigSource):
    """Load configuration data from a TOML document with include support."""

    def __init__(
        self,
        path: Path,
        *,
        name: str | None = None,
        include_key: str = DEFAULT_INCLUDE_KEY,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._root_path = path
        self.name = name or str(path)
        self._include_key = include_key
        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> Mapping[str, Any]:
        if not path.exists():
            if stack:
                raise ConfigError(f"Included configuration {path} does not exist")
            return {}
        resolved = path.resolve()
        if resolved in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, resolved))
            raise ConfigError(f"Circular include detected: {include_chain}")
        data = _read_toml(resolved)
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {path} must be a table")
        document: dict[str, Any] = dict(data)
        includes = document.pop(self._include_key, None)
        merged: dict[str, Any] = {}
        for include_path in self._coerce_includes(includes, resolved.parent):
            fragment = self._load(include_path, stack + (resolved,))
            merged = _deep_merge(merged, fragment)
        # Includes were expanded by their own _load call.
        return _deep_merge(merged, _expand_env(document, self._env))

    def _coerce_includes(self, raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, (str, Path)):
            return [self._resolve_path(Path(raw), base_dir)]
        if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
            return [self._resolve_path(Path(item), base_dir) for item in raw]
        raise ConfigError(f"Unsupported include declaration: {raw!r}")

    @staticmethod
    def _resolve_path(path: Path, base_dir: Path) -> Path:
        return path if path.is_absolute() else (base_dir / path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class CargoManifestConfigSource(ConfigSource):
    """Read ``[workspace.metadata.cargo-polish]`` and ``[package.metadata.cargo-polish]``.

    Package metadata is merged over workspace metadata so a single-crate
    manifest that declares both behaves like a workspace member override.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self.name = str(path)

    def load(self) -> Mapping[str, Any]:
        if not self._path.is_file():
            return {}
        data = _read_toml(self._path)
        merged: dict[str, Any] = {}
        for table in _MANIFEST_TABLES:
            section = _metadata_section(data, table)
            if section is None:
                continue
            if not isinstance(section, Mapping):
                raise ConfigError(f"{table}.{_METADATA_KEY}.{METADATA_SECTION} in {self._path} must be a table")
            merged = _deep_merge(merged, section)
        return merged

    def describe(self) -> str:
        return f"Cargo manifest metadata ({self.name})"


def _metadata_section(data: Mapping[str, Any], table: str) -> Any:
    outer = data.get(table)
    if not isinstance(outer, Mapping):
        return None
    metadata = outer.get(_METADATA_KEY)
    if not isinstance(metadata, Mapping):
        return None
    return metadata.get(METADATA_SECTION)


__all__ = [
    "DEFAULT_INCLUDE_KEY",
    "CargoManifestConfigSource",
    "ConfigSource",
    "DefaultConfigSource",
    "TomlConfigSource",
]
