# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence and traceability."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import CARGO_ENV_VAR, CARGO_MANIFEST, CONFIG_FILENAME
from ..errors import ConfigError
from .loaders import CargoManifestConfigSource, ConfigSource, DefaultConfigSource, TomlConfigSource
from .models import PolishConfig
from .utils import _deep_merge


@dataclass(slots=True, frozen=True)
class ConfigOverrides:
    """Command-line overrides applied after every file-based source."""

    pedantic: bool | None = None
    toolchain: str | None = None

    def as_fragment(self) -> dict[str, Any]:
        """Return the overrides as a sparse configuration fragment."""

        fragment: dict[str, Any] = {}
        if self.pedantic is not None:
            fragment["lint"] = {"pedantic": self.pedantic}
        if self.toolchain is not None:
            fragment["cargo"] = {"toolchain": self.toolchain}
        return fragment


class ConfigLoadResult(BaseModel):
    """Container bundling a resolved config with the sources that contributed."""

    model_config = ConfigDict(validate_assignment=True)

    config: PolishConfig
    sources: list[str] = Field(default_factory=list)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, project_root: Path, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            project_root: Directory that anchors relative paths.
            sources: Ordered collection of configuration sources; later
                sources win.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)
        self._project_root = project_root.resolve()

    @classmethod
    def for_root(cls, project_root: Path, *, env: Mapping[str, str] | None = None) -> ConfigLoader:
        """Return a loader with the standard source order for ``project_root``.

        Args:
            project_root: Cargo workspace root.
            env: Environment used for ``${VAR}`` expansion inside TOML files.

        Returns:
            ConfigLoader: Loader reading defaults, manifest metadata and the
            project configuration file.
        """

        root = project_root.resolve()
        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            CargoManifestConfigSource(root / CARGO_MANIFEST),
            TomlConfigSource(root / CONFIG_FILENAME, env=env),
        ]
        return cls(project_root=root, sources=sources)

    @property
    def project_root(self) -> Path:
        """Return the resolved project root."""

        return self._project_root

    def load(
        self,
        *,
        env: Mapping[str, str] | None = None,
        overrides: ConfigOverrides | None = None,
    ) -> ConfigLoadResult:
        """Merge all sources, then the environment and CLI overrides.

        Args:
            env: Environment consulted for ``CARGO``; defaults to ``os.environ``.
            overrides: Optional command-line overrides.

        Returns:
            ConfigLoadResult: Validated configuration plus contributing source names.

        Raises:
            ConfigError: If any layer yields invalid configuration.
        """

        merged: dict[str, Any] = {}
        applied: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _deep_merge(merged, fragment)
            _validate(merged, source.describe())
            applied.append(source.describe())

        environment = os.environ if env is None else env
        cargo_override = environment.get(CARGO_ENV_VAR)
        if cargo_override:
            merged = _deep_merge(merged, {"cargo": {"executable": cargo_override}})
            applied.append(f"environment variable {CARGO_ENV_VAR}")

        if overrides is not None and (fragment := overrides.as_fragment()):
            merged = _deep_merge(merged, fragment)
            applied.append("command-line options")

        config = _validate(merged, "merged configuration")
        return ConfigLoadResult(config=config, sources=applied)


def _validate(payload: Mapping[str, Any], origin: str) -> PolishConfig:
    try:
        return PolishConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration from {origin}: {exc}") from exc


def load_config(
    project_root: Path,
    *,
    env: Mapping[str, str] | None = None,
    overrides: ConfigOverrides | None = None,
) -> ConfigLoadResult:
    """Load configuration for ``project_root`` using the standard precedence.

    Args:
        project_root: Cargo workspace root.
        env: Optional environment mapping; defaults to ``os.environ``.
        overrides: Optional command-line overrides.

    Returns:
        ConfigLoadResult: Resolved configuration and provenance.
    """

    loader = ConfigLoader.for_root(project_root, env=env)
    return loader.load(env=env, overrides=overrides)


__all__ = ["ConfigLoadResult", "ConfigLoader", "ConfigOverrides", "load_config"]
