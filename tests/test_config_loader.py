# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_polish.config import ConfigError, ConfigOverrides, PolishConfig, load_config

MANIFEST_HEADER = '[package]\nname = "demo"\nversion = "0.1.0"\n'


def _write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


def test_defaults_without_any_configuration(cargo_workspace: Path) -> None:
    result = load_config(cargo_workspace, env={})

    assert result.config == PolishConfig()
    assert result.sources == ["Built-in defaults"]


def test_manifest_metadata_package_overrides_workspace(tmp_path: Path) -> None:
    _write(
        tmp_path / "Cargo.toml",
        MANIFEST_HEADER
        + '\n[workspace]\n\n[workspace.metadata.cargo-polish.lint]\npedantic = true\nwarn = ["clippy::todo"]\n'
        + '\n[package.metadata.cargo-polish.lint]\nwarn = ["clippy::unwrap_used"]\n',
    )

    config = load_config(tmp_path, env={}).config

    assert config.lint.pedantic is True
    assert config.lint.warn == ["clippy::unwrap_used"]


def test_project_file_overrides_manifest(cargo_workspace: Path) -> None:
    _write(
        cargo_workspace / "Cargo.toml",
        MANIFEST_HEADER + "\n[package.metadata.cargo-polish.lint]\npedantic = true\nnursery = false\n",
    )
    _write(cargo_workspace / ".cargo-polish.toml", "[lint]\npedantic = false\n")

    result = load_config(cargo_workspace, env={})

    assert result.config.lint.pedantic is False
    assert result.config.lint.nursery is False
    assert len(result.sources) == 3


def test_includes_merge_before_the_including_file(cargo_workspace: Path) -> None:
    shared = cargo_workspace / "shared"
    shared.mkdir()
    _write(shared / "base.toml", '[cargo]\ntoolchain = "stable"\n[lint]\ndeny = ["clippy::dbg_macro"]\n')
    _write(
        cargo_workspace / ".cargo-polish.toml",
        'include = "shared/base.toml"\n[cargo]\ntoolchain = "nightly"\n',
    )

    config = load_config(cargo_workspace, env={}).config

    assert config.cargo.toolchain == "nightly"
    assert config.lint.deny == ["clippy::dbg_macro"]


def test_circular_includes_are_rejected(cargo_workspace: Path) -> None:
    _write(cargo_workspace / ".cargo-polish.toml", 'include = ["other.toml"]\n')
    _write(cargo_workspace / "other.toml", 'include = [".cargo-polish.toml"]\n')

    with pytest.raises(ConfigError, match="Circular include"):
        load_config(cargo_workspace, env={})


def test_environment_expansion_in_toml(cargo_workspace: Path) -> None:
    _write(cargo_workspace / ".cargo-polish.toml", '[cargo.env]\nRUSTFLAGS = "${EXTRA_FLAGS}"\n')

    config = load_config(cargo_workspace, env={"EXTRA_FLAGS": "-Ctarget-cpu=native"}).config

    assert config.cargo.env == {"RUSTFLAGS": "-Ctarget-cpu=native"}


def test_cargo_environment_variable_and_cli_overrides_win(cargo_workspace: Path) -> None:
    _write(cargo_workspace / ".cargo-polish.toml", '[cargo]\nexecutable = "cargo-from-file"\n[lint]\npedantic = true\n')

    result = load_config(
        cargo_workspace,
        env={"CARGO": "/usr/local/bin/cargo"},
        overrides=ConfigOverrides(pedantic=False, toolchain="beta"),
    )

    assert result.config.cargo.executable == "/usr/local/bin/cargo"
    assert result.config.cargo.toolchain == "beta"
    assert result.config.lint.pedantic is False
    assert result.sources[-2:] == ["environment variable CARGO", "command-line options"]


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ("[lint\n", "Invalid TOML"),
        ("[lint]\nunknown_flag = true\n", "Invalid configuration"),
        ('[lint]\npedantic = "sometimes"\n', "Invalid configuration"),
        ("include = 3\n", "Unsupported include"),
    ],
)
def test_invalid_documents_raise_config_error(cargo_workspace: Path, document: str, message: str) -> None:
    _write(cargo_workspace / ".cargo-polish.toml", document)

    with pytest.raises(ConfigError, match=message):
        load_config(cargo_workspace, env={})


def test_missing_include_is_an_error(cargo_workspace: Path) -> None:
    _write(cargo_workspace / ".cargo-polish.toml", 'include = "nope.toml"\n')

    with pytest.raises(ConfigError, match="does not exist"):
        load_config(cargo_workspace, env={})


def test_included_values_are_expanded_only_once(cargo_workspace: Path) -> None:
    _write(cargo_workspace / "base.toml", '[cargo.env]\nRUSTFLAGS = "${FLAGS}"\n')
    _write(cargo_workspace / ".cargo-polish.toml", 'include = "base.toml"\n')

    config = load_config(
        cargo_workspace,
        env={"FLAGS": "-Clink-arg=-Wl,-rpath,$ORIGIN", "ORIGIN": "expanded-twice"},
    ).config

    assert config.cargo.env == {"RUSTFLAGS": "-Clink-arg=-Wl,-rpath,$ORIGIN"}


def test_rewritten_file_is_reread(cargo_workspace: Path) -> None:
    config_path = cargo_workspace / ".cargo-polish.toml"
    _write(config_path, "[lint]\npedantic = true\n")
    assert load_config(cargo_workspace, env={}).config.lint.pedantic is True

    _write(config_path, "[lint]\npedantic = false\n")

    assert load_config(cargo_workspace, env={}).config.lint.pedantic is False
