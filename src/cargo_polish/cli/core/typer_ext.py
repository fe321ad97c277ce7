# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for consistent, sorted CLI help output."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Final, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"


class SortedTyperCommand(TyperCommand):
    """Typer command that renders options in sorted order within help output."""

    def format_options(
        self,
        ctx: Context,
        formatter: HelpFormatter,
    ) -> None:
        """Render positional arguments and sorted options within CLI help.

        Args:
            ctx: Click context describing the application invocation.
            formatter: Click help formatter used to emit definition lists.
        """

        argument_records: list[tuple[str, str]] = []
        option_entries: list[tuple[tuple[str, int], tuple[str, str]]] = []

        for index, param in enumerate(self.get_params(ctx)):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                argument_records.append(record)
                continue
            option_entries.append(((_primary_option_name(param), index), record))

        if argument_records:
            with formatter.section("Arguments"):
                formatter.write_dl(argument_records)

        if option_entries:
            sorted_entries = sorted(option_entries, key=lambda item: item[0])
            with formatter.section("Options"):
                formatter.write_dl([entry for _, entry in sorted_entries])


class SortedTyperGroup(TyperGroup):
    """Typer group that defaults to using :class:`SortedTyperCommand`."""

    command_class = SortedTyperCommand


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application that emits sorted option listings by default."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator that registers commands using sorted help output.

        Args:
            name: Optional explicit command name.
            cls: Command class to instantiate; defaults to
                :class:`SortedTyperCommand` when ``None``.
            **kwargs: Additional keyword arguments forwarded to
                :meth:`typer.Typer.command`.

        Returns:
            Callable[[CommandCallback], CommandCallback]: Registration decorator.
        """

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


@dataclass(slots=True, frozen=True)
class TyperAppConfig:
    """Construction settings for :func:`create_typer`."""

    help_text: str
    name: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = False


def create_typer(*, config: TyperAppConfig) -> SortedTyper:
    """Return a :class:`SortedTyper` configured from ``config``.

    Args:
        config: Application name, help text and invocation behaviour.

    Returns:
        SortedTyper: Configured Typer application with sorted help output.
    """

    return SortedTyper(
        name=config.name,
        help=config.help_text,
        invoke_without_command=config.invoke_without_command,
        no_args_is_help=config.no_args_is_help,
        add_completion=False,
    )


def _primary_option_name(param: Parameter) -> str:
    option_names: Iterable[str] = tuple(getattr(param, "opts", ())) + tuple(
        getattr(param, "secondary_opts", ()),
    )
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


__all__ = [
    "SortedTyper",
    "SortedTyperCommand",
    "SortedTyperGroup",
    "TyperAppConfig",
    "create_typer",
]
