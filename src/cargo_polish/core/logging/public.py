# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.rule import Rule
from rich.text import Text

from ...runtime.console import detect_tty, get_console


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    get_console(color=color_enabled, emoji=use_emoji).print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether ANSI colour support is desired.
    """

    console = get_console(color=use_color, emoji=True)
    if use_color and detect_tty():
        console.print()
        console.print(Rule(title))
    else:
        console.print(Text(f"\n--- {title} ---"))


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = ["emoji", "fail", "info", "ok", "section"]
