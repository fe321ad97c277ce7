# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by the logging helpers."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _console_for(color: bool, emoji: bool, tty: bool) -> Console:
    # No file is bound, so each print goes to whatever ``sys.stdout`` is at that moment.
    return Console(
        color_system="auto" if color and tty else None,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a console for the colour/emoji preferences and the current TTY state.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Shared console matching the preferences.
    """

    return _console_for(color, emoji, detect_tty())


def reset_consoles() -> None:
    """Forget shared consoles; the next lookup builds fresh ones."""

    _console_for.cache_clear()


__all__ = ["detect_tty", "get_console", "reset_consoles"]
