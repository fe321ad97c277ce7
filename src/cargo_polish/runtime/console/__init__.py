# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console helpers backed by Rich."""

from __future__ import annotations

from .manager import detect_tty, get_console, reset_consoles

__all__ = ["detect_tty", "get_console", "reset_consoles"]
