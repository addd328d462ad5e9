# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles for report tables and status messages."""

from __future__ import annotations

import sys
from functools import cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for the requested presentation.

    Colour is only honoured when stdout is a terminal, so piped reports stay
    free of escape sequences.

    Args:
        color: Whether the caller wants coloured output.
        emoji: Whether emoji shortcodes are rendered.

    Returns:
        Console: Console reused by every caller asking for the same settings.
    """

    return _console_for(color and detect_tty(), emoji)


@cache
def _console_for(color: bool, emoji: bool) -> Console:
    return Console(
        color_system="auto" if color else None,
        no_color=not color,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


__all__ = ["detect_tty", "get_console"]
