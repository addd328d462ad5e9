# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging setup and user-facing console helpers with optional colour and emoji."""

from __future__ import annotations

import logging
from typing import Final, TextIO

from rich.text import Text

from ..runtime.console import detect_tty, get_console

PACKAGE_LOGGER: Final[str] = "dockerqa"
LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
_HANDLER_MARKER: Final[str] = "_dockerqa_handler"


def configure_logging(*, debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this repeatedly only adjusts the level of the existing handler.

    Args:
        debug: Emit ``DEBUG`` records when ``True``; otherwise ``WARNING`` and above.
        stream: Optional stream for the handler (defaults to ``sys.stderr``).

    Returns:
        logging.Logger: The configured ``dockerqa`` logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_MARKER, False):
            handler.setLevel(level)
            return logger
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    return logger


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "LOG_FORMAT",
    "PACKAGE_LOGGER",
    "configure_logging",
    "emoji",
    "fail",
    "ok",
    "warn",
]
