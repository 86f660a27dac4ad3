# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logger wiring and user-facing messages with optional colour and emoji."""

from __future__ import annotations

import logging
import sys
from typing import Final

from rich.text import Text

from .runtime.console import detect_tty, get_console_manager

PACKAGE_LOGGER: Final[str] = "stylelint_pretty"


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""

    return logging.getLogger(name)


def configure_verbose_logging() -> None:
    """Stream the package's debug messages to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(logger, "_stylelint_pretty_verbose", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_stylelint_pretty_verbose", True)


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=True)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on stderr.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "PACKAGE_LOGGER",
    "configure_verbose_logging",
    "emoji",
    "fail",
    "get_logger",
]
