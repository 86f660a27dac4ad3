# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import io
import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by colour, emoji and stream."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a Rich console configured for ``color`` and ``emoji`` preferences.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji glyphs.
            stderr: ``True`` to target ``sys.stderr`` instead of stdout.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty()
        key = (color, emoji, stderr, tty)
        if key not in self._cache:
            color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                "auto" if color and tty else None
            )
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                soft_wrap=True,
                stderr=stderr,
            )
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return a cached :class:`RichConsoleManager` instance.

    Returns:
        RichConsoleManager: Singleton console manager bound to the process.
    """

    return RichConsoleManager()


def terminal_columns() -> int:
    """Return the column count Rich reports for the current stdout."""

    return get_console_manager().get(color=False, emoji=False).size.width


class CaptureConsole:
    """Render Rich renderables into strings instead of writing to a stream.

    Every render builds a throw-away :class:`Console` bound to an in-memory
    buffer, so tables can be laid out at their own width while plain text is
    never wrapped.
    """

    def __init__(self, *, color: bool) -> None:
        self.color = color

    def _console(self, buffer: io.StringIO, *, width: int, soft_wrap: bool) -> Console:
        return Console(
            file=buffer,
            width=width,
            color_system="standard" if self.color else None,
            force_terminal=self.color,
            no_color=not self.color,
            emoji=False,
            highlight=False,
            soft_wrap=soft_wrap,
            legacy_windows=False,
        )

    def _render(self, renderable: RenderableType, *, width: int, soft_wrap: bool) -> str:
        buffer = io.StringIO()
        console = self._console(buffer, width=width, soft_wrap=soft_wrap)
        console.print(renderable, end="" if soft_wrap else "\n")
        return buffer.getvalue()

    def render_text(self, text: Text) -> str:
        """Return ``text`` rendered without wrapping, newlines included verbatim.

        Args:
            text: Styled text, including any newline characters it needs.

        Returns:
            str: Rendered text, carrying ANSI codes when colour is enabled.
        """

        return self._render(text, width=max(len(text.plain), 1), soft_wrap=True)

    def render_table(self, table: Table, *, width: int) -> str:
        """Return ``table`` rendered into exactly ``width`` cells per line.

        Args:
            table: Table whose column widths are already fixed.
            width: Total width of the table including cell padding.

        Returns:
            str: Rendered table, one newline-terminated line per output row.
        """

        return self._render(table, width=width, soft_wrap=False)


__all__ = [
    "CaptureConsole",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "terminal_columns",
]
