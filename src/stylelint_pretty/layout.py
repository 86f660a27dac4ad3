# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Column width accounting for the warning table."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .config import FormatterConfig
from .runtime.console import detect_tty, terminal_columns
from .text import display_width

# Cell padding of the four table columns, one cell on each side.
TABLE_MARGIN: Final[int] = 8
MIN_TTY_WIDTH: Final[int] = 80
MIN_TEXT_WIDTH: Final[int] = 20
TEXT_COLUMN: Final[int] = 2
INITIAL_WIDTHS: Final[tuple[int, int, int, int]] = (1, 1, 1, 1)


@dataclass(frozen=True, slots=True)
class TerminalSize:
    """Dimensions of the interactive terminal the report is written to."""

    columns: int


def probe_terminal(config: FormatterConfig) -> TerminalSize | None:
    """Return the terminal dimensions, or ``None`` when output is not interactive.

    Args:
        config: Formatter configuration that may override TTY detection and width.

    Returns:
        TerminalSize | None: Terminal size for interactive output, otherwise ``None``.
    """

    interactive = detect_tty() if config.tty is None else config.tty
    if not interactive:
        return None
    columns = config.columns if config.columns is not None else terminal_columns()
    return TerminalSize(columns=columns)


def track_column_widths(widths: Sequence[int], row: Sequence[str]) -> list[int]:
    """Return ``widths`` grown to fit the display width of every cell in ``row``."""

    return [max(width, display_width(cell)) for width, cell in zip(widths, row, strict=True)]


def text_column_width(widths: Sequence[int], terminal: TerminalSize | None) -> int:
    """Return the width of the free-text column.

    The text column keeps its content width when the table fits the terminal
    (or when there is no terminal); otherwise it takes whatever the other
    columns leave over, never less than :data:`MIN_TEXT_WIDTH`.

    Args:
        widths: Content widths of the four table columns.
        terminal: Interactive terminal size, ``None`` for non-interactive output.

    Returns:
        int: Width to assign to the text column.
    """

    text_width = widths[TEXT_COLUMN]
    if terminal is None:
        return text_width

    tty_width = max(terminal.columns, MIN_TTY_WIDTH)
    total_width = sum(widths)
    if tty_width > total_width + TABLE_MARGIN:
        return text_width

    available = tty_width - (total_width - text_width + TABLE_MARGIN)
    return available if available > 0 else MIN_TEXT_WIDTH


__all__ = [
    "INITIAL_WIDTHS",
    "MIN_TEXT_WIDTH",
    "MIN_TTY_WIDTH",
    "TABLE_MARGIN",
    "TEXT_COLUMN",
    "TerminalSize",
    "probe_terminal",
    "text_column_width",
    "track_column_widths",
]
