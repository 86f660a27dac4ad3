# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render stylelint results as a column-aligned, colour-coded report."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from pathlib import Path
from typing import Any

from rich.table import Table
from rich.text import Text

from .config import FormatterConfig
from .layout import (
    INITIAL_WIDTHS,
    TABLE_MARGIN,
    TEXT_COLUMN,
    TerminalSize,
    probe_terminal,
    text_column_width,
    track_column_widths,
)
from .logging import get_logger
from .models import LintResult, LintWarning
from .runtime.console import CaptureConsole
from .severity import is_error
from .summary import RunSummary, finalize_output, format_summary
from .symbols import ALERT_STYLE, CAUTION_STYLE, HEADING_STYLE, MUTED_STYLE, symbol_for, symbol_style
from .text import clean_text

LOGGER = get_logger(__name__)

ResultLike = LintResult | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class WarningRow:
    """Plain cell values of one table row."""

    location: str
    symbol: str
    message: str
    rule: str
    severity: str | None

    @property
    def cells(self) -> tuple[str, str, str, str]:
        """Return the four cells in column order."""

        return (self.location, self.symbol, self.message, self.rule)


@dataclass(frozen=True, slots=True)
class Report:
    """Rendered report together with the counters gathered while rendering it."""

    text: str
    summary: RunSummary


def _unique(messages: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(messages))


def format_invalid_options(results: Sequence[LintResult], summary: RunSummary, *, console: CaptureConsole) -> str:
    """Render one line per distinct invalid option message.

    Args:
        results: Results whose invalid option warnings are collected.
        summary: Counters receiving the number of distinct messages.
        console: Capture console used to apply styles.

    Returns:
        str: Rendered lines, empty when there is nothing to report.
    """

    messages = _unique(notice.text for result in results for notice in result.invalid_option_warnings)
    summary.invalid_options = len(messages)

    text = Text()
    for message in messages:
        text.append("Invalid option: ", style=ALERT_STYLE)
        text.append(f"{message}.\n")
    return console.render_text(text) if messages else ""


def format_deprecations(results: Sequence[LintResult], summary: RunSummary, *, console: CaptureConsole) -> str:
    """Render one line per distinct deprecation message.

    Args:
        results: Results whose deprecations are collected.
        summary: Counters receiving the number of distinct messages.
        console: Capture console used to apply styles.

    Returns:
        str: Rendered lines, empty when there is nothing to report.
    """

    messages = _unique(notice.text for result in results for notice in result.deprecations)
    summary.deprecations = len(messages)

    text = Text()
    for message in messages:
        text.append("Deprecated rule: ", style=CAUTION_STYLE)
        text.append(f"{message}\n")
    return console.render_text(text) if messages else ""


def merge_parse_errors(result: LintResult) -> list[LintWarning]:
    """Return the result's warnings followed by its parse errors as error warnings.

    ``result`` is left untouched; the merged sequence is a new list.
    """

    merged = list(result.warnings)
    if result.parse_errors:
        merged.extend(error.as_warning() for error in result.parse_errors)
    return merged


def relative_source_path(source: str, *, base_dir: Path | None = None) -> str:
    """Return ``source`` relative to ``base_dir`` with ``/`` separators.

    Sources starting with ``<`` name something other than a file (for example
    ``<input css 1>``) and are returned verbatim.

    Args:
        source: Source path reported by stylelint.
        base_dir: Directory to relativise against, defaults to the working directory.

    Returns:
        str: Display path for the source.
    """

    if source.startswith("<"):
        return source

    base = base_dir if base_dir is not None else Path.cwd()
    candidate = Path(source)
    if not candidate.is_absolute():
        candidate = base / candidate
    try:
        relative = os.path.relpath(candidate, base)
    except ValueError:
        # Different drives on Windows have no relative path.
        return candidate.as_posix()
    return relative.replace(os.sep, "/")


def _less(left: int | None, right: int | None) -> bool:
    return left is not None and right is not None and left < right


def compare_warnings(left: LintWarning, right: LintWarning) -> int:
    """Order two warnings: errors first, then by line, then by column.

    The comparator never reports equality. Comparisons involving a missing
    line or column are never "less", so such warnings sort after the other
    operand.

    Args:
        left: First warning.
        right: Second warning.

    Returns:
        int: ``-1`` when ``left`` goes first, ``1`` otherwise.
    """

    if left.severity == right.severity:
        if left.line == right.line:
            return -1 if _less(left.column, right.column) else 1
        return -1 if _less(left.line, right.line) else 1
    if is_error(left.severity):
        return -1
    return 1


def sort_warnings(warnings: Iterable[LintWarning]) -> list[LintWarning]:
    """Return ``warnings`` sorted with :func:`compare_warnings`."""

    return sorted(warnings, key=cmp_to_key(compare_warnings))


def format_location(display_path: str, warning: LintWarning) -> str:
    """Return the ``path:line:column`` label of ``warning``.

    The column is only shown together with a line, and the line stands alone
    when there is no path.
    """

    location = display_path
    if warning.line:
        location += f":{warning.line}" if location else str(warning.line)
        if warning.column:
            location += f":{warning.column}"
    return location


def build_row(display_path: str, warning: LintWarning, *, unicode: bool = True) -> WarningRow:
    """Return the table row describing ``warning``."""

    return WarningRow(
        location=format_location(display_path, warning),
        symbol=symbol_for(warning.severity, unicode=unicode),
        message=clean_text(warning.text, warning.rule),
        rule=warning.rule or "",
        severity=warning.severity,
    )


def build_table(rows: Sequence[WarningRow], widths: Sequence[int], text_width: int) -> Table:
    """Return a borderless table laying ``rows`` out in fixed-width columns.

    Args:
        rows: Rows in display order.
        widths: Content widths of the four columns.
        text_width: Width of the free-text column.

    Returns:
        Table: Table ready to render.
    """

    table = Table(
        box=None,
        show_header=False,
        show_lines=False,
        pad_edge=True,
        padding=(0, 1),
        expand=False,
    )
    table.add_column(width=widths[0], no_wrap=True)
    table.add_column(width=widths[1], no_wrap=True)
    # Wraps at word boundaries; only words longer than the column are folded.
    table.add_column(width=text_width, overflow="fold")
    table.add_column(width=widths[3], no_wrap=True)
    for row in rows:
        table.add_row(
            Text(row.location, style=MUTED_STYLE),
            Text(row.symbol, style=symbol_style(row.severity) or ""),
            Text(row.message),
            Text(row.rule, style=MUTED_STYLE),
        )
    return table


def format_warnings(
    warnings: Sequence[LintWarning],
    source: str | None,
    summary: RunSummary,
    *,
    config: FormatterConfig,
    console: CaptureConsole,
    terminal: TerminalSize | None,
) -> str:
    """Render the warnings of one source as a table.

    Args:
        warnings: Warnings of the source, parse errors included.
        source: Source path, ``None`` or empty when the result has none.
        summary: Counters receiving the error and warning counts.
        config: Formatter configuration.
        console: Capture console used to apply styles.
        terminal: Interactive terminal size, ``None`` for non-interactive output.

    Returns:
        str: Blank line, optional path header and table; empty without warnings.
    """

    if not warnings:
        return ""

    display_path = relative_source_path(source, base_dir=config.base_dir()) if source else ""
    widths = list(INITIAL_WIDTHS)
    rows: list[WarningRow] = []
    for warning in sort_warnings(warnings):
        summary.record_severity(warning.severity)
        row = build_row(display_path, warning, unicode=config.unicode)
        widths = track_column_widths(widths, row.cells)
        rows.append(row)

    text_width = text_column_width(widths, terminal)
    LOGGER.debug("column widths for %s: %s (text column %d)", display_path or "<no source>", widths, text_width)
    table_width = sum(widths) - widths[TEXT_COLUMN] + text_width + TABLE_MARGIN

    output = "\n"
    if source:
        header = Text(" ")
        header.append(display_path, style=HEADING_STYLE)
        header.append("\n")
        output += console.render_text(header)
    output += console.render_table(build_table(rows, widths, text_width), width=table_width)
    return output


def _coerce_result(result: ResultLike) -> LintResult:
    if isinstance(result, LintResult):
        return result
    return LintResult.model_validate(result)


def build_report(results: Iterable[ResultLike], config: FormatterConfig | None = None) -> Report:
    """Render ``results`` and return the text with the counters behind its summary.

    Args:
        results: Stylelint results, as models or raw JSON mappings.
        config: Formatter configuration, defaults to :class:`FormatterConfig`.

    Returns:
        Report: Rendered report and its counters.
    """

    cfg = config or FormatterConfig()
    collected = [_coerce_result(result) for result in results]
    summary = RunSummary()
    console = CaptureConsole(color=cfg.color_enabled())
    terminal = probe_terminal(cfg)

    output = format_invalid_options(collected, summary, console=console)
    output += format_deprecations(collected, summary, console=console)
    for result in collected:
        output += format_warnings(
            merge_parse_errors(result),
            result.source,
            summary,
            config=cfg,
            console=console,
            terminal=terminal,
        )
    output += format_summary(summary, console=console, unicode=cfg.unicode)

    LOGGER.debug("formatted %d result(s): %s", len(collected), summary)
    return Report(text=finalize_output(output), summary=summary)


def format_results(results: Iterable[ResultLike], config: FormatterConfig | None = None) -> str:
    """Return the report text for ``results``.

    Args:
        results: Stylelint results, as models or raw JSON mappings.
        config: Formatter configuration, defaults to :class:`FormatterConfig`.

    Returns:
        str: Report text, empty when there is nothing to report.
    """

    return build_report(results, config).text


class ReportFormatter:
    """Formatter callable bound to one configuration."""

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self.config = config or FormatterConfig()

    def format(self, results: Iterable[ResultLike]) -> str:
        """Return the report text for ``results``."""

        return format_results(results, self.config)

    def __call__(self, results: Iterable[ResultLike]) -> str:
        return self.format(results)


__all__ = [
    "Report",
    "ReportFormatter",
    "WarningRow",
    "build_report",
    "build_row",
    "build_table",
    "compare_warnings",
    "format_deprecations",
    "format_invalid_options",
    "format_location",
    "format_results",
    "format_warnings",
    "merge_parse_errors",
    "relative_source_path",
    "sort_warnings",
]
