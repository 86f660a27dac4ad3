# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run counters and the summary block that closes a report."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from .runtime.console import CaptureConsole
from .severity import Severity, is_error
from .symbols import ALERT_STYLE, CAUTION_STYLE, ERROR, HEADING_STYLE, INFO, WARNING, symbol_for
from .text import pluralize


@dataclass(slots=True)
class RunSummary:
    """Counters accumulated while one report is rendered."""

    errors: int = 0
    warnings: int = 0
    invalid_options: int = 0
    deprecations: int = 0

    @property
    def total(self) -> int:
        """Return the sum of every counter."""

        return self.errors + self.warnings + self.invalid_options + self.deprecations

    def is_empty(self) -> bool:
        """Return ``True`` when nothing was counted."""

        return self.total == 0

    def record_severity(self, severity: str | None) -> None:
        """Count a rendered warning; unrecognised severities are not counted."""

        if is_error(severity):
            self.errors += 1
        elif severity == Severity.WARNING.value:
            self.warnings += 1


def format_summary(summary: RunSummary, *, console: CaptureConsole, unicode: bool = True) -> str:
    """Render the summary block for ``summary``.

    Lines appear in a fixed order (errors, warnings, invalid options,
    deprecations) and only for non-zero counters.

    Args:
        summary: Counters gathered while rendering the report.
        console: Capture console used to apply styles.
        unicode: ``False`` to use fallback glyphs.

    Returns:
        str: The rendered block, or an empty string when nothing was counted.
    """

    if summary.is_empty():
        return ""

    text = Text("\n")
    text.append("Summary:", style=HEADING_STYLE)

    entries = (
        (summary.errors, ERROR, pluralize("error", summary.errors), ALERT_STYLE),
        (summary.warnings, WARNING, pluralize("warning", summary.warnings), CAUTION_STYLE),
        (
            summary.invalid_options,
            INFO,
            "invalid " + pluralize("option", summary.invalid_options),
            ALERT_STYLE,
        ),
        (summary.deprecations, INFO, pluralize("deprecation", summary.deprecations), CAUTION_STYLE),
    )
    for count, symbol, noun, style in entries:
        if count > 0:
            text.append(f"\n {symbol_for(symbol, unicode=unicode)} {count} {noun}", style=style)

    return console.render_text(text)


def finalize_output(output: str) -> str:
    """Trim ``output`` and surround a non-empty report with blank lines.

    Args:
        output: Report assembled from every rendered block.

    Returns:
        str: ``""`` for an empty report, otherwise one leading and two trailing newlines around it.
    """

    trimmed = output.strip()
    if not trimmed:
        return ""
    return f"\n{trimmed}\n\n"


__all__ = ["RunSummary", "finalize_output", "format_summary"]
