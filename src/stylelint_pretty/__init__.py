# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pretty, column-aligned reports for stylelint results."""

from __future__ import annotations

from importlib import metadata

from .config import FormatterConfig
from .errors import ResultsLoadError
from .formatter import Report, ReportFormatter, build_report, format_results
from .loader import load_results, load_results_file, load_results_text
from .models import LintResult, LintWarning, Notice, ParseError
from .severity import Severity
from .summary import RunSummary

__all__ = [
    "FormatterConfig",
    "LintResult",
    "LintWarning",
    "Notice",
    "ParseError",
    "Report",
    "ReportFormatter",
    "ResultsLoadError",
    "RunSummary",
    "Severity",
    "__version__",
    "build_report",
    "format_results",
    "load_results",
    "load_results_file",
    "load_results_text",
]

try:
    __version__ = metadata.version("stylelint-pretty")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
