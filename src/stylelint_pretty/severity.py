# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity levels stylelint assigns to warnings.

    Warnings carry their severity as a free-form string; values outside this
    enum are accepted and rendered without a glyph.
    """

    ERROR = "error"
    WARNING = "warning"


def is_error(severity: str | None) -> bool:
    """Return ``True`` when ``severity`` is the error tag."""

    return severity == Severity.ERROR.value


__all__ = ["Severity", "is_error"]
