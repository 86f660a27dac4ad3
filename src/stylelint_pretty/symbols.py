# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Log symbols and the style palette shared by the report renderers."""

from __future__ import annotations

from typing import Final

ALERT_STYLE: Final[str] = "red"
CAUTION_STYLE: Final[str] = "yellow"
MUTED_STYLE: Final[str] = "dim"
HEADING_STYLE: Final[str] = "underline"

INFO: Final[str] = "info"
WARNING: Final[str] = "warning"
ERROR: Final[str] = "error"

_UNICODE_SYMBOLS: Final[dict[str, str]] = {
    INFO: "ℹ",
    WARNING: "⚠",
    ERROR: "✖",
}

# Glyphs for terminals without full Unicode support.
_FALLBACK_SYMBOLS: Final[dict[str, str]] = {
    INFO: "i",
    WARNING: "‼",
    ERROR: "×",
}

_SYMBOL_STYLES: Final[dict[str, str]] = {
    INFO: "blue",
    WARNING: "yellow",
    ERROR: "red",
}


def symbol_for(name: str | None, *, unicode: bool = True) -> str:
    """Return the log symbol registered under ``name``.

    Args:
        name: Symbol name, usually a warning severity tag.
        unicode: ``False`` to select the fallback glyph set.

    Returns:
        str: The glyph, or an empty string when ``name`` has no symbol.
    """

    table = _UNICODE_SYMBOLS if unicode else _FALLBACK_SYMBOLS
    return table.get(name or "", "")


def symbol_style(name: str | None) -> str | None:
    """Return the Rich style used to tint the symbol registered under ``name``."""

    return _SYMBOL_STYLES.get(name or "")


__all__ = [
    "ALERT_STYLE",
    "CAUTION_STYLE",
    "ERROR",
    "HEADING_STYLE",
    "INFO",
    "MUTED_STYLE",
    "WARNING",
    "symbol_for",
    "symbol_style",
]
