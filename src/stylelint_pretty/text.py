# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""String helpers for warning messages, counts and display widths."""

from __future__ import annotations

import re
from typing import Final

from rich.cells import cell_len

_CONTROL_RUN: Final[re.Pattern[str]] = re.compile(r"[\x01-\x1a]+")
_SIBILANT_SUFFIXES: Final[tuple[str, ...]] = ("s", "x", "z", "ch", "sh")
_VOWELS: Final[str] = "aeiou"


def clean_text(text: str, rule: str | None) -> str:
    """Return a warning message suitable for a single table cell.

    Runs of control characters collapse into one space, and a trailing
    ``(<rule>)`` suffix is dropped because the rule has its own column.

    Args:
        text: Message reported by stylelint.
        rule: Rule name attached to the warning, if any.

    Returns:
        str: Cleaned message text.
    """

    cleaned = _CONTROL_RUN.sub(" ", text)
    if rule:
        cleaned = cleaned.removesuffix(f"({rule})")
    return cleaned


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""

    return cell_len(text)


def pluralize(word: str, count: int) -> str:
    """Return ``word`` in the grammatical number matching ``count``.

    Only regular English nouns are handled, which covers every noun the
    report prints.
    """

    if count == 1:
        return word
    if word.endswith(_SIBILANT_SUFFIXES):
        return f"{word}es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return f"{word[:-1]}ies"
    return f"{word}s"


__all__ = ["clean_text", "display_width", "pluralize"]
