# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from stylelint_pretty.config import FormatterConfig

LONG_TEXT = "A very very very very very very very very very very very very very very very very very very long error"


@pytest.fixture
def plain_config(tmp_path: Path) -> FormatterConfig:
    """Return a colourless, non-interactive configuration rooted at ``tmp_path``."""
    return FormatterConfig(color=False, tty=False, cwd=tmp_path)


@pytest.fixture
def default_error() -> dict[str, Any]:
    """Return a stylelint error warning as found in JSON output."""
    return {
        "line": 3,
        "column": 12,
        "rule": "block-no-empty",
        "severity": "error",
        "text": "You should not have an empty block (block-no-empty)",
    }


@pytest.fixture
def default_result() -> dict[str, Any]:
    """Return a stylelint result without any findings."""
    return {
        "source": "path/to/file.css",
        "warnings": [],
        "deprecations": [],
        "invalidOptionWarnings": [],
    }


@pytest.fixture
def long_text() -> str:
    """Return a warning message too long for a narrow terminal."""
    return LONG_TEXT
