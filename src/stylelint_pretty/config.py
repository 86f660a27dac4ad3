# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration for the report formatter."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .runtime.console import detect_tty


class FormatterConfig(BaseModel):
    """Presentation and environment settings for one report.

    ``tty`` and ``columns`` override what the host terminal reports, which is
    how callers without a terminal (tests, CI logs) pin the text column width.
    """

    model_config = ConfigDict(validate_assignment=True)

    color: bool = True
    force_color: bool = False
    unicode: bool = True
    tty: bool | None = None
    columns: int | None = Field(default=None, ge=1)
    cwd: Path | None = None

    def color_enabled(self) -> bool:
        """Return ``True`` when the report should embed ANSI styling.

        Returns:
            bool: ``True`` when colour was forced, or requested while stdout is a TTY.
        """

        if self.force_color:
            return True
        return self.color and detect_tty()

    def base_dir(self) -> Path:
        """Return the directory report paths are made relative to."""

        return self.cwd if self.cwd is not None else Path.cwd()


__all__ = ["FormatterConfig"]
