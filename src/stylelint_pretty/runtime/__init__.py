# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console utilities for runtime output."""

from __future__ import annotations

from .console import CaptureConsole, RichConsoleManager, detect_tty, get_console_manager, terminal_columns

__all__ = ["CaptureConsole", "RichConsoleManager", "detect_tty", "get_console_manager", "terminal_columns"]
