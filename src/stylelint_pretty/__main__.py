# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m stylelint_pretty``."""

from __future__ import annotations

from .cli import main

main()
