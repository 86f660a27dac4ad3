# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while loading stylelint results."""

from __future__ import annotations


class ResultsLoadError(ValueError):
    """Raised when a stylelint results payload cannot be read or validated."""

    def __init__(self, message: str, *, origin: str | None = None) -> None:
        """Create the error, prefixing ``message`` with the payload ``origin``."""

        self.origin = origin
        super().__init__(f"{origin}: {message}" if origin else message)


__all__ = ("ResultsLoadError",)
