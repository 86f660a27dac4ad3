# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load stylelint JSON results into :class:`LintResult` models."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import ResultsLoadError
from .logging import get_logger
from .models import LintResult

LOGGER = get_logger(__name__)

_RESULTS_ADAPTER: TypeAdapter[list[LintResult]] = TypeAdapter(list[LintResult])


def load_results(payload: Any, *, origin: str | None = None) -> list[LintResult]:
    """Validate a decoded stylelint JSON payload.

    Args:
        payload: Decoded JSON, expected to be a list of result objects.
        origin: Description of where the payload came from, used in errors.

    Returns:
        list[LintResult]: Validated results in payload order.

    Raises:
        ResultsLoadError: If the payload is not a list of stylelint results.
    """

    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        raise ResultsLoadError(
            f"expected a list of stylelint results, got {type(payload).__name__}",
            origin=origin,
        )
    try:
        results = _RESULTS_ADAPTER.validate_python(list(payload))
    except ValidationError as exc:
        raise ResultsLoadError(f"invalid stylelint results: {exc}", origin=origin) from exc
    LOGGER.debug("loaded %d result(s) from %s", len(results), origin or "payload")
    return results


def load_results_text(text: str, *, origin: str | None = None) -> list[LintResult]:
    """Decode ``text`` as stylelint JSON and validate it.

    Blank input means stylelint had nothing to report and yields no results.

    Raises:
        ResultsLoadError: If ``text`` is not valid JSON or not a results list.
    """

    if not text.strip():
        return []
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResultsLoadError(f"invalid JSON: {exc}", origin=origin) from exc
    return load_results(payload, origin=origin)


def load_results_file(path: Path) -> list[LintResult]:
    """Read and validate the stylelint JSON stored at ``path``.

    Raises:
        ResultsLoadError: If the file cannot be read or holds invalid results.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ResultsLoadError(f"cannot read file: {exc.strerror or exc}", origin=str(path)) from exc
    return load_results_text(text, origin=str(path))


__all__ = ["load_results", "load_results_file", "load_results_text"]
