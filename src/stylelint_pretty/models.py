# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing stylelint results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .severity import Severity


class StylelintModel(BaseModel):
    """Base model accepting stylelint's camelCase keys and snake_case names.

    Stylelint emits more keys than the report reads, so unknown keys are
    ignored rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class LintWarning(StylelintModel):
    """Single warning reported for a source file."""

    line: int | None = None
    column: int | None = None
    rule: str | None = None
    severity: str | None = None
    text: str


class ParseError(StylelintModel):
    """Syntax error stylelint hit before it could run any rule."""

    line: int | None = None
    column: int | None = None
    stylelint_type: str
    text: str

    def as_warning(self) -> LintWarning:
        """Return the error-severity warning that stands in for this parse error.

        Returns:
            LintWarning: Warning tagged with the parse error type as its rule.
        """

        return LintWarning(
            line=self.line,
            column=self.column,
            rule=self.stylelint_type,
            severity=Severity.ERROR.value,
            text=f"{self.text} ({self.stylelint_type})",
        )


class Notice(StylelintModel):
    """Free-form message attached to a result (deprecations, invalid options)."""

    text: str


class LintResult(StylelintModel):
    """Stylelint findings for one analysed source."""

    source: str | None = None
    warnings: list[LintWarning] = Field(default_factory=list)
    deprecations: list[Notice] = Field(default_factory=list)
    invalid_option_warnings: list[Notice] = Field(default_factory=list)
    parse_errors: list[ParseError] | None = None
    errored: bool | None = None
    ignored: bool | None = None


__all__ = ["LintResult", "LintWarning", "Notice", "ParseError", "StylelintModel"]
