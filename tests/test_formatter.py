# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the stylelint report formatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from stylelint_pretty.config import FormatterConfig
from stylelint_pretty.formatter import (
    ReportFormatter,
    build_report,
    compare_warnings,
    format_location,
    format_results,
    merge_parse_errors,
    relative_source_path,
    sort_warnings,
)
from stylelint_pretty.models import LintResult, LintWarning


def _lines(output: str) -> list[str]:
    return [line.rstrip() for line in output.splitlines()]


def _result(base: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    return {**base, **overrides}


def test_outputs_nothing_without_findings(default_result: dict[str, Any], plain_config: FormatterConfig) -> None:
    assert format_results([default_result], plain_config) == ""
    assert format_results([], plain_config) == ""


def test_outputs_deduplicated_invalid_options(default_result: dict[str, Any], plain_config: FormatterConfig) -> None:
    result = _result(
        default_result,
        invalidOptionWarnings=[
            {"text": "Invalid option X for rule Y"},
            {"text": "Invalid option A for rule B"},
            {"text": "Invalid option X for rule Y"},
        ],
    )

    report = build_report([result], plain_config)

    assert report.summary.invalid_options == 2
    assert report.text == (
        "\nInvalid option: Invalid option X for rule Y.\n"
        "Invalid option: Invalid option A for rule B.\n"
        "\nSummary:\n ℹ 2 invalid options\n\n"
    )


def test_outputs_deduplicated_deprecations(default_result: dict[str, Any], plain_config: FormatterConfig) -> None:
    feature_x = "Feature X has been deprecated and will be removed in the next major version."
    feature_y = "Feature Y has been deprecated and will be removed in the next major version."
    result = _result(
        default_result,
        deprecations=[{"text": feature_x}, {"text": feature_y}, {"text": feature_x}],
    )

    report = build_report([result], plain_config)

    assert report.summary.deprecations == 2
    assert report.text == (
        f"\nDeprecated rule: {feature_x}\nDeprecated rule: {feature_y}\n\nSummary:\n ℹ 2 deprecations\n\n"
    )


def test_notices_are_collected_across_results(default_result: dict[str, Any], plain_config: FormatterConfig) -> None:
    first = _result(default_result, invalidOptionWarnings=[{"text": "Invalid option X"}])
    second = _result(default_result, invalidOptionWarnings=[{"text": "Invalid option X"}, {"text": "Invalid option Z"}])

    lines = _lines(format_results([first, second], plain_config))

    assert lines[1:3] == ["Invalid option: Invalid option X.", "Invalid option: Invalid option Z."]


def test_outputs_one_warning(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    output = format_results([_result(default_result, warnings=[default_error])], plain_config)

    assert output.startswith("\n")
    assert output.endswith("\n\n")
    assert _lines(output) == [
        "",
        "path/to/file.css",
        " path/to/file.css:3:12  ✖  You should not have an empty block   block-no-empty",
        "",
        "Summary:",
        " ✖ 1 error",
        "",
    ]


def test_outputs_warnings_and_errors(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    warning = {**default_error, "severity": "warning", "line": 44, "column": 22}
    report = build_report([_result(default_result, warnings=[default_error, warning])], plain_config)

    lines = _lines(report.text)
    assert report.summary.errors == 1
    assert report.summary.warnings == 1
    assert "path/to/file.css:3:12" in lines[2]
    assert "path/to/file.css:44:22" in lines[3]
    assert "⚠" in lines[3]
    assert lines[-3:] == [" ✖ 1 error", " ⚠ 1 warning", ""]


def test_pluralizes_summary_counts(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    second = {**default_error, "line": 44, "column": 22}
    output = format_results([_result(default_result, warnings=[default_error, second])], plain_config)

    assert " ✖ 2 errors" in _lines(output)


def test_unknown_severity_has_no_symbol_and_no_summary(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    report = build_report([_result(default_result, warnings=[{**default_error, "severity": "test"}])], plain_config)

    lines = _lines(report.text)
    assert report.summary.total == 0
    assert "Summary:" not in report.text
    assert "✖" not in report.text
    assert "You should not have an empty block" in lines[2]


def test_missing_severity_has_no_symbol_and_no_count(plain_config: FormatterConfig) -> None:
    report = build_report(
        [{"source": "a.css", "warnings": [{"line": 1, "column": 2, "rule": "r", "text": "t"}]}],
        plain_config,
    )

    assert report.summary.warnings == 0
    assert report.summary.is_empty()
    assert "Summary:" not in report.text
    assert "⚠" not in report.text
    assert _lines(report.text)[2].split() == ["a.css:1:2", "t", "r"]


def test_orders_errors_on_the_same_line_by_column(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    later = {**default_error, "column": 22}
    output = format_results([_result(default_result, warnings=[default_error, later])], plain_config)
    assert output.index("file.css:3:12") < output.index("file.css:3:22")

    earlier = {**default_error, "column": 3}
    output = format_results([_result(default_result, warnings=[default_error, earlier])], plain_config)
    assert output.index("file.css:3:3 ") < output.index("file.css:3:12")


def test_orders_errors_on_different_lines(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    next_line = {**default_error, "line": 4}
    output = format_results([_result(default_result, warnings=[next_line, default_error])], plain_config)

    assert output.index("file.css:3:12") < output.index("file.css:4:12")


def test_errors_come_before_warnings(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    warning = {**default_error, "severity": "warning", "line": 1}
    error = {**default_error, "line": 4}
    output = format_results([_result(default_result, warnings=[warning, error])], plain_config)

    assert output.index("file.css:4:12") < output.index("file.css:1:12")


def test_repeated_calls_do_not_leak_counts(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    results = [
        _result(
            default_result,
            warnings=[default_error],
            invalidOptionWarnings=[{"text": "Invalid option X"}],
        ),
    ]

    first = format_results(results, plain_config)
    second = format_results(results, plain_config)

    assert first == second
    assert " ✖ 1 error" in _lines(second)


def test_wraps_long_text_on_narrow_terminals(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    long_text: str,
    tmp_path: Path,
) -> None:
    results = [_result(default_result, warnings=[{**default_error, "text": long_text}])]
    narrow = format_results(results, FormatterConfig(color=False, tty=True, columns=60, cwd=tmp_path))
    wide = format_results(results, FormatterConfig(color=False, tty=True, columns=400, cwd=tmp_path))

    assert len(_lines(narrow)) > len(_lines(wide))
    assert all(len(line) <= 80 for line in _lines(narrow))
    assert long_text in wide


def test_does_not_wrap_without_a_terminal(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    long_text: str,
    plain_config: FormatterConfig,
) -> None:
    results = [_result(default_result, warnings=[{**default_error, "text": long_text}])]

    output = format_results(results, plain_config)

    assert long_text in output


def test_omits_file_name_when_source_missing(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    output = format_results([_result(default_result, source=None, warnings=[default_error])], plain_config)

    lines = _lines(output)
    assert "file.css" not in output
    assert lines[1].startswith("3:12  ✖")


def test_omits_line_and_column_when_line_missing(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    warning = {**default_error, "line": None, "column": 22}
    output = format_results([_result(default_result, warnings=[warning])], plain_config)

    row = _lines(output)[2]
    assert row.startswith(" path/to/file.css  ✖")
    assert ":22" not in output


def test_omits_column_when_missing(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    warning = {**default_error, "column": None}
    output = format_results([_result(default_result, warnings=[warning])], plain_config)

    assert _lines(output)[2].startswith(" path/to/file.css:3  ✖")


def test_outputs_parse_errors_as_errors(default_result: dict[str, Any], plain_config: FormatterConfig) -> None:
    parse_error = {"line": 3, "column": 12, "stylelintType": "CssSyntaxError", "text": "Unclosed block"}
    result = LintResult.model_validate(_result(default_result, parseErrors=[parse_error]))

    report = build_report([result], plain_config)

    row = _lines(report.text)[2]
    assert report.summary.errors == 1
    assert row.startswith(" path/to/file.css:3:12  ✖  Unclosed block")
    assert row.endswith("CssSyntaxError")
    assert "(CssSyntaxError)" not in row
    assert result.warnings == []


def test_keeps_sources_starting_with_angle_bracket(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    source = "<path/to/file.css>"
    output = format_results([_result(default_result, source=source, warnings=[default_error])], plain_config)

    lines = _lines(output)
    assert lines[1] == source
    assert lines[2].startswith(f" {source}:3:12")


def test_shows_absolute_sources_relative_to_base_dir(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
    tmp_path: Path,
) -> None:
    source = str(tmp_path / "styles" / "main.css")
    output = format_results([_result(default_result, source=source, warnings=[default_error])], plain_config)

    assert _lines(output)[1] == "styles/main.css"


def test_separates_results_with_blank_lines(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    first = _result(default_result, warnings=[default_error])
    second = _result(default_result, source="other.css", warnings=[default_error])

    lines = _lines(format_results([first, second], plain_config))

    assert lines[1] == "path/to/file.css"
    assert lines[3] == ""
    assert lines[4] == " other.css"


def test_strips_control_characters_from_messages(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    warning = {**default_error, "text": "Unexpected\n\tvalue"}
    output = format_results([_result(default_result, warnings=[warning])], plain_config)

    assert "Unexpected value" in output


def test_embeds_ansi_codes_when_colour_is_forced(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    tmp_path: Path,
) -> None:
    config = FormatterConfig(force_color=True, tty=False, cwd=tmp_path)

    output = format_results([_result(default_result, warnings=[default_error])], config)

    assert "\x1b[" in output
    assert "Summary:" in output


def test_report_formatter_is_callable(
    default_result: dict[str, Any],
    default_error: dict[str, Any],
    plain_config: FormatterConfig,
) -> None:
    formatter = ReportFormatter(plain_config)
    results = [_result(default_result, warnings=[default_error])]

    assert formatter(results) == formatter.format(results) == format_results(results, plain_config)


def test_merge_parse_errors_builds_a_new_sequence() -> None:
    result = LintResult.model_validate(
        {
            "source": "a.css",
            "warnings": [{"line": 1, "column": 1, "rule": "r", "severity": "warning", "text": "w (r)"}],
            "parseErrors": [{"line": 2, "column": 5, "stylelintType": "X", "text": "T"}],
        },
    )

    merged = merge_parse_errors(result)

    assert len(result.warnings) == 1
    assert [warning.text for warning in merged] == ["w (r)", "T (X)"]
    assert merged[1].rule == "X"
    assert merged[1].severity == "error"
    assert (merged[1].line, merged[1].column) == (2, 5)


def test_compare_warnings_never_reports_equality() -> None:
    first = LintWarning(line=3, column=12, severity="error", text="a")
    twin = LintWarning(line=3, column=12, severity="error", text="b")

    assert compare_warnings(first, twin) == 1
    assert compare_warnings(twin, first) == 1


def test_missing_lines_are_never_less() -> None:
    missing = LintWarning(line=None, severity="warning", text="a")
    present = LintWarning(line=2, severity="warning", text="b")

    assert compare_warnings(missing, present) == 1
    assert compare_warnings(present, missing) == 1


def test_sort_warnings_puts_errors_first_then_lines() -> None:
    warnings = [
        LintWarning(line=1, column=1, severity="warning", text="w1"),
        LintWarning(line=9, column=1, severity="error", text="e9"),
        LintWarning(line=2, column=1, severity="error", text="e2"),
    ]

    assert [warning.text for warning in sort_warnings(warnings)] == ["e2", "e9", "w1"]


def test_format_location_variants() -> None:
    warning = LintWarning(line=3, column=12, text="t")

    assert format_location("a.css", warning) == "a.css:3:12"
    assert format_location("", warning) == "3:12"
    assert format_location("a.css", LintWarning(line=None, column=12, text="t")) == "a.css"
    assert format_location("a.css", LintWarning(line=3, column=None, text="t")) == "a.css:3"


def test_relative_source_path(tmp_path: Path) -> None:
    assert relative_source_path("<input css 1>", base_dir=tmp_path) == "<input css 1>"
    assert relative_source_path(str(tmp_path / "a" / "b.css"), base_dir=tmp_path) == "a/b.css"
    assert relative_source_path("a/b.css", base_dir=tmp_path) == "a/b.css"
    assert relative_source_path(str(tmp_path.parent / "c.css"), base_dir=tmp_path) == "../c.css"
