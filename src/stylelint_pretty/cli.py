# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point printing stylelint JSON results as a pretty report."""

from __future__ import annotations

from pathlib import Path

import typer

from .config import FormatterConfig
from .errors import ResultsLoadError
from .formatter import build_report
from .loader import load_results_file, load_results_text
from .logging import configure_verbose_logging, fail

STDIN_MARKER = "-"

app = typer.Typer(
    name="stylelint-pretty",
    help="Render stylelint JSON results as a column-aligned report.",
    add_completion=False,
)


@app.command()
def report(
    results_file: Path | None = typer.Argument(
        None,
        metavar="[FILE]",
        help="Stylelint JSON results (stylelint --formatter json). Reads stdin when omitted or '-'.",
    ),
    force_color: bool = typer.Option(False, "--color", help="Force colour even when stdout is not a terminal."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colour."),
    ascii_symbols: bool = typer.Option(False, "--ascii", help="Use fallback glyphs instead of Unicode symbols."),
    columns: int | None = typer.Option(
        None,
        "--columns",
        min=1,
        help="Lay the report out for a terminal this many columns wide.",
    ),
    cwd: Path | None = typer.Option(None, "--cwd", help="Directory that source paths are shown relative to."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
) -> None:
    """Format stylelint results and exit non-zero when errors were reported."""

    if verbose:
        configure_verbose_logging()

    config = FormatterConfig(
        color=not no_color,
        force_color=force_color and not no_color,
        unicode=not ascii_symbols,
        tty=True if columns is not None else None,
        columns=columns,
        cwd=cwd,
    )

    try:
        if results_file is None or str(results_file) == STDIN_MARKER:
            results = load_results_text(typer.get_text_stream("stdin").read(), origin="<stdin>")
        else:
            results = load_results_file(results_file)
    except ResultsLoadError as exc:
        fail(str(exc), use_emoji=not ascii_symbols, use_color=config.color_enabled())
        raise typer.Exit(code=2) from exc

    rendered = build_report(results, config)
    if rendered.text:
        typer.echo(rendered.text, nl=False, color=True if config.color_enabled() else None)
    if rendered.summary.errors:
        raise typer.Exit(code=1)


def main() -> None:
    """Run the command line application."""

    app()


__all__ = ["app", "main", "report"]
