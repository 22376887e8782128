from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from lcoview.cli._shared import color_allowed, configure_logging, resolve_use_color
from lcoview.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_GENERIC,
    EXIT_IOERR,
    EXIT_NOINPUT,
    EXIT_OK,
    EXIT_THRESHOLD,
)
from lcoview.core.pipeline import (
    GenerateOptions,
    NoInputError,
    SystemIOError,
    TemplateError,
    UnexpectedError,
    generate_report_with_summary,
)
from lcoview.render.format import format_percentage
from lcoview.render.tty_summary import render_tty_summary

if TYPE_CHECKING:
    from lcoview.core.pipeline import GenerateResult

_BOOL_FALSE = False


def _generate(options: GenerateOptions) -> GenerateResult:
    try:
        return generate_report_with_summary(options, cwd=Path.cwd())
    except NoInputError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except TemplateError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc
    except SystemIOError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_IOERR) from exc
    except UnexpectedError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc


def report_cmd(
    lcov_file: Annotated[
        Path,
        typer.Argument(help="Path to the lcov.info tracefile."),
    ],
    source_dir: Annotated[
        Path | None,
        typer.Option(
            "-s",
            "--source-dir",
            help="Directory the SF: paths are relative to (default: current directory).",
        ),
    ] = None,
    dest_dir: Annotated[
        Path | None,
        typer.Option(
            "-d",
            "--dest-dir",
            help="Output directory for the HTML report (default: a new temp directory).",
        ),
    ] = None,
    open_browser: Annotated[
        bool,
        typer.Option("-o", "--open", help="Open index.html in a browser after generation."),
    ] = _BOOL_FALSE,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Suppress progress output, emit only errors."),
    ] = _BOOL_FALSE,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Emit diagnostic logging."),
    ] = _BOOL_FALSE,
    summary: Annotated[
        bool,
        typer.Option("--summary/--no-summary", help="Print a per-file coverage table to the terminal."),
    ] = _BOOL_FALSE,
    fail_under_lines: Annotated[
        float | None,
        typer.Option("--fail-under-lines", help="Fail if overall line coverage % is below this value."),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
) -> None:
    """Generate an HTML coverage report from an LCOV file."""
    configure_logging(quiet=quiet, verbose=verbose)

    started = time.perf_counter()
    if not quiet:
        typer.echo("Generating coverage report...")

    result = _generate(
        GenerateOptions(
            lcov_file_path=lcov_file,
            source_dir=source_dir,
            dest_dir=dest_dir,
            quiet=quiet,
        )
    )

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    if not quiet:
        typer.echo(f"Report generated in {elapsed_ms}ms")
        typer.echo(f"  {result.index_path}")

    if summary and not quiet:
        use_color = resolve_use_color(color=color, no_color=no_color, allowed=color_allowed())
        typer.echo(render_tty_summary(result.report, color=use_color))

    if open_browser:
        if not quiet:
            typer.echo("Opening browser...")
        typer.launch(str(result.index_path))

    _enforce_line_threshold(result, fail_under_lines)
    raise typer.Exit(code=EXIT_OK)


def _enforce_line_threshold(result: GenerateResult, fail_under: float | None) -> None:
    if fail_under is None:
        return
    actual = result.report.summary.lines.percentage
    if actual >= fail_under:
        return
    typer.echo(
        f"Threshold failed: line coverage {format_percentage(actual)} < {format_percentage(fail_under)}",
        err=True,
    )
    raise typer.Exit(code=EXIT_THRESHOLD)


def register(app: typer.Typer) -> None:
    app.command("report")(report_cmd)


__all__ = ["register", "report_cmd"]
