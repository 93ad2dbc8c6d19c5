"""CLI entry point for fixture-lint."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from fixture_lint import __version__
from fixture_lint.config import DEFAULT_ESLINT_COMMAND, DEFAULT_ESLINT_CONFIG, DEFAULT_FIXTURE_DIR
from fixture_lint.exceptions import FixtureLintError
from fixture_lint.formatters import format_suite_json, format_suite_markdown, format_suite_table

app = typer.Typer(
    name="fixture-lint",
    help="Run ESLint over categorized fixture files and check error/warning thresholds.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)
console = Console()

_EPILOG = """\
Examples:

  fixture-lint

  fixture-lint --verbose

  fixture-lint --category=hooks
"""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"fixture-lint {__version__}")
        raise typer.Exit()


@app.command(epilog=_EPILOG)
def run(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show every finding and debug logging."
    ),
    category: str | None = typer.Option(
        None, "--category", "-c", help="Run only this category."
    ),
    root: Path = typer.Option(
        Path("."), "--root", "-r", help="Project root containing fixtures and ESLint config."
    ),
    fixtures: str = typer.Option(
        DEFAULT_FIXTURE_DIR, "--fixtures", help="Fixture directory, relative to the root."
    ),
    eslint_config: Path | None = typer.Option(
        None,
        "--eslint-config",
        help=f"ESLint config file (default: <root>/{DEFAULT_ESLINT_CONFIG}).",
    ),
    categories_file: Path | None = typer.Option(
        None, "--categories", help="Category table YAML (default: bundled table)."
    ),
    eslint_command: str = typer.Option(
        " ".join(DEFAULT_ESLINT_COMMAND), "--eslint-command", help="Command used to run ESLint."
    ),
    json: bool = typer.Option(False, "--json", help="Output as JSON."),
    fmt: str = typer.Option("table", "--format", "-f", help="Output format (table|json|markdown)."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        is_eager=True,
        callback=_version_callback,
        help="Show version and exit.",
    ),
) -> None:
    """Lint every fixture category and report pass/fail against its thresholds."""
    from fixture_lint.categories import load_category_table
    from fixture_lint.discovery import find_test_files
    from fixture_lint.eslint import ESLintAdapter
    from fixture_lint.runner import run_suite

    _configure_logging(verbose)

    if fmt not in ("table", "json", "markdown"):
        console.print(f"[red]Unknown format:[/red] {fmt}")
        raise typer.Exit(1)

    root = root.resolve()
    config_path = eslint_config if eslint_config is not None else root / DEFAULT_ESLINT_CONFIG

    try:
        table = load_category_table(categories_file)
        if category is not None and table.get(category) is None:
            console.print(f"[red]Unknown category:[/red] {category}")
            console.print(f"Available: {', '.join(table.names)}")
            raise typer.Exit(1)
        engine = ESLintAdapter(root, config_path, command=shlex.split(eslint_command))
        discovered = find_test_files(root, fixtures)
        report = run_suite(engine, table, discovered, only=category)
    except FixtureLintError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    if json or fmt == "json":
        format_suite_json(report, console)
    elif fmt == "markdown":
        format_suite_markdown(report, console)
    else:
        format_suite_table(report, console, verbose=verbose)

    if not report.passed:
        raise typer.Exit(1)
