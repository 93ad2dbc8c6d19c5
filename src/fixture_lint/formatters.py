"""Output formatters for fixture-lint (table, json, markdown)."""

from __future__ import annotations

import json as json_mod

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fixture_lint.config import FINDING_PREVIEW_LIMIT, RULES_PER_ROW
from fixture_lint.models import CategoryOutcome, FileLintResult, Severity, SuiteReport

_SEVERITY_ICON: dict[Severity, str] = {
    Severity.ERROR: "[red]x[/red]",
    Severity.WARNING: "[yellow]![/yellow]",
}

_PASS = "[green]PASS[/green]"
_FAIL = "[red]FAIL[/red]"


def _status(passed: bool) -> str:
    return _PASS if passed else _FAIL


# ---------------------------------------------------------------------------
# Table formatter
# ---------------------------------------------------------------------------


def _print_file(file_result: FileLintResult, console: Console, verbose: bool) -> None:
    console.print(
        f"   [cyan]{escape(file_result.file)}[/cyan]: "
        f"{file_result.error_count} errors, {file_result.warning_count} warnings"
    )
    findings = file_result.findings
    shown = findings if verbose else findings[:FINDING_PREVIEW_LIMIT]
    for f in shown:
        icon = _SEVERITY_ICON.get(f.severity, "")
        line = f.line if f.line is not None else "?"
        console.print(
            f"      {icon} Line {line}: {escape(f.message)} [dim]({f.rule_id or 'unknown'})[/dim]"
        )
    hidden = len(findings) - len(shown)
    if hidden > 0:
        console.print(f"      [dim]... and {hidden} more issues[/dim]")


def format_category(outcome: CategoryOutcome, console: Console, *, verbose: bool = False) -> None:
    """Print the detail block for one category."""
    result = outcome.result
    console.print(f"\n[bold]Category:[/bold] {outcome.category}")
    if outcome.description:
        console.print(f"   [dim]{escape(outcome.description)}[/dim]")

    for file_result in result.file_results:
        _print_file(file_result, console, verbose)

    for failure in outcome.lint_failures:
        console.print(
            f"   [red]Error linting {escape(failure.file)}:[/red] {escape(failure.error)}"
        )

    if outcome.errors_exceeded:
        console.print(
            f"   [red]Too many errors: {result.total_errors} > {outcome.max_errors}[/red]"
        )
    if outcome.warnings_exceeded:
        console.print(
            f"   [red]Too many warnings: {result.total_warnings} > {outcome.max_warnings}[/red]"
        )

    if outcome.missing_rules:
        console.print(
            f"   [yellow]Expected rules not found:[/yellow] {', '.join(outcome.missing_rules)}"
        )
    if result.rules_covered:
        covered = ", ".join(sorted(result.rules_covered))
        console.print(f"   [green]Rules covered:[/green] {covered}")

    console.print(
        f"   {_status(outcome.passed)} Category result: "
        f"{result.total_errors} errors, {result.total_warnings} warnings"
    )


def format_suite_table(report: SuiteReport, console: Console, *, verbose: bool = False) -> None:
    """Print the full suite report as Rich text and tables."""
    console.print(f"\n[bold]Discovered {len(report.discovered_files)} test files[/bold]")
    if verbose:
        for file in report.discovered_files:
            console.print(f"   - {escape(file)}")

    for name in report.skipped:
        console.print(f"\n[yellow]Skipping category '{name}' - no files found[/yellow]")

    for outcome in report.outcomes:
        format_category(outcome, console, verbose=verbose)

    console.rule("[bold]TEST REPORT SUMMARY[/bold]")

    if report.outcomes:
        table = Table()
        table.add_column("Category", style="cyan")
        table.add_column("Status")
        table.add_column("Errors", justify="right")
        table.add_column("Warnings", justify="right")
        table.add_column("Limits", justify="right", style="dim")

        for o in report.outcomes:
            table.add_row(
                o.category,
                _status(o.passed),
                str(o.result.total_errors),
                str(o.result.total_warnings),
                f"{o.max_errors} / {o.max_warnings}",
            )
        console.print(table)
    else:
        console.print("[yellow]No categories were evaluated.[/yellow]")

    console.print("\n[bold]Overall Statistics:[/bold]")
    console.print(f"   Total Errors: {report.total_errors}")
    console.print(f"   Total Warnings: {report.total_warnings}")
    console.print(f"   Rules Covered: {len(report.rules_covered)}")
    console.print(f"   Categories Tested: {report.categories_tested}")

    if report.rules_covered:
        console.print("\n[bold]Rules Coverage:[/bold]")
        rules = report.rules_covered
        for i in range(0, len(rules), RULES_PER_ROW):
            row = ", ".join(rules[i : i + RULES_PER_ROW])
            console.print(f"   {row}")

    console.rule()
    if report.passed:
        console.print("[bold green]ALL TESTS PASSED![/bold green]")
    else:
        console.print("[bold red]SOME TESTS FAILED![/bold red]")
    console.print()


# ---------------------------------------------------------------------------
# JSON / markdown formatters
# ---------------------------------------------------------------------------


def format_suite_json(report: SuiteReport, console: Console) -> None:
    """Print the suite report as JSON."""
    console.print_json(json_mod.dumps(report.model_dump(mode="json"), indent=2))


def format_suite_markdown(report: SuiteReport, console: Console) -> None:
    """Print the suite report as markdown."""
    verdict = "PASSED" if report.passed else "FAILED"
    lines = [
        "# Lint Fixture Report",
        f"**Result:** {verdict}",
        "",
    ]
    if report.outcomes:
        lines.extend(
            [
                "| Category | Status | Errors | Warnings | Max Errors | Max Warnings |",
                "|----------|--------|-------:|---------:|-----------:|-------------:|",
            ]
        )
        for o in report.outcomes:
            status = "pass" if o.passed else "fail"
            lines.append(
                f"| {o.category} | {status} | {o.result.total_errors} "
                f"| {o.result.total_warnings} | {o.max_errors} | {o.max_warnings} |"
            )
    else:
        lines.append("No categories evaluated.")

    lines.extend(
        [
            "",
            f"**Total errors:** {report.total_errors}  ",
            f"**Total warnings:** {report.total_warnings}  ",
            f"**Rules covered:** {', '.join(report.rules_covered) or 'none'}",
        ]
    )
    if report.skipped:
        lines.append(f"**Skipped:** {', '.join(report.skipped)}")
    console.print("\n".join(lines), markup=False)
