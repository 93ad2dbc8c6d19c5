"""Report generator: aggregate category outcomes into an overall verdict."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fixture_lint.models import CategoryOutcome, SuiteReport


def generate_report(
    outcomes: Sequence[CategoryOutcome],
    *,
    skipped: Iterable[str] = (),
    discovered: Iterable[str] = (),
) -> SuiteReport:
    """Combine outcomes. The suite passes only if every category passed."""
    total_errors = 0
    total_warnings = 0
    rules: set[str] = set()
    for outcome in outcomes:
        total_errors += outcome.result.total_errors
        total_warnings += outcome.result.total_warnings
        rules.update(outcome.result.rules_covered)

    return SuiteReport(
        passed=all(o.passed for o in outcomes),
        total_errors=total_errors,
        total_warnings=total_warnings,
        rules_covered=sorted(rules),
        categories_tested=len(outcomes),
        outcomes=list(outcomes),
        skipped=list(skipped),
        discovered_files=list(discovered),
    )
