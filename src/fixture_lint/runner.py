"""Category runner: lint each category's files and evaluate thresholds."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fixture_lint.categories import select_categories
from fixture_lint.eslint import LintEngine
from fixture_lint.models import (
    Category,
    CategoryOutcome,
    CategoryResult,
    CategoryTable,
    LintFailure,
    SuiteReport,
)
from fixture_lint.report import generate_report

logger = logging.getLogger(__name__)


def run_category(engine: LintEngine, category: Category) -> CategoryOutcome:
    """Lint every file of *category* and decide its verdict.

    A failure on one file marks the category failed but does not stop the
    remaining files. Expected rules are advisory and never change the verdict.
    """
    result = CategoryResult(category=category.name)
    failures: list[LintFailure] = []

    for file in category.files:
        try:
            file_result = engine.lint_file(file)
        except Exception as exc:  # noqa: BLE001
            logger.error("Error linting %s in category %r: %s", file, category.name, exc)
            failures.append(LintFailure(file=file, error=str(exc)))
            continue

        if file_result is None:
            logger.debug("No lint result for %s", file)
            continue
        result.add(file_result)

    missing = [r for r in category.expected_rules if r not in result.rules_covered]
    if missing:
        logger.info(
            "Category %r: expected rules not found: %s", category.name, ", ".join(missing)
        )

    passed = (
        not failures
        and result.total_errors <= category.max_errors
        and result.total_warnings <= category.max_warnings
    )

    return CategoryOutcome(
        category=category.name,
        description=category.description,
        passed=passed,
        max_errors=category.max_errors,
        max_warnings=category.max_warnings,
        result=result,
        lint_failures=failures,
        missing_rules=missing,
    )


def run_suite(
    engine: LintEngine,
    table: CategoryTable,
    discovered: Iterable[str],
    *,
    only: str | None = None,
) -> SuiteReport:
    """Run all runnable categories in table order and build the report."""
    discovered = list(discovered)
    runnable, skipped = select_categories(table, discovered, only=only)

    outcomes: list[CategoryOutcome] = []
    for category in runnable:
        logger.info("Testing category %r (%d files)", category.name, len(category.files))
        outcomes.append(run_category(engine, category))

    return generate_report(outcomes, skipped=skipped, discovered=discovered)
