"""Shared test fixtures for fixture-lint."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from fixture_lint.exceptions import LintEngineError
from fixture_lint.models import FileLintResult, Finding, Severity

# ---------------------------------------------------------------------------
# Sample category table YAML
# ---------------------------------------------------------------------------

SAMPLE_CATEGORIES = """\
categories:
  valid:
    description: Files that should have minimal or no errors
    files:
      - test/a.tsx
      - test/b.tsx
    max_errors: 0
    max_warnings: 10

  hooks:
    description: React hooks rules testing
    files:
      - test/hooks/react-hooks-rules.tsx
    max_errors: 10
    max_warnings: 20
    expected_rules:
      - react-hooks/exhaustive-deps
      - react-hooks/rules-of-hooks

  ghost:
    description: Nothing here exists
    files:
      - test/missing.ts
    max_errors: 0
    max_warnings: 0
"""

FIXTURE_FILES = (
    "test/a.tsx",
    "test/b.tsx",
    "test/hooks/react-hooks-rules.tsx",
    "test/notes.md",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_result(
    file: str,
    errors: int = 0,
    warnings: int = 0,
    rules: tuple[str, ...] = (),
) -> FileLintResult:
    """Build a FileLintResult with one finding per error/warning."""
    findings: list[Finding] = []
    rule_iter = iter(rules)
    for i in range(errors):
        findings.append(
            Finding(
                severity=Severity.ERROR,
                message=f"error {i}",
                line=i + 1,
                rule_id=next(rule_iter, None),
            )
        )
    for i in range(warnings):
        findings.append(
            Finding(
                severity=Severity.WARNING,
                message=f"warning {i}",
                line=i + 1,
                rule_id=next(rule_iter, None),
            )
        )
    return FileLintResult(
        file=file, error_count=errors, warning_count=warnings, findings=tuple(findings)
    )


class FakeEngine:
    """LintEngine that returns canned results and records calls."""

    def __init__(self, results: dict[str, FileLintResult | Exception | None]) -> None:
        self.results = results
        self.calls: list[str] = []

    def lint_file(self, file: str) -> FileLintResult | None:
        self.calls.append(file)
        outcome = self.results.get(file)
        if isinstance(outcome, Exception):
            raise outcome
        if file not in self.results:
            raise LintEngineError(f"no canned result for {file}")
        return outcome


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def categories_path(tmp_path: Path) -> Path:
    """Write the sample category table to a temp file."""
    p = tmp_path / "categories.yaml"
    p.write_text(SAMPLE_CATEGORIES, encoding="utf-8")
    return p


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project with fixture files and an ESLint config."""
    root = tmp_path / "project"
    for rel in FIXTURE_FILES:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("export const x = 1;\n", encoding="utf-8")
    (root / "eslint.config.js").write_text("export default [];\n", encoding="utf-8")
    return root


ResultFactory = Callable[..., FileLintResult]


@pytest.fixture
def make_result() -> ResultFactory:
    """Factory for FileLintResult values with generated findings."""
    return _build_result


@pytest.fixture
def fake_engine() -> type[FakeEngine]:
    """The FakeEngine class, for building engines with canned results."""
    return FakeEngine
