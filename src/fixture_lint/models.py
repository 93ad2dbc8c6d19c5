"""Pydantic v2 models for fixture-lint."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Severity(StrEnum):
    """Finding severity levels reported by the lint engine."""

    ERROR = "error"
    WARNING = "warning"


# ---------------------------------------------------------------------------
# Lint engine results
# ---------------------------------------------------------------------------


class Finding(BaseModel):
    """A single issue reported by the lint engine."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    line: int | None = Field(default=None, ge=1)
    column: int | None = None
    rule_id: str | None = None


class FileLintResult(BaseModel):
    """Lint outcome for one fixture file."""

    model_config = ConfigDict(frozen=True)

    file: str
    error_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)
    findings: tuple[Finding, ...] = ()


# ---------------------------------------------------------------------------
# Category table
# ---------------------------------------------------------------------------


class Category(BaseModel):
    """A named group of fixture files sharing lint-outcome thresholds."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    files: tuple[str, ...] = ()
    max_errors: int = Field(ge=0)
    max_warnings: int = Field(ge=0)
    expected_rules: tuple[str, ...] = ()


class CategoryTable(BaseModel):
    """Ordered, immutable set of categories with unique names."""

    model_config = ConfigDict(frozen=True)

    categories: tuple[Category, ...] = ()

    @model_validator(mode="after")
    def _unique_names(self) -> CategoryTable:
        seen: set[str] = set()
        for category in self.categories:
            if category.name in seen:
                raise ValueError(f"duplicate category name: {category.name!r}")
            seen.add(category.name)
        return self

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.categories]

    def get(self, name: str) -> Category | None:
        """Return the category called *name*, or None."""
        for category in self.categories:
            if category.name == name:
                return category
        return None


# ---------------------------------------------------------------------------
# Evaluation results
# ---------------------------------------------------------------------------


class CategoryResult(BaseModel):
    """Accumulated lint totals for one category."""

    category: str
    total_errors: int = 0
    total_warnings: int = 0
    rules_covered: set[str] = Field(default_factory=set)
    file_results: list[FileLintResult] = Field(default_factory=list)

    @field_serializer("rules_covered")
    def _sorted_rules(self, rules: set[str]) -> list[str]:
        return sorted(rules)

    def add(self, result: FileLintResult) -> None:
        """Fold one file's result into the totals."""
        self.total_errors += result.error_count
        self.total_warnings += result.warning_count
        self.file_results.append(result)
        for finding in result.findings:
            if finding.rule_id:
                self.rules_covered.add(finding.rule_id)


class LintFailure(BaseModel):
    """The lint engine failed on a single file."""

    file: str
    error: str


class CategoryOutcome(BaseModel):
    """Verdict and details for one evaluated category."""

    category: str
    description: str = ""
    passed: bool
    max_errors: int
    max_warnings: int
    result: CategoryResult
    lint_failures: list[LintFailure] = Field(default_factory=list)
    missing_rules: list[str] = Field(default_factory=list)

    @property
    def errors_exceeded(self) -> bool:
        return self.result.total_errors > self.max_errors

    @property
    def warnings_exceeded(self) -> bool:
        return self.result.total_warnings > self.max_warnings


class SuiteReport(BaseModel):
    """Aggregate of all category outcomes."""

    passed: bool
    total_errors: int = 0
    total_warnings: int = 0
    rules_covered: list[str] = Field(default_factory=list)
    categories_tested: int = 0
    outcomes: list[CategoryOutcome] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    discovered_files: list[str] = Field(default_factory=list)
