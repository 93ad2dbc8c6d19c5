"""Configuration constants and defaults for fixture-lint."""

from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Fixture discovery.
# ---------------------------------------------------------------------------
DEFAULT_FIXTURE_DIR: str = "test"

FIXTURE_EXTENSIONS: frozenset[str] = frozenset({".ts", ".tsx", ".js", ".jsx"})

# ---------------------------------------------------------------------------
# ESLint invocation.
# ---------------------------------------------------------------------------
DEFAULT_ESLINT_COMMAND: tuple[str, ...] = ("npx", "eslint")
DEFAULT_ESLINT_CONFIG: str = "eslint.config.js"
ESLINT_TIMEOUT_SECONDS: int = 120

# ESLint exits 0 (clean) or 1 (lint problems); anything else is a crash.
ESLINT_OK_EXIT_CODES: frozenset[int] = frozenset({0, 1})

# ESLint numeric severity -> our severity value.
ESLINT_SEVERITY_MAP: dict[int, str] = {
    2: "error",
    1: "warning",
}

# ---------------------------------------------------------------------------
# Reporting.
# ---------------------------------------------------------------------------
FINDING_PREVIEW_LIMIT: int = 3
RULES_PER_ROW: int = 3

# ---------------------------------------------------------------------------
# Paths.
# ---------------------------------------------------------------------------
DATA_DIR: Path = Path(__file__).parent / "data"
CATEGORIES_FILE: Path = DATA_DIR / "categories.yaml"
