"""Category table loader and file filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fixture_lint.config import CATEGORIES_FILE
from fixture_lint.exceptions import CategoryTableError
from fixture_lint.models import Category, CategoryTable

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CategoryTableError(f"Failed to read {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CategoryTableError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise CategoryTableError(f"Expected YAML mapping at top level in {path}")
    return raw


def load_category_table(path: Path | None = None) -> CategoryTable:
    """Load the category table from YAML (the bundled table by default)."""
    table_path = CATEGORIES_FILE if path is None else path
    raw = _read_yaml(table_path)

    categories_raw = raw.get("categories", {})
    if not isinstance(categories_raw, dict):
        raise CategoryTableError(
            f"Invalid category table in {table_path}: 'categories' must be a mapping"
        )

    categories: list[Category] = []
    for name, data in categories_raw.items():
        if not isinstance(data, dict):
            raise CategoryTableError(f"Category {name!r} in {table_path} must be a mapping")
        try:
            categories.append(Category(name=str(name), **data))
        except (TypeError, ValidationError) as exc:
            raise CategoryTableError(f"Invalid category {name!r} in {table_path}: {exc}") from exc

    logger.debug("Loaded %d categories from %s", len(categories), table_path)
    return CategoryTable(categories=tuple(categories))


def select_categories(
    table: CategoryTable,
    discovered: Iterable[str],
    *,
    only: str | None = None,
) -> tuple[list[Category], list[str]]:
    """Narrow each category to discovered files.

    Returns ``(runnable, skipped)``: categories with at least one existing
    file (file lists filtered, table order kept) and the names of categories
    left with nothing to lint.
    """
    if only is not None:
        selected = table.get(only)
        if selected is None:
            raise CategoryTableError(
                f"Unknown category {only!r}. Available: {', '.join(table.names)}"
            )
        candidates = [selected]
    else:
        candidates = list(table.categories)

    existing = set(discovered)
    runnable: list[Category] = []
    skipped: list[str] = []
    for category in candidates:
        files = tuple(f for f in category.files if f in existing)
        if not files:
            logger.info("Skipping category %r - no files found", category.name)
            skipped.append(category.name)
            continue
        missing = len(category.files) - len(files)
        if missing:
            logger.debug("Category %r: %d listed file(s) not found", category.name, missing)
        runnable.append(category.model_copy(update={"files": files}))

    return runnable, skipped
