"""Custom exceptions for fixture-lint."""

from __future__ import annotations


class FixtureLintError(Exception):
    """Base exception for all fixture-lint errors."""


class CategoryTableError(FixtureLintError):
    """Category table load or lookup failed."""


class LintEngineError(FixtureLintError):
    """The lint engine could not be started or failed on a file."""
