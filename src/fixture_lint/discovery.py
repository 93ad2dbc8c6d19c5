"""Fixture file discovery."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from fixture_lint.config import DEFAULT_FIXTURE_DIR, FIXTURE_EXTENSIONS

logger = logging.getLogger(__name__)


def _scan(directory: Path, relative: str, extensions: frozenset[str], found: list[str]) -> None:
    try:
        with os.scandir(directory) as entries:
            children = list(entries)
    except OSError as exc:
        logger.warning("Could not read directory %s: %s", relative, exc)
        return

    for entry in children:
        rel_path = f"{relative}/{entry.name}"
        try:
            if entry.is_file():
                if os.path.splitext(entry.name)[1] in extensions:
                    found.append(rel_path)
            elif entry.is_dir():
                _scan(Path(entry.path), rel_path, extensions, found)
        except OSError as exc:
            logger.warning("Could not stat %s: %s", rel_path, exc)


def find_test_files(
    root: Path,
    fixture_dir: str = DEFAULT_FIXTURE_DIR,
    extensions: Iterable[str] = FIXTURE_EXTENSIONS,
) -> list[str]:
    """Return fixture files under ``root / fixture_dir``, sorted.

    Paths are POSIX-style and relative to *root* (``test/valid.tsx``).
    Unreadable directories are skipped with a warning.
    """
    found: list[str] = []
    relative = Path(fixture_dir).as_posix().rstrip("/")
    _scan(root / fixture_dir, relative, frozenset(extensions), found)
    return sorted(found)
