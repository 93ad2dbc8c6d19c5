"""ESLint adapter: lint one file and normalize the JSON report."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fixture_lint.config import (
    DEFAULT_ESLINT_COMMAND,
    ESLINT_OK_EXIT_CODES,
    ESLINT_SEVERITY_MAP,
    ESLINT_TIMEOUT_SECONDS,
)
from fixture_lint.exceptions import LintEngineError
from fixture_lint.models import FileLintResult, Finding, Severity

logger = logging.getLogger(__name__)


class LintEngine(Protocol):
    """Anything that can lint a single fixture file."""

    def lint_file(self, file: str) -> FileLintResult | None:
        """Lint *file* (relative to the project root)."""
        ...


# ---------------------------------------------------------------------------
# ESLint ``--format json`` report shape
# ---------------------------------------------------------------------------


class _ESLintMessage(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    rule_id: str | None = Field(default=None, alias="ruleId")
    severity: int
    message: str
    line: int | None = None
    column: int | None = None


class _ESLintFileReport(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    file_path: str = Field(default="", alias="filePath")
    error_count: int = Field(default=0, alias="errorCount")
    warning_count: int = Field(default=0, alias="warningCount")
    messages: list[_ESLintMessage] = Field(default_factory=list)


def _to_finding(msg: _ESLintMessage) -> Finding:
    severity = Severity(ESLINT_SEVERITY_MAP.get(msg.severity, "warning"))
    line = msg.line if msg.line is not None and msg.line >= 1 else None
    return Finding(
        severity=severity,
        message=msg.message,
        line=line,
        column=msg.column,
        rule_id=msg.rule_id,
    )


def parse_eslint_report(file: str, output: str) -> FileLintResult | None:
    """Convert ESLint JSON output for a single file into a FileLintResult."""
    try:
        raw = json.loads(output)
    except json.JSONDecodeError as exc:
        raise LintEngineError(f"ESLint produced invalid JSON for {file}: {exc}") from exc

    if not isinstance(raw, list):
        raise LintEngineError(f"Unexpected ESLint report for {file}: expected a list")
    if not raw:
        return None

    try:
        report = _ESLintFileReport.model_validate(raw[0])
    except ValidationError as exc:
        raise LintEngineError(f"Unexpected ESLint report for {file}: {exc}") from exc

    return FileLintResult(
        file=file,
        error_count=report.error_count,
        warning_count=report.warning_count,
        findings=tuple(_to_finding(m) for m in report.messages),
    )


class ESLintAdapter:
    """Run the ESLint CLI against one file at a time."""

    def __init__(
        self,
        root: Path,
        config_file: Path,
        *,
        command: Sequence[str] = DEFAULT_ESLINT_COMMAND,
        timeout: int = ESLINT_TIMEOUT_SECONDS,
    ) -> None:
        if not command:
            raise LintEngineError("ESLint command is empty")
        if shutil.which(command[0]) is None:
            raise LintEngineError(f"ESLint executable not found on PATH: {command[0]!r}")
        if not config_file.is_file():
            raise LintEngineError(f"ESLint config not found: {config_file}")

        self.root = root
        self.config_file = config_file
        self.command = tuple(command)
        self.timeout = timeout

    def build_args(self, file: str) -> list[str]:
        return [*self.command, "--format", "json", "--config", str(self.config_file), file]

    def lint_file(self, file: str) -> FileLintResult | None:
        """Lint one file; raise LintEngineError when ESLint itself fails."""
        args = self.build_args(file)
        logger.debug("Running %s", " ".join(args))
        try:
            proc = subprocess.run(
                args,
                cwd=self.root,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise LintEngineError(f"ESLint timed out after {self.timeout}s on {file}") from exc
        except OSError as exc:
            raise LintEngineError(f"Failed to run ESLint on {file}: {exc}") from exc

        if proc.returncode not in ESLINT_OK_EXIT_CODES:
            detail = (proc.stderr or proc.stdout).strip() or f"exit code {proc.returncode}"
            raise LintEngineError(f"ESLint failed on {file}: {detail}")

        return parse_eslint_report(file, proc.stdout)
