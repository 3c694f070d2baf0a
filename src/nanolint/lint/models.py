"""Lint models - invocations, diagnostics and results."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal


class Severity(Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RunMode(Enum):
    """What eslint is asked to do."""

    DIAGNOSE = "diagnose"
    FIX_DRY_RUN = "fix-dry-run"


@dataclass(frozen=True)
class ConfigSearchSpec:
    """Filenames probed at each directory level, in priority order."""

    names: tuple[str, ...]
    max_depth: int = 100


@dataclass(frozen=True)
class LintInvocation:
    """A single eslint command line, ready to spawn."""

    executable: str
    cwd: Path
    args: tuple[str, ...]
    shell: str | None = None
    input_text: str | None = None  # piped to stdin with --stdin

    @property
    def command(self) -> list[str]:
        """Argv actually spawned; wraps the eslint command line in the shell if one is set."""
        if self.shell:
            return [self.shell, "-c", shlex.join([self.executable, *self.args])]
        return [self.executable, *self.args]

    @property
    def display(self) -> str:
        return shlex.join([self.executable, *self.args])


@dataclass(frozen=True)
class Diagnostic:
    """A single eslint finding, normalized."""

    message: str
    line: int  # 1-based
    column: int  # 1-based
    severity: Severity = Severity.INFO
    end_line: int | None = None
    end_column: int | None = None
    code: str | None = None  # eslint ruleId, e.g. "no-unused-vars"

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "severity": self.severity.value,
            "code": self.code,
        }


@dataclass(frozen=True)
class FixResult:
    """Full replacement text proposed by eslint --fix-dry-run."""

    output: str

    def differs_from(self, text: str) -> bool:
        return self.output != text


@dataclass(frozen=True)
class ProcessOutput:
    """Exit code and collected output streams of a finished eslint process."""

    returncode: int | None
    stdout: str
    stderr: str


@dataclass
class ParseResult:
    """Result from parsing eslint output."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    fix: FixResult | None = None
    parse_error: str | None = None

    @property
    def success(self) -> bool:
        return self.parse_error is None

    @classmethod
    def ok(cls, diagnostics: list[Diagnostic], fix: FixResult | None = None) -> ParseResult:
        return cls(diagnostics=diagnostics, fix=fix)

    @classmethod
    def error(cls, message: str) -> ParseResult:
        return cls(parse_error=message)


OutcomeStatus = Literal["ok", "empty", "failed", "stale"]


@dataclass
class LintOutcome:
    """Result of one lint or fix request.

    ``empty`` means there is nothing to show (no config, or eslint reported
    nothing); ``failed`` means eslint could not be run or understood, with
    the reason in ``error``.
    """

    status: OutcomeStatus
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fix: FixResult | None = None
    error: str | None = None
    config_path: Path | None = None

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    @classmethod
    def from_parse(cls, result: ParseResult, config_path: Path | None = None) -> LintOutcome:
        if not result.diagnostics and result.fix is None:
            return cls(status="empty", config_path=config_path)
        return cls(
            status="ok",
            diagnostics=result.diagnostics,
            fix=result.fix,
            config_path=config_path,
        )

    @classmethod
    def empty(cls, config_path: Path | None = None) -> LintOutcome:
        return cls(status="empty", config_path=config_path)

    @classmethod
    def failed(cls, reason: str, config_path: Path | None = None) -> LintOutcome:
        return cls(status="failed", error=reason, config_path=config_path)

    @classmethod
    def stale(cls, config_path: Path | None = None) -> LintOutcome:
        return cls(status="stale", config_path=config_path)
