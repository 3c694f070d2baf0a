"""nanolint error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Lint (external tool invocation and output)
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003

    # Lint (3xxx)
    LINT_PROCESS_FAILED = 3001
    LINT_SPAWN_FAILED = 3002
    LINT_TIMEOUT = 3003
    LINT_PARSE_ERROR = 3004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class NanoLintError(Exception):
    """Base error with structured context for logs and callbacks."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'LINT_TIMEOUT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(NanoLintError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )


class LintError(NanoLintError):
    """Failures invoking eslint or reading its output."""

    @classmethod
    def process_failed(cls, command: str, returncode: int | None, stderr: str) -> "LintError":
        return cls(
            code=ErrorCode.LINT_PROCESS_FAILED,
            message=f"Lint command '{command}' exited with code {returncode}: {stderr.strip()}",
            details={"command": command, "returncode": returncode, "stderr": stderr},
        )

    @classmethod
    def spawn_failed(cls, command: str, reason: str) -> "LintError":
        return cls(
            code=ErrorCode.LINT_SPAWN_FAILED,
            message=f"Could not start lint command '{command}': {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def timeout(cls, command: str, timeout_sec: float) -> "LintError":
        return cls(
            code=ErrorCode.LINT_TIMEOUT,
            message=f"Lint command '{command}' did not finish within {timeout_sec}s",
            retryable=True,
            details={"command": command, "timeout_sec": timeout_sec},
        )

    @classmethod
    def parse_failed(cls, command: str, reason: str) -> "LintError":
        return cls(
            code=ErrorCode.LINT_PARSE_ERROR,
            message=f"Could not parse output of '{command}': {reason}",
            details={"command": command, "reason": reason},
        )


class InternalError(NanoLintError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
