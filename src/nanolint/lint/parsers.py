"""Parse eslint JSON output into diagnostics."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

import structlog

from nanolint.lint.models import Diagnostic, FixResult, ParseResult, Severity

log = structlog.get_logger(__name__)

# eslint's notice for files matched by an ignore pattern; not actionable
IGNORED_FILE_PREFIX = "File ignored"


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _optional_int(value: Any) -> int | None:
    return int(value) if _is_number(value) else None


def severity_from_eslint(value: Any) -> Severity:
    """Map eslint's numeric severity (0 off, 1 warn, 2 error)."""
    if _is_number(value):
        if value == 2:
            return Severity.ERROR
        if value == 1:
            return Severity.WARNING
    return Severity.INFO


def _map_message(msg: Any) -> Diagnostic | None:
    if isinstance(msg, Diagnostic):
        return msg
    if not isinstance(msg, dict):
        log.warning("eslint_message_dropped", reason="not an object", raw=repr(msg))
        return None

    text = msg.get("message")
    line = msg.get("line")
    column = msg.get("column")
    if not isinstance(text, str) or not _is_number(line) or not _is_number(column):
        log.warning("eslint_message_dropped", reason="missing message, line or column", raw=msg)
        return None

    severity = severity_from_eslint(msg.get("severity"))
    if severity == Severity.WARNING and text.startswith(IGNORED_FILE_PREFIX):
        return None

    rule_id = msg.get("ruleId")
    return Diagnostic(
        message=text,
        line=int(line),
        column=int(column),
        severity=severity,
        end_line=_optional_int(msg.get("endLine")),
        end_column=_optional_int(msg.get("endColumn")),
        code=rule_id if isinstance(rule_id, str) else None,
    )


def map_messages(messages: Iterable[Any]) -> list[Diagnostic]:
    """Normalize eslint messages, dropping malformed and ignored-file entries.

    Diagnostics that are already normalized pass through unchanged.
    """
    diagnostics: list[Diagnostic] = []
    for msg in messages:
        diagnostic = _map_message(msg)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics


def parse_eslint(stdout: str) -> ParseResult:
    """Parse eslint ``--format json`` output for a single linted file.

    Only the first per-file result is read. Its ``output`` field, present
    after --fix-dry-run when eslint changed something, becomes the fix.
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        return ParseResult.error(f"ESLint JSON parse error: {e}")

    if not isinstance(data, list):
        return ParseResult.error(f"Expected a JSON array, got {type(data).__name__}")
    if not data:
        return ParseResult.ok([])

    file_result = data[0]
    if not isinstance(file_result, dict):
        return ParseResult.error(f"Expected a result object, got {type(file_result).__name__}")

    messages = file_result.get("messages") or []
    if not isinstance(messages, list):
        return ParseResult.error("'messages' is not an array")

    output = file_result.get("output")
    fix = FixResult(output) if isinstance(output, str) else None
    return ParseResult.ok(map_messages(messages), fix=fix)
