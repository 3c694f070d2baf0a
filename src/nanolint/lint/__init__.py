"""Lint module - eslint config discovery, invocation and fixes."""

from nanolint.lint.host import EditorDocument, FileDocument, IssueCollection, IssueSink
from nanolint.lint.locator import DEFAULT_CONFIG_NAMES, build_search_spec, locate
from nanolint.lint.models import (
    ConfigSearchSpec,
    Diagnostic,
    FixResult,
    LintInvocation,
    LintOutcome,
    RunMode,
    Severity,
)
from nanolint.lint.ops import LintOps
from nanolint.lint.runner import LintRunner

__all__ = [
    "ConfigSearchSpec",
    "DEFAULT_CONFIG_NAMES",
    "Diagnostic",
    "EditorDocument",
    "FileDocument",
    "FixResult",
    "IssueCollection",
    "IssueSink",
    "LintInvocation",
    "LintOps",
    "LintOutcome",
    "LintRunner",
    "RunMode",
    "Severity",
    "build_search_spec",
    "locate",
]
