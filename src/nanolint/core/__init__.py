"""Core module exports."""

from nanolint.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    LintError,
    NanoLintError,
)
from nanolint.core.logging import (
    clear_request_id,
    configure_logging,
    get_log_file_path,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "LintError",
    "NanoLintError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_log_file_path",
    "get_request_id",
    "set_request_id",
]
