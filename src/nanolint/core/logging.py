"""Structured logging driven by the ``logging`` config section.

Every configured output becomes one stdlib handler with a structlog
renderer (console or JSON). Each lint or fix request binds a
``request_id`` through structlog's context variables so the events it
emits can be correlated. The first file output is remembered so CLI
failures can point at it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from nanolint.config.models import LoggingConfig, LogOutputConfig

_REQUEST_ID_KEY = "request_id"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]

_log_file_path: Path | None = None


def get_request_id() -> str | None:
    return structlog.contextvars.get_contextvars().get(_REQUEST_ID_KEY)


def set_request_id(request_id: str | None = None) -> str:
    """Bind a request correlation ID, generating one if not given."""
    rid = request_id or uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(**{_REQUEST_ID_KEY: rid})
    return rid


def clear_request_id() -> None:
    structlog.contextvars.unbind_contextvars(_REQUEST_ID_KEY)


def get_log_file_path() -> Path | None:
    """First file destination of the active configuration, if any."""
    return _log_file_path


def _level_number(name: str) -> int:
    return logging.getLevelNamesMapping()[name.upper()]


def _is_console(output: LogOutputConfig) -> bool:
    return output.destination in ("stderr", "stdout")


def _make_handler(output: LogOutputConfig) -> logging.Handler:
    if output.destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if output.destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _make_formatter(output: LogOutputConfig) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        renderer = structlog.dev.ConsoleRenderer(
            colors=_is_console(output) and stream.isatty(),
            pad_event_to=0,
        )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def configure_logging(config: LoggingConfig | None = None, *, verbose: bool = False) -> None:
    """Install the handlers described by ``config`` on the root logger.

    Safe to call repeatedly: the CLI configures a stderr default first and
    re-applies the workspace configuration once it has been loaded.

    Args:
        config: The ``logging`` section; built-in defaults when None
        verbose: Force DEBUG on the root logger and on console outputs
    """
    global _log_file_path
    from nanolint.config.models import LoggingConfig

    config = config or LoggingConfig()
    root_level = logging.DEBUG if verbose else _level_number(config.level)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # module-level loggers are created at import, before configuration
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()
    root_logger.setLevel(root_level)

    # asyncio logs every slow child-process callback at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    _log_file_path = None
    for output in config.outputs:
        level = _level_number(output.level) if output.level else root_level
        if verbose and _is_console(output):
            level = logging.DEBUG
        elif _log_file_path is None and not _is_console(output):
            _log_file_path = Path(output.destination)

        handler = _make_handler(output)
        handler.setLevel(level)
        handler.setFormatter(_make_formatter(output))
        root_logger.addHandler(handler)
