"""Lint runner - spawn eslint for one file and read its JSON report."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from pathlib import Path

import structlog

from nanolint.config.models import LinterSettings
from nanolint.core.errors import LintError, NanoLintError
from nanolint.lint.models import (
    LintInvocation,
    LintOutcome,
    ProcessOutput,
    RunMode,
)
from nanolint.lint.parsers import parse_eslint

log = structlog.get_logger(__name__)

ErrorCallback = Callable[[NanoLintError], None]


def _log_error(error: NanoLintError) -> None:
    log.error("lint_command_failed", error=error.error_name, message=error.message)


async def run_process(invocation: LintInvocation, timeout_sec: float) -> ProcessOutput:
    """Run an invocation to completion and collect both output streams.

    The child is killed and reaped if it outlives ``timeout_sec``.

    Raises:
        OSError: If the executable (or shell) cannot be started.
        TimeoutError: If the process did not exit in time.
    """
    has_input = invocation.input_text is not None
    proc = await asyncio.create_subprocess_exec(
        *invocation.command,
        stdin=asyncio.subprocess.PIPE if has_input else asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=invocation.cwd,
    )
    input_bytes = invocation.input_text.encode() if invocation.input_text is not None else None
    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            proc.communicate(input_bytes), timeout_sec
        )
    except (TimeoutError, asyncio.CancelledError):
        if proc.returncode is None:
            proc.kill()
            await proc.wait()
        raise
    return ProcessOutput(
        returncode=proc.returncode,
        stdout=stdout_bytes.decode(errors="replace"),
        stderr=stderr_bytes.decode(errors="replace"),
    )


class LintRunner:
    """Runs eslint against a single file with a given config.

    Failures never raise: they are passed to ``on_error`` and the returned
    outcome has status ``failed``.
    """

    def __init__(self, settings: LinterSettings, on_error: ErrorCallback | None = None) -> None:
        self._settings = settings
        self._on_error = on_error or _log_error

    def build_invocation(
        self,
        config_path: Path,
        file_path: Path,
        mode: RunMode = RunMode.DIAGNOSE,
        text: str | None = None,
    ) -> LintInvocation:
        """Build the eslint command line; cwd is the config file's directory.

        When ``text`` is given it is linted in place of the file on disk
        (``--stdin --stdin-filename``); the file path stays the last argument.
        """
        args = ["--config", str(config_path), "--format", "json"]
        if mode == RunMode.FIX_DRY_RUN:
            args.append("--fix-dry-run")
        if text is not None:
            args.extend(["--stdin", "--stdin-filename"])
        args.append(str(file_path))
        return LintInvocation(
            executable=self._settings.eslint_path or "eslint",
            cwd=config_path.parent,
            args=tuple(args),
            shell=self._settings.shell_path,
            input_text=text,
        )

    async def run(
        self,
        config_path: Path,
        file_path: Path,
        mode: RunMode = RunMode.DIAGNOSE,
        text: str | None = None,
    ) -> LintOutcome:
        """Run eslint and parse its report.

        Args:
            config_path: Resolved eslint config file
            file_path: File to lint (last positional argument)
            mode: DIAGNOSE for diagnostics, FIX_DRY_RUN to also get the fixed body
            text: Unsaved document body to lint instead of the file on disk

        Returns:
            LintOutcome with diagnostics and, in fix mode, the proposed output
        """
        invocation = self.build_invocation(config_path, file_path, mode, text)
        start_time = time.time()

        log.info("lint_command_started", command=invocation.display, cwd=str(invocation.cwd))
        try:
            result = await run_process(invocation, self._settings.timeout_sec)
        except TimeoutError:
            return self._fail(
                LintError.timeout(invocation.display, self._settings.timeout_sec), config_path
            )
        except OSError as e:
            return self._fail(LintError.spawn_failed(invocation.display, str(e)), config_path)

        log.debug(
            "lint_command_finished",
            command=invocation.display,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
            duration_seconds=round(time.time() - start_time, 3),
        )

        if result.stderr:
            return self._fail(
                LintError.process_failed(invocation.display, result.returncode, result.stderr),
                config_path,
            )

        parsed = parse_eslint(result.stdout)
        if not parsed.success:
            return self._fail(
                LintError.parse_failed(invocation.display, parsed.parse_error or "unknown"),
                config_path,
            )
        return LintOutcome.from_parse(parsed, config_path)

    def _fail(self, error: LintError, config_path: Path) -> LintOutcome:
        self._on_error(error)
        return LintOutcome.failed(error.message, config_path)
