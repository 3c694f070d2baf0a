"""Tests for lint/runner.py module.

Covers:
- LintRunner.build_invocation() argument layout
- LintRunner.run() success, stderr, parse and spawn failures, timeout
- run_process() against real child processes
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from nanolint.config.models import LinterSettings
from nanolint.core.errors import ErrorCode, LintError
from nanolint.lint.models import FixResult, ProcessOutput, RunMode, Severity
from nanolint.lint.runner import LintRunner


def _settings(**overrides: Any) -> LinterSettings:
    values: dict[str, Any] = {"eslint_path": "/usr/local/bin/eslint", "shell_path": "/bin/sh"}
    values.update(overrides)
    return LinterSettings(**values)


def _report(*messages: dict[str, Any], output: str | None = None) -> str:
    result: dict[str, Any] = {"filePath": "/repo/src/a.js", "messages": list(messages)}
    if output is not None:
        result["output"] = output
    return json.dumps([result])


@pytest.fixture
def project(tmp_path: Path) -> tuple[Path, Path]:
    """A /repo-style tree: repo/eslint.config.js and repo/src/a.js."""
    repo = tmp_path / "repo"
    (repo / "src").mkdir(parents=True)
    config = repo / "eslint.config.js"
    config.write_text("export default []\n")
    source = repo / "src" / "a.js"
    source.write_text("const x = 1\n")
    return config, source


class TestBuildInvocation:
    """Tests for LintRunner.build_invocation."""

    def test_diagnose_args(self) -> None:
        runner = LintRunner(_settings())
        inv = runner.build_invocation(
            Path("/repo/eslint.config.js"), Path("/repo/src/a.js"), RunMode.DIAGNOSE
        )
        assert inv.executable == "/usr/local/bin/eslint"
        assert inv.shell == "/bin/sh"
        assert inv.cwd == Path("/repo")
        assert inv.args == (
            "--config",
            "/repo/eslint.config.js",
            "--format",
            "json",
            "/repo/src/a.js",
        )
        assert inv.input_text is None

    def test_fix_dry_run_args(self) -> None:
        runner = LintRunner(_settings())
        inv = runner.build_invocation(
            Path("/repo/eslint.config.js"), Path("/repo/src/a.js"), RunMode.FIX_DRY_RUN
        )
        assert "--fix-dry-run" in inv.args
        assert inv.args[-1] == "/repo/src/a.js"

    def test_stdin_text(self) -> None:
        """Buffer text is piped with --stdin and the path stays last."""
        runner = LintRunner(_settings())
        inv = runner.build_invocation(
            Path("/repo/eslint.config.js"),
            Path("/repo/src/a.js"),
            RunMode.FIX_DRY_RUN,
            text="const x = 1",
        )
        assert inv.args[-3:] == ("--stdin", "--stdin-filename", "/repo/src/a.js")
        assert inv.input_text == "const x = 1"

    def test_no_shell(self) -> None:
        runner = LintRunner(_settings(shell_path=None))
        inv = runner.build_invocation(Path("/repo/eslint.config.js"), Path("/repo/a.js"))
        assert inv.command[0] == "/usr/local/bin/eslint"


class TestRunWithMockedProcess:
    """LintRunner.run with run_process patched out."""

    @pytest.mark.asyncio
    async def test_diagnostics_returned(self) -> None:
        stdout = _report({"message": "Missing semicolon.", "line": 1, "column": 12, "severity": 2})
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(return_value=ProcessOutput(1, stdout, "")),
        ):
            outcome = await LintRunner(_settings()).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js")
            )

        assert outcome.status == "ok"
        assert outcome.config_path == Path("/repo/eslint.config.js")
        assert [d.severity for d in outcome.diagnostics] == [Severity.ERROR]

    @pytest.mark.asyncio
    async def test_clean_file_is_empty(self) -> None:
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(return_value=ProcessOutput(0, _report(), "")),
        ):
            outcome = await LintRunner(_settings()).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js")
            )
        assert outcome.status == "empty"

    @pytest.mark.asyncio
    async def test_fix_output_returned(self) -> None:
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(return_value=ProcessOutput(0, _report(output="const x = 1;"), "")),
        ):
            outcome = await LintRunner(_settings()).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js"), RunMode.FIX_DRY_RUN
            )
        assert outcome.status == "ok"
        assert outcome.fix == FixResult("const x = 1;")

    @pytest.mark.asyncio
    async def test_stderr_means_failure(self) -> None:
        """Any stderr output fails the run, even with valid stdout."""
        errors: list[LintError] = []
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(return_value=ProcessOutput(2, _report(), "Oops! Something went wrong!")),
        ):
            outcome = await LintRunner(_settings(), on_error=errors.append).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js")
            )

        assert outcome.status == "failed"
        assert outcome.diagnostics == []
        assert len(errors) == 1
        error = errors[0]
        assert error.code == ErrorCode.LINT_PROCESS_FAILED
        assert error.details["returncode"] == 2
        assert "Oops! Something went wrong!" in error.message
        assert "/usr/local/bin/eslint" in error.message

    @pytest.mark.asyncio
    async def test_invalid_json_means_failure(self) -> None:
        errors: list[LintError] = []
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(return_value=ProcessOutput(0, "not json", "")),
        ):
            outcome = await LintRunner(_settings(), on_error=errors.append).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js")
            )
        assert outcome.status == "failed"
        assert [e.code for e in errors] == [ErrorCode.LINT_PARSE_ERROR]

    @pytest.mark.asyncio
    async def test_spawn_error_means_failure(self) -> None:
        errors: list[LintError] = []
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(side_effect=FileNotFoundError(2, "No such file or directory")),
        ):
            outcome = await LintRunner(_settings(), on_error=errors.append).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js")
            )
        assert outcome.status == "failed"
        assert [e.code for e in errors] == [ErrorCode.LINT_SPAWN_FAILED]

    @pytest.mark.asyncio
    async def test_default_error_callback_logs(self) -> None:
        """Without a callback, failures are logged and still not raised."""
        with patch(
            "nanolint.lint.runner.run_process",
            AsyncMock(return_value=ProcessOutput(2, "", "boom")),
        ):
            outcome = await LintRunner(_settings()).run(
                Path("/repo/eslint.config.js"), Path("/repo/src/a.js")
            )
        assert outcome.status == "failed"
        assert "boom" in (outcome.error or "")


@pytest.mark.integration
class TestRunWithFakeEslint:
    """LintRunner.run spawning a real fake-eslint script."""

    @pytest.mark.asyncio
    async def test_cwd_and_args(
        self, project: tuple[Path, Path], fake_eslint: Callable[..., Any]
    ) -> None:
        """eslint runs in the config's directory with config, format and file args."""
        config, source = project
        fake = fake_eslint(
            stdout=_report({"message": "Missing semicolon.", "line": 1, "column": 12, "severity": 2})
        )
        runner = LintRunner(_settings(eslint_path=str(fake.executable)))

        outcome = await runner.run(config, source)

        assert outcome.status == "ok"
        assert outcome.diagnostics[0].message == "Missing semicolon."
        assert Path(fake.cwd) == config.parent
        assert fake.args == ["--config", str(config), "--format", "json", str(source)]

    @pytest.mark.asyncio
    async def test_without_shell(
        self, project: tuple[Path, Path], fake_eslint: Callable[..., Any]
    ) -> None:
        config, source = project
        fake = fake_eslint()
        runner = LintRunner(_settings(eslint_path=str(fake.executable), shell_path=None))

        outcome = await runner.run(config, source)

        assert outcome.status == "empty"
        assert Path(fake.cwd) == config.parent

    @pytest.mark.asyncio
    async def test_stdin_text_is_piped(
        self, project: tuple[Path, Path], fake_eslint: Callable[..., Any]
    ) -> None:
        config, source = project
        fake = fake_eslint(stdout=_report(output="const y = 2;\n"))
        runner = LintRunner(_settings(eslint_path=str(fake.executable)))

        outcome = await runner.run(config, source, RunMode.FIX_DRY_RUN, text="const y = 2\n")

        assert fake.stdin == "const y = 2\n"
        assert outcome.fix == FixResult("const y = 2;\n")

    @pytest.mark.asyncio
    async def test_stderr_output_fails(
        self, project: tuple[Path, Path], fake_eslint: Callable[..., Any]
    ) -> None:
        config, source = project
        fake = fake_eslint(stdout="", stderr="Error: Cannot find module 'typescript'\n", exit_code=2)
        errors: list[LintError] = []
        runner = LintRunner(_settings(eslint_path=str(fake.executable)), on_error=errors.append)

        outcome = await runner.run(config, source)

        assert outcome.status == "failed"
        assert errors[0].details["returncode"] == 2
        assert "Cannot find module" in errors[0].details["stderr"]

    @pytest.mark.asyncio
    async def test_missing_executable_without_shell(self, project: tuple[Path, Path]) -> None:
        config, source = project
        errors: list[LintError] = []
        runner = LintRunner(
            _settings(eslint_path="/nonexistent/eslint", shell_path=None), on_error=errors.append
        )

        outcome = await runner.run(config, source)

        assert outcome.status == "failed"
        assert errors[0].code == ErrorCode.LINT_SPAWN_FAILED

    @pytest.mark.asyncio
    async def test_missing_executable_through_shell(self, project: tuple[Path, Path]) -> None:
        """The shell reports the missing command on stderr."""
        config, source = project
        errors: list[LintError] = []
        runner = LintRunner(_settings(eslint_path="/nonexistent/eslint"), on_error=errors.append)

        outcome = await runner.run(config, source)

        assert outcome.status == "failed"
        assert errors[0].code == ErrorCode.LINT_PROCESS_FAILED

    @pytest.mark.asyncio
    async def test_timeout_kills_process(
        self, project: tuple[Path, Path], fake_eslint: Callable[..., Any]
    ) -> None:
        config, source = project
        fake = fake_eslint(sleep=30)
        errors: list[LintError] = []
        runner = LintRunner(
            _settings(eslint_path=str(fake.executable), shell_path=None, timeout_sec=0.5),
            on_error=errors.append,
        )

        outcome = await runner.run(config, source)

        assert outcome.status == "failed"
        assert errors[0].code == ErrorCode.LINT_TIMEOUT
        assert errors[0].retryable is True
