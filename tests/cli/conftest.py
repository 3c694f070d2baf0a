"""Fixtures shared by the CLI tests."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Hide the real global config and NANOLINT__ env vars; reset logging afterwards.

    The CLI installs handlers on CliRunner's streams, which are closed once
    invoke() returns.
    """
    monkeypatch.setattr(
        "nanolint.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global" / "config.yaml"
    )
    for key in list(os.environ):
        if key.upper().startswith("NANOLINT__"):
            monkeypatch.delenv(key)
    yield
    root = logging.getLogger()
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A JS project: ws/eslint.config.js and ws/src/a.js."""
    root = tmp_path / "ws"
    (root / "src").mkdir(parents=True)
    (root / "eslint.config.js").write_text("export default []\n")
    (root / "src" / "a.js").write_text("const x = 1")
    return root


@pytest.fixture
def configure_workspace() -> Callable[..., Path]:
    """Write ws/.nanolint/config.yaml pointing at the given eslint."""

    def _write(workspace: Path, eslint: Path, **extra: str) -> Path:
        lines = [f"eslint_path: {eslint}", "shell_path: /bin/sh"]
        lines += [f"{key}: {value}" for key, value in extra.items()]
        config = workspace / ".nanolint" / "config.yaml"
        config.parent.mkdir(parents=True, exist_ok=True)
        config.write_text("\n".join(lines) + "\n")
        return config

    return _write
