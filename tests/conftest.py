"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides a scriptable stand-in for the eslint executable.
"""

import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of nanolint modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("nanolint"):
        del sys.modules[module_name]


@dataclass
class FakeEslint:
    """A shell script that records how it was called and prints canned output."""

    executable: Path
    record_dir: Path

    @property
    def cwd(self) -> str:
        return (self.record_dir / "cwd.txt").read_text().strip()

    @property
    def args(self) -> list[str]:
        return (self.record_dir / "args.txt").read_text().splitlines()

    @property
    def stdin(self) -> str:
        return (self.record_dir / "stdin.txt").read_text()


@pytest.fixture
def fake_eslint(tmp_path: Path) -> Callable[..., FakeEslint]:
    """Factory for fake eslint executables.

    The script writes its cwd, argv (one per line) and stdin into its
    record directory, then prints ``stdout``/``stderr`` and exits with
    ``exit_code``. ``sleep`` replaces the process with ``sleep N``.
    """

    def _make(
        stdout: str = "[]",
        stderr: str = "",
        exit_code: int = 0,
        sleep: float | None = None,
    ) -> FakeEslint:
        bin_dir = tmp_path / "fake-bin"
        bin_dir.mkdir(exist_ok=True)
        (bin_dir / "stdout.txt").write_text(stdout)
        (bin_dir / "stderr.txt").write_text(stderr)

        lines = [
            "#!/bin/sh",
            f"cd_record='{bin_dir}'",
            'pwd > "$cd_record/cwd.txt"',
            ': > "$cd_record/args.txt"',
            'for arg in "$@"; do printf "%s\\n" "$arg" >> "$cd_record/args.txt"; done',
            'cat > "$cd_record/stdin.txt"',
        ]
        if sleep is not None:
            lines.append(f"exec sleep {sleep}")
        lines += [
            'cat "$cd_record/stdout.txt"',
            'cat "$cd_record/stderr.txt" >&2',
            f"exit {exit_code}",
        ]

        script = bin_dir / "eslint"
        script.write_text("\n".join(lines) + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return FakeEslint(executable=script, record_dir=bin_dir)

    return _make
