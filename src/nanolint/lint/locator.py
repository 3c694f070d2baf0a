"""Config discovery - find the eslint config closest to a document."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from nanolint.lint.models import ConfigSearchSpec

DEFAULT_CONFIG_NAMES: tuple[str, ...] = (
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
    "eslint.config.ts",
    "eslint.config.mts",
    "eslint.config.cts",
)

MAX_ASCENT = 100


def build_search_spec(
    config_names: Iterable[str] | None = None,
    *,
    max_depth: int = MAX_ASCENT,
) -> ConfigSearchSpec:
    """User-configured names first, then the defaults, without duplicates."""
    names: list[str] = []
    for name in [*(config_names or ()), *DEFAULT_CONFIG_NAMES]:
        if name not in names:
            names.append(name)
    return ConfigSearchSpec(names=tuple(names), max_depth=max_depth)


def _normalize(path: str | os.PathLike[str]) -> Path:
    # Collapse "." and ".." without resolving symlinks
    return Path(os.path.normpath(os.path.abspath(path)))


def locate(
    start_dir: str | os.PathLike[str],
    candidate_names: Sequence[str] | None = None,
    *,
    max_depth: int = MAX_ASCENT,
) -> Path | None:
    """Walk upward from start_dir and return the nearest config file.

    Every candidate name is tried at a directory before moving to its
    parent, so a closer directory always wins over name order.

    Args:
        start_dir: Directory to start from (searched itself first)
        candidate_names: Filenames in priority order (default: eslint.config.*)
        max_depth: Maximum number of parent traversals

    Returns:
        Normalized path of the first existing candidate, or None when the
        filesystem root or the ascent bound is reached first.
    """
    names = tuple(candidate_names) if candidate_names is not None else DEFAULT_CONFIG_NAMES
    directory = _normalize(start_dir)

    for _ in range(max_depth + 1):
        for name in names:
            candidate = directory / name
            if candidate.exists():
                return _normalize(candidate)
        if directory.parent == directory:
            return None
        directory = directory.parent

    return None


def locate_with_spec(start_dir: str | os.PathLike[str], spec: ConfigSearchSpec) -> Path | None:
    return locate(start_dir, spec.names, max_depth=spec.max_depth)
