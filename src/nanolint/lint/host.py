"""Editor-side collaborators consumed by the lint pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from nanolint.lint.models import Diagnostic


@runtime_checkable
class EditorDocument(Protocol):
    """An open document: its path, current text, and how to rewrite and save it."""

    @property
    def path(self) -> Path: ...

    @property
    def text(self) -> str: ...

    def replace_text(self, text: str) -> None:
        """Replace the whole body as a single edit."""
        ...

    def save(self) -> None: ...


@runtime_checkable
class IssueSink(Protocol):
    """Where diagnostics for a document are published."""

    def set_issues(self, path: Path, diagnostics: list[Diagnostic]) -> None: ...


class FileDocument:
    """A document backed by a file on disk.

    Edits stay in memory until save() writes them back.
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self._path = path.absolute()
        self._encoding = encoding
        # newline="" keeps CRLF so the text matches what eslint reads from disk
        with self._path.open(encoding=encoding, newline="") as f:
            self._text = f.read()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def text(self) -> str:
        return self._text

    def replace_text(self, text: str) -> None:
        self._text = text

    def save(self) -> None:
        with self._path.open("w", encoding=self._encoding, newline="") as f:
            f.write(self._text)


class IssueCollection:
    """In-memory IssueSink, keyed by document path."""

    def __init__(self) -> None:
        self._issues: dict[Path, list[Diagnostic]] = {}

    def set_issues(self, path: Path, diagnostics: list[Diagnostic]) -> None:
        self._issues[path] = list(diagnostics)

    def get(self, path: Path) -> list[Diagnostic]:
        return list(self._issues.get(path, []))
