"""Lint operations - per-document diagnose and fix requests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import structlog

from nanolint.config.loader import load_settings
from nanolint.config.models import LinterSettings
from nanolint.core.errors import InternalError, NanoLintError
from nanolint.core.logging import clear_request_id, set_request_id
from nanolint.lint.fix import apply_fix, schedule_save
from nanolint.lint.host import EditorDocument, IssueSink
from nanolint.lint.locator import build_search_spec, locate_with_spec
from nanolint.lint.models import Diagnostic, LintOutcome, RunMode
from nanolint.lint.runner import ErrorCallback, LintRunner
from nanolint.lint.sequencing import RequestSequencer

log = structlog.get_logger(__name__)

SettingsLoader = Callable[[], LinterSettings]


class LintOps:
    """Lint operations for open documents.

    Settings are loaded once at the start of every request and passed down,
    so changes to the settings store apply to the next request. Nothing
    here raises into the host: every failure becomes a ``failed`` outcome
    or a no-op.
    """

    def __init__(
        self,
        settings_loader: SettingsLoader | None = None,
        *,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._settings_loader = settings_loader or load_settings
        self._on_error = on_error
        self._sequencer = RequestSequencer()

    async def diagnose(self, document: EditorDocument) -> LintOutcome:
        """Lint the document's file on disk with its nearest config."""
        set_request_id()
        try:
            settings = self._load_settings()
            if settings is None:
                return LintOutcome.failed("Settings unavailable")
            return await self._run(document, settings, RunMode.DIAGNOSE)
        finally:
            clear_request_id()

    async def provide_issues(self, document: EditorDocument) -> list[Diagnostic]:
        """Diagnostics for the document, or nothing if linting did not succeed."""
        outcome = await self.diagnose(document)
        return outcome.diagnostics if outcome.status == "ok" else []

    async def refresh(self, document: EditorDocument, sink: IssueSink) -> LintOutcome:
        """Lint and publish to the sink, unless a newer request for the document started."""
        key = Path(document.path)
        token = self._sequencer.begin(key)
        outcome = await self.diagnose(document)
        if not self._sequencer.is_current(key, token):
            log.debug("lint_result_stale", path=str(key), token=token)
            return LintOutcome.stale(outcome.config_path)
        self._sequencer.finish(key, token)
        # a failed run leaves the previously published issues in place
        if outcome.status in ("ok", "empty"):
            try:
                sink.set_issues(key, outcome.diagnostics)
            except Exception as e:
                log.exception("issue_publish_failed", path=str(key))
                error = InternalError.unexpected(f"publishing issues failed: {e}", path=str(key))
                self._report(error)
                return LintOutcome.failed(error.message, outcome.config_path)
        return outcome

    async def fix(self, document: EditorDocument, *, during_save: bool = False) -> bool:
        """Apply eslint's fixes to the document body.

        The document's current text is sent to eslint on stdin, so unsaved
        edits are fixed rather than overwritten with the file on disk.

        Args:
            document: Document to fix
            during_save: Schedule a deferred save when the body changed

        Returns:
            True if the document was edited.
        """
        set_request_id()
        try:
            settings = self._load_settings()
            if settings is None:
                return False
            return await self._fix(document, settings, during_save)
        finally:
            clear_request_id()

    async def on_will_save(self, document: EditorDocument) -> bool:
        """Pre-save hook: fix the document when fix_on_save is enabled."""
        set_request_id()
        try:
            settings = self._load_settings()
            if settings is None or not settings.fix_on_save:
                return False
            return await self._fix(document, settings, during_save=True)
        finally:
            clear_request_id()

    def _load_settings(self) -> LinterSettings | None:
        try:
            return self._settings_loader()
        except NanoLintError as e:
            log.error("lint_settings_unavailable", error=str(e))
            self._report(e)
            return None

    def _report(self, error: NanoLintError) -> None:
        if self._on_error is not None:
            self._on_error(error)

    async def _fix(
        self,
        document: EditorDocument,
        settings: LinterSettings,
        during_save: bool,
    ) -> bool:
        outcome = await self._run(
            document, settings, RunMode.FIX_DRY_RUN, text=document.text
        )
        if outcome.status != "ok" or outcome.fix is None:
            return False
        try:
            # compared against the live text; the buffer may have changed while eslint ran
            changed = apply_fix(document, outcome.fix)
            if changed and during_save:
                schedule_save(document, settings.save_delay_sec)
        except Exception as e:
            log.exception("fix_apply_failed", path=str(document.path))
            error = InternalError.unexpected(f"applying fix failed: {e}", path=str(document.path))
            self._report(error)
            return False
        return changed

    async def _run(
        self,
        document: EditorDocument,
        settings: LinterSettings,
        mode: RunMode,
        text: str | None = None,
    ) -> LintOutcome:
        path = Path(document.path)
        try:
            spec = build_search_spec(settings.config_names, max_depth=settings.max_ascent)
            config_path = locate_with_spec(path.parent, spec)
            if config_path is None:
                log.debug("lint_config_not_found", path=str(path))
                return LintOutcome.empty()
            runner = LintRunner(settings, on_error=self._on_error)
            return await runner.run(config_path, path, mode, text)
        except Exception as e:
            log.exception("lint_request_failed", path=str(path))
            error = InternalError.unexpected(str(e), path=str(path))
            self._report(error)
            return LintOutcome.failed(error.message)
