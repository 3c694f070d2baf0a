"""Apply eslint fix output to a document."""

from __future__ import annotations

import asyncio

import structlog

from nanolint.lint.host import EditorDocument
from nanolint.lint.models import FixResult

log = structlog.get_logger(__name__)


def apply_fix(document: EditorDocument, fix: FixResult | None) -> bool:
    """Replace the document body with the fix output if it differs.

    Returns:
        True if the document was edited.
    """
    if fix is None or not fix.differs_from(document.text):
        return False
    document.replace_text(fix.output)
    log.info("fix_applied", path=str(document.path))
    return True


def schedule_save(document: EditorDocument, delay_sec: float) -> asyncio.TimerHandle:
    """Save the document again shortly, outside the save that triggered the fix.

    Must be called from a running event loop.
    """
    loop = asyncio.get_running_loop()
    return loop.call_later(delay_sec, _deferred_save, document)


def _deferred_save(document: EditorDocument) -> None:
    try:
        document.save()
    except OSError as e:
        log.error("deferred_save_failed", path=str(document.path), error=str(e))
    else:
        log.debug("deferred_save_done", path=str(document.path))
