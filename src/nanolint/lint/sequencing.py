"""Per-document request sequencing.

Rapid re-lints of the same document can finish out of order; only the
most recently started request may publish its result.
"""

from __future__ import annotations

from collections.abc import Hashable


class RequestSequencer:
    """Issues increasing tokens per key and tells whether a token is still the latest.

    Used from a single event loop, so no locking.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._latest: dict[Hashable, int] = {}

    def begin(self, key: Hashable) -> int:
        self._counter += 1
        self._latest[key] = self._counter
        return self._counter

    def is_current(self, key: Hashable, token: int) -> bool:
        return self._latest.get(key) == token

    def finish(self, key: Hashable, token: int) -> None:
        """Forget the key once its latest request completes."""
        if self.is_current(key, token):
            del self._latest[key]
