"""Thread-safe monotonically increasing integer identities."""

from __future__ import annotations

import itertools
import threading


class IdSequence:
    """Hands out ``start, start + 1, ...`` and never repeats a value.

    ``next()`` may be called from several threads; each caller gets a
    distinct id.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)
