"""Domain service: Table Pool.

A fixed set of tables is created up front and leased out to dine-in
orders.  Tables are never created on demand and never destroyed while
the pool lives; callers borrow one with ``acquire()`` and must hand it
back with ``release()``.

``acquire``/``release`` may be called from several threads.  A lock
guards the free queue so that a given table is handed to exactly one
caller.
"""

from __future__ import annotations

import logging
import threading
from collections import deque

from rms.domain.exceptions import PoolExhaustedError, ValidationError
from rms.domain.model.table import Table

logger = logging.getLogger(__name__)

DEFAULT_TABLE_CAPACITY = 4


class TablePool:

    def __init__(self, max_size: int, table_capacity: int = DEFAULT_TABLE_CAPACITY) -> None:
        if max_size <= 0:
            raise ValidationError("Max pool size must be positive")
        self._max_size = max_size
        self._lock = threading.Lock()
        self._tables: dict[int, Table] = {}
        self._free: deque[Table] = deque()

        for table_id in range(1, max_size + 1):
            table = Table(id=table_id, capacity=table_capacity)
            self._tables[table_id] = table
            self._free.append(table)

    # --- Leasing --------------------------------------------------------------

    def acquire(self) -> Table:
        """Take the longest-free table and mark it occupied.

        Raises PoolExhaustedError immediately when every table is taken;
        there is no waiting or retrying.
        """
        with self._lock:
            if not self._free:
                raise PoolExhaustedError("No tables available")
            table = self._free.popleft()
            table.occupy()
        logger.debug("Acquired table #%d", table.id)
        return table

    def release(self, table: Table) -> bool:
        """Return *table* to the free queue.

        Returns True when the table was requeued.  A table that is not from
        this pool, is already free, or would push the free queue past
        ``max_size`` is left alone: the call returns False and logs a
        warning instead of raising.
        """
        with self._lock:
            if self._tables.get(table.id) is not table:
                reason = "unknown table"
            elif not table.occupied:
                reason = "double release"
            elif len(self._free) >= self._max_size:
                reason = "pool full"
            else:
                table.vacate()
                self._free.append(table)
                reason = None

        if reason is not None:
            logger.warning("Ignored release of table #%d: %s", table.id, reason)
            return False
        logger.debug("Released table #%d", table.id)
        return True

    def resize(self, new_max: int) -> None:
        """Change the ceiling checked by ``release``.

        Existing tables are neither created nor evicted.
        """
        if new_max <= 0:
            raise ValidationError("Max pool size must be positive")
        with self._lock:
            self._max_size = new_max
        logger.info("Table pool resized to %d", new_max)

    # --- Queries --------------------------------------------------------------

    def get(self, table_id: int) -> Table | None:
        return self._tables.get(table_id)

    def tables(self) -> list[Table]:
        return list(self._tables.values())

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def available_count(self) -> int:
        with self._lock:
            return len(self._free)

    @property
    def in_use_count(self) -> int:
        return sum(1 for table in self.tables() if table.occupied)
