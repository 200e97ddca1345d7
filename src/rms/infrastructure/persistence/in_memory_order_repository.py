"""Process-local implementation of OrderRepository.

Orders live only as long as the process; nothing is written to disk.
"""

from __future__ import annotations

import logging
import threading

from rms.domain.model.order import Order
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            return self._last_id + 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return [self._store[order_id] for order_id in sorted(self._store)]

    def save(self, order: Order) -> None:
        with self._lock:
            if order.id is None:
                order.assign_id(self.next_id())
                logger.info(
                    "Committed %s order #%d (%d items, total %s)",
                    order.order_type.label, order.id, len(order.items), order.total,
                )
            self._last_id = max(self._last_id, order.id)
            self._store[order.id] = order
