"""Application service: Release Table use case.

Hands the table of a dine-in order back to the pool once the guests
leave.  The order itself is kept.
"""

from __future__ import annotations

from rms.domain.exceptions import EntityNotFoundError, ValidationError
from rms.domain.model.order import DineInOrder
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.service.table_pool import TablePool


class ReleaseTableHandler:

    def __init__(self, order_repo: OrderRepository, table_pool: TablePool) -> None:
        self._order_repo = order_repo
        self._table_pool = table_pool

    def handle(self, order_id: int) -> bool:
        """Release the order's table.

        Returns False if the table was already free (e.g. released twice).
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if not isinstance(order, DineInOrder):
            raise ValidationError(
                f"Order #{order_id} is {order.order_type.label}, not DINE-IN"
            )

        table = self._table_pool.get(order.table_id)
        if table is None:
            raise EntityNotFoundError(f"Table #{order.table_id} not found")
        return self._table_pool.release(table)
