"""Factory Method: one creator per fulfillment kind.

Creators only build the in-memory order.  The order gets its ID when the
OrderRepository commits it, and a dine-in creator never holds on to the
table lease: whoever acquired the table releases it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from rms.domain.exceptions import ValidationError
from rms.domain.model.menu import MenuItem
from rms.domain.model.order import (
    DeliveryOrder,
    DineInOrder,
    Order,
    OrderType,
    TakeawayOrder,
)

P = TypeVar("P")


class OrderCreator(ABC, Generic[P]):

    @abstractmethod
    def create_order(self, params: P) -> Order:
        """Build an empty, uncommitted order of this creator's kind."""

    def process_order(self, params: P, items: Iterable[MenuItem] = ()) -> Order:
        """Create an order and append copies of *items* in order.

        Not transactional: if an item fails, the earlier ones stay attached.
        """
        order = self.create_order(params)
        for item in items:
            order.add_item(item)
        return order


class DineInOrderCreator(OrderCreator[int]):

    def create_order(self, table_id: int) -> Order:
        if table_id is None or table_id <= 0:
            raise ValidationError("Dine-in orders need a positive table ID")
        return DineInOrder(table_id)


class DeliveryOrderCreator(OrderCreator[str]):

    def create_order(self, address: str) -> Order:
        if not address or not address.strip():
            raise ValidationError("Delivery address is required")
        return DeliveryOrder(address)


class TakeawayOrderCreator(OrderCreator[None]):

    def create_order(self, params: None = None) -> Order:
        return TakeawayOrder()


_CREATORS: dict[OrderType, type[OrderCreator]] = {
    OrderType.DINE_IN: DineInOrderCreator,
    OrderType.DELIVERY: DeliveryOrderCreator,
    OrderType.TAKEAWAY: TakeawayOrderCreator,
}


def creator_for(order_type: OrderType) -> OrderCreator:
    return _CREATORS[order_type]()
