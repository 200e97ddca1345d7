"""Order aggregate: a fulfillment-kind-tagged list of menu item copies.

Orders are built by the kind-specific creators in
``rms.domain.service.order_creators`` and receive their ID only when the
repository commits them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

from rms.domain.exceptions import ValidationError
from rms.domain.model.menu import MenuItem
from rms.domain.model.value_objects import Money


class OrderType(Enum):
    DINE_IN = "DINE_IN"
    DELIVERY = "DELIVERY"
    TAKEAWAY = "TAKEAWAY"

    @property
    def label(self) -> str:
        return self.value.replace("_", "-")


class OrderStatus(Enum):
    """Derived lifecycle state: EMPTY -> POPULATED -> FINALIZED."""

    EMPTY = "EMPTY"
    POPULATED = "POPULATED"
    FINALIZED = "FINALIZED"


@dataclass(eq=False)
class Order:
    """Base aggregate for all order kinds.

    Invariants:
    - ``items`` holds copies, never catalog instances
    - ``total`` is always the sum of current item prices (never stored)
    - ``id`` is assigned exactly once, after which the kind-specific
      payload is fixed; items may still be appended
    """

    order_type: ClassVar[OrderType]

    id: int | None = field(default=None, init=False)
    items: list[MenuItem] = field(default_factory=list, init=False)
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )

    def __post_init__(self) -> None:
        if type(self) is Order:
            raise TypeError(
                "Order is abstract; create a DineInOrder, DeliveryOrder or TakeawayOrder"
            )

    # --- Item list --------------------------------------------------------------

    def add_item(self, item: MenuItem) -> MenuItem:
        """Append an independent copy of *item* and return the copy."""
        copy = item.clone()
        self.items.append(copy)
        return copy

    # --- Identity -------------------------------------------------------------

    def assign_id(self, order_id: int) -> None:
        """Finalize the order with its committed identity."""
        if order_id <= 0:
            raise ValidationError("Order ID must be positive")
        if self.id is not None:
            raise ValidationError(f"Order #{self.id} already has an ID")
        self.id = order_id

    @property
    def is_finalized(self) -> bool:
        return self.id is not None

    @property
    def status(self) -> OrderStatus:
        if self.is_finalized:
            return OrderStatus.FINALIZED
        if self.items:
            return OrderStatus.POPULATED
        return OrderStatus.EMPTY

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return Money.total(item.price for item in self.items)

    def calculate_total(self) -> Money:
        return self.total


@dataclass(eq=False)
class DineInOrder(Order):
    order_type: ClassVar[OrderType] = OrderType.DINE_IN

    _table_id: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self._table_id <= 0:
            raise ValidationError("Dine-in orders need a positive table ID")

    @property
    def table_id(self) -> int:
        return self._table_id


@dataclass(eq=False)
class DeliveryOrder(Order):
    order_type: ClassVar[OrderType] = OrderType.DELIVERY

    _delivery_address: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self._delivery_address or not self._delivery_address.strip():
            raise ValidationError("Delivery address is required")
        self._delivery_address = self._delivery_address.strip()

    @property
    def delivery_address(self) -> str:
        return self._delivery_address


@dataclass(eq=False)
class TakeawayOrder(Order):
    order_type: ClassVar[OrderType] = OrderType.TAKEAWAY
