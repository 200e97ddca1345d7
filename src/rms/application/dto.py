"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from rms.domain.model.menu import MenuItem
from rms.domain.model.order import DeliveryOrder, DineInOrder, Order
from rms.domain.service.table_pool import TablePool


@dataclass(frozen=True)
class MenuItemDTO:
    """Output: a menu item (or an order line) as displayed to the user."""

    name: str
    description: str
    price: str  # formatted, e.g. "$8.99"
    ingredients: list[str]

    @staticmethod
    def from_item(item: MenuItem) -> MenuItemDTO:
        return MenuItemDTO(
            name=item.name,
            description=item.description,
            price=str(item.price),
            ingredients=list(item.ingredients),
        )


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_type: str  # "DINE-IN", "DELIVERY", "TAKEAWAY"
    status: str  # "EMPTY", "POPULATED", "FINALIZED"
    table_id: int | None
    delivery_address: str | None
    items: list[MenuItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            order_type=order.order_type.label,
            status=order.status.value,
            table_id=order.table_id if isinstance(order, DineInOrder) else None,
            delivery_address=(
                order.delivery_address if isinstance(order, DeliveryOrder) else None
            ),
            items=[MenuItemDTO.from_item(item) for item in order.items],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class TableDTO:
    id: int
    capacity: int
    occupied: bool


@dataclass(frozen=True)
class TablePoolDTO:
    """Output: a snapshot of the table pool."""

    max_size: int
    available: int
    in_use: int
    tables: list[TableDTO]

    @staticmethod
    def from_pool(pool: TablePool) -> TablePoolDTO:
        tables = [
            TableDTO(id=t.id, capacity=t.capacity, occupied=t.occupied)
            for t in pool.tables()
        ]
        return TablePoolDTO(
            max_size=pool.max_size,
            available=pool.available_count,
            in_use=pool.in_use_count,
            tables=tables,
        )
