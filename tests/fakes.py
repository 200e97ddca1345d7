"""In-memory fakes and sample data for testing.

FakeOrderRepository implements the same abstract interface as the
infrastructure repository but without locking or logging.
"""

from __future__ import annotations

from rms.domain.model.menu import MenuCategory, MenuItem, MenuItemBuilder
from rms.domain.model.order import Order
from rms.domain.repository.order_repository import OrderRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.assign_id(self._next_id)
            self._next_id += 1
        self._store[order.id] = order


class FailingOrderRepository(FakeOrderRepository):
    """Refuses every commit, to exercise clean-up paths."""

    def save(self, order: Order) -> None:
        raise RuntimeError("storage unavailable")


def make_item(
    name: str = "Classic Burger",
    price: str = "8.99",
    ingredients: tuple[str, ...] = ("Beef Patty", "Bun"),
    description: str = "",
) -> MenuItem:
    builder = MenuItemBuilder().with_name(name).with_price(price).with_description(description)
    for ingredient in ingredients:
        builder.add_ingredient(ingredient)
    return builder.build()


def sample_menu() -> MenuCategory:
    """Menu > {Burgers > {Classic Burger, Cheeseburger}, Drinks > {Cola}}."""
    menu = MenuCategory("Menu", "Everything")
    burgers = MenuCategory("Burgers", "Grilled to order")
    drinks = MenuCategory("Drinks", "Cold drinks")
    menu.add(burgers)
    menu.add(drinks)
    burgers.add(make_item("Classic Burger", "8.99", ("Beef Patty", "Bun"), "Beef burger"))
    burgers.add(make_item("Cheeseburger", "9.99", ("Beef Patty", "Bun", "Cheddar"), "With cheese"))
    drinks.add(make_item("Cola", "1.99", ("Carbonated Water", "Sugar"), "Chilled"))
    return menu
