"""Composition root: wires concrete implementations together.

This is the only place in the codebase that knows about *all* layers.
It builds one Restaurant context per process; the CLI passes it to the
commands explicitly instead of reaching for a global instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from rms.domain.model.menu import MenuCategory, MenuItemBuilder
from rms.domain.model.value_objects import Money
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.service.table_pool import TablePool
from rms.infrastructure.config import Settings, load_settings
from rms.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


@dataclass
class Restaurant:
    name: str
    menu: MenuCategory
    table_pool: TablePool
    order_repo: OrderRepository
    extra_cost: Money


def build_restaurant(settings: Settings | None = None) -> Restaurant:
    settings = settings or load_settings()
    return Restaurant(
        name=settings.restaurant_name,
        menu=build_default_menu(),
        table_pool=TablePool(settings.table_pool_size, settings.table_capacity),
        order_repo=InMemoryOrderRepository(),
        extra_cost=settings.extra_ingredient_cost,
    )


def build_default_menu() -> MenuCategory:
    """The house menu: Fast Food > {Burgers, Soft Drinks}."""
    menu = MenuCategory("Menu", "All dishes and drinks")

    fast_food = MenuCategory("Fast Food", "Tasty and quick meals")
    burgers = MenuCategory("Burgers", "Delicious burgers with various toppings")
    soft_drinks = MenuCategory("Soft Drinks", "Refreshing beverages")
    menu.add(fast_food)
    fast_food.add(burgers)
    fast_food.add(soft_drinks)

    burger = (
        MenuItemBuilder()
        .with_name("Classic Burger")
        .with_description("A delicious beef burger with fresh vegetables")
        .with_price("8.99")
        .add_ingredient("Beef Patty")
        .add_ingredient("Bun")
        .add_ingredient("Lettuce")
        .add_ingredient("Tomato")
        .build()
    )
    burgers.add(burger)

    # Cheeseburger is a variant of the classic one
    cheeseburger = burger.clone()
    cheeseburger.rename("Cheeseburger")
    cheeseburger.describe("Classic burger with melted cheddar cheese")
    cheeseburger.add_ingredient("Cheddar Cheese")
    cheeseburger.reprice(Money.of("9.99"))
    burgers.add(cheeseburger)

    cola = (
        MenuItemBuilder()
        .with_name("Cola")
        .with_description("Chilled carbonated soft drink")
        .with_price("1.99")
        .add_ingredient("Carbonated Water")
        .add_ingredient("Sugar")
        .add_ingredient("Caffeine")
        .build()
    )
    soft_drinks.add(cola)

    return menu
