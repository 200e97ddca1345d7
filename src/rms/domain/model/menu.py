"""Menu catalog: a tree of categories (composites) and items (leaves).

Both node kinds share the MenuComponent contract so the whole menu can be
displayed and searched uniformly.  Operations that only make sense on one
kind raise a typed error on the other; callers that want to branch
without exceptions use the ``as_item()`` / ``as_category()`` queries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field

from rms.domain.exceptions import (
    EntityNotFoundError,
    UnsupportedForCategoryError,
    UnsupportedForLeafError,
    ValidationError,
)
from rms.domain.model.identity import IdSequence
from rms.domain.model.value_objects import Money

INDENT = "  "

_component_ids = IdSequence()


class MenuComponent(ABC):
    """A node of the menu tree."""

    id: int
    name: str
    description: str

    # --- Uniform operations ---------------------------------------------------

    @abstractmethod
    def display(self, depth: int = 0) -> Iterator[str]:
        """Yield one indented line per node, pre-order, starting at *depth*."""

    def walk(self) -> Iterator[MenuComponent]:
        """Yield this node and every node below it, pre-order."""
        yield self

    def find_by_name(self, name: str) -> MenuItem | None:
        """Return the first item named *name* (case-insensitive), or None."""
        wanted = name.strip().casefold()
        for node in self.walk():
            item = node.as_item()
            if item is not None and item.name.casefold() == wanted:
                return item
        return None

    # --- Capability queries ---------------------------------------------------

    def as_item(self) -> MenuItem | None:
        return None

    def as_category(self) -> MenuCategory | None:
        return None

    # --- Composite-only operations --------------------------------------------

    @abstractmethod
    def add(self, component: MenuComponent) -> None:
        """Append *component* as the last child."""

    @abstractmethod
    def remove(self, component: MenuComponent) -> None:
        """Detach the direct child *component*."""

    @property
    @abstractmethod
    def children(self) -> list[MenuComponent]:
        """Direct children in display order."""

    # --- Item-only operations -------------------------------------------------

    @abstractmethod
    def clone(self) -> MenuItem:
        """Return an independent copy with a fresh identity."""

    @abstractmethod
    def add_ingredient(self, ingredient: str) -> None:
        """Append an ingredient to this node's recipe."""


@dataclass(eq=False)
class MenuItem(MenuComponent):
    """A sellable dish or drink.

    Items published in the catalog are treated as read-only.  Orders and
    customizations work on ``clone()``s, which own their ingredient list
    and may be changed freely.  The recipe only grows: ``ingredients``
    hands out a copy and ``add_ingredient`` is the one way to extend it.
    """

    name: str
    description: str
    price: Money
    id: int = field(default_factory=_component_ids.next)
    _ingredients: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Menu item name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Menu item price must be Money, got {type(self.price).__name__}"
            )
        self.name = self.name.strip()

    def display(self, depth: int = 0) -> Iterator[str]:
        yield f"{INDENT * depth}{self.name} - {self.price} - {self.description}"

    def as_item(self) -> MenuItem:
        return self

    def add(self, component: MenuComponent) -> None:
        raise UnsupportedForLeafError(f"Cannot add to menu item '{self.name}'")

    def remove(self, component: MenuComponent) -> None:
        raise UnsupportedForLeafError(f"Cannot remove from menu item '{self.name}'")

    @property
    def children(self) -> list[MenuComponent]:
        raise UnsupportedForLeafError(f"Menu item '{self.name}' has no children")

    @property
    def ingredients(self) -> list[str]:
        return list(self._ingredients)

    def clone(self) -> MenuItem:
        copy = MenuItem(name=self.name, description=self.description, price=self.price)
        copy._ingredients = list(self._ingredients)
        return copy

    def add_ingredient(self, ingredient: str) -> None:
        if not ingredient or not ingredient.strip():
            raise ValidationError("Ingredient name is required")
        self._ingredients.append(ingredient.strip())

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Menu item name is required")
        self.name = name.strip()

    def describe(self, description: str) -> None:
        self.description = description

    def reprice(self, price: Money) -> None:
        self.price = price

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"


@dataclass(eq=False)
class MenuCategory(MenuComponent):
    """A named group of items and sub-categories.

    Children keep insertion order, which is also display order.  The
    catalog is built once at startup; concurrent ``add``/``remove`` calls
    need external locking.
    """

    name: str
    description: str = ""
    id: int = field(default_factory=_component_ids.next)
    _children: list[MenuComponent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Menu category name is required")
        self.name = self.name.strip()

    def display(self, depth: int = 0) -> Iterator[str]:
        yield f"{INDENT * depth}{self.name} - {self.description}"
        for child in self._children:
            yield from child.display(depth + 1)

    def walk(self) -> Iterator[MenuComponent]:
        yield self
        for child in self._children:
            yield from child.walk()

    def as_category(self) -> MenuCategory:
        return self

    def items(self) -> Iterator[MenuItem]:
        """Every item below this category, pre-order."""
        for node in self.walk():
            item = node.as_item()
            if item is not None:
                yield item

    def add(self, component: MenuComponent) -> None:
        """Append *component*.

        Rejects anything that would turn the tree into a graph: adding a
        node twice, or adding a category below itself.
        """
        if any(child is component for child in self._children):
            raise ValidationError(
                f"'{component.name}' is already in category '{self.name}'"
            )
        if any(node is self for node in component.walk()):
            raise ValidationError(
                f"Cannot add '{component.name}' to '{self.name}': it would create a cycle"
            )
        self._children.append(component)

    def remove(self, component: MenuComponent) -> None:
        for i, child in enumerate(self._children):
            if child is component:
                del self._children[i]
                return
        raise EntityNotFoundError(
            f"'{component.name}' is not a child of category '{self.name}'"
        )

    @property
    def children(self) -> list[MenuComponent]:
        return list(self._children)

    @property
    def price(self) -> Money:
        raise UnsupportedForCategoryError(f"Menu category '{self.name}' has no price")

    def clone(self) -> MenuItem:
        raise UnsupportedForCategoryError(f"Cannot clone menu category '{self.name}'")

    def add_ingredient(self, ingredient: str) -> None:
        raise UnsupportedForCategoryError(
            f"Cannot add ingredients to menu category '{self.name}'"
        )


class MenuItemBuilder:
    """Staged construction of a MenuItem.

    Usage::

        burger = (
            MenuItemBuilder()
            .with_name("Classic Burger")
            .with_price("8.99")
            .add_ingredient("Bun")
            .build()
        )

    ``build()`` validates the accumulated fields; the builder can be reused
    to produce further independent items.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._description = ""
        self._price: Money | None = None
        self._ingredients: list[str] = []

    def with_name(self, name: str) -> MenuItemBuilder:
        self._name = name
        return self

    def with_description(self, description: str) -> MenuItemBuilder:
        self._description = description
        return self

    def with_price(self, price: Money | str | int | float) -> MenuItemBuilder:
        self._price = price if isinstance(price, Money) else Money.of(price)
        return self

    def add_ingredient(self, ingredient: str) -> MenuItemBuilder:
        self._ingredients.append(ingredient)
        return self

    def build(self) -> MenuItem:
        if not self._name or not self._name.strip():
            raise ValidationError("Menu item name is required")
        if self._price is None:
            raise ValidationError(f"Price is required for menu item '{self._name}'")
        item = MenuItem(
            name=self._name,
            description=self._description,
            price=self._price,
        )
        for ingredient in self._ingredients:
            item.add_ingredient(ingredient)
        return item
