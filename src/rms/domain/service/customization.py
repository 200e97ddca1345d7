"""Domain service: item customization with extra ingredients.

Each extra wraps the current variant in an ExtraIngredientDecorator,
which works on a clone, so the catalog item is never touched.  Chaining
decorators produces e.g. "Classic Burger + Extra Cheese + Bacon".
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rms.domain.exceptions import UnsupportedForCategoryError, ValidationError
from rms.domain.model.menu import INDENT, MenuComponent, MenuItem
from rms.domain.model.value_objects import Money

DEFAULT_EXTRA_COST = Money.of("1.50")


@dataclass(frozen=True)
class ExtraIngredient:
    """An add-on with a fixed surcharge."""

    name: str
    cost: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Extra ingredient name is required")


class ExtraIngredientDecorator:
    """Adds one extra ingredient on top of a menu component.

    For an item the decorator builds a modified clone (ingredient appended,
    surcharge added, name suffixed).  A category cannot be cloned; in that
    case ``modified_item`` is None and ``name``/``price`` are composed on
    the fly from the wrapped node, with no ingredient list.
    """

    def __init__(self, component: MenuComponent, extra: ExtraIngredient) -> None:
        self._wrapped = component
        self._extra = extra
        self._modified: MenuItem | None = None

        item = component.as_item()
        if item is not None:
            copy = item.clone()
            copy.add_ingredient(extra.name)
            copy.reprice(copy.price + extra.cost)
            copy.rename(f"{item.name} + {extra.name}")
            copy.describe(self._describe(item.description))
            self._modified = copy

    @property
    def modified_item(self) -> MenuItem | None:
        return self._modified

    @property
    def name(self) -> str:
        return f"{self._wrapped.name} + {self._extra.name}"

    @property
    def description(self) -> str:
        return self._describe(self._wrapped.description)

    @property
    def price(self) -> Money:
        if self._modified is not None:
            return self._modified.price
        # categories carry no price of their own
        return self._extra.cost

    def display(self, depth: int = 0) -> Iterator[str]:
        yield f"{INDENT * depth}{self.name} - {self.price} - {self.description}"

    def _describe(self, base: str) -> str:
        suffix = f"with extra {self._extra.name.lower()}"
        return f"{base}, {suffix}" if base else suffix


def customize(base: MenuComponent, extras: Iterable[ExtraIngredient]) -> MenuItem:
    """Apply *extras* in order and return the resulting item variant.

    The base must be a menu item; a category raises
    UnsupportedForCategoryError.  With no extras the result is a plain clone
    of the base.
    """
    current = base.as_item()
    if current is None:
        raise UnsupportedForCategoryError(
            f"Cannot customize menu category '{base.name}'"
        )

    result = current.clone()
    for extra in extras:
        decorator = ExtraIngredientDecorator(result, extra)
        # modified_item is never None here: every step wraps an item
        result = decorator.modified_item  # type: ignore[assignment]
    return result
