"""Application service: Customize Item use case.

Looks a menu item up by name and stacks extra ingredients on a copy of
it.  Every extra costs the same configured surcharge.
"""

from __future__ import annotations

from rms.application.dto import MenuItemDTO
from rms.domain.exceptions import EntityNotFoundError
from rms.domain.model.menu import MenuComponent, MenuItem
from rms.domain.model.value_objects import Money
from rms.domain.service.customization import ExtraIngredient, customize


class CustomizeItemHandler:

    def __init__(self, menu: MenuComponent, extra_cost: Money) -> None:
        self._menu = menu
        self._extra_cost = extra_cost

    def handle(self, item_name: str, extras: list[str]) -> MenuItemDTO:
        return MenuItemDTO.from_item(self.build(item_name, extras))

    def build(self, item_name: str, extras: list[str]) -> MenuItem:
        """Return the customized domain item (used when placing orders)."""
        base = self._menu.find_by_name(item_name)
        if base is None:
            raise EntityNotFoundError(f"Menu item not found: '{item_name}'")
        return customize(
            base, [ExtraIngredient(name, self._extra_cost) for name in extras]
        )
