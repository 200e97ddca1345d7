"""Application service: Place Order use case.

Orchestrates the menu (item lookup and customization), the table pool
(dine-in only) and the kind-specific order creator, then commits the
order through the repository, which assigns its ID.
"""

from __future__ import annotations

import logging

from rms.application.customize_item import CustomizeItemHandler
from rms.application.dto import OrderDTO
from rms.domain.exceptions import EntityNotFoundError, ValidationError
from rms.domain.model.menu import MenuComponent, MenuItem
from rms.domain.model.order import OrderType
from rms.domain.model.table import Table
from rms.domain.model.value_objects import Money
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.service.customization import DEFAULT_EXTRA_COST
from rms.domain.service.order_creators import creator_for
from rms.domain.service.table_pool import TablePool

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        menu: MenuComponent,
        table_pool: TablePool,
        order_repo: OrderRepository,
        extra_cost: Money = DEFAULT_EXTRA_COST,
    ) -> None:
        self._menu = menu
        self._table_pool = table_pool
        self._order_repo = order_repo
        self._customizer = CustomizeItemHandler(menu, extra_cost)

    def handle(
        self,
        order_type: OrderType,
        item_names: list[str],
        address: str | None = None,
        customizations: dict[str, list[str]] | None = None,
    ) -> OrderDTO:
        """Place a new order.

        Steps:
        1. Resolve every item name (fail before touching the pool).
        2. Apply any requested extras to copies of the matching items.
        3. For DINE_IN, lease a table; its ID becomes the order payload.
        4. Build the order with the kind's creator and commit it.

        If anything fails after a table was leased, the table goes back to
        the pool.  The caller releases it for successful dine-in orders
        (see ReleaseTableHandler).
        """
        items = self._resolve_items(item_names, customizations or {})

        table: Table | None = None
        if order_type is OrderType.DINE_IN:
            table = self._table_pool.acquire()
            params: int | str | None = table.id
        elif order_type is OrderType.DELIVERY:
            params = address or ""
        else:
            params = None

        try:
            order = creator_for(order_type).process_order(params, items)
            self._order_repo.save(order)
        except Exception:
            if table is not None:
                self._table_pool.release(table)
            raise

        if table is not None:
            logger.info("Order #%d seated at table #%d", order.id, table.id)
        return OrderDTO.from_order(order)

    def _resolve_items(
        self, item_names: list[str], customizations: dict[str, list[str]]
    ) -> list[MenuItem]:
        if not item_names:
            raise ValidationError("Order must contain at least one item")

        wanted = {name.strip().casefold(): extras for name, extras in customizations.items()}
        ordered = {name.strip().casefold() for name in item_names}
        stray = [name for name in customizations if name.strip().casefold() not in ordered]
        if stray:
            raise EntityNotFoundError(
                f"Customized item is not part of the order: '{stray[0]}'"
            )

        items: list[MenuItem] = []
        for name in item_names:
            extras = wanted.get(name.strip().casefold())
            if extras:
                items.append(self._customizer.build(name, extras))
                continue
            item = self._menu.find_by_name(name)
            if item is None:
                raise EntityNotFoundError(f"Menu item not found: '{name}'")
            items.append(item)
        return items
