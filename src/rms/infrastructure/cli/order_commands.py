"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from rms.application.place_order import PlaceOrderHandler
from rms.application.receipt import render_receipt
from rms.domain.exceptions import DomainException
from rms.domain.model.order import OrderType
from rms.infrastructure.bootstrap import Restaurant
from rms.infrastructure.cli.menu_commands import parse_names

ORDER_TYPES = {
    "dine-in": OrderType.DINE_IN,
    "delivery": OrderType.DELIVERY,
    "takeaway": OrderType.TAKEAWAY,
}


def _parse_customizations(raw: tuple[str, ...]) -> dict[str, list[str]]:
    """Parse ('Classic Burger=Extra Cheese+Bacon',) into {name: [extras]}."""
    result: dict[str, list[str]] = {}
    for entry in raw:
        if "=" not in entry:
            raise click.BadParameter(
                f"Invalid customization '{entry}'. Expected 'Item=Extra+Extra'."
            )
        name, extras = entry.split("=", 1)
        result[name.strip()] = [e.strip() for e in extras.split("+") if e.strip()]
    return result


@click.command("place")
@click.option(
    "--type", "order_type",
    required=True,
    type=click.Choice(sorted(ORDER_TYPES)),
    help="Fulfillment kind.",
)
@click.option("--items", required=True, help="Items as 'Name,Name'.")
@click.option("--address", default=None, help="Delivery address (delivery only).")
@click.option(
    "--customize", "customizations",
    multiple=True,
    help="Extras for an item as 'Item=Extra+Extra'. Repeatable.",
)
@click.pass_obj
def order_place(
    restaurant: Restaurant,
    order_type: str,
    items: str,
    address: str | None,
    customizations: tuple[str, ...],
) -> None:
    """Place a new order and print its receipt."""
    if order_type == "delivery" and not address:
        raise click.ClickException("--type delivery requires --address")

    handler = PlaceOrderHandler(
        menu=restaurant.menu,
        table_pool=restaurant.table_pool,
        order_repo=restaurant.order_repo,
        extra_cost=restaurant.extra_cost,
    )

    try:
        dto = handler.handle(
            ORDER_TYPES[order_type],
            parse_names(items),
            address=address,
            customizations=_parse_customizations(customizations),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(render_receipt(dto))
