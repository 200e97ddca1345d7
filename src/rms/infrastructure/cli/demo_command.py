"""End-to-end walkthrough: menu, customization, one order of each kind."""

from __future__ import annotations

import click

from rms.application.customize_item import CustomizeItemHandler
from rms.application.list_orders import ListOrdersHandler
from rms.application.place_order import PlaceOrderHandler
from rms.application.receipt import render_receipt
from rms.application.release_table import ReleaseTableHandler
from rms.application.show_menu import ShowMenuHandler
from rms.application.show_order import ShowOrderHandler
from rms.domain.exceptions import DomainException
from rms.domain.model.order import OrderType
from rms.infrastructure.bootstrap import Restaurant
from rms.infrastructure.cli.menu_commands import display_item


@click.command("demo")
@click.pass_obj
def demo(restaurant: Restaurant) -> None:
    """Run a short tour of the restaurant."""
    place = PlaceOrderHandler(
        menu=restaurant.menu,
        table_pool=restaurant.table_pool,
        order_repo=restaurant.order_repo,
        extra_cost=restaurant.extra_cost,
    )

    try:
        click.echo(f"Welcome to {restaurant.name}!")
        click.echo(f"Available tables: {restaurant.table_pool.available_count}")
        click.echo()

        for line in ShowMenuHandler(restaurant.menu).handle():
            click.echo(line)
        click.echo()

        click.echo("--- Customizing ---")
        custom = CustomizeItemHandler(restaurant.menu, restaurant.extra_cost).handle(
            "Classic Burger", ["Extra Cheese", "Bacon"]
        )
        display_item(custom)
        click.echo()

        click.echo("--- Placing orders ---")
        dine_in = place.handle(OrderType.DINE_IN, ["Classic Burger", "Cola"])
        place.handle(
            OrderType.DELIVERY, ["Cheeseburger", "Cola"], address="123 Main Street"
        )
        place.handle(OrderType.TAKEAWAY, ["Classic Burger"])
        for dto in ListOrdersHandler(restaurant.order_repo).handle():
            click.echo(f"{dto.order_type} order #{dto.id} ({dto.status}): {dto.total}")
        click.echo()

        click.echo(render_receipt(ShowOrderHandler(restaurant.order_repo).handle(dine_in.id)))

        handler = ReleaseTableHandler(restaurant.order_repo, restaurant.table_pool)
        if handler.handle(dine_in.id):
            click.echo(f"Table #{dine_in.table_id} released.")
    except DomainException as exc:
        raise click.ClickException(str(exc))
