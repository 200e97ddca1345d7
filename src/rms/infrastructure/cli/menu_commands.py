"""CLI commands for the menu catalog."""

from __future__ import annotations

import click

from rms.application.customize_item import CustomizeItemHandler
from rms.application.dto import MenuItemDTO
from rms.application.show_menu import ShowMenuHandler
from rms.domain.exceptions import DomainException
from rms.infrastructure.bootstrap import Restaurant


def parse_names(raw: str) -> list[str]:
    """Parse 'Classic Burger, Cola' into ['Classic Burger', 'Cola']."""
    names = [part.strip() for part in raw.split(",")]
    if not all(names):
        raise click.BadParameter(f"Empty name in '{raw}'. Expected 'Name,Name'.")
    return names


def display_item(dto: MenuItemDTO) -> None:
    click.echo(f"{dto.name} - {dto.price}")
    if dto.description:
        click.echo(f"  {dto.description}")
    click.echo(f"  Ingredients: {', '.join(dto.ingredients) or '(none)'}")


@click.command("show")
@click.pass_obj
def menu_show(restaurant: Restaurant) -> None:
    """Show the full menu tree."""
    click.echo(f"========== {restaurant.name} Menu ==========")
    for line in ShowMenuHandler(restaurant.menu).handle():
        click.echo(line)


@click.command("customize")
@click.option("--item", "item_name", required=True, help="Menu item name.")
@click.option("--extras", required=True, help="Extra ingredients as 'Extra,Extra'.")
@click.pass_obj
def menu_customize(restaurant: Restaurant, item_name: str, extras: str) -> None:
    """Preview a menu item with extra ingredients."""
    handler = CustomizeItemHandler(restaurant.menu, restaurant.extra_cost)

    try:
        dto = handler.handle(item_name, parse_names(extras))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_item(dto)
