import logging

import click

from rms.infrastructure.bootstrap import build_restaurant
from rms.infrastructure.cli.demo_command import demo
from rms.infrastructure.cli.menu_commands import menu_customize, menu_show
from rms.infrastructure.cli.order_commands import order_place
from rms.infrastructure.cli.table_commands import tables
from rms.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """RMS: Restaurant Management System"""
    if verbose:
        configure_logging(logging.DEBUG)
    if ctx.obj is None:
        ctx.obj = build_restaurant()


@cli.group()
def menu() -> None:
    """Browse and customize the menu."""


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
menu.add_command(menu_show)
menu.add_command(menu_customize)
order.add_command(order_place)
cli.add_command(tables)
cli.add_command(demo)
