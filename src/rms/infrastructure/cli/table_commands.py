"""CLI commands for the table pool."""

from __future__ import annotations

import click

from rms.application.show_tables import ShowTablesHandler
from rms.infrastructure.bootstrap import Restaurant


@click.command("tables")
@click.pass_obj
def tables(restaurant: Restaurant) -> None:
    """Show table pool status."""
    dto = ShowTablesHandler(restaurant.table_pool).handle()

    click.echo(f"Pool size: {dto.max_size}  available: {dto.available}  in use: {dto.in_use}")
    click.echo(f"{'Table':<8} {'Seats':>6} {'Status':>10}")
    click.echo("-" * 26)
    for table in dto.tables:
        status = "occupied" if table.occupied else "free"
        click.echo(f"{table.id:<8} {table.capacity:>6} {status:>10}")
