"""CLI command for the inventory dashboard."""

from __future__ import annotations

import click

from ims.application.show_dashboard import ShowDashboardHandler
from ims.domain.exceptions import DomainException
from ims.domain.service.aggregation import DEFAULT_LOW_STOCK_LIMIT
from ims.infrastructure.bootstrap import product_repository
from ims.infrastructure.cli._display import echo_product_table
from ims.infrastructure.config import Settings


@click.command("dashboard")
@click.option(
    "--limit",
    type=int,
    default=DEFAULT_LOW_STOCK_LIMIT,
    show_default=True,
    help="How many low stock products to list.",
)
@click.pass_obj
def dashboard(settings: Settings, limit: int) -> None:
    """Show inventory totals with the low stock and recent product tables."""
    handler = ShowDashboardHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Total products':<20} {dto.total_products:>12}")
    click.echo(f"{'Low stock':<20} {dto.low_stock_count:>12}")
    click.echo(f"{'Out of stock':<20} {dto.out_of_stock_count:>12}")
    click.echo(f"{'Inventory value':<20} {dto.total_value:>12}")

    if dto.low_stock:
        click.echo()
        click.echo("Low stock alert")
        echo_product_table(dto.low_stock)

    if dto.recent:
        click.echo()
        click.echo("Products")
        echo_product_table(dto.recent)
