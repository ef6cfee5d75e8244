"""CLI commands for stock adjustments."""

from __future__ import annotations

import click

from ims.application.adjust_stock import AdjustStockHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.value_objects import AdjustmentDirection
from ims.infrastructure.bootstrap import product_repository, stock_adjustment_service
from ims.infrastructure.config import Settings


def _adjust(
    settings: Settings,
    product_id: int,
    direction: AdjustmentDirection,
    quantity: int,
    notes: str,
) -> None:
    service = stock_adjustment_service(product_repository(settings))
    handler = AdjustStockHandler(adjustment_service=service)

    try:
        dto = handler.handle(product_id, direction, quantity, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    verb = "increased" if direction is AdjustmentDirection.ADD else "decreased"
    click.echo(f"Stock {verb} by {quantity} units")
    click.echo(f"{dto.name}: {dto.current_stock} on hand ({dto.status})")


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.option("--notes", default="", help="Reason for the adjustment.")
@click.pass_obj
def stock_add(settings: Settings, product_id: int, quantity: int, notes: str) -> None:
    """Receive stock for a product."""
    _adjust(settings, product_id, AdjustmentDirection.ADD, quantity, notes)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to remove.")
@click.option("--notes", default="", help="Reason for the adjustment.")
@click.pass_obj
def stock_remove(settings: Settings, product_id: int, quantity: int, notes: str) -> None:
    """Remove stock from a product; never goes below zero."""
    _adjust(settings, product_id, AdjustmentDirection.SUBTRACT, quantity, notes)
