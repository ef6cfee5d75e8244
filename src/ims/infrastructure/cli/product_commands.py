"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_product import ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.infrastructure.bootstrap import product_repository
from ims.infrastructure.cli._display import echo_product_detail, echo_product_table
from ims.infrastructure.config import Settings

# CLI spelling -> SortField value
_SORT_CHOICES = {
    "name": "name",
    "sku": "sku",
    "price": "price",
    "stock": "current_stock",
}


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--stock", "current_stock", required=True, type=int, help="Units on hand.")
@click.option(
    "--threshold",
    "low_stock_threshold",
    type=int,
    default=DEFAULT_LOW_STOCK_THRESHOLD,
    show_default=True,
    help="Low stock threshold.",
)
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    sku: str,
    price: str,
    current_stock: int,
    low_stock_threshold: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(
            name=name,
            sku=sku,
            price=price,
            current_stock=current_stock,
            low_stock_threshold=low_stock_threshold,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@click.option("--search", default=None, help="Match name or SKU (case-insensitive).")
@click.option(
    "--status",
    type=click.Choice(["all", "normal", "low", "out"], case_sensitive=False),
    default="all",
    show_default=True,
)
@click.option(
    "--sort",
    "sort_field",
    type=click.Choice(sorted(_SORT_CHOICES), case_sensitive=False),
    default="name",
    show_default=True,
)
@click.option("--desc", is_flag=True, help="Sort descending.")
@click.pass_obj
def product_list(
    settings: Settings, search: str | None, status: str, sort_field: str, desc: bool
) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(settings))

    try:
        listing = handler.handle(
            search=search,
            status=status,
            sort_field=_SORT_CHOICES[sort_field.lower()],
            sort_direction="desc" if desc else "asc",
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if listing.total_count == 0:
        click.echo("No products found.")
        return
    if not listing.products:
        click.echo("No products match your filters.")
        return

    echo_product_table(listing.products)
    if listing.is_filtered:
        click.echo()
        click.echo(listing.caption)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show one product."""
    handler = ShowProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product_detail(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", "current_stock", type=int, default=None, help="New stock level.")
@click.option(
    "--threshold", "low_stock_threshold", type=int, default=None,
    help="New low stock threshold.",
)
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: int,
    name: str | None,
    sku: str | None,
    price: str | None,
    current_stock: int | None,
    low_stock_threshold: int | None,
) -> None:
    """Update a product's details."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(
            product_id,
            name=name,
            sku=sku,
            price=price,
            current_stock=current_stock,
            low_stock_threshold=low_stock_threshold,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated")
    echo_product_detail(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this product?")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Delete a product permanently."""
    handler = RemoveProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' deleted")
