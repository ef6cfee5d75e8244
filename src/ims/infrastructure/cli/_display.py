"""Shared table formatting for CLI output."""

from __future__ import annotations

import click

from ims.application.dto import ProductDTO

_HEADER = (
    f"{'ID':<5} {'Name':<24} {'SKU':<12} {'Price':>10} {'Stock':>7} {'Status':<14}"
)


def echo_product_table(products: list[ProductDTO]) -> None:
    click.echo(_HEADER)
    click.echo("-" * len(_HEADER))
    for p in products:
        click.echo(
            f"{p.id:<5} {p.name:<24} {p.sku:<12} {p.price:>10} "
            f"{p.current_stock:>7} {p.status:<14}"
        )


def echo_product_detail(p: ProductDTO) -> None:
    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"SKU:          {p.sku}")
    click.echo(f"Price:        {p.price}")
    click.echo(f"Stock:        {p.current_stock} ({p.status})")
    click.echo(f"Threshold:    {p.low_stock_threshold}")
    click.echo(f"Value:        {p.value}")
    click.echo(f"Last updated: {p.last_updated}")
