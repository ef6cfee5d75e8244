from __future__ import annotations

from pathlib import Path

import click

from ims.infrastructure.cli.dashboard_commands import dashboard
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from ims.infrastructure.cli.stock_commands import stock_add, stock_remove
from ims.infrastructure.config import DATA_FILE_ENV, LOG_LEVEL_ENV, Settings
from ims.infrastructure.log_config import configure_logging


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=DATA_FILE_ENV,
    default=None,
    help="JSON file holding the product catalog.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar=LOG_LEVEL_ENV,
    default=None,
    help="Log level for diagnostics written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, log_level: str | None) -> None:
    """IMS — Inventory Management System"""
    settings = Settings.from_env()
    if data_file is not None:
        settings = Settings(data_file=data_file, log_level=settings.log_level)
    if log_level is not None:
        settings = Settings(data_file=settings.data_file, log_level=log_level.upper())

    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust stock levels."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_remove)
cli.add_command(dashboard)
