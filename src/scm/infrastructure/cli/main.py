import click

from scm.infrastructure.cli.ledger_commands import ledger_init
from scm.infrastructure.cli.product_commands import (
    product_create,
    product_exists,
    product_list,
    product_show,
    product_transfer,
    product_update,
)
from scm.infrastructure.config import get_settings
from scm.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: $SCM_LOG_LEVEL).")
def cli(log_level: str | None) -> None:
    """SCM — supply chain product ledger"""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_file or None)


@cli.group()
def ledger() -> None:
    """Manage the world state."""


@cli.group()
def product() -> None:
    """Manage product records."""


# Register subcommands
ledger.add_command(ledger_init)
product.add_command(product_create)
product.add_command(product_exists)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_transfer)
product.add_command(product_update)
