"""CLI commands for product records."""

from __future__ import annotations

import click

from scm.domain.exceptions import DomainException
from scm.domain.model.product import ProductRecord
from scm.infrastructure.bootstrap import record_service


def _display_product(record: ProductRecord) -> None:
    """Shared formatting for displaying a single product."""
    click.echo(f"Product {record.id}  (status={record.status})")
    click.echo(f"Name:        {record.name}")
    click.echo(f"Owner:       {record.owner}")
    click.echo(f"Category:    {record.category}")
    click.echo(f"Description: {record.description}")
    click.echo(f"Created:     {record.created_at}")
    click.echo(f"Updated:     {record.updated_at}")


@click.command("create")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--owner", required=True, help="Initial owner.")
@click.option("--description", default="", help="Free-form description.")
@click.option("--category", default="", help="Product category.")
def product_create(
    product_id: str, name: str, owner: str, description: str, category: str
) -> None:
    """Register a newly manufactured product."""
    service = record_service()

    try:
        record = service.create(product_id, name, owner, description, category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {record.id} '{record.name}' created for {record.owner}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--status", default="", help="New status (omit to keep).")
@click.option("--owner", default="", help="New owner (omit to keep).")
@click.option("--description", default="", help="New description (omit to keep).")
@click.option("--category", default="", help="New category (omit to keep).")
def product_update(
    product_id: str, status: str, owner: str, description: str, category: str
) -> None:
    """Update a product's status, owner, description or category."""
    service = record_service()

    try:
        record = service.update(product_id, status, owner, description, category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {record.id} updated at {record.updated_at}")


@click.command("transfer")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--owner", required=True, help="New owner.")
def product_transfer(product_id: str, owner: str) -> None:
    """Transfer ownership of a product."""
    service = record_service()

    try:
        record = service.transfer_ownership(product_id, owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {record.id} now owned by '{record.owner}'")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    service = record_service()

    try:
        record = service.query(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(record)


@click.command("exists")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_exists(product_id: str) -> None:
    """Check whether a product is recorded."""
    service = record_service()

    try:
        found = service.exists(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("true" if found else "false")


@click.command("list")
def product_list() -> None:
    """List all products in the world state."""
    service = record_service()

    try:
        products = service.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<20} {'Status':<14} {'Owner':<16} {'Updated':<20}")
    click.echo("-" * 82)
    for p in products:
        click.echo(
            f"{p.id:<8} {p.name:<20} {p.status:<14} {p.owner:<16} {p.updated_at:<20}"
        )
