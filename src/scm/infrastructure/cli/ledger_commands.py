"""CLI commands for the world state as a whole."""

from __future__ import annotations

import click

from scm.domain.exceptions import DomainException
from scm.infrastructure.bootstrap import record_service


@click.command("init")
def ledger_init() -> None:
    """Seed the world state with the genesis products."""
    service = record_service()

    try:
        seeded = service.seed_initial_records()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seeded {len(seeded)} products: {', '.join(p.id for p in seeded)}")
