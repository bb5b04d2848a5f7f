"""CLI command listing the cake catalog."""

from __future__ import annotations

import click

from bakery.domain.model.order import CAKE_TYPES, MAX_QUANTITY, MIN_QUANTITY


@click.command("catalog")
def catalog() -> None:
    """List the cake types on offer."""
    click.echo(f"  {'#':>2}  {'Cake':<12}")
    click.echo(f"  {'-'*16}")
    for index, name in enumerate(CAKE_TYPES):
        click.echo(f"  {index:>2}  {name:<12}")
    click.echo()
    click.echo(f"Orders take between {MIN_QUANTITY} and {MAX_QUANTITY} cakes.")
