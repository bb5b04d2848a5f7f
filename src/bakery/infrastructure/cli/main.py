import logging

import click

from bakery.infrastructure.cli.catalog_commands import catalog
from bakery.infrastructure.cli.order_commands import order_place
from bakery.infrastructure.config import settings


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Cupcake Corner bakery order entry"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
cli.add_command(catalog)
order.add_command(order_place)
