"""CLI commands for placing an order.

The command stands in for the order form: options are the form fields,
the quantity option is the stepper, and submission is refused until the
address section is filled in.
"""

from __future__ import annotations

import asyncio

import click

from bakery.domain.exceptions import DomainException
from bakery.domain.model.order import CAKE_TYPES, MAX_QUANTITY, MIN_QUANTITY, Order
from bakery.infrastructure.bootstrap import place_order_handler


def _build_order(
    cake_type: str,
    quantity: int,
    special_requests: bool,
    extra_frosting: bool,
    sprinkles: bool,
    name: str,
    street: str,
    city: str,
    zip_code: str,
) -> Order:
    order = Order(
        type=Order.type_index(cake_type),
        quantity=quantity,
        name=name,
        street_address=street,
        city=city,
        zip=zip_code,
    )
    order.special_request_enabled = special_requests
    if special_requests:
        order.extra_frosting = extra_frosting
        order.add_sprinkles = sprinkles
    elif extra_frosting or sprinkles:
        click.echo("Note: add-ons are ignored without --special-requests.", err=True)
    return order


@click.command("place")
@click.option(
    "--type",
    "cake_type",
    default=CAKE_TYPES[0],
    show_default=True,
    type=click.Choice(CAKE_TYPES, case_sensitive=False),
    help="Cake type.",
)
@click.option(
    "--quantity",
    default=MIN_QUANTITY,
    show_default=True,
    type=click.IntRange(MIN_QUANTITY, MAX_QUANTITY, clamp=True),
    help=f"Number of cakes ({MIN_QUANTITY}-{MAX_QUANTITY}).",
)
@click.option("--special-requests", is_flag=True, default=False, help="Enable add-ons.")
@click.option("--extra-frosting", is_flag=True, default=False, help="Add extra frosting.")
@click.option("--sprinkles", is_flag=True, default=False, help="Add extra sprinkles.")
@click.option("--name", prompt="Name", help="Recipient name.")
@click.option("--street", prompt="Street Address", help="Street address.")
@click.option("--city", prompt="City", help="City.")
@click.option("--zip", "zip_code", prompt="Zip", help="Zip code.")
def order_place(
    cake_type: str,
    quantity: int,
    special_requests: bool,
    extra_frosting: bool,
    sprinkles: bool,
    name: str,
    street: str,
    city: str,
    zip_code: str,
) -> None:
    """Place a cupcake order."""
    try:
        order = _build_order(
            cake_type, quantity, special_requests, extra_frosting, sprinkles,
            name, street, city, zip_code,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not order.is_valid:
        raise click.ClickException(
            "Name, street address, city and zip are all required."
        )

    handler = place_order_handler()

    try:
        confirmation = asyncio.run(handler.handle(order))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(confirmation.title)
    click.echo(confirmation.message)
