"""Application service: Place Order use case.

Encodes the order, posts it through the gateway exactly once, and turns
the echoed response into a confirmation.  Every failure is logged before
it propagates, so nothing goes unnoticed even if the caller ignores it.
"""

from __future__ import annotations

import logging

from bakery.application.dto import OrderConfirmation
from bakery.domain.exceptions import (
    DecodingError,
    EncodingError,
    InvalidResponseError,
    NetworkError,
    ValidationError,
)
from bakery.domain.gateway.order_gateway import OrderGateway
from bakery.domain.model.order import Order
from bakery.domain.model.order_codec import deserialize, serialize

logger = logging.getLogger("bakery")

CONFIRMATION_TITLE = "Thank You!"


def confirmation_message(order: Order) -> str:
    return f"Your order for {order.quantity}x {order.cake_name.lower()} is on its way."


class PlaceOrderHandler:

    def __init__(self, gateway: OrderGateway) -> None:
        self._gateway = gateway

    async def handle(self, order: Order) -> OrderConfirmation:
        """Submit *order* and return the confirmation.

        The caller is expected to have checked ``order.is_valid``; it is
        not checked again here.

        Steps:
        1. Serialize (EncodingError stops here, nothing is sent).
        2. One POST through the gateway (NetworkError, no retry).
        3. Decode the response and build the message from the *returned*
           order (InvalidResponseError if it does not decode).
        """
        try:
            body = serialize(order)
        except EncodingError as exc:
            logger.error("Failed to encode order: %s", exc)
            raise

        try:
            raw_response = await self._gateway.post_order(body)
        except NetworkError as exc:
            logger.error("No data in response: %s", exc)
            raise

        try:
            echoed = deserialize(raw_response)
            message = confirmation_message(echoed)
        except (DecodingError, ValidationError) as exc:
            text = raw_response.decode("utf-8", errors="replace")
            logger.error("Invalid response %s (%s)", text, exc)
            raise InvalidResponseError(f"Invalid response: {exc}", raw_body=text) from exc

        logger.info("Order placed: %s", message)
        return OrderConfirmation(title=CONFIRMATION_TITLE, message=message, order=echoed)
