"""Integration tests for the PlaceOrder use case."""

import json
import logging

import pytest

from bakery.application.place_order import PlaceOrderHandler, confirmation_message
from bakery.domain.exceptions import (
    EncodingError,
    InvalidResponseError,
    NetworkError,
    SubmissionError,
)
from bakery.domain.model.order import Order
from bakery.domain.model.order_codec import serialize
from tests.fakes import CannedOrderGateway, EchoOrderGateway, FailingOrderGateway


def _make_order(**overrides) -> Order:
    fields = dict(
        type=1,
        quantity=5,
        name="Alice",
        street_address="1 Main St",
        city="Springfield",
        zip="12345",
    )
    fields.update(overrides)
    return Order(**fields)


class TestPlaceOrderHappyPath:

    @pytest.mark.asyncio
    async def test_echo_yields_confirmation(self):
        handler = PlaceOrderHandler(EchoOrderGateway())

        confirmation = await handler.handle(_make_order())

        assert confirmation.title == "Thank You!"
        assert confirmation.message == "Your order for 5x chocolate is on its way."

    @pytest.mark.asyncio
    async def test_exactly_one_request_with_encoded_order(self):
        gateway = EchoOrderGateway()
        await PlaceOrderHandler(gateway).handle(_make_order(extra_frosting=True))

        assert len(gateway.sent) == 1
        payload = json.loads(gateway.sent[0])
        assert payload["quantity"] == 5
        assert payload["extraFrosting"] is True

    @pytest.mark.asyncio
    async def test_message_uses_server_returned_order(self):
        echoed = {
            "type": 3, "quantity": 12, "extraFrosting": False, "addSprinkles": True,
            "name": "Alice", "streetAddress": "1 Main St", "city": "Springfield",
            "zip": "12345", "id": "42", "createdAt": "2020-05-21T10:00:00.000Z",
        }
        handler = PlaceOrderHandler(CannedOrderGateway(json.dumps(echoed).encode()))

        confirmation = await handler.handle(_make_order())

        assert confirmation.message == "Your order for 12x rainbow is on its way."
        assert confirmation.order.quantity == 12
        assert confirmation.order.add_sprinkles is True

    @pytest.mark.asyncio
    async def test_invalid_order_is_not_rechecked(self):
        """Validity is the caller's responsibility."""
        handler = PlaceOrderHandler(EchoOrderGateway())

        confirmation = await handler.handle(Order(type=0, quantity=3))

        assert confirmation.message == "Your order for 3x vanilla is on its way."


class TestPlaceOrderFailures:

    @pytest.mark.asyncio
    async def test_malformed_response_rejected(self, caplog):
        body = json.dumps({"type": 1, "name": "Alice"}).encode()
        handler = PlaceOrderHandler(CannedOrderGateway(body))

        with caplog.at_level(logging.ERROR, logger="bakery"):
            with pytest.raises(InvalidResponseError, match="Missing key 'quantity'") as info:
                await handler.handle(_make_order())

        assert info.value.raw_body == '{"type": 1, "name": "Alice"}'
        assert "Invalid response" in caplog.text
        assert '"name": "Alice"' in caplog.text

    @pytest.mark.asyncio
    async def test_unknown_type_in_response_rejected(self):
        body = json.loads(serialize(_make_order()))
        body["type"] = 9
        handler = PlaceOrderHandler(CannedOrderGateway(json.dumps(body).encode()))

        with pytest.raises(InvalidResponseError, match="Unknown cake type index 9"):
            await handler.handle(_make_order())

    @pytest.mark.asyncio
    async def test_deeply_nested_response_rejected(self):
        handler = PlaceOrderHandler(CannedOrderGateway(b"[" * 200000 + b"]" * 200000))

        with pytest.raises(InvalidResponseError, match="not valid JSON"):
            await handler.handle(_make_order())

    @pytest.mark.asyncio
    async def test_network_failure_reported(self, caplog):
        handler = PlaceOrderHandler(FailingOrderGateway("The network connection was lost."))

        with caplog.at_level(logging.ERROR, logger="bakery"):
            with pytest.raises(NetworkError, match="connection was lost"):
                await handler.handle(_make_order())

        assert "No data in response: The network connection was lost." in caplog.text

    @pytest.mark.asyncio
    async def test_encoding_failure_sends_nothing(self, caplog):
        gateway = EchoOrderGateway()
        handler = PlaceOrderHandler(gateway)

        with caplog.at_level(logging.ERROR, logger="bakery"):
            with pytest.raises(EncodingError):
                await handler.handle(_make_order(name=object()))

        assert gateway.sent == []
        assert "Failed to encode order" in caplog.text

    def test_all_failures_are_submission_errors(self):
        assert issubclass(EncodingError, SubmissionError)
        assert issubclass(NetworkError, SubmissionError)
        assert issubclass(InvalidResponseError, SubmissionError)


class TestConfirmationMessage:

    @pytest.mark.parametrize(
        "cake_type, expected",
        [(0, "vanilla"), (1, "chocolate"), (2, "strawberry"), (3, "rainbow")],
    )
    def test_lowercases_catalog_name(self, cake_type, expected):
        order = Order(type=cake_type, quantity=4)
        assert confirmation_message(order) == f"Your order for 4x {expected} is on its way."
