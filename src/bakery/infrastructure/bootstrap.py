"""Composition root: builds the place-order handler on top of the httpx
gateway, configured from ``settings``.
"""

from __future__ import annotations

from bakery.application.place_order import PlaceOrderHandler
from bakery.infrastructure.config import settings
from bakery.infrastructure.http.httpx_order_gateway import HttpxOrderGateway


def order_gateway() -> HttpxOrderGateway:
    return HttpxOrderGateway(settings.order_url, timeout=settings.http_timeout)


def place_order_handler() -> PlaceOrderHandler:
    return PlaceOrderHandler(order_gateway())
