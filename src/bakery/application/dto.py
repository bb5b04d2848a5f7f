"""Data Transfer Objects that cross from the application layer to the UI."""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.model.order import Order


@dataclass(frozen=True)
class OrderConfirmation:
    """Output: what the UI shows once the endpoint accepted the order."""

    title: str
    message: str
    order: Order  # as echoed by the server, not the local copy
