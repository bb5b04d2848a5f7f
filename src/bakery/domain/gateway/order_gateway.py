"""Abstract gateway to the remote order endpoint."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderGateway(ABC):

    @abstractmethod
    async def post_order(self, body: bytes) -> bytes:
        """Send an encoded order and return the raw response body.

        Raises NetworkError when no response could be obtained.
        """
