"""httpx-backed implementation of OrderGateway."""

from __future__ import annotations

import logging

import httpx

from bakery.domain.exceptions import NetworkError
from bakery.domain.gateway.order_gateway import OrderGateway

logger = logging.getLogger("bakery")


class HttpxOrderGateway(OrderGateway):

    def __init__(
        self,
        url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    @property
    def timeout(self) -> float:
        return self._timeout

    async def post_order(self, body: bytes) -> bytes:
        # Status codes are not checked; whatever body arrives goes to the decoder.
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    self._url,
                    content=body,
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        logger.debug(
            "POST %s status=%s bytes=%s", self._url, resp.status_code, len(resp.content)
        )
        return resp.content
