"""
Real Open Market HTTP Client.

Purpose:
- Resolves the endpoint for each operation
- Builds the request body (multipart for registration, JSON for modification)
- Sends it through the RequestExecutor and returns the raw response bytes

Usage:
- Selected in openmarket/integrations/wiring.py when INTEGRATIONS_MODE is real_http
- Called by ProductService, which decodes the bytes into contract models

Important:
- Keep this client as the ONLY place where open market HTTP calls are made.
- The ``identifier`` header value is passed through as given; it is not validated here.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from openmarket.integrations import codec
from openmarket.integrations.clients.real_http.executor import RequestExecutor
from openmarket.integrations.clients.real_http.multipart import build_multipart_body
from openmarket.integrations.contracts.interfaces import OpenMarketTransport
from openmarket.integrations.contracts.products import ModificationInformation, SalesInformation
from openmarket.integrations.endpoints import Endpoint, EndpointResolver

logger = logging.getLogger(__name__)

IDENTIFIER_HEADER = "identifier"


class OpenMarketClient(OpenMarketTransport):
    def __init__(self, base_url: str, executor: Optional[RequestExecutor] = None) -> None:
        self.resolver = EndpointResolver(base_url)
        self.executor = executor or RequestExecutor()

    @property
    def base_url(self) -> str:
        return self.resolver.base_url

    async def request_health_checker(self) -> bytes:
        return await self._send(self.resolver.health_checker())

    async def request_product_list(self, page_no: int, items_per_page: int) -> bytes:
        return await self._send(self.resolver.product_list(page_no, items_per_page))

    async def request_product_detail(self, product_id: int) -> bytes:
        return await self._send(self.resolver.product_detail(product_id))

    async def request_product_registration(
        self,
        identifier: str,
        sales_information: SalesInformation,
        images: Mapping[str, bytes],
    ) -> bytes:
        endpoint = self.resolver.product_registration()
        body = build_multipart_body(codec.encode(sales_information), images)
        logger.debug("Registering product %r with %d image(s)", sales_information.name, len(images))
        headers = {IDENTIFIER_HEADER: identifier, "Content-Type": body.content_type}
        return await self._send(endpoint, headers=headers, content=body.content)

    async def request_product_modification(
        self,
        identifier: str,
        product_id: int,
        information: ModificationInformation,
    ) -> bytes:
        endpoint = self.resolver.product_modification(product_id)
        headers = {IDENTIFIER_HEADER: identifier, "Content-Type": "application/json"}
        return await self._send(endpoint, headers=headers, content=codec.encode(information))

    async def _send(
        self,
        endpoint: Endpoint,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> bytes:
        request = httpx.Request(endpoint.method, endpoint.url, headers=headers, content=content)
        return await self.executor.execute(request)


__all__ = ["OpenMarketClient", "IDENTIFIER_HEADER"]
