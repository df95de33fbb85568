"""
Product Service

Combines an open market client (real or mock) with the codec so that callers
receive contract models instead of raw bytes:
- fetch_product_page / fetch_product_detail decode list and detail responses
- register_product / modify_product encode the write payloads and decode the
  product returned by the server
- check_health reports whether the API host answered

Errors from resolution, transport and decoding propagate unchanged.
"""

import logging
from typing import Mapping

from openmarket.integrations import codec
from openmarket.integrations.contracts.interfaces import OpenMarketTransport
from openmarket.integrations.contracts.products import (
    ModificationInformation,
    Product,
    ProductPage,
    SalesInformation,
)

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, client: OpenMarketTransport):
        self.client = client

    async def check_health(self) -> bool:
        body = await self.client.request_health_checker()
        logger.info(f"Health checker answered: {body[:40]!r}")
        return True

    async def fetch_product_page(self, page_no: int, items_per_page: int) -> ProductPage:
        data = await self.client.request_product_list(page_no, items_per_page)
        page = codec.decode(data, ProductPage)
        logger.info(f"Fetched page {page.page_no} with {len(page.pages)} of {page.total_count} products")
        return page

    async def fetch_product_detail(self, product_id: int) -> Product:
        data = await self.client.request_product_detail(product_id)
        return codec.decode(data, Product)

    async def register_product(
        self,
        identifier: str,
        sales_information: SalesInformation,
        images: Mapping[str, bytes],
    ) -> Product:
        data = await self.client.request_product_registration(identifier, sales_information, images)
        product = codec.decode(data, Product)
        logger.info(f"Registered product {product.id} ({product.name})")
        return product

    async def modify_product(
        self,
        identifier: str,
        product_id: int,
        information: ModificationInformation,
    ) -> Product:
        data = await self.client.request_product_modification(identifier, product_id, information)
        product = codec.decode(data, Product)
        logger.info(f"Modified product {product.id}")
        return product
