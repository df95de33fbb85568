"""
Mock Open Market Client.

Purpose:
- Provides a fake open market integration used for development/testing
- Does NOT make any network calls
- Answers with wire-format JSON bytes, exactly like the real HTTP client

Usage:
- Selected in openmarket/integrations/wiring.py when INTEGRATIONS_MODE is mock
- Called by ProductService via the OpenMarketTransport interface

Behavior guidelines:
- list/detail read from a seeded in-memory store
- registration and modification change that store
- unknown product ids answer HttpError(404); a wrong secret answers HttpError(401)

Swap:
Replace this mock client with the real HTTP client in clients/real_http/open_market.py
when the API host is reachable.
"""

import logging
from datetime import datetime
from typing import Dict, List, Mapping, Optional

from openmarket.integrations import codec
from openmarket.integrations.clients.real_http.multipart import build_multipart_body
from openmarket.integrations.contracts.interfaces import OpenMarketTransport
from openmarket.integrations.contracts.products import (
    Currency,
    ModificationInformation,
    Product,
    ProductImage,
    ProductPage,
    SalesInformation,
    Vendor,
)
from openmarket.integrations.endpoints import EndpointResolver
from openmarket.integrations.errors import HttpError

logger = logging.getLogger(__name__)

MOCK_BASE_URL = "https://mock.open-market.local"
MOCK_VENDOR = Vendor(id=1, name="mock-vendor")
DEFAULT_MOCK_SECRET = "mock-secret"


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

def _seed_products() -> List[Product]:
    created = datetime(2022, 1, 3, 0, 0, 0)
    seeds = [
        ("MacBook Pro", 2_690_000.0, 0.0, 5, Currency.KRW),
        ("Apple Pencil", 165_000.0, 10_000.0, 0, Currency.KRW),
        ("Magic Keyboard", 99.0, 0.0, 40, Currency.USD),
    ]
    products = []
    for index, (name, price, discount, stock, currency) in enumerate(seeds, start=1):
        products.append(Product(
            id=index,
            vendor_id=MOCK_VENDOR.id,
            name=name,
            description=f"{name} (mock)",
            thumbnail=f"{MOCK_BASE_URL}/images/{index}/thumb.png",
            currency=currency,
            price=price,
            bargain_price=price - discount,
            discounted_price=discount,
            stock=stock,
            created_at=created,
            issued_at=created,
        ))
    return products


class MockOpenMarketClient(OpenMarketTransport):
    def __init__(self, secret: str = DEFAULT_MOCK_SECRET, products: Optional[List[Product]] = None) -> None:
        self.secret = secret
        # the resolver keeps parameter validation identical to the real client
        self.resolver = EndpointResolver(MOCK_BASE_URL)
        self._products: Dict[int, Product] = {
            product.id: product for product in (products if products is not None else _seed_products())
        }
        self.registrations: List[Dict[str, object]] = []

    async def request_health_checker(self) -> bytes:
        logger.info("[MOCK] Health check")
        return b'"OK"'

    async def request_product_list(self, page_no: int, items_per_page: int) -> bytes:
        self.resolver.product_list(page_no, items_per_page)
        ordered = sorted(self._products.values(), key=lambda product: product.id, reverse=True)
        offset = (page_no - 1) * items_per_page
        last_page = max(1, -(-len(ordered) // items_per_page))
        page = ProductPage(
            page_no=page_no,
            items_per_page=items_per_page,
            total_count=len(ordered),
            offset=offset,
            limit=offset + items_per_page,
            last_page=last_page,
            has_next=page_no < last_page,
            has_prev=page_no > 1,
            pages=[_list_view(product) for product in ordered[offset:offset + items_per_page]],
        )
        logger.info(f"[MOCK] Listing page {page_no} ({len(page.pages)} products)")
        return codec.encode(page)

    async def request_product_detail(self, product_id: int) -> bytes:
        self.resolver.product_detail(product_id)
        return codec.encode(self._get(product_id))

    async def request_product_registration(
        self,
        identifier: str,
        sales_information: SalesInformation,
        images: Mapping[str, bytes],
    ) -> bytes:
        # same body the real client sends, so bad filenames fail the same way
        build_multipart_body(codec.encode(sales_information), images)
        self._check_secret(sales_information.secret)
        if not images:
            raise HttpError(400, b'{"message":"at least one image is required"}')

        product_id = max(self._products, default=0) + 1
        now = datetime.now()
        product_images = [
            ProductImage(
                id=product_id * 100 + position,
                url=f"{MOCK_BASE_URL}/images/{product_id}/{filename}",
                thumbnail_url=f"{MOCK_BASE_URL}/images/{product_id}/thumb_{filename}",
                succeed=True,
                issued_at=now,
            )
            for position, filename in enumerate(images)
        ]
        discount = sales_information.discounted_price or 0.0
        product = Product(
            id=product_id,
            vendor_id=MOCK_VENDOR.id,
            name=sales_information.name,
            description=sales_information.descriptions,
            thumbnail=product_images[0].thumbnail_url,
            currency=sales_information.currency,
            price=sales_information.price,
            bargain_price=sales_information.price - discount,
            discounted_price=discount,
            stock=sales_information.stock or 0,
            created_at=now,
            issued_at=now,
            images=product_images,
            vendor=MOCK_VENDOR,
        )
        self._products[product_id] = product
        self.registrations.append({"identifier": identifier, "images": list(images)})
        logger.info(f"[MOCK] Registered product {product_id} for identifier {identifier}")
        return codec.encode(product)

    async def request_product_modification(
        self,
        identifier: str,
        product_id: int,
        information: ModificationInformation,
    ) -> bytes:
        self.resolver.product_modification(product_id)
        current = self._get(product_id)
        self._check_secret(information.secret)

        updates = {
            "name": information.name,
            "description": information.descriptions,
            "price": information.price,
            "currency": information.currency,
            "discounted_price": information.discounted_price,
            "stock": information.stock,
        }
        updates = {key: value for key, value in updates.items() if value is not None}
        if information.thumbnail_id is not None:
            thumbnail = next((image for image in current.images or [] if image.id == information.thumbnail_id), None)
            if thumbnail is None:
                raise HttpError(400, b'{"message":"unknown thumbnail_id"}')
            updates["thumbnail"] = thumbnail.thumbnail_url

        price = updates.get("price", current.price)
        discount = updates.get("discounted_price", current.discounted_price) or 0.0
        updates["bargain_price"] = price - discount
        updates["issued_at"] = datetime.now()

        product = current.model_copy(update=updates)
        self._products[product_id] = product
        logger.info(f"[MOCK] Modified product {product_id} ({sorted(updates)}) for identifier {identifier}")
        return codec.encode(product)

    def _get(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise HttpError(404, b'{"message":"product not found"}')
        return product

    def _check_secret(self, secret: str) -> None:
        if secret != self.secret:
            raise HttpError(401, b'{"message":"invalid secret"}')


def _list_view(product: Product) -> Product:
    # list responses omit the detail-only fields
    return product.model_copy(update={"description": None, "images": None, "vendor": None})


__all__ = ["MockOpenMarketClient", "MOCK_BASE_URL", "DEFAULT_MOCK_SECRET"]
