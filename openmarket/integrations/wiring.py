"""
Client selection.

The choice between the mock and the real HTTP open market client happens here
and nowhere else. Services only see the OpenMarketTransport interface.
"""

import logging
from typing import Optional

import httpx

from openmarket.integrations.clients.mocks.open_market import DEFAULT_MOCK_SECRET, MockOpenMarketClient
from openmarket.integrations.clients.real_http.executor import RequestExecutor
from openmarket.integrations.clients.real_http.open_market import OpenMarketClient
from openmarket.integrations.contracts.interfaces import OpenMarketTransport
from openmarket.integrations.services.product_service import ProductService
from openmarket.utils.config_loader import MarketConfig

logger = logging.getLogger(__name__)


def create_open_market_client(
    config: MarketConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> OpenMarketTransport:
    if config.mode == "mock":
        logger.info("Using mock open market client")
        return MockOpenMarketClient(secret=config.credentials.secret or DEFAULT_MOCK_SECRET)

    logger.info(f"Using real open market client for {config.api.host}")
    return OpenMarketClient(config.api.host, executor=RequestExecutor(transport=transport))


def create_product_service(
    config: MarketConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ProductService:
    return ProductService(create_open_market_client(config, transport=transport))
