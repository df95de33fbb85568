from abc import ABC, abstractmethod
from typing import Mapping

from .products import ModificationInformation, SalesInformation


# ---------------------------------------------------------------------------
# Abstract client interface
# ---------------------------------------------------------------------------

class OpenMarketTransport(ABC):
    """Every open market client (real or mock) must implement this interface.

    Methods return the raw response body. Decoding is left to the caller
    (see ``ProductService``).
    """

    # -- Health --

    @abstractmethod
    async def request_health_checker(self) -> bytes:
        """Check that the API host is up."""

    # -- Reads --

    @abstractmethod
    async def request_product_list(self, page_no: int, items_per_page: int) -> bytes:
        """Fetch one page of the product list."""

    @abstractmethod
    async def request_product_detail(self, product_id: int) -> bytes:
        """Fetch a single product by ID."""

    # -- Writes --

    @abstractmethod
    async def request_product_registration(
        self,
        identifier: str,
        sales_information: SalesInformation,
        images: Mapping[str, bytes],
    ) -> bytes:
        """Register a new product with its images."""

    @abstractmethod
    async def request_product_modification(
        self,
        identifier: str,
        product_id: int,
        information: ModificationInformation,
    ) -> bytes:
        """Apply a partial update to an existing product."""
