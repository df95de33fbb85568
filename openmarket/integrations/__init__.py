"""
Integrations layer.
This package contains all code used to communicate with the open market API:
- endpoint resolution and the JSON codec
- the request executor and multipart body builder (clients/real_http)
- a mock client for development without network access (clients/mocks)
- ProductService, which combines a client with the codec

Key rule:
- Callers MUST NOT build URLs or HTTP requests themselves.
- They should call ProductService (or an OpenMarketTransport client).

Switching implementations:
- The selection of mock vs real clients happens in ONE place (openmarket/integrations/wiring.py).
"""

from .contracts.interfaces import OpenMarketTransport
from .contracts.products import (
    Currency,
    ModificationInformation,
    Product,
    ProductImage,
    ProductPage,
    SalesInformation,
    Vendor,
)
from .errors import (
    DecodeError,
    EmptyBody,
    EncodingError,
    HttpError,
    InvalidParameters,
    InvalidTimestamp,
    MissingField,
    NetworkError,
    OpenMarketError,
    TransportFailure,
    TypeMismatch,
)

__all__ = [
    # interfaces
    "OpenMarketTransport",
    # products
    "Currency", "ModificationInformation", "Product", "ProductImage",
    "ProductPage", "SalesInformation", "Vendor",
    # errors
    "DecodeError", "EmptyBody", "EncodingError", "HttpError", "InvalidParameters",
    "InvalidTimestamp", "MissingField", "NetworkError", "OpenMarketError",
    "TransportFailure", "TypeMismatch",
]
