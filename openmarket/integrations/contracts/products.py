"""
Product contracts.

Defines the records exchanged with the open market API:
- Product / ProductPage, decoded from list and detail responses
- SalesInformation, the ``params`` part of a registration request
- ModificationInformation, the JSON body of a modification request

Attribute names are snake_case for Python callers; the field naming the codec
matches against is camelCase (see ``alias_generator``). Wire keys are
snake_case and are converted by ``openmarket.integrations.codec``.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"
_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{2}")


def parse_timestamp(value: Any) -> Any:
    """Accept only ``yyyy-MM-dd'T'HH:mm:ss.SS`` strings (or ready datetimes)."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError(
            "timestamp_type",
            "Timestamp must be a string, got {kind}",
            {"kind": type(value).__name__},
        )
    if not _TIMESTAMP_PATTERN.fullmatch(value):
        raise PydanticCustomError(
            "invalid_timestamp",
            "Timestamp '{value}' does not match yyyy-MM-dd'T'HH:mm:ss.SS",
            {"value": value},
        )
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        raise PydanticCustomError(
            "invalid_timestamp",
            "Timestamp '{value}' is not a valid date and time",
            {"value": value},
        ) from None


def format_timestamp(value: datetime) -> str:
    # two fractional digits: hundredths of a second
    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{value.microsecond // 10000:02d}"


MarketTimestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Currency(str, Enum):
    KRW = "KRW"
    USD = "USD"


# ---------------------------------------------------------------------------
# Read models
# ---------------------------------------------------------------------------

class MarketModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductImage(MarketModel):
    model_config = ConfigDict(frozen=True)

    id: int
    url: str
    thumbnail_url: str
    succeed: bool
    issued_at: MarketTimestamp


class Vendor(MarketModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    created_at: Optional[MarketTimestamp] = None
    issued_at: Optional[MarketTimestamp] = None


class Product(MarketModel):
    """A product as returned by list and detail responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    thumbnail: str
    currency: Currency
    price: float
    created_at: MarketTimestamp
    issued_at: MarketTimestamp
    description: Optional[str] = None                # detail responses only
    vendor_id: Optional[int] = None
    bargain_price: Optional[float] = None
    discounted_price: Optional[float] = None
    stock: Optional[int] = None
    images: Optional[List[ProductImage]] = None      # detail responses only
    vendor: Optional[Vendor] = Field(default=None, alias="vendors")


class ProductPage(MarketModel):
    """One page of the product list. Replaced, never merged, on refresh."""

    model_config = ConfigDict(frozen=True)

    page_no: int
    items_per_page: int
    total_count: int
    pages: List[Product]
    offset: Optional[int] = None
    limit: Optional[int] = None
    last_page: Optional[int] = None
    has_next: Optional[bool] = None
    has_prev: Optional[bool] = None


# ---------------------------------------------------------------------------
# Write payloads
# ---------------------------------------------------------------------------

class SalesInformation(MarketModel):
    """Registration payload, sent as the ``params`` multipart part."""

    name: str
    descriptions: str
    price: float
    currency: Currency
    secret: str
    discounted_price: Optional[float] = None
    stock: Optional[int] = None


class ModificationInformation(MarketModel):
    """
    Partial update payload. Only fields that are set are serialised, so the
    server only changes what the caller provided.
    """

    secret: str
    name: Optional[str] = None
    descriptions: Optional[str] = None
    thumbnail_id: Optional[int] = None
    price: Optional[float] = None
    currency: Optional[Currency] = None
    discounted_price: Optional[float] = None
    stock: Optional[int] = None


__all__ = [
    "TIMESTAMP_FORMAT",
    "MarketTimestamp",
    "parse_timestamp",
    "format_timestamp",
    "Currency",
    "MarketModel",
    "ProductImage",
    "Vendor",
    "Product",
    "ProductPage",
    "SalesInformation",
    "ModificationInformation",
]
