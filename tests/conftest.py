"""Pytest fixtures for the open market client tests."""

import copy
import json

import httpx
import pytest

BASE_URL = "https://market.example.test"

_PRODUCT_WIRE = {
    "id": 522,
    "vendor_id": 6,
    "name": "pizza",
    "thumbnail": "https://images.example.test/6/thumb.png",
    "currency": "KRW",
    "price": 25000.0,
    "bargain_price": 22000.0,
    "discounted_price": 3000.0,
    "stock": 49,
    "created_at": "2022-01-18T00:00:00.00",
    "issued_at": "2022-01-19T10:20:30.45",
}

_DETAIL_EXTRAS = {
    "description": "cheese pizza",
    "images": [
        {
            "id": 350,
            "url": "https://images.example.test/6/origin.png",
            "thumbnail_url": "https://images.example.test/6/thumb.png",
            "succeed": True,
            "issued_at": "2022-01-18T00:00:00.00",
        }
    ],
    "vendors": {
        "name": "pizza-vendor",
        "id": 6,
        "created_at": "2022-01-10T09:00:00.00",
        "issued_at": "2022-01-10T09:00:00.00",
    },
}


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def product_wire():
    """A product as it appears inside a list response."""
    return copy.deepcopy(_PRODUCT_WIRE)


@pytest.fixture
def product_detail_wire():
    """A product as returned by the detail endpoint."""
    document = copy.deepcopy(_PRODUCT_WIRE)
    document.update(copy.deepcopy(_DETAIL_EXTRAS))
    return document


@pytest.fixture
def product_page_wire(product_wire):
    second = dict(product_wire, id=521, name="pasta", stock=0)
    return {
        "page_no": 1,
        "items_per_page": 20,
        "total_count": 2,
        "offset": 0,
        "limit": 20,
        "last_page": 1,
        "has_next": False,
        "has_prev": False,
        "pages": [product_wire, second],
    }


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int, content: bytes):
        self.status_code = status_code
        self.content = content
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recording_handler():
    def _make(status_code: int = 200, content: bytes = b'"OK"', document=None) -> RecordingHandler:
        if document is not None:
            content = json.dumps(document).encode("utf-8")
        return RecordingHandler(status_code, content)

    return _make


@pytest.fixture(autouse=True)
def _clear_market_env(monkeypatch):
    for name in ("OPEN_MARKET_API_HOST", "INTEGRATIONS_MODE", "OPEN_MARKET_IDENTIFIER", "OPEN_MARKET_SECRET"):
        monkeypatch.delenv(name, raising=False)
