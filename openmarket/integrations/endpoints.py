"""
Endpoint resolution for the open market API.

Maps each operation to an HTTP method and a fully-qualified URL. Pure: no
network access and no shared state beyond the configured base URL. Invalid
parameters raise ``InvalidParameters`` instead of silently dropping the call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode, urlsplit

from openmarket.integrations.errors import InvalidParameters

HEALTH_CHECKER_PATH = "/healthChecker"
PRODUCTS_PATH = "/api/products"


@dataclass(frozen=True)
class Endpoint:
    method: str
    url: str


class EndpointResolver:
    def __init__(self, base_url: str) -> None:
        parts = urlsplit(base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidParameters(f"Base URL must be an absolute http(s) URL; got {base_url!r}")
        self.base_url = base_url.rstrip("/")

    def health_checker(self) -> Endpoint:
        return Endpoint("GET", f"{self.base_url}{HEALTH_CHECKER_PATH}")

    def product_list(self, page_no: int, items_per_page: int) -> Endpoint:
        _require_positive_int("page_no", page_no)
        _require_positive_int("items_per_page", items_per_page)
        query = urlencode([("page_no", page_no), ("items_per_page", items_per_page)])
        return Endpoint("GET", f"{self.base_url}{PRODUCTS_PATH}?{query}")

    def product_detail(self, product_id: int) -> Endpoint:
        _require_positive_int("product_id", product_id)
        return Endpoint("GET", f"{self.base_url}{PRODUCTS_PATH}/{product_id}")

    def product_registration(self) -> Endpoint:
        return Endpoint("POST", f"{self.base_url}{PRODUCTS_PATH}")

    def product_modification(self, product_id: int) -> Endpoint:
        _require_positive_int("product_id", product_id)
        return Endpoint("PATCH", f"{self.base_url}{PRODUCTS_PATH}/{product_id}")


def _require_positive_int(name: str, value: Any) -> None:
    # bool is an int subclass; True must not pass as page 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParameters(f"{name} must be a positive integer; got {value!r}")


__all__ = ["Endpoint", "EndpointResolver", "HEALTH_CHECKER_PATH", "PRODUCTS_PATH"]
