"""
Request executor.

Sends one ``httpx.Request`` and classifies the outcome:
- transport failure (DNS, refused connection, timeout, TLS) -> TransportFailure
- status outside 200-299 -> HttpError(status_code), whatever the body
- status inside 200-299 with an empty body -> EmptyBody(status_code)
- otherwise the raw response bytes

Redirects are followed; the final response is classified.
No retries and no timeout override; callers own any retry policy.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from openmarket.integrations.errors import EmptyBody, HttpError, TransportFailure

logger = logging.getLogger(__name__)


class RequestExecutor:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        # Tests inject httpx.MockTransport; production uses httpx's default.
        self.transport = transport

    async def execute(self, request: httpx.Request) -> bytes:
        logger.info("Sending %s %s", request.method, request.url)
        try:
            async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
                response = await client.send(request)
        except httpx.RequestError as e:
            logger.error(f"Transport failure for {request.method} {request.url}: {e!r}")
            raise TransportFailure(
                f"{request.method} {request.url} failed: {e}",
                payload={"url": str(request.url), "error": type(e).__name__},
            ) from e

        status = response.status_code
        logger.info("Received %s for %s %s", status, request.method, request.url)
        if not 200 <= status <= 299:
            logger.warning("HTTP error %s from %s: %s", status, request.url, response.text[:200])
            raise HttpError(status, response.content)
        if not response.content:
            logger.warning("Empty body with status %s from %s", status, request.url)
            raise EmptyBody(status)
        return response.content


__all__ = ["RequestExecutor"]
