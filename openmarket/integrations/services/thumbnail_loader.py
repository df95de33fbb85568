"""Thumbnail fetching as independent, cancellable tasks keyed by product."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Hashable, Optional

import httpx

from openmarket.integrations.clients.real_http.executor import RequestExecutor

logger = logging.getLogger(__name__)


class ThumbnailLoader:
    """
    Schedules one fetch per key (usually a product id or a cell identifier).

    A second ``load`` for a key whose fetch is still running returns the same
    task. Fetches are not limited in number and never block list decoding.
    """

    def __init__(self, executor: Optional[RequestExecutor] = None) -> None:
        self.executor = executor or RequestExecutor()
        self._tasks: Dict[Hashable, "asyncio.Task[bytes]"] = {}

    def load(self, key: Hashable, url: str) -> "asyncio.Task[bytes]":
        task = self._tasks.get(key)
        if task is not None and not task.done():
            return task

        task = asyncio.ensure_future(self._fetch(url))
        self._tasks[key] = task
        task.add_done_callback(lambda finished, key=key: self._forget(key, finished))
        return task

    def cancel(self, key: Hashable) -> bool:
        task = self._tasks.pop(key, None)
        if task is None or task.done():
            return False
        logger.debug("Cancelling thumbnail fetch for %r", key)
        return task.cancel()

    def cancel_all(self) -> None:
        for key in list(self._tasks):
            self.cancel(key)

    def pending(self) -> int:
        return sum(1 for task in self._tasks.values() if not task.done())

    async def _fetch(self, url: str) -> bytes:
        return await self.executor.execute(httpx.Request("GET", url))

    def _forget(self, key: Hashable, finished: "asyncio.Task[bytes]") -> None:
        if self._tasks.get(key) is finished:
            del self._tasks[key]


__all__ = ["ThumbnailLoader"]
