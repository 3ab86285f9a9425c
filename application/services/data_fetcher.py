from __future__ import annotations

import asyncio
from typing import Optional

from application.ports.logger import LoggerPort
from domain.deferred import DeferredResult

DEFAULT_FETCH_DELAY_SEC = 2.0
FETCH_PAYLOAD = "Data fetched successfully!"


class DataFetcher:
    """
    Simulated asynchronous fetch.

    ``fetch_data`` hands back a future that the event loop settles after
    ``delay_sec``; ``get_data`` awaits it and reports the outcome. There is no
    cancellation: once scheduled, the delay always runs to completion.
    """

    def __init__(
        self,
        logger: LoggerPort,
        delay_sec: float = DEFAULT_FETCH_DELAY_SEC,
        payload: str = FETCH_PAYLOAD,
    ) -> None:
        if delay_sec < 0:
            raise ValueError("delay_sec must be >= 0")
        self._logger = logger
        self._delay_sec = delay_sec
        self._payload = payload

    @property
    def delay_sec(self) -> float:
        return self._delay_sec

    def fetch_data(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> "asyncio.Future[str]":
        loop = loop or asyncio.get_running_loop()
        future: "asyncio.Future[str]" = loop.create_future()
        loop.call_later(self._delay_sec, self._settle, future)
        return future

    async def get_data(self) -> DeferredResult:
        self._logger.info("fetch.start", message="Fetching data...")
        try:
            data = await self.fetch_data()
        except Exception as exc:
            self._logger.error("fetch.failed", message="Error fetching data:", error=str(exc))
            return DeferredResult.rejected(str(exc))

        self._logger.info("fetch.succeeded", data=data)
        return DeferredResult.fulfilled(data)

    def _settle(self, future: "asyncio.Future[str]") -> None:
        if not future.done():
            future.set_result(self._payload)
