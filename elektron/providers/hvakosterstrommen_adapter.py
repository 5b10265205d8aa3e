from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, Self

import httpx
from pydantic import TypeAdapter, ValidationError

from elektron.config.settings import settings
from elektron.providers.base import PriceProvider
from elektron.providers.errors import (
    UpstreamDecodeError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from elektron.schemas.price import UpstreamRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[UpstreamRecord])

Clock = Callable[[], date]


class HvakosterstrommenAdapter(PriceProvider):
    """
    Client for the public hvakosterstrommen.no price API.

    One GET per call, no retries. The `clock` returns the host's current
    local date and decides which day `fetch_today` asks for.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        clock: Clock = date.today,
        base_url: str = settings.upstream_base_url,
        zone: str = settings.zone,
        timeout: float = settings.request_timeout_seconds,
    ):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()
        self.clock = clock
        self.base_url = base_url.rstrip("/")
        self.zone = zone
        self.timeout = timeout

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def build_url(self, day: date) -> str:
        return f"{self.base_url}/{day.year:04d}/{day.month:02d}-{day.day:02d}_{self.zone}.json"

    async def _get_records(self, url: str) -> list[UpstreamRecord]:
        try:
            response = await self.client.get(url, timeout=self.timeout, follow_redirects=True)
        except httpx.RequestError as exc:
            raise UpstreamTransportError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise UpstreamStatusError(response.status_code)

        try:
            return _RECORDS.validate_json(response.content)
        except ValidationError as exc:
            raise UpstreamDecodeError(f"invalid price payload: {exc.error_count()} error(s), first: {exc.errors()[0]['msg']}") from exc

    async def fetch_day(self, day: date) -> list[UpstreamRecord]:
        url = self.build_url(day)
        logger.debug("Fetching upstream prices", extra={"url": url})
        try:
            return await self._get_records(url)
        except UpstreamError as exc:
            logger.warning(f"Upstream request failed: {exc}", extra={"url": url, "kind": exc.kind})
            raise

    async def fetch_today(self) -> list[UpstreamRecord]:
        return await self.fetch_day(self.clock())
