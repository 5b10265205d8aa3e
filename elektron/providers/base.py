from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from elektron.schemas.price import UpstreamRecord


class PriceProvider(ABC):
    @abstractmethod
    async def fetch_day(self, day: date) -> list[UpstreamRecord]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_today(self) -> list[UpstreamRecord]:
        raise NotImplementedError
