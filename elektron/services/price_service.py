from __future__ import annotations

from collections.abc import Iterable

from elektron.providers.base import PriceProvider
from elektron.schemas.price import ChartPoint, UpstreamRecord
from elektron.utils.validators import hour_of_day


def to_chart_point(record: UpstreamRecord) -> ChartPoint:
    return ChartPoint(
        hour=hour_of_day(record.time_start),
        price=record.nok_per_kwh * 100.0,
        time=record.time_start,
        price_nok=record.nok_per_kwh,
        price_eur=record.eur_per_kwh,
    )


def normalize(records: Iterable[UpstreamRecord]) -> list[ChartPoint]:
    """
    Map upstream records to chart points, one for one and in input order.

    Never fails: a `time_start` that does not parse yields hour 0.
    """
    return [to_chart_point(record) for record in records]


class PriceService:
    def __init__(self, provider: PriceProvider):
        self.provider = provider

    async def get_today(self) -> list[ChartPoint]:
        records = await self.provider.fetch_today()
        return normalize(records)
