from elektron.schemas.price import UpstreamRecord
from elektron.services.price_service import normalize


def _record(nok, eur, time_start):
    return UpstreamRecord(NOK_per_kWh=nok, EUR_per_kWh=eur, time_start=time_start)


def test_price_is_nok_times_hundred():
    for nok in (0.1234, -0.05, 0.0, 3.3333333, 1e-9):
        point = normalize([_record(nok, 0.01, "2025-01-15T00:00:00+01:00")])[0]
        assert point.price == nok * 100.0


def test_length_and_order_preserved():
    records = [
        _record(0.3, 0.03, "2025-01-15T02:00:00+01:00"),
        _record(0.1, 0.01, "2025-01-15T00:00:00+01:00"),
        _record(0.1, 0.01, "2025-01-15T00:00:00+01:00"),
    ]
    points = normalize(records)
    assert len(points) == len(records)
    assert [p.time for p in points] == [r.time_start for r in records]
    assert [p.hour for p in points] == [2, 0, 0]


def test_hour_follows_embedded_offset():
    points = normalize(
        [
            _record(0.5, 0.04, "2025-10-26T02:00:00+02:00"),
            _record(0.5, 0.04, "2025-10-26T02:00:00+01:00"),
            _record(0.5, 0.04, "2025-10-26T23:00:00+01:00"),
        ]
    )
    assert [p.hour for p in points] == [2, 2, 23]


def test_unparseable_time_gives_hour_zero_and_keeps_fields():
    point = normalize([_record(0.42, 0.037, "not a timestamp")])[0]
    assert point.hour == 0
    assert point.time == "not a timestamp"
    assert point.price_nok == 0.42
    assert point.price_eur == 0.037
    assert point.price == 0.42 * 100.0


def test_empty_input():
    assert normalize([]) == []
