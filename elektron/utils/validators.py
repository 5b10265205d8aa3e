from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?P<fraction>\.\d+)?"
    r"(?P<offset>[Zz]|(?P<sign>[+-])(?P<offset_hour>\d{2}):(?P<offset_minute>\d{2}))",
    re.ASCII,
)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC 3339 date-time, keeping the offset it carries.

    Raises ValueError if the string is not a complete date-time with an
    explicit offset, or if any component is out of range.
    """
    match = _RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"not an RFC 3339 date-time: {value!r}")

    if match["sign"]:
        offset_hour = int(match["offset_hour"])
        offset_minute = int(match["offset_minute"])
        if offset_hour > 23 or offset_minute > 59:
            raise ValueError(f"offset out of range: {value!r}")
        delta = timedelta(hours=offset_hour, minutes=offset_minute)
        tz = timezone(-delta if match["sign"] == "-" else delta)
    else:
        tz = timezone.utc

    # A leap second is folded into the last ordinary second of the minute
    second = int(match["second"])
    if second == 60:
        second = 59
    microsecond = int((match["fraction"] or ".0")[1:7].ljust(6, "0"))

    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        second,
        microsecond,
        tzinfo=tz,
    )


def hour_of_day(value: str, default: int = 0) -> int:
    """Hour in the timestamp's own offset, or `default` if it does not parse."""
    try:
        return parse_rfc3339(value).hour
    except ValueError:
        return default
